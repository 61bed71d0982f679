"""Shared test fixtures.

Each test gets its own in-memory SQLite database; the app's ``get_session``
dependency is overridden to use it, and Cloudinary is never contacted.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.configuration import settings
from app.db.database import get_session
from app.main import app
from app.models.user import User  # noqa: F401
from app.services.media import UploadedMedia
from fixtures import AVATAR_URL, COVER_URL


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


# ---------------------------------------------------------------------------
# App client
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def temp_upload_dir(tmp_path, monkeypatch):
    """Spool multipart uploads into a per-test directory."""
    upload_dir = tmp_path / "temp"
    monkeypatch.setattr(settings, "TEMP_UPLOAD_DIR", str(upload_dir))
    return upload_dir


@pytest.fixture
async def client(engine):
    async def _override_session():
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = _override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Cloudinary
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_upload():
    """Patch the Cloudinary upload; avatar and cover get distinct URLs."""

    async def _upload(path):
        if path is None:
            return None
        url = COVER_URL if "cover" in Path(path).name else AVATAR_URL
        return UploadedMedia(url=url, public_id=str(path))

    with patch(
        "app.services.media.upload_on_cloudinary", AsyncMock(side_effect=_upload)
    ) as mock:
        yield mock

