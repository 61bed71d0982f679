# app/main.py

import datetime as dt
from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.configuration import settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.db.database import get_session, init_db
from app.routers import users

configure_logging()
logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("startup_complete", project=settings.PROJECT_NAME)
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    openapi_tags=settings.TAGS_METADATA,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Router 등록하기
app.include_router(users.router, prefix=f"{settings.API_PREFIX}/users", tags=["Users"])

@app.get("/")
async def root():
    return {"message": "Main Page"}

@app.get("/health")
async def health_check(session: Annotated[AsyncSession, Depends(get_session)]):
    """
    DB 연결 확인
    """
    try:
        conn = await session.connection()
        await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("health_check_failed", error=str(e))
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "timestamp": dt.datetime.now().isoformat(),
        }
    return {
        "status": "healthy",
        "database": "connected",
        "timestamp": dt.datetime.now().isoformat(),
    }
