# app/services/uploads.py

from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
import structlog

from app.core.configuration import settings

logger = structlog.get_logger()

def first_file(files: list[UploadFile] | None) -> UploadFile | None:
    """
    같은 key 로 들어온 파일 중 첫번째만 사용 (빈 파일 항목은 무시)
    """
    if not files:
        return None
    upload = files[0]
    if not upload.filename:
        return None
    return upload

async def save_temp_upload(upload: UploadFile | None) -> Path | None:
    """
    UploadFile 을 TEMP_UPLOAD_DIR 에 저장하고 경로 반환
    """
    if upload is None:
        return None

    temp_dir = Path(settings.TEMP_UPLOAD_DIR)
    temp_dir.mkdir(parents=True, exist_ok=True)
    path = temp_dir / f"{uuid4().hex}-{Path(upload.filename).name}"

    content = await upload.read()
    await run_in_threadpool(path.write_bytes, content)

    return path

def remove_temp_upload(path: Path | None) -> None:
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("temp_upload_cleanup_failed", path=str(path), error=str(e))
