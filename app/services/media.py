# app/services/media.py

import os

import cloudinary
import cloudinary.uploader
import structlog
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict

from app.core.configuration import settings

logger = structlog.get_logger()

_configured = False

class UploadedMedia(BaseModel):
    """
    Cloudinary 업로드 결과 (url 만 User 에 저장됨)
    """
    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    secure_url: str | None = None
    public_id: str | None = None
    resource_type: str | None = None

def configure_cloudinary():
    global _configured
    if not _configured:
        cloudinary.config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            secure=True,
        )
        _configured = True

async def upload_on_cloudinary(local_file_path: str | os.PathLike | None) -> UploadedMedia | None:
    """
    로컬 파일을 Cloudinary 에 업로드
    - 경로가 없거나 업로드 실패 시 None 반환
    """
    if not local_file_path:
        return None

    configure_cloudinary()
    options = {"resource_type": "auto"}
    if settings.CLOUDINARY_FOLDER:
        options["folder"] = settings.CLOUDINARY_FOLDER

    try:
        result = await run_in_threadpool(
            cloudinary.uploader.upload, str(local_file_path), **options
        )
    except Exception as e:
        logger.warning("cloudinary_upload_failed", path=str(local_file_path), error=str(e))
        return None

    media = UploadedMedia.model_validate(result)
    logger.info("cloudinary_upload_done", public_id=media.public_id, url=media.url)
    return media
