# app/core/configuration.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    환경변수 / .env 에서 읽어오는 설정값
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "StreamHub API"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "User accounts and profile media for StreamHub"
    TAGS_METADATA: list[dict] = [
        {"name": "Users", "description": "User registration"},
    ]
    API_PREFIX: str = "/api/v1"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./streamhub.db"
    DATABASE_ECHO: bool = False

    CORS_ORIGINS: list[str] = ["*"]

    # Cloudinary
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_FOLDER: str | None = None

    # multipart 파일을 잠시 저장하는 위치
    TEMP_UPLOAD_DIR: str = "public/temp"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
