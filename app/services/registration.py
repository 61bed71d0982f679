# app/services/registration.py

from pathlib import Path

import structlog
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.errors import BadRequestError, ConflictError, InternalServerError
from app.crud import user as crud_user
from app.schemas.user import RegistrationForm, UserOut
from app.services import media

logger = structlog.get_logger()

DUPLICATE_USER_MESSAGE = "User with email or username already exists"

async def register_user(
        session: AsyncSession,
        form: RegistrationForm,
        avatar_path: Path | None,
        cover_image_path: Path | None = None
) -> UserOut:
    """
    회원가입
    1. 필드 검증 (공백만 있는 값도 누락으로 처리)
    2. username / email 중복 체크
    3. avatar 필수
    4. avatar, cover image 업로드
    5. User 생성
    6. 생성된 User 다시 조회 (password, refresh token 제외)
    """
    missing = form.missing_fields()
    if missing:
        raise BadRequestError("All fields are required", errors=missing)

    existing_user = await crud_user.find_existing_user(session, form.username, form.email)
    if existing_user:
        logger.info("duplicate_user_rejected", username=form.username.lower())
        raise ConflictError(DUPLICATE_USER_MESSAGE)

    if avatar_path is None:
        raise BadRequestError("Avatar file is required")

    avatar = await media.upload_on_cloudinary(avatar_path)
    cover_image = None
    if cover_image_path is not None:
        cover_image = await media.upload_on_cloudinary(cover_image_path)
        # cover image 는 선택 사항 -> 실패해도 가입은 진행
        if cover_image is None or not cover_image.url:
            logger.warning("cover_image_upload_failed", username=form.username.lower())

    if avatar is None or not avatar.url:
        logger.error("avatar_upload_failed", username=form.username.lower())
        raise InternalServerError("Error uploading avatar to Cloudinary")

    try:
        new_user = await crud_user.create_user(
            session=session,
            full_name=form.full_name,
            email=form.email,
            username=form.username,
            password=form.password,
            avatar=avatar.url,
            cover_image=(cover_image.url if cover_image and cover_image.url else ""),
        )
    except crud_user.DuplicateUserError:
        logger.info("duplicate_user_rejected", username=form.username.lower(), on="insert")
        raise ConflictError(DUPLICATE_USER_MESSAGE)

    created_user = await crud_user.get_user_by_id(session, new_user.id)
    if created_user is None:
        raise InternalServerError("Something went wrong while registering the user")

    logger.info("user_registered", user_id=created_user.id, username=created_user.username)
    return UserOut.model_validate(created_user)
