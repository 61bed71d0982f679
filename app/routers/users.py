# app/routers/users.py

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db.database import get_session
from app.schemas.response import ApiResponse
from app.schemas.user import RegistrationForm, UserOut
from app.services import uploads
from app.services.registration import register_user

router = APIRouter()

@router.post(
    "/register",
    response_model=ApiResponse[UserOut],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    session: Annotated[AsyncSession, Depends(get_session)],
    full_name: Annotated[str | None, Form(alias="fullName")] = None,
    email: Annotated[str | None, Form()] = None,
    username: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
    avatar: Annotated[list[UploadFile] | None, File()] = None,
    cover_image: Annotated[list[UploadFile] | None, File(alias="coverImage")] = None,
):
    """
    신규 사용자 회원가입 (multipart/form-data)
    - fullName, email, username, password
    - avatar (필수), coverImage (선택)
    """
    form = RegistrationForm(
        full_name=full_name,
        email=email,
        username=username,
        password=password,
    )

    avatar_path = None
    cover_image_path = None
    try:
        avatar_path = await uploads.save_temp_upload(uploads.first_file(avatar))
        cover_image_path = await uploads.save_temp_upload(uploads.first_file(cover_image))
        created_user = await register_user(
            session,
            form,
            avatar_path=avatar_path,
            cover_image_path=cover_image_path,
        )
    finally:
        uploads.remove_temp_upload(avatar_path)
        uploads.remove_temp_upload(cover_image_path)

    return ApiResponse[UserOut](
        status_code=status.HTTP_201_CREATED,
        data=created_user,
        message="User registered successfully!",
    )
