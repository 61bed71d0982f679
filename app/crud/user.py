# app/crud/user.py

from sqlalchemy.exc import IntegrityError
from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import uuid4

from app.core.security import get_password_hash
from app.models.user import User

class DuplicateUserError(Exception):
    """
    username / email unique 제약 위반
    """

async def find_existing_user(
        session: AsyncSession,
        username: str,
        email: str
) -> User | None:
    """
    Returns User matching username (lowercased) OR email (as given)
    """
    statement = select(User).where(
        or_(User.username == username.lower(), User.email == email)
    )
    result = await session.exec(statement)
    return result.first()

async def create_user(
        session: AsyncSession,
        full_name: str,
        email: str,
        username: str,
        password: str,
        avatar: str,
        cover_image: str = ""
) -> User:
    """
    User 생성
    - username 은 소문자로 저장
    - password 는 hash 해서 저장
    - unique 제약 위반 시 DuplicateUserError
    """
    user = User(
        id=str(uuid4()),
        full_name=full_name,
        email=email,
        username=username.lower(),
        password=get_password_hash(password),
        avatar=avatar,
        cover_image=cover_image,
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        raise DuplicateUserError("User with email or username already exists") from e
    await session.refresh(user)
    return user

async def get_user_by_id(
        session: AsyncSession,
        user_id: str
) -> User | None:
    """
    Returns User by ID (DB 에서 다시 조회)
    """
    statement = select(User).where(User.id == user_id)
    result = await session.exec(statement)
    return result.first()
