# app/schemas/user.py

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class RegistrationForm(BaseModel):
    """
    회원가입 form 의 text field
    - 값이 없을 수 있음 (검증은 registration service 에서)
    """
    full_name: str | None = None
    email: str | None = None
    username: str | None = None
    password: str | None = Field(default=None, repr=False)

    def missing_fields(self) -> list[str]:
        values = {
            "fullName": self.full_name,
            "email": self.email,
            "username": self.username,
            "password": self.password,
        }
        return [name for name, value in values.items() if value is None or not value.strip()]

class UserOut(BaseModel):
    """
    응답용 User (password, refresh token 제외)
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    username: str
    email: str
    full_name: str
    avatar: str
    cover_image: str = ""
    created_at: dt.datetime
    updated_at: dt.datetime
