# app/schemas/response.py

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    """
    공통 성공 응답 envelope
    {statusCode, data, message, success}
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int
    data: T
    message: str = "Success"

    @computed_field
    @property
    def success(self) -> bool:
        return self.status_code < 400
