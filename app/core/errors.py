# app/core/errors.py

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

logger = structlog.get_logger()

class ApiError(Exception):
    """
    HTTP status 와 message 를 가진 API 오류
    -> error envelope 로 변환되어 응답됨
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong"

    def __init__(
            self,
            message: str | None = None,
            status_code: int | None = None,
            errors: list | None = None
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors or []
        super().__init__(self.message)

class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"

class InternalServerError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

def error_envelope(status_code: int, message: str, errors: list | None = None) -> dict:
    return {
        "statusCode": status_code,
        "data": None,
        "message": message,
        "success": False,
        "errors": errors or [],
    }

async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(
        "api_error",
        path=request.url.path,
        status_code=exc.status_code,
        message=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, exc.message, exc.errors),
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(status.HTTP_400_BAD_REQUEST, "Invalid request", errors),
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
