"""
Uniform error body returned by every failing endpoint.
"""
from datetime import datetime, timezone
from enum import Enum, unique
from http import HTTPStatus

from starlette.responses import JSONResponse

from model_repository.db.schemas import CamelModel, format_timestamp


@unique
class ApiErrorMessage(Enum):
    INTERNAL_SERVER_ERROR = "Internal Server Error."
    HTTP_MESSAGE_NOT_READABLE = "JSON Parse Error occurred. Operation aborted."
    ERRONEOUS_PARAMETER_TYPE = "A non-acceptable variable data type has been detected. Operation aborted."


class ErrorMessage(CamelModel):
    http_code: int
    http_text: str
    message: str
    message_key: str
    timestamp: str


def _timestamp(now: datetime | None = None) -> str:
    return format_timestamp(now or datetime.now(timezone.utc))


def build_error(status_code: int, message: str, message_key: str) -> ErrorMessage:
    return ErrorMessage(
        http_code=status_code,
        http_text=f"{status_code} {HTTPStatus(status_code).name}",
        message=message,
        message_key=message_key,
        timestamp=_timestamp(),
    )


def error_response(status_code: int, message: str, message_key: str) -> JSONResponse:
    body = build_error(status_code, message, message_key)
    return JSONResponse(body.model_dump(by_alias=True), status_code=status_code)


def internal_error_response() -> JSONResponse:
    code = ApiErrorMessage.INTERNAL_SERVER_ERROR
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR.value, code.value, code.name)
