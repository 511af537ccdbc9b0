"""
Tagged outcomes returned by every service operation.

A wrapper carries an outcome code, a human message, the error code that
fired (if any) and the payload. Expected failures (not found, conflict, bad
request) travel as wrappers, never as exceptions.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

SUCCESS_MESSAGE = "Database transaction successfully concluded."


class ResponseCode(str, Enum):
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    CONFLICT = "CONFLICT"
    ERROR = "ERROR"
    UNDEFINED = "UNDEFINED"


_FAILURE_CODES = frozenset({
    ResponseCode.NOT_FOUND,
    ResponseCode.BAD_REQUEST,
    ResponseCode.CONFLICT,
    ResponseCode.ERROR,
})


def _check_failure(code: ResponseCode, message: str) -> None:
    if code not in _FAILURE_CODES:
        raise ValueError(f"{code.value} is not a failure outcome")
    if not message or not message.strip():
        raise ValueError("failure outcomes require a message")


@dataclass(frozen=True)
class PaginationInfo:
    total_items: int
    total_pages: int
    current_page: int

    def __post_init__(self):
        if self.total_items < 0 or self.total_pages < 0 or self.current_page < 0:
            raise ValueError("pagination values must be non-negative")

    @classmethod
    def from_totals(cls, total_items: int, size: int, current_page: int) -> "PaginationInfo":
        total_pages = math.ceil(total_items / size) if size > 0 else 0
        return cls(total_items=total_items, total_pages=total_pages, current_page=current_page)


@dataclass
class ResponseWrapper:
    code: ResponseCode = ResponseCode.UNDEFINED
    message: str = ""
    error_code: Optional[Enum] = None
    response: Optional[Any] = None

    @classmethod
    def success(cls, response: Any = None, message: str = SUCCESS_MESSAGE) -> "ResponseWrapper":
        return cls(code=ResponseCode.SUCCESS, message=message, response=response)

    @classmethod
    def failure(cls, code: ResponseCode, message: str, error_code: Optional[Enum] = None) -> "ResponseWrapper":
        _check_failure(code, message)
        return cls(code=code, message=message, error_code=error_code)

    @property
    def is_success(self) -> bool:
        return self.code is ResponseCode.SUCCESS


@dataclass
class ResponsesWrapper:
    code: ResponseCode = ResponseCode.UNDEFINED
    message: str = ""
    error_code: Optional[Enum] = None
    list_of_responses: Optional[List[Any]] = None
    pagination_info: Optional[PaginationInfo] = None

    @classmethod
    def success(cls, responses: List[Any], pagination_info: PaginationInfo,
                message: str = SUCCESS_MESSAGE) -> "ResponsesWrapper":
        return cls(
            code=ResponseCode.SUCCESS,
            message=message,
            list_of_responses=list(responses),
            pagination_info=pagination_info,
        )

    @classmethod
    def failure(cls, code: ResponseCode, message: str, error_code: Optional[Enum] = None) -> "ResponsesWrapper":
        _check_failure(code, message)
        return cls(code=code, message=message, error_code=error_code)

    @property
    def is_success(self) -> bool:
        return self.code is ResponseCode.SUCCESS
