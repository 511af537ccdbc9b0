"""
Translation of service outcomes into HTTP responses.

Every endpoint funnels its service call through :func:`execute`, which maps
the returned wrapper onto a status code and either the payload or the
uniform error body. The mapping is the same for all entities; only the
operation changes the success status and whether a conflict is an expected
outcome.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from fastapi import status
from starlette.responses import JSONResponse, Response

from model_repository.api.errors import error_response, internal_error_response
from model_repository.db.schemas import PaginationInfoResponse
from model_repository.services.wrappers import ResponseCode, ResponsesWrapper, ResponseWrapper

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    RETRIEVE = "retrieve"
    RETRIEVE_ALL = "retrieve_all"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    DELETE_ALL = "delete_all"


_SUCCESS_STATUS = {
    Operation.RETRIEVE: status.HTTP_200_OK,
    Operation.RETRIEVE_ALL: status.HTTP_200_OK,
    Operation.CREATE: status.HTTP_201_CREATED,
    Operation.UPDATE: status.HTTP_200_OK,
    Operation.DELETE: status.HTTP_200_OK,
    Operation.DELETE_ALL: status.HTTP_204_NO_CONTENT,
}

_CONFLICT_EXPECTED = frozenset({Operation.CREATE, Operation.UPDATE})

_FAILURE_STATUS = {
    ResponseCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ResponseCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResponseCode.CONFLICT: status.HTTP_409_CONFLICT,
}


def _payload(operation: Operation, wrapper):
    if operation is Operation.RETRIEVE_ALL:
        if wrapper.list_of_responses is None or wrapper.pagination_info is None:
            return None
        info = wrapper.pagination_info
        return {
            "items": [item.model_dump(mode="json", by_alias=True) for item in wrapper.list_of_responses],
            "paginationInfo": PaginationInfoResponse(
                total_items=info.total_items,
                total_pages=info.total_pages,
                current_page=info.current_page,
            ).model_dump(by_alias=True),
        }
    if wrapper.response is None:
        return None
    return wrapper.response.model_dump(mode="json", by_alias=True)


def translate(
    operation: Operation,
    wrapper: ResponseWrapper | ResponsesWrapper | None,
    deletion_notice: Optional[str] = None,
) -> Response:
    if wrapper is None:
        logger.error("%s produced no result", operation.value)
        return internal_error_response()

    code = wrapper.code
    if code is ResponseCode.CONFLICT and operation not in _CONFLICT_EXPECTED:
        logger.error("%s reported an unexpected conflict: %s", operation.value, wrapper.message)
        return internal_error_response()
    if code in _FAILURE_STATUS:
        key = wrapper.error_code.name if wrapper.error_code is not None else code.value
        return error_response(_FAILURE_STATUS[code], wrapper.message, key)
    if code is not ResponseCode.SUCCESS:
        logger.error("%s failed with %s: %s", operation.value, code.value, wrapper.message)
        return internal_error_response()

    if operation is Operation.DELETE_ALL:
        logger.info("%s", deletion_notice or "Successfully deleted all entities from the persistence layer.")
        return Response(status_code=_SUCCESS_STATUS[operation])

    body = _payload(operation, wrapper)
    if body is None:
        logger.error("%s reported success without a payload", operation.value)
        return internal_error_response()
    return JSONResponse(body, status_code=_SUCCESS_STATUS[operation])


def execute(
    operation: Operation,
    call: Callable[[], ResponseWrapper | ResponsesWrapper | None],
    deletion_notice: Optional[str] = None,
) -> Response:
    """Run a service call and translate its outcome; any exception becomes a 500."""
    try:
        wrapper = call()
    except Exception:
        logger.exception("%s raised an unexpected error", operation.value)
        return internal_error_response()
    return translate(operation, wrapper, deletion_notice)
