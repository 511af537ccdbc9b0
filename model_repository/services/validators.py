"""
Request validation for the catalogue services.

Every check is a pure function of its inputs that raises
:class:`InvalidRequestError` carrying the error code that fired. ``errors``
is the entity's error-code enum, so the same checks serve every entity.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, Type

from model_repository.services.error_codes import describe

_UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class InvalidRequestError(ValueError):
    """A request was rejected before reaching the store."""

    def __init__(self, error_code: Enum, message: str | None = None):
        self.error_code = error_code
        self.message = message or error_code.value
        super().__init__(self.message)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_identifier(identifier: str | None, errors: Type[Enum]) -> None:
    if _is_blank(identifier):
        raise InvalidRequestError(errors.IDENTIFIER_MISSING)
    if not _UUID_PATTERN.match(str(identifier)):
        raise InvalidRequestError(errors.IDENTIFIER_NOT_UUID, describe(errors.IDENTIFIER_NOT_UUID, identifier))


def validate_name(name: str | None, errors: Type[Enum]) -> None:
    if _is_blank(name):
        raise InvalidRequestError(errors.IDENTIFIER_MISSING)


def validate_payload(payload: Any, errors: Type[Enum]) -> None:
    if payload is None:
        raise InvalidRequestError(errors.MISSING_DATA_INPUT)


def validate_required_fields(payload: Any, fields: Iterable[str], errors: Type[Enum]) -> None:
    missing = [name for name in fields if _is_blank(getattr(payload, name, None))]
    if missing:
        code = errors.MANDATORY_FIELDS_MISSING
        raise InvalidRequestError(code, f"{code.value} Field(s): {', '.join(missing)}")


def validate_location(location: Any, errors: Type[Enum]) -> None:
    """Accept a location holding either a full coordinate pair or a virtual location.

    An absent location passes. A virtual location may not be combined with
    any coordinate, and coordinates must come as a latitude/longitude pair.
    A latitude or longitude of exactly 0 counts as unset, so coordinates on
    the equator or the prime meridian are rejected.
    """
    if location is None:
        return
    has_virtual = not _is_blank(location.virtual_location)
    geo = location.geo_location
    any_coordinate = geo is not None and (bool(geo.latitude) or bool(geo.longitude))
    full_pair = geo is not None and bool(geo.latitude) and bool(geo.longitude)
    if has_virtual and any_coordinate:
        raise InvalidRequestError(errors.INVALID_LOCATION_STRUCTURE)
    if not has_virtual and not full_pair:
        raise InvalidRequestError(errors.INVALID_LOCATION_STRUCTURE)


def validate_pagination(page: int, size: int, errors: Type[Enum]) -> None:
    if page < 0 or size < 1:
        code = errors.INVALID_PARAMETERS
        raise InvalidRequestError(code, f"{code.value} Page: {page}, Size: {size}")
