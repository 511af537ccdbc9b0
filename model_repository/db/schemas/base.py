"""
Shared pydantic configuration for the catalogue DTOs.

Payloads travel as camelCase JSON while Python code uses snake_case
attributes. Timestamps are rendered in UTC with millisecond precision.
"""
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel


def format_timestamp(value: datetime) -> str:
    # 2024-05-01T12:30:45.123
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogEntryRequest(CamelModel):
    # Optional here so blank or absent values are reported as missing mandatory fields
    name: str | None = None
    description: str | None = None


class CatalogEntryResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    creation_date: datetime
    latest_update_date: datetime
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_validator("creation_date", "latest_update_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; every stored timestamp is UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("creation_date", "latest_update_date", when_used="json")
    def _render_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)


class PaginationInfoResponse(CamelModel):
    total_items: int
    total_pages: int
    current_page: int
