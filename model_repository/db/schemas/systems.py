from typing import Any, List
from .base import CamelModel, CatalogEntryRequest, CatalogEntryResponse


class GeoLocation(CamelModel):
    latitude: float | None = None
    longitude: float | None = None


class Location(CamelModel):
    geo_location: GeoLocation | None = None
    virtual_location: str | None = None


class SystemRequest(CatalogEntryRequest):
    location: Location | None = None
    organization: str | None = None
    additional_information: List[Any] | None = None


class SystemResponse(CatalogEntryResponse):
    location: Location | None = None
    organization: str | None = None
    additional_information: List[Any] = []
