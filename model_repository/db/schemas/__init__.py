"""
Pydantic request/response schemas for the catalogue entities.
"""

from .base import CamelModel, CatalogEntryRequest, CatalogEntryResponse, PaginationInfoResponse, format_timestamp
from .systems import GeoLocation, Location, SystemRequest, SystemResponse
from .vendors import VendorRequest, VendorResponse
from .asset_categories import AssetCategoryRequest, AssetCategoryResponse

__all__ = [
    "CamelModel",
    "CatalogEntryRequest",
    "CatalogEntryResponse",
    "PaginationInfoResponse",
    "format_timestamp",
    "GeoLocation",
    "Location",
    "SystemRequest",
    "SystemResponse",
    "VendorRequest",
    "VendorResponse",
    "AssetCategoryRequest",
    "AssetCategoryResponse",
]
