"""Business logic services package with the per-entity pipeline profiles."""

from .entity_service import EntityProfile, EntityService
from .systems import SYSTEM_PROFILE
from .vendors import VENDOR_PROFILE
from .asset_categories import ASSET_CATEGORY_PROFILE
from .wrappers import PaginationInfo, ResponseCode, ResponsesWrapper, ResponseWrapper

__all__ = [
    "EntityProfile",
    "EntityService",
    "SYSTEM_PROFILE",
    "VENDOR_PROFILE",
    "ASSET_CATEGORY_PROFILE",
    "PaginationInfo",
    "ResponseCode",
    "ResponsesWrapper",
    "ResponseWrapper",
]
