"""
Per-entity repositories built on the generic `Repository`.
"""

from .base import Page, Repository
from .systems import SystemRepository
from .vendors import VendorRepository
from .asset_categories import AssetCategoryRepository

__all__ = [
    "Page",
    "Repository",
    "SystemRepository",
    "VendorRepository",
    "AssetCategoryRepository",
]
