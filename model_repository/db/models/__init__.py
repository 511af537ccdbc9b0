"""
SQLAlchemy models for the catalogue entities.

Exposes `Base`, the timestamp/identifier helpers and every ORM class so
callers (and Alembic) can import a single module.
"""

from .base import Base, CatalogEntryMixin, new_identifier, now_utc  # re-export

from .systems import System
from .vendors import Vendor
from .asset_categories import AssetCategory

__all__ = [
    "Base",
    "CatalogEntryMixin",
    "new_identifier",
    "now_utc",
    "System",
    "Vendor",
    "AssetCategory",
]
