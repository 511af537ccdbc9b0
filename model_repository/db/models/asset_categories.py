from .base import Base, CatalogEntryMixin


class AssetCategory(CatalogEntryMixin, Base):
    __tablename__ = 'asset_categories'
    entity_label = "Asset Category"
