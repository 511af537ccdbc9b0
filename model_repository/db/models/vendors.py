from .base import Base, CatalogEntryMixin


class Vendor(CatalogEntryMixin, Base):
    __tablename__ = 'vendors'
    entity_label = "Vendor"
