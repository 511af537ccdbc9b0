from sqlalchemy import Column, Float, JSON, String
from .base import Base, CatalogEntryMixin


class System(CatalogEntryMixin, Base):
    __tablename__ = 'systems'
    entity_label = "System"

    # Location: either a coordinate pair or a virtual location, never both
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    virtual_location = Column(String(255), nullable=True)

    organization = Column(String(255), nullable=True)
    additional_information = Column(JSON, nullable=False, default=list)
