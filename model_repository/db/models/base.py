"""
Shared SQLAlchemy base, common catalogue columns and persistence listeners.
"""
import logging
import uuid
from datetime import datetime, UTC
from sqlalchemy import Column, DateTime, String, Text, event
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


def new_identifier() -> str:
    return str(uuid.uuid4())


Base = declarative_base()


class CatalogEntryMixin:
    """Columns shared by every catalogue entity.

    ``entity_label`` is the human readable type name used in log lines.
    """

    entity_label = "Entity"

    id = Column(String(36), primary_key=True, default=new_identifier)
    name = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    creation_date = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    latest_update_date = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} name={self.name!r}>"


@event.listens_for(CatalogEntryMixin, "after_insert", propagate=True)
@event.listens_for(CatalogEntryMixin, "after_update", propagate=True)
def _log_persisted(mapper, connection, target):
    logger.info("%s with DatabaseID: '%s' has been persisted.", target.entity_label, target.id)


@event.listens_for(CatalogEntryMixin, "after_delete", propagate=True)
def _log_deleted(mapper, connection, target):
    logger.info("%s with DatabaseID: '%s' has been deleted.", target.entity_label, target.id)
