"""
Generic repository over a catalogue ORM model.

Provides the store operations the service layer relies on: lookups by id and
name, paginated listing, insert-or-replace, single and bulk deletion, and
counting. Store exceptions propagate unchanged after the session is rolled
back; mapping them onto domain errors is the caller's job.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from model_repository.db.models import CatalogEntryMixin

ModelT = TypeVar("ModelT", bound=CatalogEntryMixin)


@dataclass
class Page(Generic[ModelT]):
    content: List[ModelT] = field(default_factory=list)
    total_elements: int = 0
    total_pages: int = 0
    number: int = 0


class Repository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, identifier: str) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == identifier).first()

    def find_first_by_name(self, name: str) -> Optional[ModelT]:
        return (
            self.db.query(self.model)
            .filter(self.model.name == name)
            .order_by(self.model.creation_date)
            .first()
        )

    def find_all(self, page: int, size: int) -> Page[ModelT]:
        q = self.db.query(self.model)
        total_elements = q.count()
        total_pages = math.ceil(total_elements / size) if size > 0 else 0
        offset = page * size
        if offset >= total_elements:
            # Window starts past the last row; skip the query so huge values never reach the driver
            return Page(content=[], total_elements=total_elements, total_pages=total_pages, number=page)
        content = (
            q.order_by(self.model.creation_date, self.model.id)
            .offset(offset)
            .limit(min(size, total_elements - offset))
            .all()
        )
        return Page(content=content, total_elements=total_elements, total_pages=total_pages, number=page)

    def save(self, entity: ModelT) -> ModelT:
        """Insert the entity, or replace the stored one carrying the same id."""
        try:
            merged = self.db.merge(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(merged)
        return merged

    def delete_by_id(self, identifier: str) -> None:
        try:
            entity = self.find_by_id(identifier)
            if entity is not None:
                self.db.delete(entity)
                self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete_all(self) -> int:
        """Delete every row one by one so the per-entity delete listeners fire."""
        try:
            entities = self.db.query(self.model).all()
            for entity in entities:
                self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return len(entities)

    def count(self) -> int:
        return self.db.query(self.model).count()
