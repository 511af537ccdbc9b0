"""
Boundary between the catalogue services and the store.

`RepositoryAccess` forwards each call to a `Repository` and guarantees that
no store failure escapes: SQLAlchemy and driver errors are logged and re-raised as
`RepositoryError`, unique-constraint violations on save as
`NameConflictError`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from model_repository.db.repositories import Page, Repository

logger = logging.getLogger(__name__)


class RepositoryError(RuntimeError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, label: str, detail: str = ""):
        self.operation = operation
        self.label = label
        message = f"{label} store operation '{operation}' failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NameConflictError(RepositoryError):
    """The store refused a write because the name is already taken."""


class RepositoryAccess:
    def __init__(self, repository: Repository, label: str):
        self.repository = repository
        self.label = label

    def _call(self, operation: str, fn: Callable[..., Any], *args) -> Any:
        try:
            return fn(*args)
        except IntegrityError as exc:
            logger.info("%s %s rejected by unique constraint: %s", self.label, operation, exc.orig)
            raise NameConflictError(operation, self.label, str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            logger.error("%s %s failed: %s", self.label, operation, exc)
            raise RepositoryError(operation, self.label, str(exc)) from exc
        except (OverflowError, ValueError, TypeError) as exc:
            # Driver-level rejections of out-of-range arguments
            logger.error("%s %s failed: %r", self.label, operation, exc)
            raise RepositoryError(operation, self.label, repr(exc)) from exc

    def find_by_id(self, identifier: str) -> Optional[Any]:
        return self._call("find_by_id", self.repository.find_by_id, identifier)

    def find_first_by_name(self, name: str) -> Optional[Any]:
        return self._call("find_first_by_name", self.repository.find_first_by_name, name)

    def find_all(self, page: int, size: int) -> Page:
        return self._call("find_all", self.repository.find_all, page, size)

    def save(self, entity: Any) -> Any:
        return self._call("save", self.repository.save, entity)

    def delete_by_id(self, identifier: str) -> None:
        self._call("delete_by_id", self.repository.delete_by_id, identifier)

    def delete_all(self) -> int:
        return self._call("delete_all", self.repository.delete_all)

    def count(self) -> int:
        return self._call("count", self.repository.count)
