"""
Generic CRUD pipeline shared by every catalogue entity.

Each operation runs the same stages: validate the request, call the store
through `RepositoryAccess`, resolve existence and name conflicts, and wrap
the outcome in a `ResponseWrapper`/`ResponsesWrapper`. What differs between
entities (labels, error codes, mandatory fields, structural checks, converter,
repository) lives in an `EntityProfile`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Tuple, Type

from sqlalchemy.orm import Session

from model_repository.db.converters import EntityConverter
from model_repository.db.models import new_identifier, now_utc
from model_repository.db.repositories import Repository
from model_repository.services.error_codes import describe
from model_repository.services.repository_access import (
    NameConflictError,
    RepositoryAccess,
    RepositoryError,
)
from model_repository.services.validators import (
    InvalidRequestError,
    validate_identifier,
    validate_name,
    validate_pagination,
    validate_payload,
    validate_required_fields,
)
from model_repository.services.wrappers import (
    PaginationInfo,
    ResponseCode,
    ResponsesWrapper,
    ResponseWrapper,
)

logger = logging.getLogger(__name__)

StructuralCheck = Callable[[Any, Type[Enum]], None]


@dataclass(frozen=True)
class EntityProfile:
    label: str
    plural: str
    errors: Type[Enum]
    not_found_by_id: Enum
    not_found_by_name: Enum
    none_found: Enum
    duplicate: Enum
    repository: Type[Repository]
    converter: EntityConverter
    required_fields: Tuple[str, ...] = ("name",)
    structural_checks: Tuple[StructuralCheck, ...] = ()

    @property
    def deletion_notice(self) -> str:
        return f"Successfully deleted all {self.plural} from the persistence layer."


class EntityService:
    """CRUD operations for one entity type bound to one database session."""

    def __init__(self, db: Session, profile: EntityProfile):
        self.profile = profile
        self.errors = profile.errors
        self.store = RepositoryAccess(profile.repository(db), profile.label)

    # Retrieval

    def retrieve_by_id(self, identifier: str | None) -> ResponseWrapper:
        try:
            validate_identifier(identifier, self.errors)
        except InvalidRequestError as exc:
            return self._rejected(exc)
        try:
            entity = self.store.find_by_id(identifier)
        except RepositoryError:
            return self._error(self.errors.ERROR_ON_RETRIEVAL_ID, identifier)
        if entity is None:
            return self._not_found(self.profile.not_found_by_id, identifier)
        return self._wrap(entity)

    def retrieve_by_name(self, name: str | None) -> ResponseWrapper:
        try:
            validate_name(name, self.errors)
        except InvalidRequestError as exc:
            return self._rejected(exc)
        try:
            entity = self.store.find_first_by_name(name)
        except RepositoryError:
            return self._error(self.errors.ERROR_ON_RETRIEVAL_NAME, name)
        if entity is None:
            return self._not_found(self.profile.not_found_by_name, name)
        return self._wrap(entity)

    def retrieve_all(self, page: int, size: int) -> ResponsesWrapper:
        try:
            validate_pagination(page, size, self.errors)
        except InvalidRequestError as exc:
            logger.info("%s listing rejected: %s", self.profile.label, exc.error_code.name)
            return ResponsesWrapper.failure(ResponseCode.BAD_REQUEST, exc.message, exc.error_code)
        try:
            result = self.store.find_all(page, size)
        except RepositoryError:
            code = self.errors.ERROR_ON_RETRIEVAL_MANY
            return ResponsesWrapper.failure(ResponseCode.ERROR, code.value, code)

        pagination = PaginationInfo.from_totals(result.total_elements, size, page)
        if not result.content:
            if pagination.total_items > 0:
                code = self.errors.EXCEEDED_PAGE_LIMIT
                message = f"{code.value} Total Pages: {pagination.total_pages}"
            else:
                code = self.profile.none_found
                message = code.value
            logger.info("%s listing page=%s size=%s: %s", self.profile.label, page, size, code.name)
            return ResponsesWrapper.failure(ResponseCode.NOT_FOUND, message, code)

        try:
            responses = self.profile.converter.to_responses(result.content)
        except (ValueError, TypeError, AttributeError):
            logger.exception("%s conversion failed while listing", self.profile.label)
            code = self.errors.INTERNAL_SERVER_ERROR
            return ResponsesWrapper.failure(ResponseCode.ERROR, code.value, code)
        return ResponsesWrapper.success(responses, pagination)

    # Mutation

    def create(self, payload: Any) -> ResponseWrapper:
        try:
            self._validate_payload(payload)
        except InvalidRequestError as exc:
            return self._rejected(exc)
        try:
            owner = self.store.find_first_by_name(payload.name)
            if owner is not None:
                return self._conflict(payload.name, owner)
            entity = self.profile.converter.to_entity(payload, new_identifier())
            stamp = now_utc()
            entity.creation_date = stamp
            entity.latest_update_date = stamp
            saved = self.store.save(entity)
        except NameConflictError:
            return self._conflict(payload.name)
        except RepositoryError:
            return self._error(self.errors.ERROR_ON_CREATION, payload.name)
        if saved is None:
            return self._error(self.errors.ERROR_ON_CREATION, payload.name)
        logger.info("%s created: id=%s", self.profile.label, saved.id)
        return self._wrap(saved)

    def update(self, payload: Any, identifier: str | None) -> ResponseWrapper:
        try:
            validate_identifier(identifier, self.errors)
            self._validate_payload(payload)
        except InvalidRequestError as exc:
            return self._rejected(exc)
        try:
            existing = self.store.find_by_id(identifier)
            if existing is None:
                return self._not_found(self.profile.not_found_by_id, identifier)
            if payload.name != existing.name:
                owner = self.store.find_first_by_name(payload.name)
                if owner is not None and owner.id != existing.id:
                    return self._conflict(payload.name, owner)
            entity = self.profile.converter.to_entity(payload, existing.id)
            entity.creation_date = existing.creation_date
            entity.latest_update_date = now_utc()
            saved = self.store.save(entity)
        except NameConflictError:
            return self._conflict(payload.name)
        except RepositoryError:
            return self._error(self.errors.ERROR_ON_UPDATE, identifier)
        if saved is None:
            return self._error(self.errors.ERROR_ON_UPDATE, identifier)
        logger.info("%s updated: id=%s", self.profile.label, saved.id)
        return self._wrap(saved)

    def delete(self, identifier: str | None) -> ResponseWrapper:
        try:
            validate_identifier(identifier, self.errors)
        except InvalidRequestError as exc:
            return self._rejected(exc)
        try:
            entity = self.store.find_by_id(identifier)
            if entity is None:
                return self._not_found(self.profile.not_found_by_id, identifier)
            # Convert before deleting: the instance is expired once the row is gone
            wrapper = self._wrap(entity)
            if not wrapper.is_success:
                return wrapper
            self.store.delete_by_id(identifier)
        except RepositoryError:
            return self._error(self.errors.ERROR_ON_DELETION_ID, identifier)
        logger.info("%s deleted: id=%s", self.profile.label, identifier)
        return wrapper

    def delete_all(self) -> ResponseWrapper:
        try:
            if self.store.count() == 0:
                return self._not_found(self.profile.none_found)
            deleted = self.store.delete_all()
        except RepositoryError:
            return self._error(self.errors.ERROR_ON_DELETION_MANY)
        logger.info("%s collection deleted: count=%s", self.profile.label, deleted)
        return ResponseWrapper.success()

    # Helpers

    def _validate_payload(self, payload: Any) -> None:
        validate_payload(payload, self.errors)
        validate_required_fields(payload, self.profile.required_fields, self.errors)
        for check in self.profile.structural_checks:
            check(payload, self.errors)

    def _wrap(self, entity: Any) -> ResponseWrapper:
        try:
            return ResponseWrapper.success(self.profile.converter.to_response(entity))
        except (ValueError, TypeError, AttributeError):
            logger.exception("%s conversion failed: id=%s", self.profile.label, getattr(entity, "id", None))
            code = self.errors.INTERNAL_SERVER_ERROR
            return ResponseWrapper.failure(ResponseCode.ERROR, code.value, code)

    def _rejected(self, exc: InvalidRequestError) -> ResponseWrapper:
        logger.info("%s request rejected: %s", self.profile.label, exc.error_code.name)
        return ResponseWrapper.failure(ResponseCode.BAD_REQUEST, exc.message, exc.error_code)

    def _not_found(self, code: Enum, value: Any = None) -> ResponseWrapper:
        logger.info("%s not found: %s value=%s", self.profile.label, code.name, value)
        return ResponseWrapper.failure(ResponseCode.NOT_FOUND, describe(code, value), code)

    def _error(self, code: Enum, value: Any = None) -> ResponseWrapper:
        return ResponseWrapper.failure(ResponseCode.ERROR, describe(code, value), code)

    def _conflict(self, name: str, owner: Any = None) -> ResponseWrapper:
        if owner is None:
            # The unique index fired; look the owner up again for the message
            try:
                owner = self.store.find_first_by_name(name)
            except RepositoryError:
                owner = None
        code = self.profile.duplicate
        logger.info("%s name conflict: name=%s", self.profile.label, name)
        return ResponseWrapper.failure(ResponseCode.CONFLICT, describe(code, owner.id if owner else name), code)
