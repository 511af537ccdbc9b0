"""
Conversion between request/response DTOs and ORM entities.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, List, Type

from model_repository.db import models, schemas


class EntityConverter:
    """Maps the fields shared by every catalogue entity.

    Subclasses set ``model`` and ``response_schema`` and extend
    ``_entity_fields``/``to_response`` for entity specific fields.
    """

    model: Type[models.CatalogEntryMixin]
    response_schema: Type[schemas.CatalogEntryResponse]

    def to_entity(self, request: schemas.CatalogEntryRequest, identifier: str) -> models.CatalogEntryMixin:
        return self.model(id=identifier, **self._entity_fields(request))

    def _entity_fields(self, request) -> dict:
        return {"name": request.name, "description": request.description}

    def to_response(self, entity) -> schemas.CatalogEntryResponse:
        return self.response_schema.model_validate(entity)

    def to_responses(self, entities: Iterable) -> List[schemas.CatalogEntryResponse]:
        return [self.to_response(entity) for entity in entities]


class VendorConverter(EntityConverter):
    model = models.Vendor
    response_schema = schemas.VendorResponse


class AssetCategoryConverter(EntityConverter):
    model = models.AssetCategory
    response_schema = schemas.AssetCategoryResponse


def unique_values(values: Iterable[Any] | None) -> List[Any]:
    """Drop repeated values, keeping the first occurrence.

    Values may be unhashable (dicts, lists), so equality is judged on their
    canonical JSON form.
    """
    seen = set()
    result = []
    for value in values or []:
        key = json.dumps(value, sort_keys=True, default=str)
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


class SystemConverter(EntityConverter):
    model = models.System
    response_schema = schemas.SystemResponse

    def _entity_fields(self, request: schemas.SystemRequest) -> dict:
        fields = super()._entity_fields(request)
        location = request.location
        geo = location.geo_location if location is not None else None
        fields.update(
            latitude=geo.latitude if geo is not None else None,
            longitude=geo.longitude if geo is not None else None,
            virtual_location=location.virtual_location if location is not None else None,
            organization=request.organization,
            additional_information=unique_values(request.additional_information),
        )
        return fields

    def to_response(self, entity: models.System) -> schemas.SystemResponse:
        return schemas.SystemResponse(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            creation_date=entity.creation_date,
            latest_update_date=entity.latest_update_date,
            location=self._location(entity),
            organization=entity.organization,
            additional_information=list(entity.additional_information or []),
        )

    @staticmethod
    def _location(entity: models.System) -> schemas.Location | None:
        if entity.virtual_location:
            return schemas.Location(virtual_location=entity.virtual_location)
        if entity.latitude is not None or entity.longitude is not None:
            return schemas.Location(
                geo_location=schemas.GeoLocation(latitude=entity.latitude, longitude=entity.longitude)
            )
        return None
