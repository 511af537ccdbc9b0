"""
Asset Category API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Body, Depends

from model_repository.api.deps import get_asset_category_service
from model_repository.api.responses import Operation, execute
from model_repository.db import schemas
from model_repository.services import ASSET_CATEGORY_PROFILE, EntityService

router = APIRouter(prefix="/asset_category", tags=["Asset Category"])


@router.get("/{asset_category_id}")
def retrieve_asset_category_endpoint(
    asset_category_id: str,
    service: EntityService = Depends(get_asset_category_service),
):
    return execute(Operation.RETRIEVE, lambda: service.retrieve_by_id(asset_category_id))


@router.get("")
def retrieve_asset_categories_endpoint(
    name: Optional[str] = None,
    page: int = 0,
    size: int = 10,
    service: EntityService = Depends(get_asset_category_service),
):
    if name is not None:
        return execute(Operation.RETRIEVE, lambda: service.retrieve_by_name(name))
    return execute(Operation.RETRIEVE_ALL, lambda: service.retrieve_all(page, size))


@router.post("")
def create_asset_category_endpoint(
    asset_category: Optional[schemas.AssetCategoryRequest] = Body(default=None),
    service: EntityService = Depends(get_asset_category_service),
):
    return execute(Operation.CREATE, lambda: service.create(asset_category))


@router.put("/{asset_category_id}")
def update_asset_category_endpoint(
    asset_category_id: str,
    asset_category: Optional[schemas.AssetCategoryRequest] = Body(default=None),
    service: EntityService = Depends(get_asset_category_service),
):
    return execute(Operation.UPDATE, lambda: service.update(asset_category, asset_category_id))


@router.delete("/{asset_category_id}")
def delete_asset_category_endpoint(
    asset_category_id: str,
    service: EntityService = Depends(get_asset_category_service),
):
    return execute(Operation.DELETE, lambda: service.delete(asset_category_id))


@router.delete("")
def delete_asset_categories_endpoint(service: EntityService = Depends(get_asset_category_service)):
    return execute(Operation.DELETE_ALL, service.delete_all, ASSET_CATEGORY_PROFILE.deletion_notice)
