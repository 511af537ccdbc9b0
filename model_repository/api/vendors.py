"""
Vendor API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Body, Depends

from model_repository.api.deps import get_vendor_service
from model_repository.api.responses import Operation, execute
from model_repository.db import schemas
from model_repository.services import VENDOR_PROFILE, EntityService

router = APIRouter(prefix="/vendor", tags=["Vendor"])


@router.get("/{vendor_id}")
def retrieve_vendor_endpoint(vendor_id: str, service: EntityService = Depends(get_vendor_service)):
    return execute(Operation.RETRIEVE, lambda: service.retrieve_by_id(vendor_id))


@router.get("")
def retrieve_vendors_endpoint(
    name: Optional[str] = None,
    page: int = 0,
    size: int = 10,
    service: EntityService = Depends(get_vendor_service),
):
    if name is not None:
        return execute(Operation.RETRIEVE, lambda: service.retrieve_by_name(name))
    return execute(Operation.RETRIEVE_ALL, lambda: service.retrieve_all(page, size))


@router.post("")
def create_vendor_endpoint(
    vendor: Optional[schemas.VendorRequest] = Body(default=None),
    service: EntityService = Depends(get_vendor_service),
):
    return execute(Operation.CREATE, lambda: service.create(vendor))


@router.put("/{vendor_id}")
def update_vendor_endpoint(
    vendor_id: str,
    vendor: Optional[schemas.VendorRequest] = Body(default=None),
    service: EntityService = Depends(get_vendor_service),
):
    return execute(Operation.UPDATE, lambda: service.update(vendor, vendor_id))


@router.delete("/{vendor_id}")
def delete_vendor_endpoint(vendor_id: str, service: EntityService = Depends(get_vendor_service)):
    return execute(Operation.DELETE, lambda: service.delete(vendor_id))


@router.delete("")
def delete_vendors_endpoint(service: EntityService = Depends(get_vendor_service)):
    return execute(Operation.DELETE_ALL, service.delete_all, VENDOR_PROFILE.deletion_notice)
