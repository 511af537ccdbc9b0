"""
System API endpoints.

Systems carry a location (coordinates or a virtual location), an
organization and a free-form list of additional information.
"""
from typing import Optional
from fastapi import APIRouter, Body, Depends

from model_repository.api.deps import get_system_service
from model_repository.api.responses import Operation, execute
from model_repository.db import schemas
from model_repository.services import SYSTEM_PROFILE, EntityService

router = APIRouter(prefix="/system", tags=["System"])


@router.get("/{system_id}")
def retrieve_system_endpoint(system_id: str, service: EntityService = Depends(get_system_service)):
    return execute(Operation.RETRIEVE, lambda: service.retrieve_by_id(system_id))


@router.get("")
def retrieve_systems_endpoint(
    name: Optional[str] = None,
    page: int = 0,
    size: int = 10,
    service: EntityService = Depends(get_system_service),
):
    if name is not None:
        return execute(Operation.RETRIEVE, lambda: service.retrieve_by_name(name))
    return execute(Operation.RETRIEVE_ALL, lambda: service.retrieve_all(page, size))


@router.post("")
def create_system_endpoint(
    system: Optional[schemas.SystemRequest] = Body(default=None),
    service: EntityService = Depends(get_system_service),
):
    return execute(Operation.CREATE, lambda: service.create(system))


@router.put("/{system_id}")
def update_system_endpoint(
    system_id: str,
    system: Optional[schemas.SystemRequest] = Body(default=None),
    service: EntityService = Depends(get_system_service),
):
    return execute(Operation.UPDATE, lambda: service.update(system, system_id))


@router.delete("/{system_id}")
def delete_system_endpoint(system_id: str, service: EntityService = Depends(get_system_service)):
    return execute(Operation.DELETE, lambda: service.delete(system_id))


@router.delete("")
def delete_systems_endpoint(service: EntityService = Depends(get_system_service)):
    return execute(Operation.DELETE_ALL, service.delete_all, SYSTEM_PROFILE.deletion_notice)
