"""
Shared FastAPI dependencies: one service per request, bound to the request's session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from model_repository.db.database import get_db
from model_repository.services import (
    ASSET_CATEGORY_PROFILE,
    SYSTEM_PROFILE,
    VENDOR_PROFILE,
    EntityService,
)


def get_system_service(db: Session = Depends(get_db)) -> EntityService:
    return EntityService(db, SYSTEM_PROFILE)


def get_vendor_service(db: Session = Depends(get_db)) -> EntityService:
    return EntityService(db, VENDOR_PROFILE)


def get_asset_category_service(db: Session = Depends(get_db)) -> EntityService:
    return EntityService(db, ASSET_CATEGORY_PROFILE)
