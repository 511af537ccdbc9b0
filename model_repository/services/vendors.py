"""Vendor pipeline configuration."""

from model_repository.db.converters import VendorConverter
from model_repository.db.repositories import VendorRepository
from model_repository.services.entity_service import EntityProfile
from model_repository.services.error_codes import VendorErrorCode

VENDOR_PROFILE = EntityProfile(
    label="Vendor",
    plural="Vendors",
    errors=VendorErrorCode,
    not_found_by_id=VendorErrorCode.VENDOR_NOT_FOUND_ID,
    not_found_by_name=VendorErrorCode.VENDOR_NOT_FOUND_NAME,
    none_found=VendorErrorCode.NO_VENDORS_FOUND,
    duplicate=VendorErrorCode.DUPLICATE_VENDOR,
    repository=VendorRepository,
    converter=VendorConverter(),
)
