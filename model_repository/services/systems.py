"""System pipeline configuration.

Systems additionally require a description and, when a location is given,
exactly one of a coordinate pair or a virtual location.
"""

from model_repository.db.converters import SystemConverter
from model_repository.db.repositories import SystemRepository
from model_repository.services.entity_service import EntityProfile
from model_repository.services.error_codes import SystemErrorCode
from model_repository.services.validators import validate_location


def check_location(payload, errors) -> None:
    validate_location(payload.location, errors)


SYSTEM_PROFILE = EntityProfile(
    label="System",
    plural="Systems",
    errors=SystemErrorCode,
    not_found_by_id=SystemErrorCode.SYSTEM_NOT_FOUND_ID,
    not_found_by_name=SystemErrorCode.SYSTEM_NOT_FOUND_NAME,
    none_found=SystemErrorCode.NO_SYSTEMS_FOUND,
    duplicate=SystemErrorCode.DUPLICATE_SYSTEM,
    repository=SystemRepository,
    converter=SystemConverter(),
    required_fields=("name", "description"),
    structural_checks=(check_location,),
)
