"""Asset Category pipeline configuration."""

from model_repository.db.converters import AssetCategoryConverter
from model_repository.db.repositories import AssetCategoryRepository
from model_repository.services.entity_service import EntityProfile
from model_repository.services.error_codes import AssetCategoryErrorCode

ASSET_CATEGORY_PROFILE = EntityProfile(
    label="Asset Category",
    plural="Asset Categories",
    errors=AssetCategoryErrorCode,
    not_found_by_id=AssetCategoryErrorCode.ASSET_CATEGORY_NOT_FOUND_ID,
    not_found_by_name=AssetCategoryErrorCode.ASSET_CATEGORY_NOT_FOUND_NAME,
    none_found=AssetCategoryErrorCode.NO_ASSET_CATEGORIES_FOUND,
    duplicate=AssetCategoryErrorCode.DUPLICATE_ASSET_CATEGORY,
    repository=AssetCategoryRepository,
    converter=AssetCategoryConverter(),
)
