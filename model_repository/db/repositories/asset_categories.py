from model_repository.db import models
from .base import Repository


class AssetCategoryRepository(Repository[models.AssetCategory]):
    model = models.AssetCategory
