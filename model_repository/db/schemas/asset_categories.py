from .base import CatalogEntryRequest, CatalogEntryResponse


class AssetCategoryRequest(CatalogEntryRequest):
    pass


class AssetCategoryResponse(CatalogEntryResponse):
    pass
