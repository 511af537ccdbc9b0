from .base import CatalogEntryRequest, CatalogEntryResponse


class VendorRequest(CatalogEntryRequest):
    pass


class VendorResponse(CatalogEntryResponse):
    pass
