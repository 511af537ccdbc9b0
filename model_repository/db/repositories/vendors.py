from model_repository.db import models
from .base import Repository


class VendorRepository(Repository[models.Vendor]):
    model = models.Vendor
