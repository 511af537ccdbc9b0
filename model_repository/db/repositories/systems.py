from model_repository.db import models
from .base import Repository


class SystemRepository(Repository[models.System]):
    model = models.System
