"""
App assembly entry point.

Re-exports the FastAPI `app` from `model_repository.api.main` so servers can
be started with ``uvicorn app:app``.
"""

from model_repository.api.main import app  # noqa: F401
