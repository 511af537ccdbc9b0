"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with sensible
fallbacks (a local SQLite file for development, SQLite in-memory under pytest)
and exposes the FastAPI session dependency.
"""
import logging
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_PATH = "./model_repository.db"


# Database connection URL
# Generated from individual components if DATABASE_URL is not provided
def _get_database_url() -> str:
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    pg_settings = {
        "POSTGRES_USER": os.getenv("POSTGRES_USER"),
        "POSTGRES_PASSWORD": os.getenv("POSTGRES_PASSWORD"),
        "POSTGRES_HOST": os.getenv("POSTGRES_HOST"),
        "POSTGRES_PORT": os.getenv("POSTGRES_PORT"),
        "POSTGRES_DB": os.getenv("POSTGRES_DB"),
    }
    configured = [key for key, value in pg_settings.items() if value]
    if configured and len(configured) != len(pg_settings):
        missing = [key for key, value in pg_settings.items() if not value]
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")
    if configured:
        return (
            f"postgresql://{pg_settings['POSTGRES_USER']}:{pg_settings['POSTGRES_PASSWORD']}"
            f"@{pg_settings['POSTGRES_HOST']}:{pg_settings['POSTGRES_PORT']}/{pg_settings['POSTGRES_DB']}"
        )

    # Nothing configured: local development database
    return f"sqlite:///{os.getenv('MODEL_REPOSITORY_SQLITE_PATH', DEFAULT_SQLITE_PATH)}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while an individual test is running, so
    module import time during collection also checks ``sys.modules``.
    ``PYTEST_RUNNING=1`` forces the detection on.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


# Test override strategy:
# 1. If MODEL_REPOSITORY_TEST_DB is set, use it.
# 2. Else if running under pytest, force in-memory sqlite shared through a StaticPool.
explicit_test_db = os.getenv("MODEL_REPOSITORY_TEST_DB")

if explicit_test_db:
    DATABASE_URL = explicit_test_db
elif _is_pytest_runtime():
    DATABASE_URL = "sqlite+pysqlite:///:memory:"
else:
    DATABASE_URL = _get_database_url()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # In-memory schema must survive across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def schema_autocreate_enabled() -> bool:
    """Whether the app should create tables itself instead of relying on Alembic.

    Defaults to on for SQLite (development and tests) and off otherwise.
    """
    raw = os.getenv("MODEL_REPOSITORY_CREATE_SCHEMA")
    if raw is None:
        return engine.url.get_backend_name() == "sqlite"
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def init_schema() -> None:
    from model_repository.db import models  # local import to avoid circular import at module load

    models.Base.metadata.create_all(bind=engine)
    logger.info("schema_ready: backend=%s", engine.url.get_backend_name())


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
