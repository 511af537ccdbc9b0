import pytest
from fastapi.testclient import TestClient

from model_repository.api.main import app
from model_repository.db import models
from model_repository.db.database import SessionLocal, engine, get_db


@pytest.fixture
def db_session():
    """Fresh schema per test on the shared in-memory SQLite engine."""
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """TestClient whose requests get sessions on the test engine."""

    def override_get_db():
        db = SessionLocal(bind=db_session.get_bind())
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
