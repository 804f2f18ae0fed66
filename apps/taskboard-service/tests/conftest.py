import os

# Force the in-memory SQLite engine before core.db.database is imported
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient

import core.db.database as db_module
from core.db import models
from core.api.main import app
from core.utils.config import reset_settings_cache


@pytest.fixture(scope="session", autouse=True)
def _schema():
    models.Base.metadata.create_all(bind=db_module.engine)
    yield
    models.Base.metadata.drop_all(bind=db_module.engine)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


_CURRENT_SESSION = None


@pytest.fixture
def db_session(_schema):
    global _CURRENT_SESSION
    session = db_module.SessionLocal()
    _CURRENT_SESSION = session
    try:
        yield session
    finally:
        _CURRENT_SESSION = None
        session.rollback()
        for table in reversed(models.Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


# Backwards-compatible alias used by repository tests
@pytest.fixture
def db(db_session):
    return db_session


def _override_get_db():
    # Route handlers share the test's session so assertions see their writes
    if _CURRENT_SESSION is not None:
        yield _CURRENT_SESSION
        return
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()


app.dependency_overrides[db_module.get_db] = _override_get_db


@pytest.fixture
def client(db_session):
    return TestClient(app)
