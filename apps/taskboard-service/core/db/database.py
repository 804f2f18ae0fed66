"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration (SQLite file by
default, PostgreSQL when configured) with an in-memory SQLite fallback under
pytest, and exposes the FastAPI session dependency.
"""
import logging
import os
import sqlite3
import sys

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.utils.config import get_settings

logger = logging.getLogger(__name__)

_IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def _get_database_url() -> str:
    # An explicit DATABASE_URL always wins
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # PostgreSQL when every component is provided
    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")
    if all([db_user, db_password, db_host, db_port, db_name]):
        return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    # Local file-backed SQLite
    return f"sqlite:///{get_settings().sqlite_path}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while an individual test runs, so
    module import during collection is detected through ``sys.modules``.
    ``PYTEST_RUNNING=1`` forces the test path explicitly.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if "pytest" in sys.modules:
        return True
    return False


DATABASE_URL = _get_database_url()

# Test override strategy:
# 1. TASKBOARD_TEST_DB wins when set.
# 2. Otherwise under pytest, force in-memory SQLite shared through StaticPool.
explicit_test_db = os.getenv("TASKBOARD_TEST_DB")
pytest_indicator = _is_pytest_runtime()

if explicit_test_db:
    DATABASE_URL = explicit_test_db
elif pytest_indicator:
    DATABASE_URL = _IN_MEMORY_URL


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # Schema must persist across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, connection_record):
    """Enable cascading foreign keys on SQLite; WAL for file databases."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA database_list")
        rows = cursor.fetchall()
        is_file_backed = any(row[1] == "main" and row[2] for row in rows)
        if is_file_backed:
            cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


def _create_engine_with_fallback(url: str):
    """Create engine; under pytest without an explicit DB fall back to in-memory SQLite."""
    try:
        return create_engine(url, **_engine_kwargs(url))
    except OperationalError:
        if _is_pytest_runtime() and not os.getenv("TASKBOARD_TEST_DB"):
            logger.warning("database_engine_fallback", extra={"url": _IN_MEMORY_URL})
            return create_engine(_IN_MEMORY_URL, **_engine_kwargs(_IN_MEMORY_URL))
        raise


engine = _create_engine_with_fallback(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# PostgreSQL schemas are managed by Alembic; SQLite databases get the
# declarative schema on first use so a fresh checkout runs without migrating.
_SCHEMA_INIT_DONE = False


def ensure_sqlite_schema() -> None:
    global _SCHEMA_INIT_DONE
    if _SCHEMA_INIT_DONE:
        return
    if engine.url.get_backend_name() == "sqlite":
        from core.db import models  # local import to avoid circular import at module load

        models.Base.metadata.create_all(bind=engine)
    _SCHEMA_INIT_DONE = True


def get_db():
    """Dependency to get a database session."""
    ensure_sqlite_schema()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
