"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy.orm import Session

from users_backend.database import BaseSchema, DatabaseService
from users_backend.settings import get_settings

SQLITE_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", SQLITE_URL)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """Provide a fresh in-memory database with the schema created."""
    db = DatabaseService(SQLITE_URL)
    BaseSchema.metadata.create_all(db.engine)
    yield db
    db.engine.dispose()


@pytest.fixture
def session(database: DatabaseService) -> Iterator[Session]:
    with database.session() as db_session:
        yield db_session
