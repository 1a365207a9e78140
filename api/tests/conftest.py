"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import date
from typing import Any

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from wordbook.core.database import get_session
from wordbook.main import app
from wordbook.models import WordEntry

# Test database URL (in-memory SQLite shared across connections)
TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Fixed reference date for engine tests
TODAY = date(2024, 6, 15)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_session() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_word():
    """Build unsaved WordEntry objects with sensible defaults."""

    def _make_word(word: str = "talo", **fields: Any) -> WordEntry:
        fields.setdefault("translation", "house")
        fields.setdefault("date_added", TODAY)
        return WordEntry(word=word, **fields)

    return _make_word
