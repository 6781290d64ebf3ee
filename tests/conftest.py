"""Shared pytest fixtures for the test suite."""

import os

# Must be set before app.core.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_CREATE_TABLES"] = "true"

import pytest
from fastapi.testclient import TestClient

from app.core.database import (
    SessionLocal,
    create_database_tables,
    drop_database_tables,
)
from app.main import app
from app.repositories.student import InMemoryStudentRepository


@pytest.fixture
def tables():
    """A fresh students table, dropped after the test."""
    create_database_tables()
    yield
    drop_database_tables()


@pytest.fixture
def db_session(tables):
    """A SQLAlchemy session bound to the in-memory SQLite engine."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def memory_repository() -> InMemoryStudentRepository:
    return InMemoryStudentRepository()


@pytest.fixture
def client(tables):
    """A test client against the real app; lifespan is not run."""
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()
