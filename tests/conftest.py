"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the database, the HTTP test
client and sample payloads.
"""

import os

import pytest

# Point the application at an in-memory database before importing app modules
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_FILE_PATH", "logs/test_logging_errors.log")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402


@pytest.fixture
def db_engine():
    """
    Provides an isolated in-memory SQLite engine.

    StaticPool keeps the single connection alive, so every session of the
    test sees the same database.
    """
    return create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)


@pytest.fixture
def session_factory(db_engine):
    """
    Provides a session factory bound to the test engine.

    Returns:
        sessionmaker: Factory producing AsyncSession instances.
    """
    return sessionmaker(
        db_engine, expire_on_commit=False, class_=AsyncSession
    )


@pytest.fixture
def client(db_engine, session_factory):
    """
    Create a test client for the full application.

    Requests run against the test engine instead of the configured
    database; tables are created before the first request.

    Yields:
        TestClient: FastAPI test client instance.
    """
    from course_library import app
    from course_library.storage.db import create_tables, get_session

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as test_client:
        test_client.portal.call(create_tables, db_engine)
        yield test_client
        test_client.portal.call(db_engine.dispose)

    app.dependency_overrides.clear()


@pytest.fixture
def author_payload():
    """
    Provides a valid author creation payload.

    Returns:
        dict: Author fields in their wire spelling.
    """
    return {
        "firstName": "Jaimy",
        "lastName": "Johnson",
        "dateOfBirth": "1980-12-23",
        "mainCategory": "Maps",
    }


@pytest.fixture
def create_author(client, author_payload):
    """
    Provides a helper creating authors through the API.

    Returns:
        Callable: Creates an author and returns its ID as a string.
    """

    def _create(**overrides):
        response = client.post("/authors", json={**author_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create

