"""
Tests for the application factory and its lifespan.
"""

from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from course_library import application


def test_lifespan_waits_for_database_and_disposes_engine():
    """Test that startup waits for the database and shutdown closes the pool."""
    mock_engine = MagicMock()
    mock_engine.dispose = AsyncMock()

    with (
        patch("course_library.wait_and_init_db", new=AsyncMock()) as wait,
        patch("course_library.engine", mock_engine),
    ):
        with TestClient(application()):
            wait.assert_awaited_once()
            mock_engine.dispose.assert_not_awaited()

        mock_engine.dispose.assert_awaited_once()


def test_application_registers_routes():
    """Test that every router module is collected."""
    paths = {route.path for route in application().routes}

    assert "/authors" in paths
    assert "/authorcollections/({ids})" in paths
    assert "/authors/{author_id}/courses/{course_id}" in paths
    assert "/health" in paths
