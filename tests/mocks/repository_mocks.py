"""
Mock factory functions for repository testing.

Provides pre-configured repository mocks with common method stubs.
"""

from unittest.mock import AsyncMock

from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository


def create_mock_author_repository():
    """
    Creates a mock AuthorRepository with common methods.

    Returns:
        AsyncMock: Mocked AuthorRepository instance
    """
    repo_mock = AsyncMock(spec=AuthorRepository)
    repo_mock.get_by_id = AsyncMock(return_value=None)
    repo_mock.get_by_ids = AsyncMock(return_value=[])
    repo_mock.list_authors = AsyncMock(return_value=[])
    repo_mock.create = AsyncMock(side_effect=lambda entity: entity)
    repo_mock.delete = AsyncMock()
    repo_mock.exists = AsyncMock(return_value=True)
    repo_mock.save = AsyncMock()
    return repo_mock


def create_mock_course_repository():
    """
    Creates a mock CourseRepository with common methods.

    Returns:
        AsyncMock: Mocked CourseRepository instance
    """
    repo_mock = AsyncMock(spec=CourseRepository)
    repo_mock.get_for_author = AsyncMock(return_value=None)
    repo_mock.list_for_author = AsyncMock(return_value=[])

    async def _add_for_author(author_id, course):
        course.author_id = author_id
        return course

    repo_mock.add_for_author = AsyncMock(side_effect=_add_for_author)
    repo_mock.update = AsyncMock(side_effect=lambda entity: entity)
    repo_mock.delete = AsyncMock()
    repo_mock.exists = AsyncMock(return_value=False)
    repo_mock.save = AsyncMock()
    return repo_mock
