"""
Dependency injection configuration for FastAPI.

Every repository of one request shares the same session, so a command
that touches several of them still commits once.

Example:
    ```python
    @router.get("/authors/{author_id}")
    async def get_author(author_id: uuid.UUID, repo: AuthorRepoDep) -> AuthorDto:
        return await GetAuthorCommand(repo).execute(author_id)
    ```
"""

import uuid
from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository
from course_library.storage.db import get_session
from course_library.utils.id_set import parse_id_set

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    return AuthorRepository(session)


def get_course_repository(session: SessionDep) -> CourseRepository:
    return CourseRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
CourseRepoDep = Annotated[CourseRepository, Depends(get_course_repository)]


# ============================================================================
# Path Binding
# ============================================================================


def get_author_ids(ids: str) -> list[uuid.UUID]:
    """
    Bind the `{ids}` path segment of a composite author location.

    Raises:
        BadRequestError: If the segment is empty or holds an invalid ID.
    """
    return parse_id_set(ids)


AuthorIdsDep = Annotated[list[uuid.UUID], Depends(get_author_ids)]
