"""
Repository for Course entity.

Courses are always addressed through their owning author, so every lookup
takes the (author_id, course_id) pair.
"""

import uuid

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.models.course import Course
from course_library.repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    """Repository for Course entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Course)

    async def get_for_author(
        self, author_id: uuid.UUID, course_id: uuid.UUID
    ) -> Course | None:
        """
        Get a course only if it belongs to the given author.

        Args:
            author_id: Owning author ID.
            course_id: Course ID.

        Returns:
            The course, or None when it does not exist or belongs to
            another author.
        """
        stmt = select(Course).where(
            Course.id == course_id, Course.author_id == author_id
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_author(self, author_id: uuid.UUID) -> list[Course]:
        """List the courses of one author ordered by title."""
        stmt = (
            select(Course)
            .where(Course.author_id == author_id)
            .order_by(col(Course.title))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def add_for_author(
        self, author_id: uuid.UUID, course: Course
    ) -> Course:
        """
        Attach a new course to an author and add it to the session.

        Args:
            author_id: Owning author ID.
            course: Course to insert. Its ID is kept as is.

        Returns:
            The flushed course.
        """
        course.author_id = author_id
        return await self.create(course)
