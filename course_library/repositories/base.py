"""
Base repository with common CRUD operations.

Repositories encapsulate all database operations for one entity. Writes
are staged on the request-scoped session and flushed, so generated values
and constraint violations surface immediately; nothing is committed until
the command calls `save()`, once, after its last mutation.

Example:
    ```python
    class CourseRepository(BaseRepository[Course]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Course)

        async def list_for_author(self, author_id: uuid.UUID) -> list[Course]:
            stmt = select(Course).where(Course.author_id == author_id)
            result = await self.session.exec(stmt)
            return list(result.all())
    ```
"""

import uuid
from typing import Any, Generic, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.sql.expression import SelectOfScalar

from course_library.exceptions import DatabaseError
from course_library.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository for one SQLModel table.

    Type Parameters:
        T: The SQLModel type this repository manages.

    Attributes:
        session: Session shared by every repository of the request.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    def _select_where(self, **filters: Any) -> SelectOfScalar[T]:
        stmt = select(self.model)
        for key, value in filters.items():
            stmt = stmt.where(getattr(self.model, key) == value)
        return stmt

    async def _stage(self, entity: T, action: str) -> T:
        # Flush so the caller sees generated values before the commit
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error {action} {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: uuid.UUID) -> T | None:
        """
        Get entity by primary key.

        Returns:
            Entity if found, None otherwise.
        """
        return await self.session.get(self.model, id)

    async def exists(self, **filters: Any) -> bool:
        """
        Whether at least one row matches every `column=value` filter.

        Raises:
            SQLAlchemyError: If the query fails.
        """
        try:
            result = await self.session.exec(
                self._select_where(**filters).limit(1)
            )
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(
                f"Error checking existence of {self.model.__name__}: {e}"
            )
            raise

    async def create(self, entity: T) -> T:
        """
        Stage a new entity.

        Related entities reachable through cascading relationships are
        inserted with it.

        Raises:
            SQLAlchemyError: If the flush fails; the session is rolled back.
        """
        return await self._stage(entity, "creating")

    async def update(self, entity: T) -> T:
        """
        Stage the changed fields of an entity loaded from this session.

        Raises:
            SQLAlchemyError: If the flush fails; the session is rolled back.
        """
        return await self._stage(entity, "updating")

    async def delete(self, entity: T) -> None:
        """
        Stage the deletion of an entity, cascading to the rows it owns.

        Raises:
            SQLAlchemyError: If the flush fails; the session is rolled back.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise

    async def save(self) -> None:
        """
        Commit every change staged in the session.

        Raises:
            DatabaseError: If the commit fails. The session is rolled back,
                so none of the staged changes are persisted.
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error saving {self.model.__name__} changes: {e}")
            raise DatabaseError("Could not save changes", original=e) from e
