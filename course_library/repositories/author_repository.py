"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.list_authors(search_query="rip")
        batch = await repo.get_by_ids([first_id, second_id])
    ```
"""

import uuid
from typing import Iterable

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.models.author import Author
from course_library.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Author-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)

    async def get_by_ids(self, ids: Iterable[uuid.UUID]) -> list[Author]:
        """
        Resolve a set of author IDs in one query.

        Duplicate IDs are collapsed by the query itself, so each author is
        returned at most once.

        Args:
            ids: Author identifiers to look up.

        Returns:
            Authors whose ID is in `ids`, in no particular order.
        """
        ids = list(ids)
        if not ids:
            return []
        stmt = select(Author).where(col(Author.id).in_(ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_authors(
        self,
        main_category: str | None = None,
        search_query: str | None = None,
    ) -> list[Author]:
        """
        List authors, optionally filtered.

        Args:
            main_category: Exact main category match (surrounding
                whitespace ignored).
            search_query: Case-insensitive substring searched in main
                category, first name and last name.

        Returns:
            Matching authors ordered by first and last name.
        """
        stmt = select(Author)

        if main_category and main_category.strip():
            stmt = stmt.where(Author.main_category == main_category.strip())

        if search_query and search_query.strip():
            pattern = f"%{search_query.strip()}%"
            stmt = stmt.where(
                or_(
                    col(Author.main_category).ilike(pattern),
                    col(Author.first_name).ilike(pattern),
                    col(Author.last_name).ilike(pattern),
                )
            )

        stmt = stmt.order_by(col(Author.first_name), col(Author.last_name))
        result = await self.session.exec(stmt)
        return list(result.all())
