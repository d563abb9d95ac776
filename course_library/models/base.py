"""
Base model for all database tables with async relationship support.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Combines SQLModel with SQLAlchemy's AsyncAttrs mixin so lazy-loaded
    relationships can be reached through `awaitable_attrs` without raising
    MissingGreenlet in async contexts:

        courses = await author.awaitable_attrs.courses
    """

    pass
