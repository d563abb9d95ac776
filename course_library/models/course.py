import uuid
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from course_library.constants import (
    COURSE_DESCRIPTION_MAX_LENGTH,
    COURSE_TITLE_MAX_LENGTH,
)
from course_library.models.base import BaseModel

if TYPE_CHECKING:
    from course_library.models.author import Author


class Course(BaseModel, table=True):
    """
    SQLModel representing a course owned by an author.

    The identifier is unique across the whole table, not only within one
    author, and `author_id` never changes after the course is created.
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str = Field(max_length=COURSE_TITLE_MAX_LENGTH)
    description: str | None = Field(
        default=None, max_length=COURSE_DESCRIPTION_MAX_LENGTH
    )
    author_id: uuid.UUID = Field(foreign_key="author.id", index=True)

    author: Optional["Author"] = Relationship(back_populates="courses")
