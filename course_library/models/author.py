import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from course_library.constants import (
    AUTHOR_MAIN_CATEGORY_MAX_LENGTH,
    AUTHOR_NAME_MAX_LENGTH,
)
from course_library.models.base import BaseModel

if TYPE_CHECKING:
    from course_library.models.course import Course


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    Use AuthorRepository for all database operations. Courses are owned
    exclusively by their author and are deleted together with it.

    Attributes:
        id: Primary key, assigned when the author is created
        first_name: Given name of the author
        last_name: Family name of the author
        date_of_birth: Used to derive the age shown to clients
        main_category: Main subject the author teaches
        courses: Courses owned by the author
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    first_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    last_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    date_of_birth: date
    main_category: str = Field(max_length=AUTHOR_MAIN_CATEGORY_MAX_LENGTH)

    courses: list["Course"] = Relationship(
        back_populates="author",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
