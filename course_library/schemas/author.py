import uuid
from datetime import date

from pydantic import Field

from course_library.constants import (
    AUTHOR_MAIN_CATEGORY_MAX_LENGTH,
    AUTHOR_NAME_MAX_LENGTH,
)
from course_library.schemas.base import CamelModel
from course_library.schemas.course import CourseForCreationDto


class AuthorDto(CamelModel):
    """Author as returned to clients. `name` and `age` are derived."""

    id: uuid.UUID
    name: str
    age: int
    main_category: str


class AuthorForCreationDto(CamelModel):
    """Payload for creating an author, optionally with its first courses."""

    first_name: str = Field(
        ..., min_length=1, max_length=AUTHOR_NAME_MAX_LENGTH
    )
    last_name: str = Field(
        ..., min_length=1, max_length=AUTHOR_NAME_MAX_LENGTH
    )
    date_of_birth: date
    main_category: str = Field(
        ..., min_length=1, max_length=AUTHOR_MAIN_CATEGORY_MAX_LENGTH
    )
    courses: list[CourseForCreationDto] = Field(default_factory=list)


class AuthorsResourceParameters(CamelModel):
    """Filters accepted by GET /authors."""

    main_category: str | None = None
    search_query: str | None = None
