"""
Conversions between persisted entities and transfer shapes.

Computed transfer fields (`name`, `age`) are derived here on every read
and never stored.
"""

from datetime import date, datetime, timezone
from typing import Any

from course_library.models.author import Author
from course_library.models.course import Course
from course_library.schemas.author import AuthorDto, AuthorForCreationDto
from course_library.schemas.course import (
    CourseDto,
    CourseForManipulationDto,
    CourseForUpdateDto,
)


def get_current_age(date_of_birth: date, today: date | None = None) -> int:
    """
    Whole years elapsed since `date_of_birth`.

    Args:
        date_of_birth: Birth date.
        today: Reference date. Defaults to the current UTC date.
    """
    today = today or datetime.now(timezone.utc).date()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def author_to_dto(author: Author) -> AuthorDto:
    return AuthorDto(
        id=author.id,
        name=f"{author.first_name} {author.last_name}",
        age=get_current_age(author.date_of_birth),
        main_category=author.main_category,
    )


def author_from_creation(payload: AuthorForCreationDto) -> Author:
    """Build a new author, with its nested courses, from a creation payload."""
    return Author(
        first_name=payload.first_name,
        last_name=payload.last_name,
        date_of_birth=payload.date_of_birth,
        main_category=payload.main_category,
        courses=[course_from_payload(course) for course in payload.courses],
    )


def course_to_dto(course: Course) -> CourseDto:
    return CourseDto(
        id=course.id,
        title=course.title,
        description=course.description,
        author_id=course.author_id,
    )


def course_from_payload(payload: CourseForManipulationDto) -> Course:
    """Build a new course; the caller decides its ID and owner."""
    return Course(title=payload.title, description=payload.description)


def course_to_update_document(course: Course) -> dict[str, Any]:
    """JSON document of the update shape of a stored course."""
    return CourseForUpdateDto.model_construct(
        title=course.title, description=course.description
    ).model_dump(by_alias=True)


def apply_course_update(course: Course, payload: CourseForUpdateDto) -> Course:
    """
    Copy the mutable fields of `payload` onto `course`.

    The identifier and the owning author are left untouched.
    """
    course.title = payload.title
    course.description = payload.description
    return course
