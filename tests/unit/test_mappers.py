"""
Tests for entity to transfer shape mapping.
"""

from datetime import date

import pytest

from course_library.mappers import (
    apply_course_update,
    author_to_dto,
    course_to_update_document,
    get_current_age,
)
from course_library.schemas.course import CourseForUpdateDto
from tests.mocks.model_factories import make_author, make_course


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2020, 6, 14), 29),
        (date(2020, 6, 15), 30),
        (date(2020, 12, 31), 30),
    ],
)
def test_get_current_age(today, expected):
    """Test that age only increases on the birthday itself."""
    assert get_current_age(date(1990, 6, 15), today=today) == expected


def test_author_to_dto_derives_name_and_age():
    author = make_author(
        first_name="Nancy",
        last_name="Swashbuckler Rye",
        date_of_birth=date(1668, 5, 21),
    )

    dto = author_to_dto(author)

    assert dto.name == "Nancy Swashbuckler Rye"
    assert dto.age == get_current_age(date(1668, 5, 21))
    assert dto.model_dump(by_alias=True)["mainCategory"] == "Ships"


def test_course_to_update_document():
    course = make_course(title="Rum", description=None)

    assert course_to_update_document(course) == {
        "title": "Rum",
        "description": None,
    }


def test_apply_course_update_keeps_identity():
    course = make_course()
    course_id, author_id = course.id, course.author_id

    apply_course_update(
        course, CourseForUpdateDto(title="New", description="Other")
    )

    assert (course.title, course.description) == ("New", "Other")
    assert (course.id, course.author_id) == (course_id, author_id)
