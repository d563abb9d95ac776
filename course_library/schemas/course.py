import uuid
from typing import Any

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from course_library.constants import (
    COURSE_DESCRIPTION_MAX_LENGTH,
    COURSE_TITLE_MAX_LENGTH,
)
from course_library.schemas.base import CamelModel


class CourseDto(CamelModel):
    """Course as returned to clients."""

    id: uuid.UUID
    title: str
    description: str | None = None
    author_id: uuid.UUID


class CourseForManipulationDto(CamelModel):
    """
    Fields a client may set on a course.

    The description, when given, must differ from the title.
    """

    title: str = Field(
        ..., min_length=1, max_length=COURSE_TITLE_MAX_LENGTH
    )
    description: str | None = Field(
        default=None, max_length=COURSE_DESCRIPTION_MAX_LENGTH
    )

    @model_validator(mode="after")
    def description_differs_from_title(self) -> "CourseForManipulationDto":
        if self.description is not None and self.description == self.title:
            raise PydanticCustomError(
                "description_equals_title",
                "The provided description should be different from the title.",
            )
        return self

    @classmethod
    def empty_document(cls) -> dict[str, Any]:
        """
        JSON document of an instance with every member unset.

        Used as the starting point when a patch has to create the course.
        """
        return {
            field.alias or name: None
            for name, field in cls.model_fields.items()
        }


class CourseForCreationDto(CourseForManipulationDto):
    """Payload of POST /authors/{authorId}/courses."""


class CourseForUpdateDto(CourseForManipulationDto):
    """Payload of PUT, and the document PATCH operations are applied to."""
