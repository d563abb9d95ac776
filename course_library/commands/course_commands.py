"""
Commands for Course operations.

Courses are always addressed through their owning author. PUT and PATCH
share one state machine keyed by the (author, course) pair:

    ABSENT  --(author missing)----------> NotFoundError
    ABSENT  --(shape + validate ok)------> Created, course now PRESENT
    ABSENT  --(shape + validate fails)---> ValidationError, still ABSENT
    PRESENT --(shape + validate ok)------> Updated
    PRESENT --(shape + validate fails)---> ValidationError, unchanged

The identifier in the URL is authoritative: a course created through PUT
or PATCH gets exactly that identifier. Every check runs before the store
is touched, so a failed request leaves nothing behind.
"""

import uuid
from typing import Any, Sequence

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from course_library.commands.base import BaseCommand, Created, Updated
from course_library.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from course_library.logging import logger
from course_library.mappers import (
    apply_course_update,
    course_from_payload,
    course_to_dto,
    course_to_update_document,
)
from course_library.models.course import Course
from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository
from course_library.schemas.course import (
    CourseDto,
    CourseForCreationDto,
    CourseForUpdateDto,
)
from course_library.schemas.patch import PatchOperation
from course_library.utils.json_patch import apply_patch
from course_library.utils.problem_details import collect_errors

# ============================================================================
# Input Models
# ============================================================================


class CourseKey(BaseModel):  # type: ignore[misc]
    """Identifies one course of one author."""

    author_id: uuid.UUID
    course_id: uuid.UUID


class CreateCourseInput(BaseModel):  # type: ignore[misc]
    author_id: uuid.UUID
    course: CourseForCreationDto


class UpsertCourseInput(CourseKey):
    """Full replacement payload for PUT."""

    course: CourseForUpdateDto


class PatchCourseInput(CourseKey):
    """Ordered patch operations for PATCH."""

    operations: list[PatchOperation] = Field(default_factory=list)


# ============================================================================
# Shared Helpers
# ============================================================================


def patch_course_document(
    initial: dict[str, Any], operations: Sequence[PatchOperation]
) -> CourseForUpdateDto:
    """
    Apply patch operations to an update document and validate the result.

    Both PATCH branches go through here; they differ only in `initial`,
    which is either the empty document or the stored course.

    Args:
        initial: JSON document of a CourseForUpdateDto.
        operations: Operations to apply in order.

    Returns:
        The validated update shape.

    Raises:
        PatchApplicationError: If an operation cannot be applied.
        ValidationError: If the patched document is not a valid course.
    """
    members = CourseForUpdateDto.empty_document().keys()
    patched = apply_patch(initial, operations, members)

    # Unset members count as missing, not as explicit nulls
    document = {key: value for key, value in patched.items() if value is not None}
    try:
        return CourseForUpdateDto.model_validate(document)
    except PydanticValidationError as ex:
        raise ValidationError(collect_errors(ex.errors()))


class _CourseLookups:
    """Repository access shared by the course commands."""

    def __init__(self, authors: AuthorRepository, courses: CourseRepository):
        self.authors = authors
        self.courses = courses

    async def _ensure_author(self, author_id: uuid.UUID) -> None:
        if not await self.authors.exists(id=author_id):
            raise NotFoundError(f"Author with ID {author_id} not found")

    async def _ensure_id_free(self, course_id: uuid.UUID) -> None:
        # Course IDs are unique across authors; a course is never reparented
        if await self.courses.exists(id=course_id):
            raise ConflictError(
                f"Course with ID {course_id} belongs to another author"
            )

    async def _insert(
        self,
        author_id: uuid.UUID,
        payload: CourseForUpdateDto | CourseForCreationDto,
        course_id: uuid.UUID | None = None,
    ) -> Created[CourseDto]:
        course: Course = course_from_payload(payload)
        if course_id is not None:
            course.id = course_id

        try:
            course = await self.courses.add_for_author(author_id, course)
        except IntegrityError as ex:
            # Another request took the ID between the check and the insert
            raise ConflictError(
                f"Course with ID {course.id} could not be inserted"
            ) from ex
        await self.courses.save()

        return Created(
            resource=course_to_dto(course),
            route_values={"author_id": author_id, "course_id": course.id},
        )

    async def _replace(
        self, course: Course, payload: CourseForUpdateDto
    ) -> Updated:
        apply_course_update(course, payload)
        await self.courses.update(course)
        await self.courses.save()
        return Updated()


# ============================================================================
# Commands
# ============================================================================


class GetCoursesForAuthorCommand(
    _CourseLookups, BaseCommand[uuid.UUID, list[CourseDto]]
):
    async def execute(self, author_id: uuid.UUID) -> list[CourseDto]:
        """
        Raises:
            NotFoundError: If the author does not exist.
        """
        await self._ensure_author(author_id)

        courses = await self.courses.list_for_author(author_id)
        return [course_to_dto(course) for course in courses]


class GetCourseForAuthorCommand(
    _CourseLookups, BaseCommand[CourseKey, CourseDto]
):
    async def execute(self, key: CourseKey) -> CourseDto:
        """
        Raises:
            NotFoundError: If the author or the course does not exist.
        """
        await self._ensure_author(key.author_id)

        course = await self.courses.get_for_author(key.author_id, key.course_id)
        if course is None:
            raise NotFoundError(f"Course with ID {key.course_id} not found")
        return course_to_dto(course)


class CreateCourseCommand(
    _CourseLookups, BaseCommand[CreateCourseInput, Created[CourseDto]]
):
    """Create a course with a server-assigned identifier."""

    async def execute(
        self, input_data: CreateCourseInput
    ) -> Created[CourseDto]:
        await self._ensure_author(input_data.author_id)
        return await self._insert(input_data.author_id, input_data.course)


class UpsertCourseCommand(
    _CourseLookups,
    BaseCommand[UpsertCourseInput, Created[CourseDto] | Updated],
):
    """
    Replace a course, or create it at the client-supplied identifier.

    Only title and description are replaced; identifier and owner never
    change.
    """

    async def execute(
        self, input_data: UpsertCourseInput
    ) -> Created[CourseDto] | Updated:
        """
        Raises:
            NotFoundError: If the author does not exist.
            ConflictError: If the identifier belongs to another author's
                course.
        """
        await self._ensure_author(input_data.author_id)

        course = await self.courses.get_for_author(
            input_data.author_id, input_data.course_id
        )
        if course is None:
            await self._ensure_id_free(input_data.course_id)
            logger.info(
                f"Creating course {input_data.course_id} through upsert"
            )
            return await self._insert(
                input_data.author_id,
                input_data.course,
                course_id=input_data.course_id,
            )

        return await self._replace(course, input_data.course)


class PatchCourseCommand(
    _CourseLookups,
    BaseCommand[PatchCourseInput, Created[CourseDto] | Updated],
):
    """
    Apply JSON Patch operations to a course, creating it when absent.

    An absent course is patched starting from the empty update document;
    it is created only if the result is a valid course.
    """

    async def execute(
        self, input_data: PatchCourseInput
    ) -> Created[CourseDto] | Updated:
        """
        Raises:
            NotFoundError: If the author does not exist.
            PatchApplicationError: If an operation cannot be applied.
            ValidationError: If the patched course is invalid.
            ConflictError: If the identifier belongs to another author's
                course.
        """
        await self._ensure_author(input_data.author_id)

        course = await self.courses.get_for_author(
            input_data.author_id, input_data.course_id
        )
        if course is None:
            payload = patch_course_document(
                CourseForUpdateDto.empty_document(), input_data.operations
            )
            await self._ensure_id_free(input_data.course_id)
            logger.info(
                f"Creating course {input_data.course_id} through patch"
            )
            return await self._insert(
                input_data.author_id,
                payload,
                course_id=input_data.course_id,
            )

        payload = patch_course_document(
            course_to_update_document(course), input_data.operations
        )
        return await self._replace(course, payload)


class DeleteCourseCommand(_CourseLookups, BaseCommand[CourseKey, None]):
    async def execute(self, key: CourseKey) -> None:
        """
        Raises:
            NotFoundError: If the author or the course does not exist.
        """
        await self._ensure_author(key.author_id)

        course = await self.courses.get_for_author(key.author_id, key.course_id)
        if course is None:
            raise NotFoundError(f"Course with ID {key.course_id} not found")

        await self.courses.delete(course)
        await self.courses.save()
