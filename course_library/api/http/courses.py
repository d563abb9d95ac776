"""
Course endpoints, nested under their author.

PUT and PATCH create the course at the URL identifier when it does not
exist yet (201 with Location), and answer 204 when they change an existing
one.
"""

import uuid

from fastapi import APIRouter, Request, Response, status

from course_library.commands.course_commands import (
    CourseKey,
    CreateCourseCommand,
    CreateCourseInput,
    DeleteCourseCommand,
    GetCourseForAuthorCommand,
    GetCoursesForAuthorCommand,
    PatchCourseCommand,
    PatchCourseInput,
    UpsertCourseCommand,
    UpsertCourseInput,
)
from course_library.dependencies import AuthorRepoDep, CourseRepoDep
from course_library.schemas.course import (
    CourseDto,
    CourseForCreationDto,
    CourseForUpdateDto,
)
from course_library.schemas.patch import PatchOperation
from course_library.schemas.problem import ValidationProblemDetails
from course_library.utils.responses import (
    created_at_route,
    created_or_no_content,
)

router = APIRouter(prefix="/authors/{author_id}/courses", tags=["courses"])

_MUTATION_RESPONSES = {
    status.HTTP_201_CREATED: {
        "model": CourseDto,
        "description": "Course created at the given ID",
    },
    status.HTTP_204_NO_CONTENT: {"description": "Course updated"},
    status.HTTP_404_NOT_FOUND: {"description": "Author not found"},
    status.HTTP_409_CONFLICT: {
        "description": "Course ID belongs to another author"
    },
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ValidationProblemDetails},
}


@router.get(
    "",
    response_model=list[CourseDto],
    name="get_courses_for_author",
    summary="Get the courses of an author",
)
async def get_courses_for_author(
    author_id: uuid.UUID, authors: AuthorRepoDep, courses: CourseRepoDep
) -> list[CourseDto]:
    command = GetCoursesForAuthorCommand(authors, courses)
    return await command.execute(author_id)


@router.get(
    "/{course_id}",
    response_model=CourseDto,
    name="get_course_for_author",
    summary="Get one course of an author",
)
async def get_course_for_author(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> CourseDto:
    command = GetCourseForAuthorCommand(authors, courses)
    return await command.execute(
        CourseKey(author_id=author_id, course_id=course_id)
    )


@router.post(
    "",
    response_model=CourseDto,
    status_code=status.HTTP_201_CREATED,
    summary="Create a course for an author",
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {
            "model": ValidationProblemDetails
        }
    },
)
async def create_course_for_author(
    request: Request,
    author_id: uuid.UUID,
    course: CourseForCreationDto,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> Response:
    command = CreateCourseCommand(authors, courses)
    created = await command.execute(
        CreateCourseInput(author_id=author_id, course=course)
    )
    return created_at_route(request, "get_course_for_author", created)


@router.put(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a course, creating it if it does not exist",
    responses=_MUTATION_RESPONSES,
)
async def update_course_for_author(
    request: Request,
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    course: CourseForUpdateDto,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> Response:
    """
    Example:
        PUT /authors/{author_id}/courses/{course_id}
        {"title": "Rum Appreciation", "description": "An introduction."}
    """
    command = UpsertCourseCommand(authors, courses)
    outcome = await command.execute(
        UpsertCourseInput(
            author_id=author_id, course_id=course_id, course=course
        )
    )
    return created_or_no_content(request, "get_course_for_author", outcome)


@router.patch(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Apply a JSON Patch to a course, creating it if it does not exist",
    responses=_MUTATION_RESPONSES,
)
async def partially_update_course_for_author(
    request: Request,
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    operations: list[PatchOperation],
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> Response:
    """
    Example:
        PATCH /authors/{author_id}/courses/{course_id}
        Content-Type: application/json-patch+json
        [{"op": "replace", "path": "/title", "value": "Updated title"}]
    """
    command = PatchCourseCommand(authors, courses)
    outcome = await command.execute(
        PatchCourseInput(
            author_id=author_id, course_id=course_id, operations=operations
        )
    )
    return created_or_no_content(request, "get_course_for_author", outcome)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a course",
)
async def delete_course_for_author(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    authors: AuthorRepoDep,
    courses: CourseRepoDep,
) -> Response:
    command = DeleteCourseCommand(authors, courses)
    await command.execute(CourseKey(author_id=author_id, course_id=course_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
