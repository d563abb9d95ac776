"""
Author endpoints.

Handlers bind the request, run one command and shape the response;
failures are raised by the commands and rendered by the exception
handlers registered on the application.
"""

import uuid

from fastapi import APIRouter, Query, Request, Response, status

from course_library.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    GetAuthorsCommand,
)
from course_library.constants import AUTHORS_ALLOWED_METHODS
from course_library.dependencies import AuthorRepoDep
from course_library.schemas.author import (
    AuthorDto,
    AuthorForCreationDto,
    AuthorsResourceParameters,
)
from course_library.schemas.problem import ValidationProblemDetails
from course_library.utils.responses import created_at_route

router = APIRouter(prefix="/authors", tags=["authors"])


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_model=list[AuthorDto],
    name="get_authors",
    summary="Get all authors",
)
async def get_authors(
    repo: AuthorRepoDep,
    main_category: str | None = Query(default=None, alias="mainCategory"),
    search_query: str | None = Query(default=None, alias="searchQuery"),
) -> list[AuthorDto]:
    """
    Get all authors with optional filtering.

    Example:
        GET /authors?mainCategory=Rum
        GET /authors?searchQuery=ann
    """
    command = GetAuthorsCommand(repo)
    return await command.execute(
        AuthorsResourceParameters(
            main_category=main_category, search_query=search_query
        )
    )


@router.options("", summary="List the methods supported on /authors")
async def get_authors_options() -> Response:
    return Response(headers={"Allow": AUTHORS_ALLOWED_METHODS})


@router.get(
    "/{author_id}",
    response_model=AuthorDto,
    name="get_author",
    summary="Get one author",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Author not found"}},
)
async def get_author(author_id: uuid.UUID, repo: AuthorRepoDep) -> AuthorDto:
    return await GetAuthorCommand(repo).execute(author_id)


@router.post(
    "",
    response_model=AuthorDto,
    status_code=status.HTTP_201_CREATED,
    name="create_author",
    summary="Create a new author",
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {
            "model": ValidationProblemDetails
        }
    },
)
async def create_author(
    request: Request,
    author: AuthorForCreationDto,
    repo: AuthorRepoDep,
) -> Response:
    """
    Create a new author, optionally with courses.

    Example:
        POST /authors
        {
            "firstName": "Berry",
            "lastName": "Griffin Beak Eldritch",
            "dateOfBirth": "1650-07-23",
            "mainCategory": "Ships",
            "courses": [{"title": "Commandeering a Ship Without Getting Caught"}]
        }
    """
    created = await CreateAuthorCommand(repo).execute(author)
    return created_at_route(request, "get_author", created)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author and all of its courses",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Author not found"}},
)
async def delete_author(author_id: uuid.UUID, repo: AuthorRepoDep) -> Response:
    await DeleteAuthorCommand(repo).execute(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
