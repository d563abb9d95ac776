"""
Author collection endpoints.

A collection location names every author of a batch at once:
`/authorcollections/(id1,id2,...)`. Reading it is all or nothing.

This module must be collected before `authors`, so that `/authors/(...)`
is matched here and not as a single author ID.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Request, Response, status

from course_library.commands.author_collection_commands import (
    CreateAuthorCollectionCommand,
    GetAuthorCollectionCommand,
)
from course_library.dependencies import AuthorIdsDep, AuthorRepoDep
from course_library.schemas.author import AuthorDto, AuthorForCreationDto
from course_library.schemas.problem import ValidationProblemDetails
from course_library.utils.responses import created_at_route

router = APIRouter(tags=["author collections"])


@router.get(
    "/authorcollections/({ids:idset})",
    response_model=list[AuthorDto],
    name="get_author_collection",
    summary="Get several authors by ID",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationProblemDetails},
        status.HTTP_404_NOT_FOUND: {
            "description": "At least one author was not found"
        },
    },
)
@router.get(
    "/authors/({ids:idset})",
    response_model=list[AuthorDto],
    name="get_author_collection_alias",
    include_in_schema=False,
)
async def get_author_collection(
    ids: AuthorIdsDep, repo: AuthorRepoDep
) -> list[AuthorDto]:
    """
    Example:
        GET /authorcollections/(d28888e9-2ba9-473a-a40f-e38cb54f9b35,da2fd609-d754-4feb-8acd-c4f9ff13ba96)
    """
    return await GetAuthorCollectionCommand(repo).execute(ids)


@router.post(
    "/authorcollections",
    response_model=list[AuthorDto],
    status_code=status.HTTP_201_CREATED,
    summary="Create several authors at once",
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {
            "model": ValidationProblemDetails
        }
    },
)
async def create_author_collection(
    request: Request,
    authors: Annotated[list[AuthorForCreationDto], Body(min_length=1)],
    repo: AuthorRepoDep,
) -> Response:
    """
    Create every author of the body with one commit.

    The Location header names the whole batch.
    """
    created = await CreateAuthorCollectionCommand(repo).execute(authors)
    return created_at_route(request, "get_author_collection", created)
