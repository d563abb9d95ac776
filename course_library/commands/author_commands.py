"""
Commands for single Author operations.
"""

import uuid

from course_library.commands.base import BaseCommand, Created
from course_library.exceptions import NotFoundError
from course_library.mappers import author_from_creation, author_to_dto
from course_library.repositories.author_repository import AuthorRepository
from course_library.schemas.author import (
    AuthorDto,
    AuthorForCreationDto,
    AuthorsResourceParameters,
)


class GetAuthorsCommand(BaseCommand[AuthorsResourceParameters, list[AuthorDto]]):
    """List authors filtered by main category and/or a search query."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(
        self, input_data: AuthorsResourceParameters
    ) -> list[AuthorDto]:
        authors = await self.repository.list_authors(
            main_category=input_data.main_category,
            search_query=input_data.search_query,
        )
        return [author_to_dto(author) for author in authors]


class GetAuthorCommand(BaseCommand[uuid.UUID, AuthorDto]):
    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: uuid.UUID) -> AuthorDto:
        """
        Raises:
            NotFoundError: If the author does not exist.
        """
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise NotFoundError(f"Author with ID {author_id} not found")
        return author_to_dto(author)


class CreateAuthorCommand(
    BaseCommand[AuthorForCreationDto, Created[AuthorDto]]
):
    """
    Command to create an author together with its nested courses.

    The identifier is assigned by the server.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(
        self, input_data: AuthorForCreationDto
    ) -> Created[AuthorDto]:
        author = await self.repository.create(author_from_creation(input_data))
        await self.repository.save()

        return Created(
            resource=author_to_dto(author),
            route_values={"author_id": author.id},
        )


class DeleteAuthorCommand(BaseCommand[uuid.UUID, None]):
    """
    Command to delete an author.

    The author's courses are deleted with it.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: uuid.UUID) -> None:
        """
        Raises:
            NotFoundError: If the author does not exist.
        """
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise NotFoundError(f"Author with ID {author_id} not found")

        await self.repository.delete(author)
        await self.repository.save()
