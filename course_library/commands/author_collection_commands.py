"""
Commands for reading and creating batches of authors.

A batch is addressed by a composite identifier token, `id1,id2,...`, so
the location returned when a batch is created can be read back with a
single request.
"""

import uuid

from course_library.commands.base import BaseCommand, Created
from course_library.exceptions import NotFoundError
from course_library.mappers import author_from_creation, author_to_dto
from course_library.repositories.author_repository import AuthorRepository
from course_library.schemas.author import AuthorDto, AuthorForCreationDto
from course_library.utils.id_set import format_id_set


class GetAuthorCollectionCommand(
    BaseCommand[list[uuid.UUID], list[AuthorDto]]
):
    """
    Resolve a set of author IDs, all or nothing.

    Requested IDs are de-duplicated before the comparison, so asking for
    the same existing author twice succeeds and returns it once.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, ids: list[uuid.UUID]) -> list[AuthorDto]:
        """
        Args:
            ids: Requested author IDs, in request order.

        Returns:
            The authors, ordered by the first occurrence of their ID.

        Raises:
            NotFoundError: If any requested ID does not resolve.
        """
        requested = list(dict.fromkeys(ids))
        authors = await self.repository.get_by_ids(requested)

        if len(authors) != len(requested):
            found = {author.id for author in authors}
            missing = [str(id) for id in requested if id not in found]
            raise NotFoundError(
                f"Authors not found: {', '.join(missing)}"
            )

        position = {id: index for index, id in enumerate(requested)}
        authors.sort(key=lambda author: position[author.id])
        return [author_to_dto(author) for author in authors]


class CreateAuthorCollectionCommand(
    BaseCommand[list[AuthorForCreationDto], Created[list[AuthorDto]]]
):
    """
    Create several authors with one commit.

    Either every author of the batch is persisted or none is.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(
        self, input_data: list[AuthorForCreationDto]
    ) -> Created[list[AuthorDto]]:
        authors = [author_from_creation(payload) for payload in input_data]
        for author in authors:
            await self.repository.create(author)

        await self.repository.save()

        return Created(
            resource=[author_to_dto(author) for author in authors],
            route_values={
                "ids": format_id_set([author.id for author in authors])
            },
        )
