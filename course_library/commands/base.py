"""
Base command for encapsulating business operations.

Commands hold the business logic of one operation, depend only on
repositories, and raise exceptions from course_library.exceptions on
failure. HTTP handlers translate their results into responses.

Mutating commands return one of two outcomes:

- `Created(resource, route_values)`: a new resource exists; the handler
  answers 201 with a Location built from `route_values`.
- `Updated()`: an existing resource changed; the handler answers 204.

Example:
    ```python
    class DeleteCourseCommand(BaseCommand[CourseKey, None]):
        def __init__(self, authors: AuthorRepository, courses: CourseRepository):
            self.authors = authors
            self.courses = courses

        async def execute(self, key: CourseKey) -> None:
            ...
    ```
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")
TResource = TypeVar("TResource")


@dataclass(frozen=True)
class Created(Generic[TResource]):
    """A resource was created at the location named by `route_values`."""

    resource: TResource
    route_values: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Updated:
    """An existing resource was changed in place."""


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            AppException: Any subclass, for failures the client caused.
        """
        pass
