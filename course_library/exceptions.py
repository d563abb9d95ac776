"""
Custom exception classes for the application.

Each exception carries the HTTP status it maps to, so the exception
handlers registered on the application can turn any of them into a
response without knowing where it was raised.
"""

from typing import Any


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a referenced author or course does not exist.

    HTTP Status: 404 Not Found (empty body)
    """

    http_status = 404


class BadRequestError(AppException):
    """
    Structurally malformed input.

    Raised when input cannot be bound at all, e.g. an absent or
    unparsable identifier set.

    HTTP Status: 400 Bad Request
    """

    http_status = 400

    def __init__(
        self, message: str, errors: dict[str, list[str]] | None = None
    ):
        super().__init__(message)
        self.errors = errors or {}


class ValidationError(AppException):
    """
    Semantic constraint violation.

    Raised when a document fails field-level validation (required member
    missing, length exceeded, cross-field rule broken).

    HTTP Status: 422 Unprocessable Entity

    Attributes:
        errors: Field path to list of messages.
    """

    http_status = 422

    def __init__(
        self,
        errors: dict[str, list[str]],
        message: str = "Validation failed",
    ):
        super().__init__(message)
        self.errors = errors


class PatchApplicationError(ValidationError):
    """
    A patch operation could not be applied.

    Raised for unknown paths, missing members and failed `test`
    operations. Reported exactly like ValidationError.
    """

    def __init__(
        self,
        errors: dict[str, list[str]],
        message: str = "Patch could not be applied",
    ):
        super().__init__(errors, message)


class ConflictError(AppException):
    """
    Resource conflict.

    Raised when a client-supplied course identifier already belongs to
    another author.

    HTTP Status: 409 Conflict
    """

    http_status = 409


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500

    def __init__(self, message: str, original: Any = None):
        super().__init__(message)
        self.original = original
