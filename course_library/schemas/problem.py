"""
Problem details payload (RFC 7807) for validation and input errors.

Example:
    {
        "type": "https://dummycourselibrary.com/modelvalidationproblem",
        "title": "One or more validation errors occured.",
        "status": 422,
        "detail": "See the errors property for details.",
        "instance": "/authors/6f0c.../courses/1a2b...",
        "traceId": "3fa85f64",
        "errors": {"title": ["Field required"]}
    }
"""

from pydantic import Field

from course_library.schemas.base import CamelModel


class ValidationProblemDetails(CamelModel):
    """Machine-readable error payload with a field-level error map."""

    type: str = Field(..., description="URI identifying the problem type")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Where to look for details")
    instance: str = Field(..., description="Path of the failing request")
    trace_id: str = Field(..., description="Request correlation ID")
    errors: dict[str, list[str]] = Field(
        default_factory=dict, description="Field path to messages"
    )
