"""
Translation of validation failures into problem details payloads.

Both framework-level binding failures (400) and semantic validation
failures (422) are rendered with the same shape; only the status code
and title differ.
"""

from typing import Any, Iterable, Sequence

from fastapi.responses import JSONResponse
from starlette import status

from course_library.constants import (
    INPUT_PROBLEM_TITLE,
    PROBLEM_DETAIL,
    PROBLEM_JSON_MEDIA_TYPE,
    ROOT_ERROR_KEY,
    VALIDATION_PROBLEM_TITLE,
    VALIDATION_PROBLEM_TYPE,
)
from course_library.middlewares.correlation_id import get_correlation_id
from course_library.schemas.problem import ValidationProblemDetails

# Locations FastAPI reports for request parts other than the body
_NON_BODY_SOURCES = {"path", "query", "header", "cookie"}

# Error types that mean the body could not be bound as a whole
_BODY_BINDING_ERROR_TYPES = {
    "json_invalid",
    "missing",
    "model_attributes_type",
    "model_type",
    "dict_type",
    "list_type",
}


def error_key(loc: Sequence[Any]) -> str:
    """
    Render a pydantic error location as an errors-map key.

    Examples:
        ("title",) -> "title"
        (0, "firstName") -> "[0].firstName"
        () -> "$"
    """
    key = ""
    for part in loc:
        if isinstance(part, int):
            key += f"[{part}]"
        else:
            key += f".{part}" if key else str(part)
    return key or ROOT_ERROR_KEY


def collect_errors(
    errors: Iterable[dict[str, Any]], skip_source: bool = False
) -> dict[str, list[str]]:
    """
    Group pydantic error dicts into a field path to messages map.

    Args:
        errors: Errors as returned by `ValidationError.errors()`.
        skip_source: Drop the first location element ("body", "path", ...)
            as reported by FastAPI request validation.
    """
    result: dict[str, list[str]] = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if skip_source:
            loc = loc[1:]
        result.setdefault(error_key(loc), []).append(error["msg"])
    return result


def is_binding_failure(error: dict[str, Any]) -> bool:
    """
    Whether a request validation error means the input could not be bound.

    Path, query, header and cookie values that cannot be parsed, invalid
    JSON, and a body that is missing or of the wrong kind altogether are
    binding failures. Everything else is a validation failure of an
    otherwise well-formed document.
    """
    loc = tuple(error.get("loc", ()))
    if not loc or loc[0] in _NON_BODY_SOURCES:
        return True
    if error.get("type") == "json_invalid":
        return True
    return len(loc) == 1 and error.get("type") in _BODY_BINDING_ERROR_TYPES


def build_problem(
    errors: dict[str, list[str]],
    instance: str,
    status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> ValidationProblemDetails:
    """
    Build the problem payload for a set of field-level failures.

    Args:
        errors: Field path to messages.
        instance: Path of the request that failed.
        status_code: 422 for validation failures, 400 for input that could
            not be bound.
    """
    title = (
        INPUT_PROBLEM_TITLE
        if status_code == status.HTTP_400_BAD_REQUEST
        else VALIDATION_PROBLEM_TITLE
    )
    return ValidationProblemDetails(
        type=VALIDATION_PROBLEM_TYPE,
        title=title,
        status=status_code,
        detail=PROBLEM_DETAIL,
        instance=instance,
        trace_id=get_correlation_id(),
        errors=errors,
    )


def problem_response(problem: ValidationProblemDetails) -> JSONResponse:
    """Render a problem payload as an application/problem+json response."""
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(by_alias=True),
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )
