"""
Exception handlers turning application exceptions into HTTP responses.

Commands raise exceptions from course_library.exceptions; nothing below the
HTTP layer builds responses. Every failure ends in an explicit response:

- NotFoundError, ConflictError: status code with an empty body
- BadRequestError, request binding failures: 400 problem details
- ValidationError, PatchApplicationError, body validation: 422 problem details
- anything else: 500 with a generic message
"""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette import status

from course_library.constants import UNEXPECTED_FAULT_MESSAGE
from course_library.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from course_library.logging import logger
from course_library.utils.problem_details import (
    build_problem,
    collect_errors,
    is_binding_failure,
    problem_response,
)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    errors = exc.errors()
    status_code = (
        status.HTTP_400_BAD_REQUEST
        if any(is_binding_failure(error) for error in errors)
        else status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    logger.warning(
        f"Request validation failed for {request.method} {request.url.path}",
        extra={"error_count": len(errors), "status_code": status_code},
    )
    problem = build_problem(
        collect_errors(errors, skip_source=True),
        instance=request.url.path,
        status_code=status_code,
    )
    return problem_response(problem)


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> Response:
    logger.warning(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={"exception_type": type(exc).__name__},
    )
    problem = build_problem(exc.errors, instance=request.url.path)
    return problem_response(problem)


async def bad_request_handler(
    request: Request, exc: BadRequestError
) -> Response:
    logger.warning(
        f"Bad request {request.method} {request.url.path}: {exc.message}"
    )
    problem = build_problem(
        exc.errors,
        instance=request.url.path,
        status_code=status.HTTP_400_BAD_REQUEST,
    )
    return problem_response(problem)


async def empty_body_handler(request: Request, exc: AppException) -> Response:
    logger.warning(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}"
    )
    return Response(status_code=exc.http_status)


async def app_exception_handler(
    request: Request, exc: AppException
) -> Response:
    logger.error(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        exc_info=exc,
    )
    return PlainTextResponse(
        UNEXPECTED_FAULT_MESSAGE, status_code=exc.http_status
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> Response:
    logger.error(
        f"Unhandled error in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return PlainTextResponse(
        UNEXPECTED_FAULT_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register every handler on `app`.

    Starlette resolves handlers by walking the exception's MRO, so the
    more specific classes win over AppException.
    """
    app.add_exception_handler(
        RequestValidationError, request_validation_handler
    )
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(BadRequestError, bad_request_handler)
    app.add_exception_handler(NotFoundError, empty_body_handler)
    app.add_exception_handler(ConflictError, empty_body_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
