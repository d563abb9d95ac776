"""
Middleware for injecting contextual fields into structured logs.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from course_library.logging import clear_log_context, set_log_context


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject contextual fields into structured logs.

    Adds endpoint and method before the request is handled, the status
    code once a response exists, and clears the context afterwards.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        set_log_context(
            endpoint=request.url.path,
            method=request.method,
        )

        try:
            response = await call_next(request)
            set_log_context(status_code=response.status_code)
        finally:
            clear_log_context()

        return response
