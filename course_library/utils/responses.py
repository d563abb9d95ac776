"""
Helpers turning command outcomes into HTTP responses.
"""

from typing import Any

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from course_library.commands.base import Created, Updated


def created_at_route(
    request: Request, route_name: str, created: Created[Any]
) -> JSONResponse:
    """
    201 response whose Location points at the named route.

    Args:
        request: Current request, used to build an absolute URL.
        route_name: Name of the route that reads the new resource.
        created: Command outcome carrying the resource and route values.
    """
    location = request.url_for(
        route_name,
        **{key: str(value) for key, value in created.route_values.items()},
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=jsonable_encoder(created.resource, by_alias=True),
        headers={"Location": str(location)},
    )


def created_or_no_content(
    request: Request, route_name: str, outcome: Created[Any] | Updated
) -> Response:
    """201 with Location for a creation, 204 for an update."""
    if isinstance(outcome, Created):
        return created_at_route(request, route_name, outcome)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
