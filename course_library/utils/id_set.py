"""
Parsing of composite identifier path segments such as `(id1,id2,id3)`.
"""

import uuid

from starlette.convertors import Convertor, register_url_convertor

from course_library.constants import ID_SET_SEPARATOR
from course_library.exceptions import BadRequestError

ID_SET_FIELD = "ids"


class IdSetConvertor(Convertor[str]):
    """
    Path convertor for the content of `(...)`.

    Unlike the default `str` convertor it also matches an empty segment,
    so `()` reaches the handler and is rejected as malformed input.
    """

    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("idset", IdSetConvertor())


def parse_id_set(raw: str | None) -> list[uuid.UUID]:
    """
    Split a comma separated identifier list and parse every token.

    Empty tokens are skipped, order and duplicates are preserved.

    Args:
        raw: Path segment content without the surrounding parentheses.

    Returns:
        Parsed identifiers.

    Raises:
        BadRequestError: If the list is absent or a token is not a valid
            identifier.
    """
    if raw is None or not raw.strip():
        raise BadRequestError(
            "Identifier set is missing",
            errors={ID_SET_FIELD: ["At least one identifier is required."]},
        )

    ids = []
    for token in raw.split(ID_SET_SEPARATOR):
        token = token.strip()
        if not token:
            continue
        try:
            ids.append(uuid.UUID(token))
        except ValueError:
            raise BadRequestError(
                f"Invalid identifier '{token}'",
                errors={
                    ID_SET_FIELD: [
                        f"The value '{token}' is not a valid identifier."
                    ]
                },
            )

    if not ids:
        raise BadRequestError(
            "Identifier set is missing",
            errors={ID_SET_FIELD: ["At least one identifier is required."]},
        )
    return ids


def format_id_set(ids: list[uuid.UUID]) -> str:
    """Join identifiers into the token accepted by `parse_id_set`."""
    return ID_SET_SEPARATOR.join(str(id) for id in ids)
