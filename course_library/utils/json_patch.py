"""
Application of JSON Patch (RFC 6902) documents to transfer shapes.

Operations are applied one at a time so the first one that cannot be
applied is reported against the member it targets. Only top-level members
of the transfer shape may be addressed.
"""

from typing import Any, Collection, Sequence

import jsonpatch
import jsonpointer

from course_library.constants import ROOT_ERROR_KEY
from course_library.exceptions import PatchApplicationError
from course_library.schemas.patch import PatchOperation


def _target_member(pointer: str) -> str:
    parts = jsonpointer.JsonPointer(pointer).parts
    return parts[0] if parts else ""


def _check_pointer(pointer: str, members: Collection[str]) -> str:
    try:
        member = _target_member(pointer)
    except jsonpointer.JsonPointerException as ex:
        raise PatchApplicationError({ROOT_ERROR_KEY: [str(ex)]})

    if member not in members:
        raise PatchApplicationError(
            {
                member or ROOT_ERROR_KEY: [
                    f"The target location specified by path segment '{member}' was not found."
                ]
            }
        )
    return member


def apply_patch(
    document: dict[str, Any],
    operations: Sequence[PatchOperation],
    members: Collection[str],
) -> dict[str, Any]:
    """
    Apply `operations` in order to a copy of `document`.

    Args:
        document: JSON document of a transfer shape.
        operations: Patch operations.
        members: Member names (wire spelling) the operations may target.

    Returns:
        The patched document. `document` itself is not modified.

    Raises:
        PatchApplicationError: On the first operation that targets an
            unknown member, misses its source, or fails a `test`.
    """
    patched = dict(document)

    for operation in operations:
        member = _check_pointer(operation.path, members)
        if operation.from_ is not None:
            _check_pointer(operation.from_, members)

        try:
            patched = jsonpatch.JsonPatch([operation.as_json()]).apply(
                patched
            )
        except (
            jsonpatch.JsonPatchException,
            jsonpointer.JsonPointerException,
        ) as ex:
            raise PatchApplicationError(
                {member: [f"The '{operation.op}' operation failed: {ex}"]}
            )

    return patched
