from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class PatchOperation(BaseModel):  # type: ignore[misc]
    """
    One JSON Patch (RFC 6902) operation.

    Attributes:
        op: Operation kind.
        path: JSON Pointer to the target member, e.g. "/title".
        value: Value for add/replace/test.
        from_: Source pointer for move/copy (`from` on the wire).
    """

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")

    def as_json(self) -> dict[str, Any]:
        """Operation in the shape the patch engine consumes."""
        return self.model_dump(by_alias=True, exclude_unset=True)
