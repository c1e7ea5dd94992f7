"""JsonKind StrEnum and the json_kind() dispatch for parsed JSON values.

Every component (printer, differ) classifies values through ``json_kind`` so
there is exactly one place where Python types are mapped onto the six JSON
value shapes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

__all__ = ["JsonKind", "JsonValue", "json_kind"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonKind(StrEnum):
    """The six shapes a JSON value can take."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    @property
    def is_container(self) -> bool:
        return self in (JsonKind.OBJECT, JsonKind.ARRAY)


def json_kind(value: Any) -> JsonKind:
    """Classify a parsed JSON value.

    Args:
        value: Any value produced by ``json.loads`` (tuples are accepted as
            arrays for callers that build documents by hand).

    Returns:
        The ``JsonKind`` of ``value``.

    Raises:
        TypeError: If ``value`` is not a JSON value.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
