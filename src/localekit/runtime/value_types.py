"""Tree value model shared by locale data and call-site parameters.

A TreeValue is the JSON value model: string, number, boolean, null, array
or string-keyed object. Locale data arrives already parsed into this shape
and call-site parameters use it too.

The helpers below give cheap shape checks and safe typed extraction that
return None instead of raising, so absence is data rather than a failure.
bool is never treated as a number even though it subclasses int.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TypeAlias

__all__ = [
    "TreeObject",
    "TreeValue",
    "as_array",
    "as_number",
    "as_object",
    "as_string",
    "is_number",
    "to_json",
    "to_text",
]

TreeValue: TypeAlias = (
    str
    | int
    | float
    | bool
    | None
    | Sequence["TreeValue"]
    | Mapping[str, "TreeValue"]
)
"""Recursive JSON-shaped value used for locale data and parameters."""

TreeObject: TypeAlias = Mapping[str, TreeValue]
"""Ordered string-keyed object node."""


def is_number(value: object) -> bool:
    """Check for an int or float that is not a bool."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def as_number(value: object) -> int | float | None:
    """Return value if it is numeric, else None."""
    if is_number(value):
        return value  # type: ignore[return-value]
    return None


def as_string(value: object) -> str | None:
    """Return value if it is a string, else None."""
    return value if isinstance(value, str) else None


def as_object(value: object) -> TreeObject | None:
    """Return value if it is an object node, else None."""
    return value if isinstance(value, Mapping) else None


def as_array(value: object) -> Sequence[TreeValue] | None:
    """Return value if it is an array node, else None.

    Strings and bytes are sequences in Python but never arrays here.
    """
    if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
        return value
    return None


def _jsonable(value: object) -> object:
    """Convert Mapping/Sequence implementations to dict/list for json."""
    if isinstance(value, Mapping):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if as_array(value) is not None:
        return [_jsonable(item) for item in value]  # type: ignore[attr-defined]
    return value


def to_json(value: object) -> str:
    """Render a tree value in canonical compact JSON.

    Example:
        >>> to_json({"a": [1, True, None]})
        '{"a":[1,true,null]}'
        >>> to_json("x")
        '"x"'
    """
    return json.dumps(
        _jsonable(value), ensure_ascii=False, separators=(",", ":"), default=str
    )


def to_text(value: object) -> str:
    """Stringify any tree value: strings verbatim, everything else as JSON.

    This is the single conversion used wherever a parameter is inserted into
    a template or passed positionally.

    Example:
        >>> to_text("Anna")
        'Anna'
        >>> to_text(3)
        '3'
        >>> to_text(False)
        'false'
    """
    if isinstance(value, str):
        return value
    return to_json(value)
