"""Template interpolation for translation strings.

Three template syntaxes are recognized:

    %{key}        named field, value inserted as text
    %<key>.f      formatted field, f is a single format letter
    {N} and {}    positional parameters (positional API only)

Each syntax has its own scanner. Every scanner makes a single left-to-right
pass: once a placeholder is replaced, scanning resumes after it, so inserted
text is never re-examined by the same pass. Placeholders whose parameter is
missing are copied through unchanged.

Guard rule for the two % syntaxes: a placeholder is recognized at the start
of the text, directly after the previous replacement, or after any character
other than '%'. A doubled '%%{x}' is therefore left as literal text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import string
from collections.abc import Mapping, Sequence

from localekit.runtime.value_types import TreeValue, as_number, as_object, to_json, to_text

__all__ = [
    "interpolate",
    "interpolate_formatted",
    "interpolate_named",
    "interpolate_positional",
]

_WORD_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")
_KEY_CHARS: frozenset[str] = _WORD_CHARS | {"."}
_DIGITS: frozenset[str] = frozenset(string.digits)

_NAMED_OPEN = "%{"
_FORMATTED_OPEN = "%<"


def _scan_run(text: str, start: int, chars: frozenset[str]) -> int:
    """Return the index just past the run of chars beginning at start."""
    end = start
    while end < len(text) and text[end] in chars:
        end += 1
    return end


def _is_guarded(text: str, pos: int, scan_start: int) -> bool:
    """Check whether the '%' at pos is escaped by a preceding '%'."""
    return pos > scan_start and text[pos - 1] == "%"


def _format_int(value: TreeValue) -> str:
    number = as_number(value)
    if number is None or not math.isfinite(number):
        return "0"
    return str(int(number))


def _format_float(value: TreeValue) -> str:
    number = as_number(value)
    if number is None:
        return "0"
    return format(float(number), "g")


def _format_field(value: TreeValue, fmt: str) -> str:
    match fmt:
        case "d" | "i":
            return _format_int(value)
        case "f":
            return _format_float(value)
        case "s":
            return to_text(value)
        case _:
            return to_json(value)


def interpolate_named(text: str, params: Mapping[str, TreeValue] | None) -> str:
    """Replace %{key} placeholders with parameter values.

    Keys are matched literally against the top level of params; a dotted key
    such as 'user.name' names a parameter called 'user.name'.

    Example:
        >>> interpolate_named("Hi, %{name}!", {"name": "Anna"})
        'Hi, Anna!'
        >>> interpolate_named("%%{name} and %{missing}", {"name": "Anna"})
        '%%{name} and %{missing}'
    """
    fields = as_object(params)
    if fields is None or not text:
        return text

    parts: list[str] = []
    last = 0
    pos = text.find(_NAMED_OPEN)
    while pos >= 0:
        key_start = pos + len(_NAMED_OPEN)
        key_end = _scan_run(text, key_start, _KEY_CHARS)
        if (
            _is_guarded(text, pos, last)
            or key_end == key_start
            or key_end >= len(text)
            or text[key_end] != "}"
        ):
            pos = text.find(_NAMED_OPEN, pos + 1)
            continue

        key = text[key_start:key_end]
        parts.append(text[last:pos])
        if key in fields:
            parts.append(to_text(fields[key]))
        else:
            parts.append(text[pos : key_end + 1])
        last = key_end + 1
        pos = text.find(_NAMED_OPEN, last)

    parts.append(text[last:])
    return "".join(parts)


def interpolate_formatted(text: str, params: Mapping[str, TreeValue] | None) -> str:
    """Replace %<key>.f placeholders with formatted parameter values.

    Format letters:
        d, i: integer (truncated toward zero), 0 for non-numeric values
        f: floating point in %g form, 0 for non-numeric values
        s: string value, or JSON for non-strings
        any other word character: JSON form of the value

    Example:
        >>> interpolate_formatted("%<n>.d items", {"n": 3.7})
        '3 items'
        >>> interpolate_formatted("%<ratio>.f", {"ratio": 0.5})
        '0.5'
    """
    fields = as_object(params)
    if fields is None or not text:
        return text

    parts: list[str] = []
    last = 0
    pos = text.find(_FORMATTED_OPEN)
    while pos >= 0:
        key_start = pos + len(_FORMATTED_OPEN)
        key_end = _scan_run(text, key_start, _KEY_CHARS)
        fmt_pos = key_end + 2
        if (
            _is_guarded(text, pos, last)
            or key_end == key_start
            or text[key_end : key_end + 2] != ">."
            or fmt_pos >= len(text)
            or text[fmt_pos] not in _WORD_CHARS
        ):
            pos = text.find(_FORMATTED_OPEN, pos + 1)
            continue

        key = text[key_start:key_end]
        parts.append(text[last:pos])
        if key in fields:
            parts.append(_format_field(fields[key], text[fmt_pos]))
        else:
            parts.append(text[pos : fmt_pos + 1])
        last = fmt_pos + 1
        pos = text.find(_FORMATTED_OPEN, last)

    parts.append(text[last:])
    return "".join(parts)


def interpolate(text: str, params: Mapping[str, TreeValue] | None) -> str:
    """Apply the named pass, then the formatted pass."""
    return interpolate_formatted(interpolate_named(text, params), params)


def interpolate_positional(text: str, params: Sequence[str]) -> str:
    """Replace {N} and {} placeholders with positional parameters.

    {N} takes the Nth parameter when N is in range. Each {} takes the next
    parameter not yet taken by an earlier {}; the {} cursor ignores {N}
    substitutions. Out-of-range and exhausted placeholders stay as written.

    Example:
        >>> interpolate_positional("{1} before {0}", ["a", "b"])
        'b before a'
        >>> interpolate_positional("{} + {} = {2}", ["1", "2", "3"])
        '1 + 2 = 3'
        >>> interpolate_positional("{} {} {}", ["x"])
        'x {} {}'
    """
    if not params or not text:
        return text

    parts: list[str] = []
    last = 0
    cursor = 0
    pos = text.find("{")
    while pos >= 0:
        digits_end = _scan_run(text, pos + 1, _DIGITS)
        if digits_end >= len(text) or text[digits_end] != "}":
            pos = text.find("{", pos + 1)
            continue

        digits = text[pos + 1 : digits_end]
        replacement: str | None = None
        if digits:
            index = int(digits)
            if index < len(params):
                replacement = params[index]
        elif cursor < len(params):
            replacement = params[cursor]
            cursor += 1

        parts.append(text[last:pos])
        parts.append(text[pos : digits_end + 1] if replacement is None else replacement)
        last = digits_end + 1
        pos = text.find("{", last)

    parts.append(text[last:])
    return "".join(parts)
