"""Translation node resolution: plural, variant and passthrough dispatch.

Given the node found for a key in one locale, these functions produce the
final string for that locale. They never raise on malformed data; a bad node
renders as one of the sentinel strings from localekit.constants.

An empty result means "nothing usable here" and lets the caller continue
with the next fallback locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from localekit.constants import (
    SENTINEL_PLURAL_MISSING_FORM,
    SENTINEL_PLURAL_NOT_OBJECT,
    SENTINEL_UNSUPPORTED_TYPE,
    SENTINEL_VARIANT_NO_MATCH,
    SENTINEL_VARIANT_NOT_OBJECT,
)
from localekit.enums import PluralCategory
from localekit.runtime.interpolation import interpolate, interpolate_positional
from localekit.runtime.plural_rules import select_plural_category
from localekit.runtime.value_types import (
    TreeValue,
    as_array,
    as_number,
    as_object,
    as_string,
    to_json,
)

__all__ = [
    "COUNT_PARAM",
    "plural_count",
    "resolve_node",
    "resolve_node_plural",
    "resolve_node_positional",
    "select_plural_template",
    "select_variant_template",
]

# Parameter whose presence switches object nodes to plural handling.
COUNT_PARAM = "count"


def plural_count(params: Mapping[str, TreeValue]) -> int:
    """Read the plural count parameter, truncated to int (1 if unusable)."""
    count = as_number(params.get(COUNT_PARAM))
    if count is None or not math.isfinite(count):
        return 1
    return int(count)


def select_plural_template(data: TreeValue, locale: str, count: int) -> str:
    """Pick the plural form for count from a plural object.

    Tries the locale's plural category, then "other", then the literal count
    as a key. Only string entries qualify.

    Example:
        >>> select_plural_template({"one": "1 file", "other": "files"}, "en", 1)
        '1 file'
        >>> select_plural_template({"0": "none"}, "en", 0)
        'none'
    """
    forms = as_object(data)
    if forms is None:
        return SENTINEL_PLURAL_NOT_OBJECT

    category = select_plural_category(count, locale)
    for form in (category.value, PluralCategory.OTHER.value, str(count)):
        template = as_string(forms.get(form))
        if template is not None:
            return template
    return SENTINEL_PLURAL_MISSING_FORM


def select_variant_template(data: TreeValue, params: Mapping[str, TreeValue]) -> str:
    """Pick the variant selected by the first matching string parameter.

    Parameters are scanned in iteration order; the first string value naming
    a string entry of the variant object wins, then "other".

    Example:
        >>> select_variant_template({"male": "He", "other": "They"}, {"gender": "male"})
        'He'
    """
    variants = as_object(data)
    if variants is None:
        return SENTINEL_VARIANT_NOT_OBJECT

    for value in params.values():
        choice = as_string(value)
        if choice is None:
            continue
        template = as_string(variants.get(choice))
        if template is not None:
            return template

    fallback = as_string(variants.get(PluralCategory.OTHER.value))
    if fallback is not None:
        return fallback
    return SENTINEL_VARIANT_NO_MATCH


def resolve_node(node: TreeValue, locale: str, params: Mapping[str, TreeValue]) -> str:
    """Resolve a node for the tree-parameter API.

    Strings are interpolated with params. Objects are plural objects when a
    "count" parameter is present and variant objects otherwise; the chosen
    template is interpolated too. Arrays render as JSON untouched.
    """
    if isinstance(node, str):
        return interpolate(node, params)
    if as_object(node) is not None:
        if COUNT_PARAM in params:
            template = select_plural_template(node, locale, plural_count(params))
        else:
            template = select_variant_template(node, params)
        return interpolate(template, params)
    if as_array(node) is not None:
        return to_json(node)
    return SENTINEL_UNSUPPORTED_TYPE


def resolve_node_positional(node: TreeValue, params: Sequence[str]) -> str:
    """Resolve a node for the positional-parameter API.

    Objects contribute their "other" entry, or their first string entry.
    An object without any string entry resolves to the empty string.
    """
    if isinstance(node, str):
        return interpolate_positional(node, params)
    entries = as_object(node)
    if entries is not None:
        template = as_string(entries.get(PluralCategory.OTHER.value))
        if template is None:
            template = next(
                (value for value in entries.values() if isinstance(value, str)), ""
            )
        return interpolate_positional(template, params)
    if as_array(node) is not None:
        return to_json(node)
    return SENTINEL_UNSUPPORTED_TYPE


def resolve_node_plural(
    node: TreeValue, locale: str, count: int, params: Sequence[str]
) -> str:
    """Resolve a node for the positional plural API.

    The count itself becomes positional parameter 0, ahead of params, so a
    template such as "{} files" receives the count in its first slot.
    """
    if isinstance(node, str):
        return interpolate_positional(node, [str(count), *params])
    if as_object(node) is not None:
        template = select_plural_template(node, locale, count)
        if template == SENTINEL_PLURAL_MISSING_FORM:
            return template
        return interpolate_positional(template, [str(count), *params])
    if as_array(node) is not None:
        return to_json(node)
    return SENTINEL_UNSUPPORTED_TYPE
