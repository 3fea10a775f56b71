"""Translation runtime: tree values, plural rules, lookup and interpolation.

The runtime layer is pure: every function here computes over values passed
in and holds no state between calls.

Python 3.13+. Zero external dependencies.
"""

from .interpolation import (
    interpolate,
    interpolate_formatted,
    interpolate_named,
    interpolate_positional,
)
from .lookup import lookup, split_key
from .plural_rules import plural_family, select_plural_category
from .resolver import (
    resolve_node,
    resolve_node_plural,
    resolve_node_positional,
    select_plural_template,
    select_variant_template,
)
from .value_types import TreeObject, TreeValue, to_json, to_text

__all__ = [
    "TreeObject",
    "TreeValue",
    "interpolate",
    "interpolate_formatted",
    "interpolate_named",
    "interpolate_positional",
    "lookup",
    "plural_family",
    "resolve_node",
    "resolve_node_plural",
    "resolve_node_positional",
    "select_plural_category",
    "select_plural_template",
    "select_variant_template",
    "split_key",
    "to_json",
    "to_text",
]
