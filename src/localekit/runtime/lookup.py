"""Dotted key lookup through a locale's data tree.

Lookup is a repeated capability-checked descent: at each segment the current
node must be an object containing that segment, otherwise the result is None.
A miss is ordinary data, not an error.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from localekit.constants import KEY_SEPARATOR
from localekit.runtime.value_types import TreeValue, as_object

__all__ = ["lookup", "split_key"]


def split_key(key: str) -> list[str]:
    """Split a dotted key into path segments.

    A trailing separator does not produce an empty final segment; empty
    segments elsewhere are kept and simply never match.

    Example:
        >>> split_key("menu.file.open")
        ['menu', 'file', 'open']
        >>> split_key("menu.")
        ['menu']
    """
    segments = key.split(KEY_SEPARATOR)
    if segments and not segments[-1]:
        segments.pop()
    return segments


def lookup(tree: TreeValue, key: str) -> TreeValue | None:
    """Resolve a dotted key against a tree.

    Args:
        tree: Root of a locale's data (normally an object)
        key: Dotted key path (e.g., 'menu.file.open')

    Returns:
        The node at the path, or None if any segment is absent or an
        intermediate node is not an object.

    Example:
        >>> lookup({"menu": {"open": "Open"}}, "menu.open")
        'Open'
        >>> lookup({"menu": "Menu"}, "menu.open") is None
        True
    """
    node: TreeValue = tree
    for segment in split_key(key):
        current = as_object(node)
        if current is None or segment not in current:
            return None
        node = current[segment]
    return node
