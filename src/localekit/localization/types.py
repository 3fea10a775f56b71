"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

from localekit.runtime.value_types import TreeValue

__all__ = [
    "LocaleCode",
    "LocaleDataset",
    "LocaleTree",
    "TranslationKey",
]

LocaleCode: TypeAlias = str
"""Hyphen-delimited locale identifier (e.g., 'en', 'en-US', 'en-US-NY')."""

TranslationKey: TypeAlias = str
"""Dot-separated path into a locale tree (e.g., 'menu.file.open')."""

LocaleTree: TypeAlias = dict[str, TreeValue]
"""Translatable tree of one locale, with the _formats entry removed."""

LocaleDataset: TypeAlias = dict[LocaleCode, LocaleTree]
"""Translation trees keyed by locale."""
