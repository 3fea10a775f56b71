"""Shared constants for localekit.

This module provides centralized constants used across the runtime,
formatting and localization packages. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Fallback locale and reserved data keys
- Date patterns: ISO-8601 default pattern
- Sentinel strings: In-band diagnostics for malformed translation data

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_FALLBACK_LOCALE",
    "FORMATS_KEY",
    "LOCALE_SEPARATOR",
    "KEY_SEPARATOR",
    # Date patterns
    "ISO_8601_PATTERN",
    # Sentinel strings
    "SENTINEL_PLURAL_NOT_OBJECT",
    "SENTINEL_PLURAL_MISSING_FORM",
    "SENTINEL_VARIANT_NOT_OBJECT",
    "SENTINEL_VARIANT_NO_MATCH",
    "SENTINEL_UNSUPPORTED_TYPE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Fallback locale appended to every fallback chain after reset().
DEFAULT_FALLBACK_LOCALE: str = "en"

# Reserved top-level key inside a locale's data holding its format overrides.
# Recognized only while locale data is loaded; never a translation key.
FORMATS_KEY: str = "_formats"

# Separates specificity levels in a locale identifier: en-US-NY
LOCALE_SEPARATOR: str = "-"

# Separates path segments in a translation key: menu.file.open
KEY_SEPARATOR: str = "."

# ============================================================================
# DATE PATTERNS
# ============================================================================

# Used by format_date() when no pattern is given.
ISO_8601_PATTERN: str = "%Y-%m-%dT%H:%M:%S"

# ============================================================================
# SENTINEL STRINGS
# ============================================================================

# Malformed translation data degrades a single string instead of raising.
# The bracketed form keeps them visually distinct from real translations.
SENTINEL_PLURAL_NOT_OBJECT: str = "[plural: data not object]"
SENTINEL_PLURAL_MISSING_FORM: str = "[plural: missing form]"
SENTINEL_VARIANT_NOT_OBJECT: str = "[variant: data not object]"
SENTINEL_VARIANT_NO_MATCH: str = "[variant: no match]"
SENTINEL_UNSUPPORTED_TYPE: str = "[unsupported translation type]"
