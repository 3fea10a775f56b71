"""Locale-aware formatting of numbers, currency amounts and dates.

Submodules:
    config     - FormatConfig dataclasses and _formats override handling
    formatters - format_number, format_price, format_date, CalendarFields
    cldr       - FormatConfig built from CLDR data (requires Babel)

Python 3.13+. Zero external dependencies (cldr needs the babel extra).
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .cldr import cldr_format_config
from .config import (
    CurrencyConfig,
    DateTimeConfig,
    FormatConfig,
    NumberConfig,
    apply_format_overrides,
)
from .formatters import (
    CalendarFields,
    format_date,
    format_number,
    format_price,
    resolve_date_pattern,
)

__all__ = [
    # Configuration
    "CurrencyConfig",
    "DateTimeConfig",
    "FormatConfig",
    "NumberConfig",
    "apply_format_overrides",
    # Renderers
    "CalendarFields",
    "format_date",
    "format_number",
    "format_price",
    "resolve_date_pattern",
    # CLDR data (optional Babel)
    "cldr_format_config",
]
