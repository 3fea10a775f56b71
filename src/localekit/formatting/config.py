"""Immutable per-locale format configuration.

A FormatConfig bundles everything the format engine needs for one locale:
currency and number conventions, six named date/time patterns, and month
and weekday names. Instances are frozen; overrides produce new instances via
apply_format_overrides().

Override documents use the shape stored under a locale's "_formats" key:

    {
        "currency": {"symbol": "€", "positive_format": "%p%q %c", ...},
        "number": {"decimal_symbol": ",", "thousand_separator": ".", ...},
        "date_time": {"short_date": "%d.%m.%Y", ...},
        "short_month_names": [...12 names...],
        "long_month_names": [...],
        "short_day_names": [...7 names, Sunday first...],
        "long_day_names": [...]
    }

Unrecognized keys are ignored. Values of the wrong type are logged and
ignored, so a bad override never breaks an otherwise valid configuration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from localekit.enums import DatePatternName
from localekit.runtime.value_types import as_array, as_object

__all__ = [
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "CurrencyConfig",
    "DateTimeConfig",
    "FormatConfig",
    "NumberConfig",
    "apply_format_overrides",
]

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

_DEFAULT_SHORT_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_DEFAULT_LONG_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_DEFAULT_SHORT_DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_DEFAULT_LONG_DAYS = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)


@dataclass(frozen=True, slots=True)
class NumberConfig:
    """Number rendering conventions.

    Attributes:
        decimal_symbol: Separator between integer and fraction
        thousand_separator: Inserted between groups of three integer digits
        fract_digits: Fraction digits after rounding (zero-padded)
        positive_symbol: Prefix for non-negative values (usually empty)
        negative_symbol: Prefix for negative values
    """

    decimal_symbol: str = "."
    thousand_separator: str = " "
    fract_digits: int = 2
    positive_symbol: str = ""
    negative_symbol: str = "-"


@dataclass(frozen=True, slots=True)
class CurrencyConfig:
    """Currency rendering conventions.

    The format patterns understand %c (symbol), %q (formatted amount) and
    %p (sign position; empty because the sign is part of the amount).

    Attributes:
        symbol: Currency symbol inserted for %c
        name: Display name of the currency
        short_name: ISO-style code of the currency
        decimal_symbol: Separator between integer and fraction
        thousand_separator: Inserted between groups of three integer digits
        fract_digits: Minor unit digits
        positive_symbol: Prefix for non-negative amounts
        negative_symbol: Prefix for negative amounts
        positive_format: Pattern for amounts >= 0
        negative_format: Pattern for amounts < 0
    """

    symbol: str = "XXX"
    name: str = "Currency"
    short_name: str = "XXX"
    decimal_symbol: str = "."
    thousand_separator: str = " "
    fract_digits: int = 2
    positive_symbol: str = ""
    negative_symbol: str = "-"
    positive_format: str = "%c %p%q"
    negative_format: str = "%c %p%q"

    def number_config(self) -> NumberConfig:
        """Return the NumberConfig used to render the amount itself."""
        return NumberConfig(
            decimal_symbol=self.decimal_symbol,
            thousand_separator=self.thousand_separator,
            fract_digits=self.fract_digits,
            positive_symbol=self.positive_symbol,
            negative_symbol=self.negative_symbol,
        )


@dataclass(frozen=True, slots=True)
class DateTimeConfig:
    """Named date/time patterns, in the token language of format_date()."""

    long_time: str = "%H:%M:%S"
    short_time: str = "%H:%M"
    long_date: str = "%F %d, %Y"
    short_date: str = "%m/%d/%Y"
    long_date_time: str = "%F %d, %Y %H:%M:%S"
    short_date_time: str = "%m/%d/%Y %H:%M"

    def pattern(self, name: DatePatternName) -> str:
        """Return the pattern configured for a named alias."""
        value: str = getattr(self, name.value)
        return value


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Complete format configuration for one locale.

    Day name tuples start with Sunday, matching CalendarFields.weekday.

    Raises:
        ValueError: If a month tuple does not hold 12 names or a day tuple 7
    """

    currency: CurrencyConfig = field(default_factory=CurrencyConfig)
    number: NumberConfig = field(default_factory=NumberConfig)
    date_time: DateTimeConfig = field(default_factory=DateTimeConfig)
    short_month_names: tuple[str, ...] = _DEFAULT_SHORT_MONTHS
    long_month_names: tuple[str, ...] = _DEFAULT_LONG_MONTHS
    short_day_names: tuple[str, ...] = _DEFAULT_SHORT_DAYS
    long_day_names: tuple[str, ...] = _DEFAULT_LONG_DAYS

    def __post_init__(self) -> None:
        for name, expected in _NAME_LISTS.items():
            actual = len(getattr(self, name))
            if actual != expected:
                msg = f"{name} must contain {expected} names, got {actual}"
                raise ValueError(msg)


_NAME_LISTS: dict[str, int] = {
    "short_month_names": MONTHS_PER_YEAR,
    "long_month_names": MONTHS_PER_YEAR,
    "short_day_names": DAYS_PER_WEEK,
    "long_day_names": DAYS_PER_WEEK,
}

_NUMBER_TEXT_FIELDS = ("decimal_symbol", "thousand_separator", "positive_symbol", "negative_symbol")
_CURRENCY_TEXT_FIELDS = (
    "symbol",
    "name",
    "short_name",
    *_NUMBER_TEXT_FIELDS,
    "positive_format",
    "negative_format",
)
_DATE_TIME_FIELDS = tuple(name.value for name in DatePatternName)


def _section_changes(
    section: str,
    overrides: Mapping[str, Any],
    text_fields: tuple[str, ...],
    *,
    has_digits: bool,
) -> dict[str, Any]:
    """Collect valid field overrides for one config section."""
    changes: dict[str, Any] = {}
    for key in text_fields:
        if key not in overrides:
            continue
        value = overrides[key]
        if isinstance(value, str):
            changes[key] = value
        else:
            logger.warning(
                "Ignoring %s.%s override: expected string, got %s",
                section, key, type(value).__name__,
            )

    if has_digits and "fract_digits" in overrides:
        digits = overrides["fract_digits"]
        if isinstance(digits, int) and not isinstance(digits, bool) and digits >= 0:
            changes["fract_digits"] = digits
        else:
            logger.warning(
                "Ignoring %s.fract_digits override: expected non-negative integer, got %r",
                section, digits,
            )
    return changes


def _name_list(key: str, value: object, expected: int) -> tuple[str, ...] | None:
    """Validate a month/day name list override."""
    names = as_array(value)
    if names is None or len(names) != expected or not all(isinstance(n, str) for n in names):
        logger.warning("Ignoring %s override: expected %d strings", key, expected)
        return None
    return tuple(names)  # type: ignore[arg-type]


def apply_format_overrides(config: FormatConfig, overrides: object) -> FormatConfig:
    """Return a new FormatConfig with overrides applied on top of config.

    Args:
        config: Base configuration
        overrides: Mapping shaped like a locale's "_formats" entry. Anything
            else is ignored and config is returned unchanged.

    Returns:
        Updated configuration (config itself when nothing applies)

    Example:
        >>> cfg = apply_format_overrides(FormatConfig(), {"number": {"decimal_symbol": ","}})
        >>> cfg.number.decimal_symbol
        ','
    """
    formats = as_object(overrides)
    if formats is None:
        return config

    changes: dict[str, Any] = {}

    if (currency := as_object(formats.get("currency"))) is not None:
        section = _section_changes("currency", currency, _CURRENCY_TEXT_FIELDS, has_digits=True)
        if section:
            changes["currency"] = replace(config.currency, **section)

    if (number := as_object(formats.get("number"))) is not None:
        section = _section_changes("number", number, _NUMBER_TEXT_FIELDS, has_digits=True)
        if section:
            changes["number"] = replace(config.number, **section)

    if (date_time := as_object(formats.get("date_time"))) is not None:
        section = _section_changes("date_time", date_time, _DATE_TIME_FIELDS, has_digits=False)
        if section:
            changes["date_time"] = replace(config.date_time, **section)

    for key, expected in _NAME_LISTS.items():
        if key in formats:
            names = _name_list(key, formats[key], expected)
            if names is not None:
                changes[key] = names

    if not changes:
        return config
    return replace(config, **changes)
