"""FormatConfig construction from Babel's CLDR locale data.

Requires the optional Babel dependency (pip install localekit[babel]).
Nothing here is imported by the core translation pipeline, so a Babel-free
installation only fails when cldr_format_config() is actually called.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localekit.core.babel_compat import get_babel_dates, get_babel_numbers, require_babel
from localekit.formatting.config import (
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    CurrencyConfig,
    FormatConfig,
    NumberConfig,
)
from localekit.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["cldr_format_config", "currency_pattern_from_cldr"]

logger = logging.getLogger(__name__)

_CURRENCY_SIGN = "¤"
_PATTERN_DIGITS = frozenset("#0")
_FALLBACK_CURRENCY_PATTERN = "%c %p%q"


def currency_pattern_from_cldr(pattern: str) -> str:
    """Translate a CLDR currency pattern into %c/%p/%q placement.

    Only the placement of the currency sign relative to the number and the
    whitespace between them are kept; grouping and digit rules come from
    the rest of the configuration.

    Example:
        >>> currency_pattern_from_cldr("¤#,##0.00")
        '%c%p%q'
        >>> currency_pattern_from_cldr("#,##0.00\\xa0¤")
        '%p%q\\xa0%c'
    """
    positive = pattern.split(";", 1)[0]
    sign_at = positive.find(_CURRENCY_SIGN)
    digit_positions = [i for i, ch in enumerate(positive) if ch in _PATTERN_DIGITS]
    if sign_at < 0 or not digit_positions:
        return _FALLBACK_CURRENCY_PATTERN

    if sign_at < digit_positions[0]:
        gap = positive[sign_at + 1 : digit_positions[0]]
        return "%c" + "".join(ch for ch in gap if ch.isspace()) + "%p%q"
    gap = positive[digit_positions[-1] + 1 : sign_at]
    return "%p%q" + "".join(ch for ch in gap if ch.isspace()) + "%c"


def _territory(locale: Locale) -> str | None:
    if locale.territory:
        return str(locale.territory)
    from babel.core import get_global  # noqa: PLC0415

    likely: str | None = get_global("likely_subtags").get(locale.language)
    if not likely:
        return None
    parts = likely.split("_")
    return parts[-1] if len(parts) > 1 else None


def _territory_currency(locale: Locale) -> str | None:
    territory = _territory(locale)
    if territory is None:
        return None
    currencies = get_babel_numbers().get_territory_currencies(territory)
    return str(currencies[0]) if currencies else None


def cldr_format_config(locale_code: str, currency: str | None = None) -> FormatConfig:
    """Build a FormatConfig from CLDR data for a locale.

    Args:
        locale_code: Locale identifier (e.g., 'de-AT')
        currency: ISO 4217 code to use instead of the territory's currency

    Returns:
        Format configuration with CLDR symbols, currency and calendar names.
        Date/time patterns keep the library defaults.

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If Babel does not recognize the locale

    Example:
        >>> cfg = cldr_format_config("de-DE")
        >>> cfg.number.decimal_symbol, cfg.currency.symbol
        (',', '€')
    """
    require_babel("cldr_format_config")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    numbers = get_babel_numbers()
    dates = get_babel_dates()

    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        msg = f"Unknown locale for CLDR data: {locale_code!r}"
        raise ValueError(msg) from e

    decimal_symbol = numbers.get_decimal_symbol(locale)
    group_symbol = numbers.get_group_symbol(locale)
    minus_sign = numbers.get_minus_sign_symbol(locale)
    number = NumberConfig(
        decimal_symbol=decimal_symbol,
        thousand_separator=group_symbol,
        negative_symbol=minus_sign,
    )

    code = currency or _territory_currency(locale)
    if code is None:
        logger.debug("No territory currency for %s; using default currency", locale_code)
        currency_config = CurrencyConfig(
            decimal_symbol=decimal_symbol,
            thousand_separator=group_symbol,
            negative_symbol=minus_sign,
        )
    else:
        standard = locale.currency_formats.get("standard")
        placement = (
            currency_pattern_from_cldr(standard.pattern)
            if standard is not None
            else _FALLBACK_CURRENCY_PATTERN
        )
        currency_config = CurrencyConfig(
            symbol=numbers.get_currency_symbol(code, locale=locale),
            name=numbers.get_currency_name(code, locale=locale),
            short_name=code,
            decimal_symbol=decimal_symbol,
            thousand_separator=group_symbol,
            fract_digits=numbers.get_currency_precision(code),
            negative_symbol=minus_sign,
            positive_format=placement,
            negative_format=placement,
        )

    def month_names(width: str) -> tuple[str, ...]:
        names = dates.get_month_names(width, locale=locale)
        return tuple(str(names[month]) for month in range(1, MONTHS_PER_YEAR + 1))

    def day_names(width: str) -> tuple[str, ...]:
        # Babel numbers weekdays from Monday = 0; FormatConfig starts on Sunday.
        names = dates.get_day_names(width, locale=locale)
        return tuple(str(names[(day + 6) % DAYS_PER_WEEK]) for day in range(DAYS_PER_WEEK))

    return FormatConfig(
        currency=currency_config,
        number=number,
        short_month_names=month_names("abbreviated"),
        long_month_names=month_names("wide"),
        short_day_names=day_names("abbreviated"),
        long_day_names=day_names("wide"),
    )
