"""Pattern-driven rendering of numbers, currency amounts and dates.

All renderers are pure functions of (value, config). They do not consult
the process locale, so the same config always yields the same output.

Number rounding uses decimal arithmetic on the shortest repr of the value
with ROUND_HALF_UP, which rounds halves away from zero: 2.675 renders as
2.68 with two fraction digits, not the binary-float 2.67.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from localekit.constants import ISO_8601_PATTERN
from localekit.core.errors import FormattingError
from localekit.enums import DatePatternName
from localekit.formatting.config import CurrencyConfig, DateTimeConfig, FormatConfig, NumberConfig

__all__ = [
    "CalendarFields",
    "format_date",
    "format_number",
    "format_price",
    "resolve_date_pattern",
]

_GROUP_SIZE = 3


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Pre-resolved, already-localized calendar breakdown.

    No timezone conversion happens during formatting; the fields are
    rendered exactly as given.

    Attributes:
        year: Full year (e.g., 2024)
        month: Month index, 0-based (0 = January)
        day: Day of the month, 1-based
        hour: Hour 0-23
        minute: Minute 0-59
        second: Second 0-59
        weekday: Day of the week, 0 = Sunday
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    weekday: int = 0

    @classmethod
    def from_datetime(cls, value: date | datetime) -> CalendarFields:
        """Build fields from a date or datetime (time fields 0 for a date).

        Example:
            >>> CalendarFields.from_datetime(date(2024, 3, 5))
            CalendarFields(year=2024, month=2, day=5, hour=0, minute=0, second=0, weekday=2)
        """
        if isinstance(value, datetime):
            hour, minute, second = value.hour, value.minute, value.second
        else:
            hour = minute = second = 0
        return cls(
            year=value.year,
            month=value.month - 1,
            day=value.day,
            hour=hour,
            minute=minute,
            second=second,
            weekday=value.isoweekday() % 7,
        )

    @classmethod
    def now(cls) -> CalendarFields:
        """Fields for the current local time."""
        return cls.from_datetime(datetime.now().astimezone())


def _expand_tokens(pattern: str, render: Callable[[str], str | None]) -> str:
    """Expand %x tokens in pattern.

    render returns the replacement for a token letter, or None to keep the
    token verbatim. A lone trailing '%' is kept as is.
    """
    parts: list[str] = []
    pos = 0
    while (found := pattern.find("%", pos)) >= 0:
        parts.append(pattern[pos:found])
        if found + 1 >= len(pattern):
            parts.append("%")
            pos = len(pattern)
            break
        token = pattern[found + 1]
        replacement = render(token)
        parts.append(f"%{token}" if replacement is None else replacement)
        pos = found + 2
    parts.append(pattern[pos:])
    return "".join(parts)


def _group_thousands(digits: str, separator: str) -> str:
    head = len(digits) % _GROUP_SIZE or _GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i : i + _GROUP_SIZE] for i in range(head, len(digits), _GROUP_SIZE))
    return separator.join(groups)


def format_number(value: int | float | Decimal, config: NumberConfig | None = None) -> str:
    """Render a number with grouping, fixed fraction digits and sign.

    Args:
        value: Number to render
        config: Number conventions (library defaults when None)

    Returns:
        Formatted number

    Raises:
        FormattingError: If value is NaN or infinite

    Examples:
        >>> format_number(1234.5)
        '1 234.50'
        >>> format_number(-5)
        '-5.00'
        >>> format_number(1234567.891, NumberConfig(",", ".", 1))
        '1.234.567,9'
    """
    if config is None:
        config = NumberConfig()

    magnitude = Decimal(str(abs(value)))
    if not magnitude.is_finite():
        msg = f"Cannot format non-finite number: {value!r}"
        raise FormattingError(msg, value)

    digits = config.fract_digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, magnitude.adjusted() + digits + 2)
        rounded = magnitude.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)

    integer_part, _, fraction = format(rounded, "f").partition(".")
    result = _group_thousands(integer_part, config.thousand_separator)
    if digits > 0:
        result += config.decimal_symbol + fraction.ljust(digits, "0")

    if value < 0:
        return config.negative_symbol + result
    return config.positive_symbol + result


def format_price(value: int | float | Decimal, config: CurrencyConfig | None = None) -> str:
    """Render a currency amount through the currency's format pattern.

    Tokens: %q formatted amount, %c currency symbol, %p empty (the sign is
    already part of the amount). Unknown tokens and a trailing '%' are kept.

    Raises:
        FormattingError: If value is NaN or infinite

    Example:
        >>> format_price(10)
        'XXX 10.00'
        >>> format_price(-3.5, CurrencyConfig(symbol="€", negative_format="%p%q %c"))
        '-3.50 €'
    """
    if config is None:
        config = CurrencyConfig()

    amount = format_number(value, config.number_config())
    pattern = config.negative_format if value < 0 else config.positive_format
    tokens: Mapping[str, str] = {"q": amount, "c": config.symbol, "p": ""}
    return _expand_tokens(pattern, tokens.get)


def resolve_date_pattern(pattern: str | None, date_time: DateTimeConfig) -> str:
    """Map a named alias to its configured pattern.

    Known alias names resolve through date_time; any other non-empty string
    is used as a literal pattern; None or "" selects ISO-8601.

    Example:
        >>> resolve_date_pattern("short_time", DateTimeConfig())
        '%H:%M'
        >>> resolve_date_pattern(None, DateTimeConfig())
        '%Y-%m-%dT%H:%M:%S'
    """
    if not pattern:
        return ISO_8601_PATTERN
    if pattern in DatePatternName:
        return date_time.pattern(DatePatternName(pattern))
    return pattern


def _name_at(names: Sequence[str], index: int) -> str:
    return names[index] if 0 <= index < len(names) else ""


def format_date(
    pattern: str | None = None,
    fields: CalendarFields | date | datetime | None = None,
    config: FormatConfig | None = None,
) -> str:
    """Render calendar fields through a date/time pattern.

    Tokens:
        %H hour, %M or %i minute, %S or %s second, %d day, %m month (1-based),
        all two digits; %Y four-digit year; %l / %a full / short weekday name;
        %F / %b full / short month name. Out-of-range name indices render as
        nothing. Unknown tokens and a trailing '%' are kept verbatim.

    Args:
        pattern: Alias name (e.g., 'short_date'), literal pattern, or None
        fields: Calendar breakdown, date or datetime; None for now
        config: Format configuration (library defaults when None)

    Example:
        >>> format_date("%l, %F %d %Y", CalendarFields(2024, 2, 5, weekday=2))
        'Tuesday, March 05 2024'
    """
    if config is None:
        config = FormatConfig()
    match fields:
        case None:
            fields = CalendarFields.now()
        case date():
            fields = CalendarFields.from_datetime(fields)

    minute = f"{fields.minute:02d}"
    second = f"{fields.second:02d}"
    tokens: Mapping[str, str] = {
        "H": f"{fields.hour:02d}",
        "M": minute,
        "i": minute,
        "S": second,
        "s": second,
        "d": f"{fields.day:02d}",
        "m": f"{fields.month + 1:02d}",
        "Y": f"{fields.year:04d}",
        "l": _name_at(config.long_day_names, fields.weekday),
        "a": _name_at(config.short_day_names, fields.weekday),
        "F": _name_at(config.long_month_names, fields.month),
        "b": _name_at(config.short_month_names, fields.month),
    }
    return _expand_tokens(resolve_date_pattern(pattern, config.date_time), tokens.get)
