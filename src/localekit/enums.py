"""Enumerations for localekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category label.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    Members compare equal to their plain-string labels, so they can be used
    directly as keys into plural objects.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class PluralFamily(StrEnum):
    """Plural rule family shared by a group of languages.

    StrEnum provides automatic string conversion: str(PluralFamily.SLAVIC) == "slavic"
    """

    ONE_OTHER = "one-other"
    """English-like: one for exactly 1, other otherwise."""

    SLAVIC = "slavic"
    """Russian, Ukrainian, Belarusian, Serbo-Croatian family."""

    POLISH = "polish"
    """Polish: one, few, many."""

    CZECH_SLOVAK = "czech-slovak"
    """Czech and Slovak: one, few (2-4), other."""

    FRENCH = "french"
    """French-like: one for 0 and 1."""

    ARABIC = "arabic"
    """Arabic: all six categories."""


class DatePatternName(StrEnum):
    """Named date/time pattern aliases resolved through DateTimeConfig.

    StrEnum provides automatic string conversion: str(DatePatternName.SHORT_DATE) == "short_date"
    Values match the DateTimeConfig field names and the keys accepted in the
    ``date_time`` section of format overrides.
    """

    LONG_TIME = "long_time"
    SHORT_TIME = "short_time"
    LONG_DATE = "long_date"
    SHORT_DATE = "short_date"
    LONG_DATE_TIME = "long_date_time"
    SHORT_DATE_TIME = "short_date_time"


__all__ = [
    "DatePatternName",
    "PluralCategory",
    "PluralFamily",
]
