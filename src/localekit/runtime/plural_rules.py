"""Plural category selection from a fixed table of locale families.

Each language root maps to one rule family; unknown roots use the
English-like one/other rule. The rules operate on integer counts.

Negative counts are passed to the modulo-based rules as-is. Python's % always
yields a non-negative residue for a positive modulus, so -1 behaves like 99
under n % 100 and like 9 under n % 10; no sign correction is applied.

Python 3.13+. Zero external dependencies.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Callable
from types import MappingProxyType

from localekit.enums import PluralCategory, PluralFamily
from localekit.locale_utils import locale_root

__all__ = ["plural_family", "select_plural_category"]

_FAMILY_BY_ROOT: MappingProxyType[str, PluralFamily] = MappingProxyType({
    **dict.fromkeys(
        (
            "en", "de", "nl", "sv", "da", "no", "nb", "nn", "fo",
            "es", "pt", "it", "bg", "el", "fi", "et", "he", "eo",
        ),
        PluralFamily.ONE_OTHER,
    ),
    **dict.fromkeys(("ru", "uk", "be", "hr", "sr", "bs", "sh"), PluralFamily.SLAVIC),
    "pl": PluralFamily.POLISH,
    **dict.fromkeys(("cs", "sk"), PluralFamily.CZECH_SLOVAK),
    **dict.fromkeys(("fr", "ff", "kab"), PluralFamily.FRENCH),
    "ar": PluralFamily.ARABIC,
})


def _one_other(n: int) -> PluralCategory:
    return PluralCategory.ONE if n == 1 else PluralCategory.OTHER


def _slavic(n: int) -> PluralCategory:
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and mod100 != 11:
        return PluralCategory.ONE
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return PluralCategory.FEW
    if mod10 == 0 or 5 <= mod10 <= 9 or 11 <= mod100 <= 14:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _polish(n: int) -> PluralCategory:
    if n == 1:
        return PluralCategory.ONE
    mod10 = n % 10
    mod100 = n % 100
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return PluralCategory.FEW
    return PluralCategory.MANY


def _czech_slovak(n: int) -> PluralCategory:
    if n == 1:
        return PluralCategory.ONE
    if 2 <= n <= 4:
        return PluralCategory.FEW
    return PluralCategory.OTHER


def _french(n: int) -> PluralCategory:
    return PluralCategory.ONE if n < 2 else PluralCategory.OTHER


def _arabic(n: int) -> PluralCategory:
    match n:
        case 0:
            return PluralCategory.ZERO
        case 1:
            return PluralCategory.ONE
        case 2:
            return PluralCategory.TWO
    mod100 = n % 100
    if 3 <= mod100 <= 10:
        return PluralCategory.FEW
    if 11 <= mod100 <= 99:
        return PluralCategory.MANY
    return PluralCategory.OTHER


_RULES: MappingProxyType[PluralFamily, Callable[[int], PluralCategory]] = MappingProxyType({
    PluralFamily.ONE_OTHER: _one_other,
    PluralFamily.SLAVIC: _slavic,
    PluralFamily.POLISH: _polish,
    PluralFamily.CZECH_SLOVAK: _czech_slovak,
    PluralFamily.FRENCH: _french,
    PluralFamily.ARABIC: _arabic,
})


def plural_family(locale: str) -> PluralFamily:
    """Return the rule family for a locale's language root.

    Example:
        >>> plural_family("uk-UA")
        <PluralFamily.SLAVIC: 'slavic'>
        >>> plural_family("ja")
        <PluralFamily.ONE_OTHER: 'one-other'>
    """
    return _FAMILY_BY_ROOT.get(locale_root(locale), PluralFamily.ONE_OTHER)


def select_plural_category(n: int, locale: str) -> PluralCategory:
    """Select the plural category for an integer count.

    Args:
        n: Count to categorize
        locale: Locale identifier; only the root before the first '-' matters

    Returns:
        Plural category: zero, one, two, few, many or other

    Examples:
        >>> select_plural_category(21, "ru")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(22, "ru-RU")
        <PluralCategory.FEW: 'few'>
        >>> select_plural_category(0, "fr")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(2, "ar")
        <PluralCategory.TWO: 'two'>
    """
    return _RULES[plural_family(locale)](n)
