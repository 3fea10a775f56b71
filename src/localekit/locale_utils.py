"""Locale utilities: ancestry, fallback chains and Babel conversion.

Locale identifiers are hyphen-delimited specificity tags (en, en-US, en-US-NY).
They are compared case-sensitively, by exact string; no normalization is
applied for fallback purposes. normalize_locale() exists only for handing
identifiers to Babel, which expects POSIX underscores.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import TYPE_CHECKING

from localekit.constants import LOCALE_SEPARATOR

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_ancestry",
    "locale_root",
    "normalize_locale",
    "resolve_fallbacks",
]


def locale_root(locale: str) -> str:
    """Return the language part of a locale identifier.

    Example:
        >>> locale_root("pt-BR")
        'pt'
        >>> locale_root("kab")
        'kab'
    """
    return locale.split(LOCALE_SEPARATOR, 1)[0]


def locale_ancestry(locale: str) -> tuple[str, ...]:
    """Return every prefix of a locale identifier, most specific first.

    Example:
        >>> locale_ancestry("en-US-NY")
        ('en-US-NY', 'en-US', 'en')
        >>> locale_ancestry("fr")
        ('fr',)
        >>> locale_ancestry("")
        ()
    """
    if not locale:
        return ()
    parts = locale.split(LOCALE_SEPARATOR)
    return tuple(
        LOCALE_SEPARATOR.join(parts[:end]) for end in range(len(parts), 0, -1)
    )


def resolve_fallbacks(
    requested: Iterable[str],
    fallback_locale: str = "",
) -> tuple[str, ...]:
    """Build the ordered candidate list used for every lookup.

    Concatenates the ancestry of each requested locale in order, skipping
    identifiers already emitted, then appends the fallback locale when it is
    non-empty and not yet present.

    Args:
        requested: Locale identifiers, most preferred first
        fallback_locale: Global fallback appended last (empty to disable)

    Returns:
        De-duplicated candidates, most specific first

    Example:
        >>> resolve_fallbacks(["de-AT", "fr-CA"], "en")
        ('de-AT', 'de', 'fr-CA', 'fr', 'en')
        >>> resolve_fallbacks(["en-GB"], "en")
        ('en-GB', 'en')
    """
    # dict.fromkeys() removes duplicates while maintaining insertion order
    candidates = dict.fromkeys(
        ancestor for locale in requested for ancestor in locale_ancestry(locale)
    )
    if fallback_locale:
        candidates.setdefault(fallback_locale)
    return tuple(candidates)


def normalize_locale(locale_code: str) -> str:
    """Convert a hyphenated locale identifier to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace(LOCALE_SEPARATOR, "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale identifier (hyphen or underscore form)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    from localekit.core.babel_compat import get_locale_class  # noqa: PLC0415

    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))
