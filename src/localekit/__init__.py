"""localekit - translation resolution and locale-aware formatting.

Resolves translation keys against hierarchical per-locale data with locale
fallback chains, plural and variant selection, and three template syntaxes
(%{name}, %<name>.fmt and positional {N}/{}). Renders numbers, currency
amounts and dates from per-locale format configurations.

Public API:
    Translator - Active locales, locale data, translation and formatting
    FormatConfig - Per-locale number, currency and date conventions
    CalendarFields - Calendar breakdown accepted by format_date
    PluralCategory - CLDR plural category names
    select_plural_category - Plural category of a count in a locale

Exceptions:
    LocaleKitError - Base exception class
    LocaleLoadError - Locale data could not be loaded
    FormattingError - Value could not be formatted
    BabelImportError - Optional Babel dependency missing

Submodules:
    localekit.runtime - Pure resolution pipeline (lookup, plurals, interpolation)
    localekit.formatting - Format configuration and renderers
    localekit.localization - Translator, loaders and type aliases
"""

from .core import BabelImportError, FormattingError, LocaleKitError, LocaleLoadError
from .enums import DatePatternName, PluralCategory, PluralFamily
from .formatting import (
    CalendarFields,
    CurrencyConfig,
    DateTimeConfig,
    FormatConfig,
    NumberConfig,
)
from .localization import FallbackInfo, PathLocaleLoader, Translator
from .runtime import select_plural_category

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localekit")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "CalendarFields",
    "CurrencyConfig",
    "DatePatternName",
    "DateTimeConfig",
    "FallbackInfo",
    "FormatConfig",
    "FormattingError",
    "LocaleKitError",
    "LocaleLoadError",
    "NumberConfig",
    "PathLocaleLoader",
    "PluralCategory",
    "PluralFamily",
    "Translator",
    "__version__",
    "select_plural_category",
]
