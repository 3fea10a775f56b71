"""Stateful localization layer: the Translator and its locale data loading.

Submodules:
    types      - PEP 695 type aliases (LocaleCode, TranslationKey, LocaleTree)
    loading    - LocaleLoader protocol, PathLocaleLoader, FallbackInfo,
                 JSON parsing helpers
    translator - Translator (active locales, fallback chains, formatting)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localekit.localization.loading import (
    FallbackInfo,
    LocaleLoader,
    PathLocaleLoader,
    locale_from_path,
    parse_locale_source,
    read_locale_file,
)
from localekit.localization.translator import Translator
from localekit.localization.types import (
    LocaleCode,
    LocaleDataset,
    LocaleTree,
    TranslationKey,
)

__all__ = [
    # Main entry point
    "Translator",
    # Loader protocol and implementations
    "LocaleLoader",
    "PathLocaleLoader",
    "locale_from_path",
    "parse_locale_source",
    "read_locale_file",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "LocaleCode",
    "LocaleDataset",
    "LocaleTree",
    "TranslationKey",
]
