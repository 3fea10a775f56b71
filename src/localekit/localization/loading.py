"""Locale data loading: JSON documents, loader protocol and fallback records.

Components:
    LocaleLoader - Protocol for fetching one locale's JSON source
    PathLocaleLoader - Disk-based loader with path-traversal prevention
    FallbackInfo - Immutable record of a locale fallback event
    parse_locale_source - JSON text to locale tree, errors as LocaleLoadError
    read_locale_file - Read and parse a UTF-8 JSON locale file

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from localekit.core.errors import LocaleLoadError
from localekit.localization.types import LocaleCode, LocaleTree, TranslationKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LocaleLoader",
    # Concrete loader
    "PathLocaleLoader",
    # Fallback observability
    "FallbackInfo",
    # Parsing helpers
    "locale_from_path",
    "parse_locale_source",
    "read_locale_file",
]

_LOCALE_PLACEHOLDER = "{locale}"


class LocaleLoader(Protocol):
    """Protocol for loading the JSON source of one locale.

    This is a Protocol (structural typing) rather than ABC so any object
    with a matching load() method can serve as a loader.

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, sources: dict[str, str]) -> None:
        ...         self.sources = sources
        ...     def load(self, locale: str) -> str:
        ...         return self.sources[locale]
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"memory:{locale}"
    """

    def load(self, locale: LocaleCode) -> str:
        """Return the JSON source for locale.

        Raises:
            FileNotFoundError: If no document exists for this locale
            OSError: If the document cannot be read
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return a human-readable location for error messages."""
        return locale


@dataclass(frozen=True, slots=True)
class PathLocaleLoader:
    """File system loader using a path template.

    The template must contain a {locale} placeholder, e.g.
    "locales/{locale}.json".

    Security:
        Locale codes containing path separators or ".." are rejected, and
        every resolved path is checked against a fixed root directory.

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Root directory for traversal checks. Defaults to the static
            prefix of base_path before the placeholder.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the template and cache the resolved root directory.

        Raises:
            ValueError: If base_path does not contain {locale}
        """
        if _LOCALE_PLACEHOLDER not in self.base_path:
            msg = f"base_path must contain '{{locale}}' placeholder, got: '{self.base_path}'"
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # "locales/{locale}.json" -> "locales"; "data/app-{locale}.json" -> "data"
            static_prefix = self.base_path.split(_LOCALE_PLACEHOLDER, 1)[0]
            if static_prefix.endswith(("/", "\\")):
                prefix_dir = Path(static_prefix.rstrip("/\\") or "/")
            else:
                prefix_dir = Path(static_prefix).parent
            resolved = prefix_dir.resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the locale-substituted path."""
        return self.base_path.replace(_LOCALE_PLACEHOLDER, locale)

    def load(self, locale: LocaleCode) -> str:
        """Read the JSON document for locale.

        Raises:
            ValueError: If locale is unsafe or the path escapes the root
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        self._validate_locale(locale)

        # replace() rather than format(): other braces in the template stay literal
        full_path = Path(self.describe_path(locale)).resolve()
        if not full_path.is_relative_to(self._resolved_root):
            msg = f"Path traversal detected: resolved path escapes root directory. locale='{locale}'"
            raise ValueError(msg)

        return full_path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Passed to the Translator's on_fallback callback when a key resolves
    from a fallback candidate instead of the first one.

    Attributes:
        requested_locale: First candidate of the fallback chain
        resolved_locale: Candidate that produced the translation
        key: Translation key that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key}: {info.resolved_locale} (wanted {info.requested_locale})")
        >>> translator = Translator(on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: TranslationKey


def locale_from_path(path: str | Path) -> LocaleCode:
    """Infer a locale code from a file name stem.

    Example:
        >>> locale_from_path("locales/pt-BR.json")
        'pt-BR'
    """
    return Path(path).stem


def parse_locale_source(
    source: str,
    *,
    locale: LocaleCode = "",
    source_path: str | None = None,
) -> LocaleTree:
    """Parse a JSON document into a locale tree.

    Raises:
        LocaleLoadError: If the JSON is malformed or its root is not an object
    """
    where = source_path or locale or "<string>"
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        msg = f"Malformed JSON in {where}: {e}"
        raise LocaleLoadError(msg, locale=locale, source_path=source_path) from e

    if not isinstance(data, dict):
        msg = f"Locale data in {where} must be a JSON object, got {type(data).__name__}"
        raise LocaleLoadError(msg, locale=locale, source_path=source_path)
    return data


def read_locale_file(path: str | Path, *, locale: LocaleCode = "") -> LocaleTree:
    """Read and parse a UTF-8 JSON locale file.

    Raises:
        LocaleLoadError: If the file cannot be read or parsed
    """
    source_path = str(path)
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read locale file {source_path}: {e}"
        raise LocaleLoadError(msg, locale=locale, source_path=source_path) from e
    return parse_locale_source(source, locale=locale, source_path=source_path)
