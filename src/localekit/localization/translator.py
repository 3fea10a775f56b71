"""Translator: active locale state, locale data and fallback resolution.

The Translator owns everything stateful in localekit: the ordered active
locales, the global fallback locale, the per-locale translation trees, the
per-locale format configurations and the effective FormatConfig. All
resolution work is delegated to the pure runtime and formatting layers.

Resolution walks the fallback chain (every ancestor of every requested
locale, then the fallback locale) and returns the first non-empty result.
Misses never raise: the tree API returns its "default" parameter or the key,
the positional APIs return the key.

A Translator is not safe for concurrent mutation. Hosts that share one
instance across threads serialize load/set/configure calls against reads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import TypeAlias

from localekit.constants import DEFAULT_FALLBACK_LOCALE, FORMATS_KEY
from localekit.core.errors import LocaleLoadError
from localekit.formatting.cldr import cldr_format_config
from localekit.formatting.config import FormatConfig, apply_format_overrides
from localekit.formatting.formatters import (
    CalendarFields,
    format_date,
    format_number,
    format_price,
)
from localekit.locale_utils import resolve_fallbacks
from localekit.localization.loading import (
    FallbackInfo,
    LocaleLoader,
    locale_from_path,
    parse_locale_source,
    read_locale_file,
)
from localekit.localization.types import (
    LocaleCode,
    LocaleDataset,
    LocaleTree,
    TranslationKey,
)
from localekit.runtime.interpolation import interpolate
from localekit.runtime.lookup import lookup
from localekit.runtime.resolver import (
    resolve_node,
    resolve_node_plural,
    resolve_node_positional,
)
from localekit.runtime.value_types import TreeValue, as_array, as_object, to_text

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

# Tree API parameters with special meaning
_LOCALE_PARAM = "locale"
_DEFAULT_PARAM = "default"

_Renderer: TypeAlias = Callable[[TreeValue, LocaleCode], str]


def _flatten_leaves(
    node: Mapping[str, TreeValue], prefix: tuple[str, ...] = ()
) -> Iterable[tuple[tuple[str, ...], TreeValue]]:
    """Yield (path, leaf) for every string or array leaf below node.

    Nested _formats entries are skipped.
    """
    for key, value in node.items():
        if key == FORMATS_KEY:
            continue
        path = (*prefix, key)
        if isinstance(value, str) or as_array(value) is not None:
            yield path, value
        elif (child := as_object(value)) is not None:
            yield from _flatten_leaves(child, path)


def _own_tree(node: Mapping[str, TreeValue]) -> LocaleTree:
    """Copy every object level of node into plain dicts owned by the Translator."""
    return {
        key: _own_tree(child) if (child := as_object(value)) is not None else value
        for key, value in node.items()
    }


def _merge_leaf(tree: LocaleTree, path: tuple[str, ...], leaf: TreeValue) -> None:
    """Write leaf at path, creating or replacing intermediate objects."""
    node = tree
    for segment in path[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = node[segment] = {}
        node = child
    node[path[-1]] = leaf


class Translator:
    """Translation and locale-aware formatting with fallback chains.

    Example:
        >>> translator = Translator("en-US")
        >>> translator.load({"en": {"greeting": "Hello, %{name}!"}})
        >>> translator.translate("greeting", {"name": "Anna"})
        'Hello, Anna!'
        >>> translator.tr("greeting")
        'Hello, %{name}!'

    Args:
        locales: Active locale or locales, most preferred first
        fallback_locale: Locale appended to every fallback chain
        on_fallback: Optional callback invoked when a key resolves from a
            candidate other than the first one in the chain
    """

    __slots__ = (
        "_config",
        "_data",
        "_fallback_locale",
        "_formats",
        "_locales",
        "_on_fallback",
    )

    def __init__(
        self,
        locales: LocaleCode | Iterable[LocaleCode] = (),
        *,
        fallback_locale: LocaleCode = DEFAULT_FALLBACK_LOCALE,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        self._on_fallback = on_fallback
        self._locales: tuple[LocaleCode, ...] = ()
        self._fallback_locale = fallback_locale
        self._data: LocaleDataset = {}
        self._formats: dict[LocaleCode, FormatConfig] = {}
        self._config = FormatConfig()
        self.set_locale(locales)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> Translator(["lv", "en"])
            Translator(locales=('lv', 'en'), fallback='en', loaded=0)
        """
        return (
            f"Translator(locales={self._locales!r}, "
            f"fallback={self._fallback_locale!r}, loaded={len(self._data)})"
        )

    # ------------------------------------------------------------------
    # Active state
    # ------------------------------------------------------------------

    @property
    def locale(self) -> LocaleCode:
        """Most preferred active locale, or "" when none is set."""
        return self._locales[0] if self._locales else ""

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Active locales, most preferred first."""
        return self._locales

    @property
    def fallback_locale(self) -> LocaleCode:
        """Global fallback locale ("" when disabled)."""
        return self._fallback_locale

    @property
    def config(self) -> FormatConfig:
        """Effective format configuration."""
        return self._config

    @property
    def loaded_locales(self) -> tuple[LocaleCode, ...]:
        """Locales with translation data, in load order."""
        return tuple(self._data)

    def set_locale(self, locales: LocaleCode | Iterable[LocaleCode]) -> None:
        """Replace the active locales.

        The effective format configuration switches to the configuration
        registered for the first locale, if any; otherwise it is kept.

        Args:
            locales: One locale code or locale codes, most preferred first
        """
        if isinstance(locales, str):
            self._locales = (locales,)
        else:
            self._locales = tuple(locales)

        if self._locales and (config := self._formats.get(self._locales[0])) is not None:
            self._config = config
        logger.debug("Active locales set to %s", self._locales)

    def set_fallback_locale(self, locale: LocaleCode) -> None:
        """Set the global fallback locale; "" disables it."""
        self._fallback_locale = locale
        logger.debug("Fallback locale set to %r", locale)

    def fallback_chain(self, *extra: LocaleCode) -> tuple[LocaleCode, ...]:
        """Return the candidate locales tried by every lookup.

        Args:
            *extra: Locales to try ahead of the active locales

        Example:
            >>> Translator(["de-AT", "fr-CA"]).fallback_chain()
            ('de-AT', 'de', 'fr-CA', 'fr', 'en')
        """
        return resolve_fallbacks((*extra, *self._locales), self._fallback_locale)

    def reset(self) -> None:
        """Clear locales, data and format configs; restore all defaults."""
        self._locales = ()
        self._data.clear()
        self._formats.clear()
        self._config = FormatConfig()
        self._fallback_locale = DEFAULT_FALLBACK_LOCALE
        logger.debug("Translator reset")

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _register_formats(self, locale: LocaleCode, overrides: object) -> None:
        if as_object(overrides) is None:
            logger.warning(
                "Ignoring %s for %s: expected object, got %s",
                FORMATS_KEY, locale, type(overrides).__name__,
            )
            return
        self.register_format_config(locale, apply_format_overrides(FormatConfig(), overrides))

    def register_format_config(self, locale: LocaleCode, config: FormatConfig) -> None:
        """Register the format configuration of a locale.

        Becomes the effective configuration at once when locale is the most
        preferred active locale.
        """
        self._formats[locale] = config
        if self._locales and self._locales[0] == locale:
            self._config = config
        logger.debug("Registered format configuration for %s", locale)

    def register_cldr_formats(
        self, locale: LocaleCode, currency: str | None = None
    ) -> FormatConfig:
        """Register a CLDR-derived format configuration for a locale.

        Raises:
            BabelImportError: If Babel is not installed
            ValueError: If Babel does not recognize the locale
        """
        config = cldr_format_config(locale, currency)
        self.register_format_config(locale, config)
        return config

    def load_locale_data(self, locale: LocaleCode, tree: Mapping[str, TreeValue]) -> None:
        """Replace one locale's translation tree.

        A top-level _formats entry is removed from the tree and registered as
        the locale's format overrides.

        Raises:
            LocaleLoadError: If tree is not an object
        """
        if as_object(tree) is None:
            msg = f"Locale data for {locale!r} must be an object, got {type(tree).__name__}"
            raise LocaleLoadError(msg, locale=locale)

        data = _own_tree(tree)
        overrides = data.pop(FORMATS_KEY, None)
        self._data[locale] = data
        if overrides is not None:
            self._register_formats(locale, overrides)
        logger.info("Loaded locale data for %s (%d top-level keys)", locale, len(data))

    def load(self, data: Mapping[str, TreeValue]) -> None:
        """Merge translations for several locales.

        data maps locale codes to trees. String and array leaves are written
        at their dotted path in the locale's tree (last write wins); other
        leaf types are dropped. A locale-level _formats entry registers the
        locale's format overrides; nested _formats entries are skipped.

        Raises:
            LocaleLoadError: If data or any locale entry is not an object.
                Nothing is merged in that case.
        """
        locales = as_object(data)
        if locales is None:
            msg = f"Translation data must be an object, got {type(data).__name__}"
            raise LocaleLoadError(msg)
        for locale, tree in locales.items():
            if as_object(tree) is None:
                msg = f"Locale data for {locale!r} must be an object, got {type(tree).__name__}"
                raise LocaleLoadError(msg, locale=locale)

        for locale, tree in locales.items():
            entries: Mapping[str, TreeValue] = tree  # type: ignore[assignment]
            target = self._data.setdefault(locale, {})
            count = 0
            for path, leaf in _flatten_leaves(entries):
                _merge_leaf(target, path, leaf)
                count += 1
            if FORMATS_KEY in entries:
                self._register_formats(locale, entries[FORMATS_KEY])
            logger.info("Merged %d translations into %s", count, locale)

    def load_locale(self, locale: LocaleCode, path: str | Path) -> None:
        """Load a UTF-8 JSON file as one locale's tree.

        Raises:
            LocaleLoadError: If the file cannot be read or parsed
        """
        self.load_locale_data(locale, read_locale_file(path, locale=locale))

    def load_locale_from_file(self, path: str | Path) -> LocaleCode:
        """Load a JSON file, taking the locale code from its file name.

        Returns:
            The inferred locale code (e.g., 'pt-BR' for 'pt-BR.json')

        Raises:
            LocaleLoadError: If no locale can be inferred or loading fails
        """
        locale = locale_from_path(path)
        if not locale:
            msg = f"Cannot infer locale from file name: {path}"
            raise LocaleLoadError(msg, source_path=str(path))
        self.load_locale(locale, path)
        return locale

    def load_from(
        self, loader: LocaleLoader, locales: Iterable[LocaleCode]
    ) -> tuple[LocaleCode, ...]:
        """Load several locales through a loader.

        Locales the loader cannot find are skipped. Every document is read
        and parsed before any of them is stored.

        Returns:
            Locales that were loaded, in request order

        Raises:
            LocaleLoadError: If a document exists but cannot be read or parsed
        """
        trees: dict[LocaleCode, LocaleTree] = {}
        for locale in locales:
            source_path = loader.describe_path(locale)
            try:
                source = loader.load(locale)
            except FileNotFoundError:
                logger.debug("No locale data for %s at %s", locale, source_path)
                continue
            except (OSError, ValueError) as e:
                msg = f"Cannot load locale {locale!r} from {source_path}: {e}"
                raise LocaleLoadError(msg, locale=locale, source_path=source_path) from e
            trees[locale] = parse_locale_source(source, locale=locale, source_path=source_path)

        for locale, tree in trees.items():
            self.load_locale_data(locale, tree)
        return tuple(trees)

    # ------------------------------------------------------------------
    # Lookup and translation
    # ------------------------------------------------------------------

    def lookup(self, key: TranslationKey, locale: LocaleCode) -> TreeValue | None:
        """Return the raw node for key in one locale, or None."""
        if not key or not locale:
            return None
        tree = self._data.get(locale)
        if tree is None:
            return None
        return lookup(tree, key)

    def key_exists(self, key: TranslationKey) -> bool:
        """Check whether any fallback candidate has a node for key.

        Always False when no locale is active. Never raises.
        """
        if not self._locales:
            return False
        try:
            return any(self.lookup(key, locale) is not None for locale in self.fallback_chain())
        except Exception:  # pylint: disable=broad-exception-caught
            logger.debug("Key check failed for %r", key, exc_info=True)
            return False

    def _first_translation(
        self,
        key: TranslationKey,
        candidates: tuple[LocaleCode, ...],
        render: _Renderer,
    ) -> str | None:
        """Render key in each candidate; return the first non-empty result."""
        for locale in candidates:
            node = self.lookup(key, locale)
            if node is None:
                continue
            result = render(node, locale)
            if not result:
                continue

            requested = candidates[0]
            if locale != requested:
                logger.debug("Resolved %r from %s (requested %s)", key, locale, requested)
                if self._on_fallback is not None:
                    self._on_fallback(
                        FallbackInfo(requested_locale=requested, resolved_locale=locale, key=key)
                    )
            return result

        logger.debug("Translation %r not found in %s", key, candidates)
        return None

    def translate(
        self,
        key: TranslationKey,
        params: Mapping[str, TreeValue] | None = None,
    ) -> str:
        """Translate key with named parameters.

        Special parameters:
            locale: locale code tried ahead of the active locales
            count: switches object nodes to plural selection
            default: template returned (interpolated) when key is missing

        Example:
            >>> t = Translator("en")
            >>> t.load({"en": {"files": {"one": "%{count} file", "other": "%{count} files"}}})
            >>> t.translate("files", {"count": 3})
            '3 files'
            >>> t.translate("missing", {"default": "n/a"})
            'n/a'
        """
        if not key:
            return ""
        fields = as_object(params) or {}

        requested = fields.get(_LOCALE_PARAM)
        extra = (requested,) if isinstance(requested, str) else ()
        result = self._first_translation(
            key,
            self.fallback_chain(*extra),
            lambda node, locale: resolve_node(node, locale, fields),
        )
        if result is not None:
            return result

        default = fields.get(_DEFAULT_PARAM)
        if isinstance(default, str):
            return interpolate(default, fields)
        return key

    def tr_list(self, key: TranslationKey, params: Iterable[TreeValue] = ()) -> str:
        """Translate key with positional parameters given as a sequence."""
        if not key:
            return ""
        texts = [to_text(param) for param in params]
        result = self._first_translation(
            key,
            self.fallback_chain(),
            lambda node, _locale: resolve_node_positional(node, texts),
        )
        return key if result is None else result

    def tr(self, key: TranslationKey, *params: TreeValue) -> str:
        """Translate key with positional parameters.

        Example:
            >>> t = Translator("en")
            >>> t.load({"en": {"pair": "{1} and {0}"}})
            >>> t.tr("pair", "salt", "pepper")
            'pepper and salt'
        """
        return self.tr_list(key, params)

    def tr_plural_list(
        self,
        key: TranslationKey,
        count: int,
        params: Iterable[TreeValue] = (),
    ) -> str:
        """Plural translation with positional parameters given as a sequence."""
        if not key:
            return ""
        texts = [to_text(param) for param in params]
        result = self._first_translation(
            key,
            self.fallback_chain(),
            lambda node, locale: resolve_node_plural(node, locale, count, texts),
        )
        return key if result is None else result

    def tr_plural(self, key: TranslationKey, count: int, *params: TreeValue) -> str:
        """Plural translation; count is also positional parameter 0.

        Example:
            >>> t = Translator("en")
            >>> t.load({"en": {"greeting": {"one": "Hello, friend!",
            ...                             "other": "Hello, {} friends!"}}})
            >>> t.tr_plural("greeting", 3)
            'Hello, 3 friends!'
        """
        return self.tr_plural_list(key, count, params)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def configure(self, overrides: Mapping[str, TreeValue]) -> FormatConfig:
        """Apply _formats-shaped overrides to the effective configuration.

        Registered per-locale configurations are not changed.

        Returns:
            The new effective configuration
        """
        self._config = apply_format_overrides(self._config, overrides)
        return self._config

    def format_number(self, value: int | float | Decimal) -> str:
        """Format a number with the effective number conventions."""
        return format_number(value, self._config.number)

    def format_price(self, value: int | float | Decimal) -> str:
        """Format a currency amount with the effective currency conventions."""
        return format_price(value, self._config.currency)

    def format_date(
        self,
        pattern: str | None = None,
        fields: CalendarFields | date | datetime | None = None,
    ) -> str:
        """Format a date/time; pattern may be an alias such as 'short_date'."""
        return format_date(pattern, fields, self._config)

