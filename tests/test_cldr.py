"""Tests for CLDR-derived format configurations (requires Babel)."""

from __future__ import annotations

import pytest

from localekit.core.babel_compat import BabelImportError
from localekit.formatting.cldr import cldr_format_config, currency_pattern_from_cldr
from localekit.formatting.formatters import format_number, format_price


class TestCurrencyPatternFromCldr:
    """Test CLDR currency pattern placement extraction."""

    def test_symbol_before(self) -> None:
        """A leading sign without gap."""
        assert currency_pattern_from_cldr("¤#,##0.00") == "%c%p%q"

    def test_symbol_after_with_space(self) -> None:
        """A trailing sign keeps the separating whitespace."""
        assert currency_pattern_from_cldr("#,##0.00\xa0¤") == "%p%q\xa0%c"

    def test_symbol_before_with_space(self) -> None:
        """A leading sign keeps the separating whitespace."""
        assert currency_pattern_from_cldr("¤ #,##0.00;¤ -#,##0.00") == "%c %p%q"

    def test_no_sign(self) -> None:
        """Patterns without a currency sign use the default placement."""
        assert currency_pattern_from_cldr("#,##0.00") == "%c %p%q"


class TestCldrFormatConfig:
    """Test FormatConfig construction from CLDR data."""

    def test_en_us(self) -> None:
        """US English uses dollars with a leading symbol."""
        config = cldr_format_config("en-US")
        assert config.number.decimal_symbol == "."
        assert config.number.thousand_separator == ","
        assert config.currency.short_name == "USD"
        assert config.currency.symbol == "$"
        assert format_price(1234.5, config.currency) == "$1,234.50"

    def test_de_de(self) -> None:
        """German uses comma decimals and a trailing euro sign."""
        config = cldr_format_config("de-DE")
        assert format_number(1234.5, config.number) == "1.234,50"
        assert config.currency.symbol == "€"
        assert format_price(1234.5, config.currency) == "1.234,50\xa0€"
        assert config.long_month_names[2] == "März"

    def test_day_names_start_on_sunday(self) -> None:
        """Weekday names are reordered to start with Sunday."""
        config = cldr_format_config("en")
        assert config.long_day_names[0] == "Sunday"
        assert config.short_day_names[1] == "Mon"

    def test_territory_from_likely_subtags(self) -> None:
        """A language without region uses its likely territory's currency."""
        assert cldr_format_config("de").currency.short_name == "EUR"

    def test_currency_precision(self) -> None:
        """Currency digits follow CLDR (yen has none)."""
        assert cldr_format_config("ja-JP").currency.fract_digits == 0

    def test_explicit_currency(self) -> None:
        """An explicit currency overrides the territory's."""
        config = cldr_format_config("en-US", currency="EUR")
        assert config.currency.short_name == "EUR"
        assert config.currency.symbol == "€"

    def test_unknown_locale(self) -> None:
        """Locales unknown to Babel raise ValueError."""
        with pytest.raises(ValueError, match="Unknown locale"):
            cldr_format_config("zz-ZZ")

    def test_babel_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without Babel a BabelImportError names the feature."""
        monkeypatch.setattr(
            "localekit.core.babel_compat._check_babel_available", lambda: False
        )
        with pytest.raises(BabelImportError, match="cldr_format_config"):
            cldr_format_config("en")
