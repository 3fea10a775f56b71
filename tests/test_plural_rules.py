"""Tests for the fixed-table plural rule engine."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localekit.enums import PluralCategory, PluralFamily
from localekit.runtime.plural_rules import plural_family, select_plural_category

counts = st.integers(min_value=0, max_value=1_000_000)


class TestPluralFamily:
    """Test language root to family mapping."""

    @pytest.mark.parametrize(
        ("locale", "family"),
        [
            ("en", PluralFamily.ONE_OTHER),
            ("de-AT", PluralFamily.ONE_OTHER),
            ("ru", PluralFamily.SLAVIC),
            ("uk-UA", PluralFamily.SLAVIC),
            ("sh", PluralFamily.SLAVIC),
            ("pl", PluralFamily.POLISH),
            ("cs", PluralFamily.CZECH_SLOVAK),
            ("sk-SK", PluralFamily.CZECH_SLOVAK),
            ("fr-CA", PluralFamily.FRENCH),
            ("kab", PluralFamily.FRENCH),
            ("ar-EG", PluralFamily.ARABIC),
        ],
    )
    def test_known_roots(self, locale: str, family: PluralFamily) -> None:
        """Known roots map to their family regardless of region."""
        assert plural_family(locale) == family

    def test_unknown_root_is_one_other(self) -> None:
        """Unknown languages use the English-like rule."""
        assert plural_family("ja-JP") == PluralFamily.ONE_OTHER

    def test_root_comparison_is_case_sensitive(self) -> None:
        """Roots are matched exactly; 'RU' is not 'ru'."""
        assert plural_family("RU") == PluralFamily.ONE_OTHER


class TestSelectPluralCategory:
    """Test category selection per family."""

    @pytest.mark.parametrize(
        ("n", "locale", "expected"),
        [
            (1, "en", "one"),
            (0, "en", "other"),
            (2, "en", "other"),
            (21, "ru", "one"),
            (11, "ru", "many"),
            (22, "ru", "few"),
            (12, "ru", "many"),
            (25, "ru", "many"),
            (111, "ru", "many"),
            (1, "pl", "one"),
            (3, "pl", "few"),
            (13, "pl", "many"),
            (21, "pl", "many"),
            (3, "cs", "few"),
            (5, "cs", "other"),
            (0, "fr", "one"),
            (1, "fr", "one"),
            (2, "fr", "other"),
            (0, "ar", "zero"),
            (1, "ar", "one"),
            (2, "ar", "two"),
            (5, "ar", "few"),
            (110, "ar", "few"),
            (11, "ar", "many"),
            (100, "ar", "other"),
            (102, "ar", "other"),
        ],
    )
    def test_table(self, n: int, locale: str, expected: str) -> None:
        """Categories follow the family rules."""
        assert select_plural_category(n, locale) == expected

    def test_returns_plural_category(self) -> None:
        """The result is a PluralCategory usable as a plain string key."""
        result = select_plural_category(1, "en")
        assert result is PluralCategory.ONE
        assert {"one": "x"}[result] == "x"

    def test_negative_count_uses_python_modulo(self) -> None:
        """-1 behaves like 99 under n % 100 and 9 under n % 10."""
        assert select_plural_category(-1, "ru") == "many"
        assert select_plural_category(-1, "ar") == "many"
        assert select_plural_category(-1, "en") == "other"

    @given(n=counts)
    def test_one_other_family(self, n: int) -> None:
        """English-like locales only ever yield one or other."""
        expected = "one" if n == 1 else "other"
        assert select_plural_category(n, "de") == expected

    @given(n=counts)
    def test_slavic_never_zero_or_two(self, n: int) -> None:
        """Slavic rules never produce zero or two."""
        assert select_plural_category(n, "ru") not in ("zero", "two")

    @given(n=counts)
    def test_slavic_periodic_in_100(self, n: int) -> None:
        """Slavic categories depend only on n % 100."""
        assert select_plural_category(n, "uk") == select_plural_category(n % 100 + 100, "uk")

    @given(n=st.integers(min_value=2, max_value=1_000_000))
    def test_polish_has_no_other_above_one(self, n: int) -> None:
        """Polish counts above 1 are few or many."""
        assert select_plural_category(n, "pl") in ("few", "many")

    @given(n=counts, locale=st.sampled_from(["en", "ru", "pl", "cs", "fr", "ar", "zz"]))
    def test_always_valid_category(self, n: int, locale: str) -> None:
        """Every result is a CLDR category."""
        assert select_plural_category(n, locale) in set(PluralCategory)
