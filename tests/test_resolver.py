"""Tests for node dispatch: plural, variant, array and unsupported nodes."""

from __future__ import annotations

import pytest

from localekit.constants import (
    SENTINEL_PLURAL_MISSING_FORM,
    SENTINEL_PLURAL_NOT_OBJECT,
    SENTINEL_UNSUPPORTED_TYPE,
    SENTINEL_VARIANT_NO_MATCH,
    SENTINEL_VARIANT_NOT_OBJECT,
)
from localekit.runtime.resolver import (
    plural_count,
    resolve_node,
    resolve_node_plural,
    resolve_node_positional,
    select_plural_template,
    select_variant_template,
)

FILES = {"one": "%{count} file", "other": "%{count} files"}
RU_FILES = {"one": "%{count} файл", "few": "%{count} файла", "many": "%{count} файлов"}


class TestPluralCount:
    """Test extraction of the count parameter."""

    def test_integer(self) -> None:
        """Integer counts are used as they are."""
        assert plural_count({"count": 5}) == 5

    def test_float_truncates(self) -> None:
        """Float counts truncate toward zero."""
        assert plural_count({"count": 2.9}) == 2

    @pytest.mark.parametrize("value", ["3", None, True, float("nan")])
    def test_unusable_defaults_to_one(self, value: object) -> None:
        """Non-numeric or non-finite counts become 1."""
        assert plural_count({"count": value}) == 1  # type: ignore[dict-item]

    def test_missing_defaults_to_one(self) -> None:
        """A missing count becomes 1."""
        assert plural_count({}) == 1


class TestSelectPluralTemplate:
    """Test plural form selection."""

    def test_category_match(self) -> None:
        """The locale's category selects the form."""
        assert select_plural_template(RU_FILES, "ru", 22) == "%{count} файла"

    def test_falls_back_to_other(self) -> None:
        """A missing category uses 'other'."""
        assert select_plural_template({"other": "many"}, "en", 1) == "many"

    def test_falls_back_to_literal_count(self) -> None:
        """Without 'other' the count itself is tried as a key."""
        assert select_plural_template({"one": "x", "0": "none"}, "en", 0) == "none"

    def test_non_string_entries_skipped(self) -> None:
        """Only string entries qualify as forms."""
        assert select_plural_template({"one": 1, "other": "x"}, "en", 1) == "x"

    def test_missing_form(self) -> None:
        """No usable form yields the missing-form sentinel."""
        assert select_plural_template({"few": "x"}, "en", 1) == SENTINEL_PLURAL_MISSING_FORM

    def test_not_object(self) -> None:
        """Non-object data yields the not-object sentinel."""
        assert select_plural_template("x", "en", 1) == SENTINEL_PLURAL_NOT_OBJECT


class TestSelectVariantTemplate:
    """Test variant selection."""

    VARIANTS = {"male": "He replied", "female": "She replied", "other": "They replied"}

    def test_first_matching_parameter(self) -> None:
        """A string parameter naming an entry selects it."""
        assert select_variant_template(self.VARIANTS, {"gender": "female"}) == "She replied"

    def test_parameters_scanned_in_order(self) -> None:
        """The first matching parameter wins."""
        params = {"name": "Anna", "gender": "male", "other_gender": "female"}
        assert select_variant_template(self.VARIANTS, params) == "He replied"

    def test_non_string_parameters_ignored(self) -> None:
        """Only string values select variants."""
        assert select_variant_template({"1": "one", "other": "o"}, {"n": 1}) == "o"

    def test_other_fallback(self) -> None:
        """Without a match 'other' is used."""
        assert select_variant_template(self.VARIANTS, {"gender": "x"}) == "They replied"

    def test_no_match(self) -> None:
        """No match and no 'other' yields the no-match sentinel."""
        assert select_variant_template({"a": "A"}, {"k": "b"}) == SENTINEL_VARIANT_NO_MATCH

    def test_not_object(self) -> None:
        """Non-object data yields the not-object sentinel."""
        assert select_variant_template(["a"], {}) == SENTINEL_VARIANT_NOT_OBJECT


class TestResolveNode:
    """Test dispatch for the named-parameter API."""

    def test_string_interpolated(self) -> None:
        """String nodes run through both named passes."""
        assert resolve_node("Hi %{n} %<c>.d", "en", {"n": "A", "c": 1.5}) == "Hi A 1"

    def test_plural_when_count_given(self) -> None:
        """Object nodes are plural objects when count is present."""
        assert resolve_node(FILES, "en", {"count": 3}) == "3 files"
        assert resolve_node(FILES, "en", {"count": 1}) == "1 file"

    def test_variant_without_count(self) -> None:
        """Object nodes are variant objects without count."""
        node = {"formal": "Good day, %{name}", "other": "Hi, %{name}"}
        assert resolve_node(node, "en", {"style": "formal", "name": "Anna"}) == "Good day, Anna"

    def test_array_passthrough(self) -> None:
        """Arrays render as JSON without interpolation."""
        assert resolve_node(["%{a}", 1], "en", {"a": "x"}) == '["%{a}",1]'

    @pytest.mark.parametrize("node", [1, 2.5, True, None])
    def test_unsupported_types(self, node: object) -> None:
        """Scalars other than strings yield the unsupported-type sentinel."""
        assert resolve_node(node, "en", {}) == SENTINEL_UNSUPPORTED_TYPE  # type: ignore[arg-type]


class TestResolveNodePositional:
    """Test dispatch for tr()."""

    def test_string(self) -> None:
        """String nodes run through the positional pass."""
        assert resolve_node_positional("{0}-{1}", ["a", "b"]) == "a-b"

    def test_object_uses_other(self) -> None:
        """Objects contribute their 'other' entry."""
        assert resolve_node_positional({"one": "1", "other": "{} items"}, ["4"]) == "4 items"

    def test_object_uses_first_string_entry(self) -> None:
        """Without 'other' the first string entry is used."""
        assert resolve_node_positional({"x": 1, "a": "A {}", "b": "B"}, ["z"]) == "A z"

    def test_object_without_strings(self) -> None:
        """Objects without string entries resolve to empty."""
        assert resolve_node_positional({"a": 1}, []) == ""

    def test_array_passthrough(self) -> None:
        """Arrays render as JSON."""
        assert resolve_node_positional(["a", "b"], ["x"]) == '["a","b"]'


class TestResolveNodePlural:
    """Test dispatch for tr_plural()."""

    GREETING = {"one": "Hello, friend!", "other": "Hello, {} friends!"}

    def test_one(self) -> None:
        """Count 1 selects 'one'."""
        assert resolve_node_plural(self.GREETING, "en", 1, []) == "Hello, friend!"

    def test_count_prepended(self) -> None:
        """The count is consumed by the first {} placeholder."""
        assert resolve_node_plural(self.GREETING, "en", 3, []) == "Hello, 3 friends!"

    def test_extra_params_follow_count(self) -> None:
        """Positional parameters start at index 1."""
        node = {"other": "{1} has {0} cats"}
        assert resolve_node_plural(node, "en", 2, ["Anna"]) == "Anna has 2 cats"

    def test_string_node_gets_count(self) -> None:
        """String nodes also receive the count as parameter 0."""
        assert resolve_node_plural("{0} things", "en", 7, []) == "7 things"

    def test_missing_form_not_interpolated(self) -> None:
        """The missing-form sentinel is returned as is."""
        assert resolve_node_plural({"few": "x"}, "en", 1, []) == SENTINEL_PLURAL_MISSING_FORM

    def test_slavic_forms(self) -> None:
        """Locale rules pick the form."""
        node = {"one": "{} файл", "few": "{} файла", "many": "{} файлов"}
        assert resolve_node_plural(node, "ru", 21, []) == "21 файл"
        assert resolve_node_plural(node, "ru", 25, []) == "25 файлов"
