"""Tests for dotted key lookup."""

from hypothesis import given
from hypothesis import strategies as st

from localekit.runtime.lookup import lookup, split_key

TREE = {
    "menu": {
        "file": {"open": "Open", "close": "Close"},
        "title": "Menu",
    },
    "count": 3,
    "list": ["a", "b"],
}

segments = st.text(alphabet="abcdefgh_", min_size=1, max_size=6)


class TestSplitKey:
    """Test key segmentation."""

    def test_nested_key(self) -> None:
        """Keys split on dots."""
        assert split_key("menu.file.open") == ["menu", "file", "open"]

    def test_trailing_separator(self) -> None:
        """A trailing dot does not add an empty segment."""
        assert split_key("menu.") == ["menu"]

    def test_inner_empty_segment_kept(self) -> None:
        """Empty segments inside the key are kept and never match."""
        assert split_key("a..b") == ["a", "", "b"]


class TestLookup:
    """Test tree descent."""

    def test_leaf(self) -> None:
        """A full path returns the leaf."""
        assert lookup(TREE, "menu.file.open") == "Open"

    def test_intermediate_object(self) -> None:
        """A partial path returns the object node."""
        assert lookup(TREE, "menu.file") == {"open": "Open", "close": "Close"}

    def test_missing_segment(self) -> None:
        """An absent segment is a miss."""
        assert lookup(TREE, "menu.edit") is None

    def test_through_string(self) -> None:
        """Descending through a string is a miss."""
        assert lookup(TREE, "menu.title.x") is None

    def test_through_array(self) -> None:
        """Arrays are not indexed by key segments."""
        assert lookup(TREE, "list.0") is None

    def test_non_string_leaf(self) -> None:
        """Non-string leaves are returned as they are."""
        assert lookup(TREE, "count") == 3

    def test_non_object_root(self) -> None:
        """A root that is not an object misses every key."""
        assert lookup("text", "a") is None

    @given(path=st.lists(segments, min_size=1, max_size=5))
    def test_built_path_round_trips(self, path: list[str]) -> None:
        """A leaf placed at a path is found at the dotted form of that path."""
        tree: dict[str, object] = {}
        node = tree
        for segment in path[:-1]:
            node = node.setdefault(segment, {})  # type: ignore[assignment]
        node[path[-1]] = "leaf"
        assert lookup(tree, ".".join(path)) == "leaf"
