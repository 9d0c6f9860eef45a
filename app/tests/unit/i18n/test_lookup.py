"""Tests for locale_engine.i18n.lookup module."""

import pytest

from locale_engine.i18n.lookup import is_unsafe_key, resolve_path

pytestmark = pytest.mark.unit


class TestResolvePath:
    """Tests for resolve_path()."""

    def test_top_level_key(self):
        assert resolve_path({"greeting": "Hello"}, "greeting") == "Hello"

    def test_nested_key(self):
        assert resolve_path({"a": {"b": {"c": "deep"}}}, "a.b.c") == "deep"

    def test_returns_intermediate_mapping(self):
        root = {"a": {"b": "x"}}
        assert resolve_path(root, "a") == {"b": "x"}

    def test_missing_key_returns_none(self):
        assert resolve_path({"a": {"b": "x"}}, "a.c") is None

    def test_none_root_returns_none(self):
        assert resolve_path(None, "a.b") is None

    def test_non_mapping_intermediate_returns_none(self):
        assert resolve_path({"a": "text"}, "a.b") is None

    def test_non_string_leaf_is_returned(self):
        assert resolve_path({"count": 3}, "count") == 3

    @pytest.mark.parametrize("segment", ["__proto__", "constructor", "prototype"])
    def test_unsafe_segment_not_found_at_top_level(self, segment):
        """Unsafe segments never resolve, even when the key exists."""
        assert resolve_path({segment: "polluted"}, segment) is None

    @pytest.mark.parametrize(
        "path", ["a.__proto__", "a.constructor.name", "prototype.x", "a.b.__proto__"]
    )
    def test_unsafe_segment_not_found_at_any_depth(self, path):
        root = {
            "a": {"__proto__": "x", "constructor": {"name": "y"}, "b": {"__proto__": "z"}},
            "prototype": {"x": "w"},
        }
        assert resolve_path(root, path) is None

    def test_unsafe_segment_case_insensitive(self):
        assert resolve_path({"Constructor": "x"}, "Constructor") is None


class TestIsUnsafeKey:
    """Tests for is_unsafe_key()."""

    @pytest.mark.parametrize(
        "segment", ["__proto__", "constructor", "prototype", " PROTOTYPE "]
    )
    def test_unsafe(self, segment):
        assert is_unsafe_key(segment) is True

    @pytest.mark.parametrize("segment", ["proto", "constructors", "nav", ""])
    def test_safe(self, segment):
        assert is_unsafe_key(segment) is False
