"""Tests for locale_engine.i18n.loader module."""

from unittest.mock import patch

import pytest

from locale_engine.i18n.loader import (
    CatalogLoadError,
    YAMLCatalogLoader,
    deep_merge,
    normalize_fragment,
)

pytestmark = pytest.mark.unit


class TestDeepMerge:
    def test_merges_nested(self):
        target = {"nav": {"home": "Home"}, "a": "x"}
        source = {"nav": {"settings": "Settings"}, "b": "y"}
        assert deep_merge(target, source) == {
            "nav": {"home": "Home", "settings": "Settings"},
            "a": "x",
            "b": "y",
        }

    def test_source_wins(self):
        assert deep_merge({"a": "old"}, {"a": "new"}) == {"a": "new"}

    def test_mapping_replaces_string(self):
        assert deep_merge({"a": "text"}, {"a": {"b": "c"}}) == {"a": {"b": "c"}}

    def test_does_not_mutate_target(self):
        target = {"nav": {"home": "Home"}}
        deep_merge(target, {"nav": {"x": "y"}})
        assert target == {"nav": {"home": "Home"}}

    @patch("locale_engine.i18n.loader.logger")
    def test_skips_unsafe_keys_at_any_depth(self, mock_logger):
        source = {"__proto__": {"x": 1}, "nav": {"constructor": "bad", "ok": "fine"}}
        assert deep_merge({}, source) == {"nav": {"ok": "fine"}}
        assert mock_logger.warning.call_count == 2


class TestNormalizeFragment:
    def test_plain_mapping(self):
        assert normalize_fragment({"a": "b"}) == {"a": "b"}

    def test_default_wrapper_is_equivalent(self):
        messages = {"nav": {"home": "Home"}}
        assert normalize_fragment({"default": messages}) == normalize_fragment(messages)

    def test_default_key_next_to_others_is_kept(self):
        fragment = {"default": {"a": "b"}, "other": "c"}
        assert normalize_fragment(fragment) == fragment

    def test_default_string_is_a_message(self):
        assert normalize_fragment({"default": "Default"}) == {"default": "Default"}

    def test_sanitizes(self):
        assert normalize_fragment({"default": {"prototype": "x", "a": "b"}}) == {"a": "b"}

    @pytest.mark.parametrize("fragment", [None, "text", ["a"], 42])
    def test_non_mapping_raises(self, fragment):
        with pytest.raises(CatalogLoadError):
            normalize_fragment(fragment)


class TestYAMLCatalogLoader:
    """Tests for YAMLCatalogLoader."""

    def test_initialization(self, temp_translations_dir):
        loader = YAMLCatalogLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.use_cache is True
        assert loader.cache == {}

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ValueError):
            YAMLCatalogLoader(tmp_path / "missing")

    def test_load_merges_namespace_files(self, yaml_loader):
        catalog = yaml_loader.load("en")
        assert catalog["nav"] == {"home": "Home", "settings": "Settings", "reports": "Reports"}
        assert catalog["dashboard"]["title"] == "Dashboard"

    def test_load_region_locale(self, yaml_loader):
        assert "items" in yaml_loader.load("pl-PL")

    def test_load_unknown_locale_raises(self, yaml_loader):
        with pytest.raises(FileNotFoundError):
            yaml_loader.load("de")

    def test_load_all(self, yaml_loader):
        catalogs = yaml_loader.load_all()
        assert sorted(catalogs) == ["en", "fr", "pl-PL"]

    def test_load_all_empty_directory_raises(self, tmp_path):
        loader = YAMLCatalogLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load_all()

    def test_invalid_yaml_raises(self, tmp_path):
        (tmp_path / "en.yml").write_text("key: [unclosed", encoding="utf-8")
        loader = YAMLCatalogLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load("en")

    @patch("locale_engine.i18n.loader.logger")
    def test_non_mapping_file_skipped(self, mock_logger, tmp_path):
        (tmp_path / "en.yml").write_text("- a\n- b\n", encoding="utf-8")
        (tmp_path / "extra.en.yml").write_text("greeting: Hi\n", encoding="utf-8")
        loader = YAMLCatalogLoader(tmp_path)
        assert loader.load("en") == {"greeting": "Hi"}
        mock_logger.warning.assert_called_once()

    def test_empty_file_is_ignored(self, tmp_path):
        (tmp_path / "en.yml").write_text("", encoding="utf-8")
        loader = YAMLCatalogLoader(tmp_path)
        assert loader.load("en") == {}

    def test_unsafe_yaml_keys_dropped(self, tmp_path):
        (tmp_path / "en.yml").write_text("__proto__:\n  x: y\nok: fine\n", encoding="utf-8")
        loader = YAMLCatalogLoader(tmp_path)
        assert loader.load("en") == {"ok": "fine"}

    def test_files_without_locale_suffix_ignored(self, tmp_path):
        (tmp_path / "en.yml").write_text("a: b\n", encoding="utf-8")
        (tmp_path / "readme.1.yml").write_text("c: d\n", encoding="utf-8")
        loader = YAMLCatalogLoader(tmp_path)
        assert list(loader.load_all()) == ["en"]

    def test_cache(self, temp_translations_dir):
        loader = YAMLCatalogLoader(temp_translations_dir, use_cache=True)
        first = loader.load("fr")
        assert loader.load("fr") is first
        loader.clear_cache()
        assert loader.cache == {}
        assert loader.load("fr") is not first
