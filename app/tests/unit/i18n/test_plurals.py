"""Tests for locale_engine.i18n.plurals module."""

from unittest.mock import patch

import pytest

from locale_engine.i18n.models import PluralCategory
from locale_engine.i18n.plurals import (
    LANGUAGE_FAMILIES,
    PLURAL_RULE_FAMILIES,
    plural_category,
    plural_family,
    primary_language,
)

pytestmark = pytest.mark.unit

ONE = PluralCategory.ONE
TWO = PluralCategory.TWO
FEW = PluralCategory.FEW
MANY = PluralCategory.MANY
ZERO = PluralCategory.ZERO
OTHER = PluralCategory.OTHER

ENGLISH_FAMILY_LOCALES = [
    locale for locale, family in LANGUAGE_FAMILIES.items() if family == "one_other"
]


class TestEnglishFamily:
    @pytest.mark.parametrize("locale", ENGLISH_FAMILY_LOCALES)
    def test_one_for_exactly_one(self, locale):
        assert plural_category(locale, 1) == ONE

    @pytest.mark.parametrize("locale", ENGLISH_FAMILY_LOCALES)
    @pytest.mark.parametrize("count", [0, 2, 5, 11, 21, 100, 1.5])
    def test_other_for_everything_else(self, locale, count):
        assert plural_category(locale, count) == OTHER

    def test_regional_variants_share_rules(self):
        assert plural_category("en-US", 1) == ONE
        assert plural_category("en_GB", 2) == OTHER


class TestPolishFamily:
    @pytest.mark.parametrize(
        "count,expected",
        [
            (1, ONE),
            (2, FEW),
            (3, FEW),
            (4, FEW),
            (5, MANY),
            (22, FEW),
            (0, MANY),
            (11, MANY),
            (12, MANY),
            (14, MANY),
            (112, MANY),
            (104, FEW),
            (1.5, OTHER),
        ],
    )
    def test_categories(self, count, expected):
        assert plural_category("pl", count) == expected

    def test_region_subtag_is_ignored(self):
        assert plural_category("pl-PL", 22) == FEW
        assert plural_category("pl_PL", 5) == MANY


class TestOtherFamilies:
    @pytest.mark.parametrize(
        "count,expected",
        [(1, ONE), (21, ONE), (11, MANY), (2, FEW), (24, FEW), (5, MANY), (0, MANY), (2.5, OTHER)],
    )
    def test_russian(self, count, expected):
        assert plural_category("ru", count) == expected

    @pytest.mark.parametrize(
        "count,expected",
        [(0, ZERO), (1, ONE), (2, TWO), (3, FEW), (110, FEW), (11, MANY), (99, MANY), (100, OTHER), (102, OTHER)],
    )
    def test_arabic(self, count, expected):
        assert plural_category("ar", count) == expected

    @pytest.mark.parametrize("count,expected", [(0, ONE), (1, ONE), (2, OTHER), (1.5, OTHER)])
    def test_french(self, count, expected):
        assert plural_category("fr", count) == expected

    @pytest.mark.parametrize("count,expected", [(1, ONE), (3, FEW), (5, OTHER), (0.5, MANY)])
    def test_czech(self, count, expected):
        assert plural_category("cs", count) == expected

    @pytest.mark.parametrize("count", [0, 1, 2, 100])
    def test_japanese_is_always_other(self, count):
        assert plural_category("ja", count) == OTHER


class TestUnknownLocales:
    @patch("locale_engine.i18n.plurals.logger")
    def test_unknown_locale_uses_english_rules(self, mock_logger):
        assert plural_category("xx", 1) == ONE
        assert plural_category("xx", 3) == OTHER
        mock_logger.warning.assert_called_with(
            "plural_rules_unknown_locale",
            locale="xx",
            fallback_family="one_other",
        )

    @pytest.mark.parametrize("locale", ["", "???", "-"])
    @patch("locale_engine.i18n.plurals.logger")
    def test_malformed_locale_never_raises(self, mock_logger, locale):
        assert plural_category(locale, 1) == ONE
        assert mock_logger.warning.called

    @patch("locale_engine.i18n.plurals.logger")
    def test_known_locale_does_not_warn(self, mock_logger):
        plural_category("de", 1)
        mock_logger.warning.assert_not_called()


class TestHelpers:
    @pytest.mark.parametrize(
        "locale,expected", [("pt-BR", "pt"), ("zh_Hant_TW", "zh"), (" EN ", "en")]
    )
    def test_primary_language(self, locale, expected):
        assert primary_language(locale) == expected

    def test_every_language_maps_to_a_rule(self):
        for family in LANGUAGE_FAMILIES.values():
            assert family in PLURAL_RULE_FAMILIES

    def test_plural_family_lookup(self):
        assert plural_family("uk-UA") == "east_slavic"
