"""CLDR-style plural category selection.

Rules live in two tables: rule functions keyed by a family id, and a
language -> family map. Locales are reduced to their primary language
subtag before lookup ("pl-PL" and "pl_PL" both use the Polish family).

Reference: https://www.unicode.org/cldr/charts/latest/supplemental/language_plural_rules.html
"""

from typing import Callable, Dict, Union

from locale_engine.core.logging import get_module_logger
from locale_engine.i18n.models import PluralCategory

logger = get_module_logger()

Number = Union[int, float]
PluralRule = Callable[[Number], PluralCategory]

DEFAULT_FAMILY = "one_other"


def _as_integer(n: Number):
    """Return abs(n) as an int when n is integral, else None."""
    if isinstance(n, float) and not n.is_integer():
        return None
    return abs(int(n))


def _one_other(n: Number) -> PluralCategory:
    return PluralCategory.ONE if n == 1 else PluralCategory.OTHER


def _zero_one_other(n: Number) -> PluralCategory:
    i = _as_integer(n)
    if i is not None and i in (0, 1):
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _other_only(n: Number) -> PluralCategory:
    return PluralCategory.OTHER


def _polish(n: Number) -> PluralCategory:
    i = _as_integer(n)
    if i is None:
        return PluralCategory.OTHER
    if i == 1:
        return PluralCategory.ONE
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return PluralCategory.FEW
    return PluralCategory.MANY


def _east_slavic(n: Number) -> PluralCategory:
    i = _as_integer(n)
    if i is None:
        return PluralCategory.OTHER
    if i % 10 == 1 and i % 100 != 11:
        return PluralCategory.ONE
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return PluralCategory.FEW
    return PluralCategory.MANY


def _czech(n: Number) -> PluralCategory:
    i = _as_integer(n)
    if i is None:
        return PluralCategory.MANY
    if i == 1:
        return PluralCategory.ONE
    if 2 <= i <= 4:
        return PluralCategory.FEW
    return PluralCategory.OTHER


def _arabic(n: Number) -> PluralCategory:
    i = _as_integer(n)
    if i is None:
        return PluralCategory.OTHER
    if i == 0:
        return PluralCategory.ZERO
    if i == 1:
        return PluralCategory.ONE
    if i == 2:
        return PluralCategory.TWO
    if 3 <= i % 100 <= 10:
        return PluralCategory.FEW
    if 11 <= i % 100 <= 99:
        return PluralCategory.MANY
    return PluralCategory.OTHER


PLURAL_RULE_FAMILIES: Dict[str, PluralRule] = {
    "one_other": _one_other,
    "zero_one_other": _zero_one_other,
    "other_only": _other_only,
    "polish": _polish,
    "east_slavic": _east_slavic,
    "czech": _czech,
    "arabic": _arabic,
}

LANGUAGE_FAMILIES: Dict[str, str] = {
    # one / other
    "en": "one_other",
    "de": "one_other",
    "nl": "one_other",
    "sv": "one_other",
    "da": "one_other",
    "nb": "one_other",
    "nn": "one_other",
    "no": "one_other",
    "fi": "one_other",
    "et": "one_other",
    "it": "one_other",
    "es": "one_other",
    "el": "one_other",
    "hu": "one_other",
    "tr": "one_other",
    "bg": "one_other",
    "ca": "one_other",
    # 0 and 1 are singular
    "fr": "zero_one_other",
    "pt": "zero_one_other",
    # no plural distinction
    "ja": "other_only",
    "zh": "other_only",
    "ko": "other_only",
    "vi": "other_only",
    "th": "other_only",
    "id": "other_only",
    # slavic
    "pl": "polish",
    "ru": "east_slavic",
    "uk": "east_slavic",
    "be": "east_slavic",
    "cs": "czech",
    "sk": "czech",
    "ar": "arabic",
}


def primary_language(locale: str) -> str:
    """Return the lowercased primary language subtag ("pt-BR" -> "pt")."""
    return locale.strip().replace("_", "-").split("-")[0].lower()


def plural_family(locale: str) -> str:
    """Map a locale to its plural rule family id.

    Unknown or malformed locales log a warning and use the English family.
    """
    family = LANGUAGE_FAMILIES.get(primary_language(locale or ""))
    if family is None:
        logger.warning(
            "plural_rules_unknown_locale",
            locale=locale,
            fallback_family=DEFAULT_FAMILY,
        )
        return DEFAULT_FAMILY
    return family


def plural_category(locale: str, count: Number) -> PluralCategory:
    """Select the plural category for a count in a locale.

    Examples:
        plural_category("en", 1)   # PluralCategory.ONE
        plural_category("pl", 22)  # PluralCategory.FEW
        plural_category("ar", 0)   # PluralCategory.ZERO

    Args:
        locale: Locale code (e.g., "en", "pl-PL", "ar_EG").
        count: Number to categorize.

    Returns:
        The PluralCategory for the count.
    """
    return PLURAL_RULE_FAMILIES[plural_family(locale)](count)
