"""Translation models for the i18n engine.

Defines the plural categories and the shapes of catalogs and parameters.
Catalogs themselves are plain nested mappings supplied by callers; the
engine only reads them.
"""

from enum import Enum
from typing import Any, Callable, Mapping, Optional

# locale code -> nested tree of strings / plural form sets
TranslationCatalog = Mapping[str, Mapping[str, Any]]

# parameter name -> value (str, number, datetime, sequence or nested mapping)
ParameterMap = Mapping[str, Any]

MissingKeyHandler = Callable[[str, str], None]


class PluralCategory(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PLURAL_CATEGORY_NAMES = frozenset(category.value for category in PluralCategory)


def is_plural_form_set(value: Any) -> bool:
    """Check whether a catalog node is a plural form set.

    A plural form set is a non-empty mapping whose keys are all plural
    category names, e.g. {"one": "1 item", "other": "{{count}} items"}.

    Args:
        value: Catalog node to inspect.

    Returns:
        True if the node looks like a plural form set.
    """
    if not isinstance(value, Mapping) or not value:
        return False
    return all(key in PLURAL_CATEGORY_NAMES for key in value)


def get_count(params: Optional[ParameterMap]) -> Optional[float]:
    """Return params["count"] if it is a real number, else None.

    Booleans are rejected even though they are ints in Python.
    """
    if not params:
        return None
    count = params.get("count")
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return None
    return count
