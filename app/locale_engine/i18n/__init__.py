"""i18n engine - translation resolution, pluralization and formatting.

Main components:
- lookup: resolve_path() for dotted keys with unsafe-segment guards
- plurals: plural_category() rule families
- formatters: Babel-backed number/currency/date/list formatting
- interpolation: {{ name, kind, arg }} placeholder substitution
- translator: translate() pipeline and the Translator class
- loader: CatalogLoader and YAMLCatalogLoader
- store: LocaleStore for async loading and locale switching
- resolvers: LocaleResolver for Accept-Language negotiation
"""

from locale_engine.i18n.formatters import (
    FormatKind,
    format_currency,
    format_date,
    format_list,
    format_number,
    format_value,
)
from locale_engine.i18n.interpolation import interpolate
from locale_engine.i18n.loader import (
    CatalogLoader,
    CatalogLoadError,
    YAMLCatalogLoader,
    deep_merge,
    normalize_fragment,
)
from locale_engine.i18n.lookup import resolve_path
from locale_engine.i18n.models import PluralCategory
from locale_engine.i18n.plurals import plural_category
from locale_engine.i18n.resolvers import LocaleResolver
from locale_engine.i18n.store import LocaleStore
from locale_engine.i18n.translator import Translator, translate

__all__ = [
    "CatalogLoadError",
    "CatalogLoader",
    "FormatKind",
    "LocaleResolver",
    "LocaleStore",
    "PluralCategory",
    "Translator",
    "YAMLCatalogLoader",
    "deep_merge",
    "format_currency",
    "format_date",
    "format_list",
    "format_number",
    "format_value",
    "interpolate",
    "normalize_fragment",
    "plural_category",
    "resolve_path",
    "translate",
]
