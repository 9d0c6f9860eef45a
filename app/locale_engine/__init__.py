"""locale-engine: translation resolution and safe markup segmentation."""

from locale_engine.i18n import (
    LocaleStore,
    PluralCategory,
    Translator,
    interpolate,
    plural_category,
    resolve_path,
    translate,
)
from locale_engine.i18n.service import TranslationService
from locale_engine.markup import (
    SlotSegment,
    TextSegment,
    escape_html,
    render_rich,
    segment,
)

__all__ = [
    "LocaleStore",
    "PluralCategory",
    "SlotSegment",
    "TextSegment",
    "TranslationService",
    "Translator",
    "escape_html",
    "interpolate",
    "plural_category",
    "render_rich",
    "resolve_path",
    "segment",
    "translate",
]
