"""Safe markup handling for translated strings.

Main components:
- parser: segment() splits strings into TextSegment / SlotSegment
- attributes: attribute scanning and URL / event-handler sanitization
- allowlist: inline tags and attributes that may render as elements
- escaping: escape_html()
- rich: render_rich() turns segments into HTML
"""

from locale_engine.markup.allowlist import SAFE_ATTRIBUTES, SAFE_TAGS
from locale_engine.markup.attributes import is_safe_url, parse_attributes
from locale_engine.markup.cache import ParseCache
from locale_engine.markup.escaping import escape_html
from locale_engine.markup.models import Segment, SlotSegment, TextSegment
from locale_engine.markup.parser import (
    MAX_TEMPLATE_LENGTH,
    has_component_slots,
    segment,
)
from locale_engine.markup.rich import render_rich

__all__ = [
    "MAX_TEMPLATE_LENGTH",
    "SAFE_ATTRIBUTES",
    "SAFE_TAGS",
    "ParseCache",
    "Segment",
    "SlotSegment",
    "TextSegment",
    "escape_html",
    "has_component_slots",
    "is_safe_url",
    "parse_attributes",
    "render_rich",
    "segment",
]
