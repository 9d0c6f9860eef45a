"""Segmentation of translated strings into text and slot segments.

Transforms "Hello <Link>world</Link>, click <Button>here</Button>" into

    (TextSegment("Hello "), SlotSegment("link", None, "world"),
     TextSegment(", click "), SlotSegment("button", None, "here"))

for a renderer to materialize. The scanner makes one forward pass over the
input. Closing tags are indexed up front and looked up by bisection, so
cost stays O(n log n) however the input is crafted. Inputs over
MAX_TEMPLATE_LENGTH are not scanned at all.

Limitations: a flat segmenter, not an HTML parser. Nesting the same tag
name is not supported ("<a>1 <a>2</a></a>" closes at the first "</a>").
"""

import string
from bisect import bisect_right
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from locale_engine.core.config import settings
from locale_engine.core.logging import get_module_logger
from locale_engine.markup.attributes import parse_attributes
from locale_engine.markup.cache import ParseCache
from locale_engine.markup.models import Segment, Segments, SlotSegment, TextSegment

logger = get_module_logger()

MAX_TEMPLATE_LENGTH = 10_000

TAG_NAME_START_CHARS = frozenset(string.ascii_letters)
TAG_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "-")

parse_cache = ParseCache(capacity=settings.i18n.PARSE_CACHE_SIZE)


def _scan_name(text: str, start: int) -> int:
    """Return the end index of a tag name starting at start."""
    end = start
    while end < len(text) and text[end] in TAG_NAME_CHARS:
        end += 1
    return end


def _freeze(attributes: Optional[Dict[str, str]]) -> Optional[Mapping[str, str]]:
    """Wrap attributes read-only; segments are shared through the cache."""
    return MappingProxyType(attributes) if attributes is not None else None


def _index_closing_tags(text: str) -> Dict[str, List[int]]:
    """Map lowercased tag names to the start offsets of their "</name>" tags."""
    index: Dict[str, List[int]] = {}
    pos = text.find("</")
    while pos != -1:
        name_start = pos + 2
        if name_start < len(text) and text[name_start] in TAG_NAME_START_CHARS:
            name_end = _scan_name(text, name_start)
            if name_end < len(text) and text[name_end] == ">":
                index.setdefault(text[name_start:name_end].lower(), []).append(pos)
        pos = text.find("</", pos + 2)
    return index


def _scan(text: str) -> List[Segment]:
    closing_tags = _index_closing_tags(text)
    segments: List[Segment] = []
    pos = 0
    text_start = 0
    # Offset of the first ">" at or after the current tag name; it only ever
    # moves forward, so each character is searched at most once.
    next_gt = 0

    while True:
        tag_start = text.find("<", pos)
        if tag_start == -1:
            break

        name_start = tag_start + 1
        if name_start >= len(text) or text[name_start] not in TAG_NAME_START_CHARS:
            pos = tag_start + 1
            continue

        name_end = _scan_name(text, name_start)
        if name_end < len(text) and not (
            text[name_end] in ">/" or text[name_end].isspace()
        ):
            pos = tag_start + 1
            continue

        if next_gt < name_end:
            next_gt = text.find(">", name_end)
        if next_gt == -1:
            # No ">" remains anywhere, so no later tag can be complete.
            break
        tag_end = next_gt

        tag_name = text[name_start:name_end]
        candidates = closing_tags.get(tag_name.lower(), [])
        nearest = bisect_right(candidates, tag_end)
        if nearest == len(candidates):
            # Unclosed: leave it in the surrounding text.
            pos = tag_start + 1
            continue
        close_start = candidates[nearest]

        if tag_start > text_start:
            segments.append(TextSegment(text[text_start:tag_start]))

        segments.append(
            SlotSegment(
                name=tag_name.lower(),
                attributes=_freeze(parse_attributes(text[name_end:tag_end])),
                slot_content=text[tag_end + 1 : close_start],
            )
        )

        pos = text_start = close_start + len(tag_name) + 3

    if text_start < len(text):
        segments.append(TextSegment(text[text_start:]))
    return segments


def segment(text: str) -> Segments:
    """Split a translated string into text and slot segments.

    Example:
        segment("Click <Link>here</Link>")
        # (TextSegment("Click "), SlotSegment("link", None, "here"))

    Results are memoized by exact input; repeated calls return the same
    tuple while it stays in the cache. Inputs longer than
    MAX_TEMPLATE_LENGTH are returned as one TextSegment and not cached.

    Args:
        text: Translated string, possibly containing <Tag>...</Tag> pairs.

    Returns:
        Segments in source order.
    """
    if len(text) > MAX_TEMPLATE_LENGTH:
        logger.warning(
            "markup_input_too_long",
            length=len(text),
            max_length=MAX_TEMPLATE_LENGTH,
        )
        return (TextSegment(text),)

    cached = parse_cache.get(text)
    if cached is not None:
        return cached

    segments = tuple(_scan(text))
    parse_cache.put(text, segments)
    return segments


def has_component_slots(text: str) -> bool:
    """Check whether segment() would find at least one slot in text.

    Oversized input is never segmented, so it has no slots; no warning is
    logged for it here.
    """
    if len(text) > MAX_TEMPLATE_LENGTH:
        return False
    return any(isinstance(part, SlotSegment) for part in segment(text))
