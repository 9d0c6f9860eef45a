"""Inline formatting tags that may be rendered straight from translations.

Only these tags become real elements, and only the listed attributes are
kept on them. "style" is never kept.
"""

from typing import Dict, Mapping, Optional

SAFE_TAGS = frozenset(
    {"b", "strong", "em", "i", "u", "s", "mark", "small", "sub", "sup", "span"}
)
SAFE_ATTRIBUTES = frozenset({"class", "title", "id"})


def is_safe_tag(name: str) -> bool:
    return name.lower() in SAFE_TAGS


def is_safe_attribute(name: str) -> bool:
    return name.lower() in SAFE_ATTRIBUTES


def filter_attributes(attributes: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Keep only allowlisted attributes (names lowercased)."""
    if not attributes:
        return {}
    return {
        name.lower(): value
        for name, value in attributes.items()
        if is_safe_attribute(name)
    }
