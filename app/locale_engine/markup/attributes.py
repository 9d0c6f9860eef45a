"""Attribute parsing and sanitization for markup slots.

Attributes are read with a small forward scanner (no regular expressions)
and then checked as a whole: if any attribute is an event handler or
carries an unsafe URL, the entire attribute set is dropped.
"""

import html
import string
from typing import Dict, Optional

from locale_engine.core.logging import get_module_logger

logger = get_module_logger()

ATTRIBUTE_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-:.")
SCHEME_CHARS = frozenset(string.ascii_letters + string.digits + "+-.")
# Per HTML, unquoted values end at whitespace or any of these.
UNQUOTED_VALUE_TERMINATORS = frozenset("\"'=<>`")

URL_ATTRIBUTES = frozenset({"href", "src", "action", "formaction", "xlink:href", "poster", "cite"})
SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto", "tel"})


def is_event_attribute(name: str) -> bool:
    """Return True for on* event handler attributes (onclick, OnLoad, ...)."""
    return name.lower().startswith("on")


def _strip_control_characters(value: str) -> str:
    return "".join(ch for ch in value if ord(ch) > 0x1F and ord(ch) != 0x7F)


def is_safe_url(value: str) -> bool:
    """Check a URL attribute value against the scheme allowlist.

    The value is HTML-unescaped and stripped of control characters first,
    so "java&#58;script:" and "java\\x00script:" are seen as "javascript:".
    Relative paths, fragments, queries and empty values are safe.
    """
    cleaned = _strip_control_characters(html.unescape(value)).strip()
    if not cleaned or cleaned[0] in "/#?.":
        return True

    colon = cleaned.find(":")
    if colon == -1:
        return True
    # A "/", "?" or "#" before the colon makes it part of a relative path.
    if any(delimiter in cleaned[:colon] for delimiter in "/?#"):
        return True

    scheme = cleaned[:colon]
    if not scheme or scheme[0] not in string.ascii_letters:
        return True
    if any(ch not in SCHEME_CHARS for ch in scheme):
        return True
    return scheme.lower() in SAFE_URL_SCHEMES


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _scan_attributes(text: str) -> Optional[Dict[str, str]]:
    """Tokenize an attribute string.

    Accepts name="v", name='v', name=v and bare boolean names. Characters
    that cannot start a name are skipped. Returns None on an unterminated
    quoted value.
    """
    attributes: Dict[str, str] = {}
    pos = 0
    length = len(text)

    while pos < length:
        if text[pos] not in ATTRIBUTE_NAME_CHARS:
            pos += 1
            continue

        start = pos
        while pos < length and text[pos] in ATTRIBUTE_NAME_CHARS:
            pos += 1
        name = text[start:pos]
        value = ""

        after_name = _skip_whitespace(text, pos)
        if after_name < length and text[after_name] == "=":
            pos = _skip_whitespace(text, after_name + 1)
            if pos < length and text[pos] in "\"'":
                quote = text[pos]
                end = text.find(quote, pos + 1)
                if end == -1:
                    return None
                value = text[pos + 1 : end]
                pos = end + 1
            else:
                start = pos
                while (
                    pos < length
                    and not text[pos].isspace()
                    and text[pos] not in UNQUOTED_VALUE_TERMINATORS
                ):
                    pos += 1
                value = text[start:pos]

        # First occurrence wins, as in HTML.
        attributes.setdefault(name, value)

    return attributes


def parse_attributes(attr_text: Optional[str]) -> Optional[Dict[str, str]]:
    """Parse and sanitize the attribute text of an opening tag.

    Example:
        parse_attributes(" href='/home' class=\"nav\"")
        # -> {"href": "/home", "class": "nav"}
        parse_attributes(' onclick="alert(1)"')  # -> None

    Args:
        attr_text: Text between the tag name and ">".

    Returns:
        The attributes, or None when there are none, the text is
        structurally malformed, or any attribute is dangerous.
    """
    if not attr_text or not attr_text.strip():
        return None

    attributes = _scan_attributes(attr_text)
    if attributes is None:
        logger.warning("malformed_attributes", attributes=attr_text)
        return None

    for name, value in attributes.items():
        if is_event_attribute(name):
            logger.warning("blocked_dangerous_attribute", attribute=name)
            return None
        if name.lower() in URL_ATTRIBUTES and not is_safe_url(value):
            logger.warning("blocked_unsafe_url", attribute=name, value=value)
            return None

    return attributes or None
