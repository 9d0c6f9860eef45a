"""HTML escaping for text that is not rendered through the allowlist."""

from typing import Any

_HTML_ESCAPES = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&#039;",
}


def escape_html(value: Any) -> str:
    """Escape &, <, >, " and ' in the string form of value.

    Non-strings are escaped via str(), so None becomes "None".
    """
    return str(value).translate(_HTML_ESCAPES)
