"""Render segmented translations to an HTML string.

Text is always escaped. A slot is rendered, in order of preference, by a
caller-supplied renderer registered under its name, as an allowlisted
inline element, or as escaped text of its content.
"""

from typing import Callable, Dict, Iterable, Mapping, Optional, Union

from locale_engine.markup.allowlist import filter_attributes, is_safe_tag
from locale_engine.markup.escaping import escape_html
from locale_engine.markup.models import Segment, SlotSegment
from locale_engine.markup.parser import segment

# (slot_content, attributes) -> trusted HTML
SlotRenderer = Callable[[str, Optional[Dict[str, str]]], str]


def render_safe_tag(slot: SlotSegment) -> str:
    """Render an allowlisted slot as an element with escaped content."""
    attributes = "".join(
        f' {name}="{escape_html(value)}"'
        for name, value in filter_attributes(slot.attributes).items()
    )
    return f"<{slot.name}{attributes}>{escape_html(slot.slot_content)}</{slot.name}>"


def render_rich(
    source: Union[str, Iterable[Segment]],
    renderers: Optional[Mapping[str, SlotRenderer]] = None,
) -> str:
    """Render a translated string or its segments as HTML.

    Example:
        render_rich("Read <b>this</b> <Link href='/tos'>terms</Link>",
                    {"link": lambda text, attrs: f'<a href="/tos">{text}</a>'})
        # 'Read <b>this</b> <a href="/tos">terms</a>'

    Args:
        source: Raw translated string (segmented here) or segments.
        renderers: Slot name (lowercase) -> renderer. Renderer output is
            trusted; renderers must escape what they embed. Each call gets
            its own copy of the slot's attributes.

    Returns:
        HTML string.
    """
    segments = segment(source) if isinstance(source, str) else source
    renderers = {name.lower(): fn for name, fn in (renderers or {}).items()}

    parts = []
    for part in segments:
        if not isinstance(part, SlotSegment):
            parts.append(escape_html(part.content))
        elif part.name in renderers:
            attributes = dict(part.attributes) if part.attributes is not None else None
            parts.append(renderers[part.name](part.slot_content, attributes))
        elif is_safe_tag(part.name):
            parts.append(render_safe_tag(part))
        else:
            parts.append(escape_html(part.slot_content))
    return "".join(parts)
