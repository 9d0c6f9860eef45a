"""Segment types produced by the markup parser."""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class TextSegment:
    """Literal text between (or instead of) slots."""

    content: str

    kind = "text"


@dataclass(frozen=True)
class SlotSegment:
    """A matched <name ...>content</name> region.

    Attributes:
        name: Lowercased tag name.
        attributes: Sanitized attributes as a read-only mapping, or None
            when the tag had none or any attribute was rejected.
        slot_content: Raw text between the opening and closing tags.
    """

    name: str
    attributes: Optional[Mapping[str, str]]
    slot_content: str

    kind = "slot"

    @property
    def content(self) -> str:
        return self.slot_content


Segment = Union[TextSegment, SlotSegment]
Segments = Tuple[Segment, ...]
