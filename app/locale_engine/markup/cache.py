"""Bounded, thread-safe LRU cache for parsed segment sequences."""

import threading
from collections import OrderedDict
from typing import Optional

from locale_engine.markup.models import Segments


class ParseCache:
    """Least-recently-used cache keyed by the exact input string.

    Parsing is a pure function of its input, so two threads racing to fill
    the same key store equal values; the last write wins.
    """

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError("ParseCache capacity must be at least 1")
        self.capacity = capacity
        self._entries: "OrderedDict[str, Segments]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, text: str) -> Optional[Segments]:
        with self._lock:
            segments = self._entries.get(text)
            if segments is not None:
                self._entries.move_to_end(text)
            return segments

    def put(self, text: str, segments: Segments) -> None:
        with self._lock:
            self._entries[text] = segments
            self._entries.move_to_end(text)
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, text: str) -> bool:
        with self._lock:
            return text in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
