"""Dot-path lookup into nested catalogs and parameter maps."""

from typing import Any, Mapping, Optional

# Path segments that are never resolved, whatever the container holds.
UNSAFE_KEYS = frozenset({"__proto__", "constructor", "prototype"})


def is_unsafe_key(segment: str) -> bool:
    """Return True for path segments that must never be resolved."""
    return segment.strip().lower() in UNSAFE_KEYS


def resolve_path(root: Optional[Mapping[str, Any]], path: str) -> Any:
    """Resolve a dot-separated path against nested mappings.

    Example:
        resolve_path({"a": {"b": "hello"}}, "a.b")  # -> "hello"

    Args:
        root: Nested mapping to walk (catalog or parameter map).
        path: Dot-separated key, e.g. "nav.home.title".

    Returns:
        The value at the path, or None when any segment is missing, an
        intermediate node is not a mapping, or a segment is unsafe.
    """
    node: Any = root
    for segment in path.split("."):
        if is_unsafe_key(segment):
            return None
        if not isinstance(node, Mapping):
            return None
        node = node.get(segment)
        if node is None:
            return None
    return node
