"""Declaration normalization: turn a style mapping into ordered property/value pairs.

A style mapping is what callers write::

    {"display": ["inline", "run-in"], "float": "left", "&:hover": {"color": "red"}}

List values declare fallbacks for the same property and expand into one
declaration per element.  Mapping values are nested selectors, not
declarations, and are left for plugins to deal with.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

__all__ = ["iter_declarations", "flat_declarations", "format_value", "is_nested"]


def is_nested(value: Any) -> bool:
    """Return True if *value* is a nested rule body rather than a declaration value."""
    return isinstance(value, Mapping)


def iter_declarations(style: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield ``(property, value)`` pairs in key order, expanding list values."""
    for prop, value in style.items():
        if is_nested(value):
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                yield prop, item
        else:
            yield prop, value


def flat_declarations(style: Mapping[str, Any]) -> dict[str, Any]:
    """Return a plain dict holding only the flat declarations of *style*."""
    return {prop: value for prop, value in style.items() if not is_nested(value)}


def format_value(value: Any) -> str:
    """Render a declaration value as CSS text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
