"""Live-context protocol: a mutable style target a rule can be synced against."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LiveContext(Protocol):
    """Anything that exposes a rule's properties outside the rule itself.

    The attachment layer (a rendered document, an element's inline style)
    supplies the implementation.
    """

    def get_property(self, name: str) -> Any:
        """Return the current value of *name*."""
        ...

    def set_property(self, name: str, value: Any) -> None:
        """Push *value* for *name* into the context."""
        ...


class InlineStyle:
    """In-memory live context, the equivalent of an element's inline style.

    Unknown properties read as an empty string.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial) if initial else {}

    def get_property(self, name: str) -> Any:
        return self._values.get(name, "")

    def set_property(self, name: str, value: Any) -> None:
        self._values[name] = value

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of the current values."""
        return dict(self._values)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"InlineStyle({self._values!r})"
