"""Rule model: one generated stylesheet fragment."""

from __future__ import annotations

from enum import Enum
from typing import Any

from jss.declarations import flat_declarations, iter_declarations
from jss.model.context import LiveContext
from jss.model.options import RuleOptions

_MISSING = object()


class RuleKind(Enum):
    """The closed set of rule shapes.

    REGULAR      selector with a declaration block (also ``@font-face``)
    SIMPLE       at-rule with a verbatim value and no block (``@charset``)
    KEYFRAME     ``@keyframes`` wrapping one block per offset
    CONDITIONAL  ``@media`` / ``@supports`` wrapping nested rules
    """

    REGULAR = "regular"
    SIMPLE = "simple"
    KEYFRAME = "keyframe"
    CONDITIONAL = "conditional"

    @property
    def is_container(self) -> bool:
        return self in (RuleKind.KEYFRAME, RuleKind.CONDITIONAL)


class Rule:
    """A single rule of a given kind.

    The kind and selector are fixed once the rule is built; declarations in
    ``style`` stay mutable through ``set()`` and plugins.  Container kinds
    carry their nested rules in ``children`` and have an empty ``style``;
    each child points back through ``parent``.
    Rules are normally built through ``Jss.create_rule`` rather than
    instantiated directly.
    """

    def __init__(
        self,
        kind: RuleKind,
        selector: str | None = None,
        *,
        style: dict[str, Any] | None = None,
        value: str | None = None,
        children: list[Rule] | None = None,
        class_name: str | None = None,
        options: RuleOptions | None = None,
    ) -> None:
        self._kind = kind
        self.selector = selector
        self.class_name = class_name
        self.style: dict[str, Any] = dict(style) if style else {}
        self.value = value
        self.children: list[Rule] = list(children) if children else []
        self.parent: Rule | None = None
        for child in self.children:
            child.parent = self
        self.options = options if options is not None else RuleOptions()
        self.context: LiveContext | None = None

    @property
    def kind(self) -> RuleKind:
        return self._kind

    @property
    def type(self) -> str:
        """The kind as a plain string (``"regular"``, ``"simple"``, ...)."""
        return self._kind.value

    @property
    def name(self) -> str | None:
        """The at-rule name of a simple rule; same as ``selector``."""
        return self.selector

    # --- live context ---------------------------------------------------------

    def link(self, context: LiveContext) -> Rule:
        """Sync property reads and writes against *context*."""
        self.context = context
        return self

    def unlink(self) -> Rule:
        self.context = None
        return self

    # --- property access ------------------------------------------------------

    def get(self, prop: str) -> Any:
        """Return the value of *prop*.

        Cached values win.  On a miss the linked context, if any, is asked
        and its answer is cached.  Without a context a miss returns None.
        """
        if prop in self.style:
            return self.style[prop]
        if self.context is None:
            return None
        value = self.context.get_property(prop)
        self.style[prop] = value
        return value

    def set(self, prop: str, value: Any) -> Rule:
        """Cache *value* for *prop* and push it to the linked context."""
        self.style[prop] = value
        if self.context is not None:
            self.context.set_property(prop, value)
        return self

    def prop(self, name: str, value: Any = _MISSING) -> Any:
        """Read *name* with one argument, write it with two."""
        if value is _MISSING:
            return self.get(name)
        return self.set(name, value)

    def apply_to(self, target: LiveContext) -> Rule:
        """Push every declaration straight onto *target*, bypassing CSS text."""
        for prop, value in iter_declarations(self.style):
            target.set_property(prop, value)
        return self

    # --- output ---------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        """Return the flat declarations; nested rule bodies are left out."""
        return flat_declarations(self.style)

    def to_string(self) -> str:
        from jss.render import render_rule

        return render_rule(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rule(kind={self._kind.value}, selector={self.selector!r})"
