"""Render rules to CSS text.

Output shape::

    @media print {
      .jss-0-0 {
        display: none;
      }
    }

Two spaces per nesting level, ``;`` after every declaration and none after
a closing brace.  Rendering has no side effects.
"""

from __future__ import annotations

from jss.declarations import format_value, iter_declarations
from jss.model.rule import Rule, RuleKind

__all__ = ["render_rule", "INDENT"]

INDENT = "  "


def render_rule(rule: Rule, level: int = 0) -> str:
    """Render *rule* with its outermost line indented *level* steps."""
    pad = INDENT * level
    if rule.kind is RuleKind.SIMPLE:
        return f"{pad}{rule.selector} {rule.value};"
    if rule.kind is RuleKind.REGULAR:
        lines = [
            f"{pad}{INDENT}{prop}: {format_value(value)};"
            for prop, value in iter_declarations(rule.style)
        ]
    elif rule.kind.is_container:
        lines = [render_rule(child, level + 1) for child in rule.children]
    else:
        raise ValueError(f"Unknown rule kind: {rule.kind!r}")
    body = "".join(line + "\n" for line in lines)
    # An unnamed rule without a selector renders with an empty header.
    header = f"{rule.selector} " if rule.selector else ""
    return f"{pad}{header}{{\n{body}{pad}}}"
