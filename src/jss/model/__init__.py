"""jss model layer -- public type re-exports."""

from jss.model.context import InlineStyle, LiveContext
from jss.model.options import RuleOptions
from jss.model.rule import Rule, RuleKind

__all__ = [
    # rule
    "Rule",
    "RuleKind",
    # options
    "RuleOptions",
    # context
    "LiveContext",
    "InlineStyle",
]
