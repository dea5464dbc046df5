"""Per-rule construction options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jss.stylesheet import StyleSheet


@dataclass(eq=False)
class RuleOptions:
    """Options passed to rule construction.

    Attributes:
        named: When True, a rule built without a selector gets a generated
            class name.  Children of a conditional rule inherit the flag.
        sheet: The StyleSheet the rule belongs to, if any.  Plugins use it
            to add sibling rules.
    """

    named: bool = True
    sheet: StyleSheet | None = None
