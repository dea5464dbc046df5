"""StyleSheet: a keyed collection of rules rendered together."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jss.model.options import RuleOptions
from jss.model.rule import Rule, RuleKind

if TYPE_CHECKING:
    from jss.engine import Jss

logger = logging.getLogger(__name__)


class StyleSheet:
    """Rules keyed by name, in insertion order.

    In a named sheet (the default) plain keys are names: each rule gets a
    generated class name, recorded in ``classes``.  In an unnamed sheet
    keys are used as selectors.  At-rule keys are always selectors.
    """

    def __init__(
        self,
        jss: Jss,
        styles: Mapping[str, Any] | None = None,
        *,
        named: bool = True,
    ) -> None:
        self.jss = jss
        self.named = named
        self.rules: dict[str, Rule] = {}
        self.classes: dict[str, str] = {}
        if styles:
            self.add_rules(styles)

    def add_rule(self, key: str, style: Any, *, named: bool | None = None) -> Rule:
        """Build a rule for *key*, store it, then run the plugins over it."""
        if named is None:
            named = self.named
        known = None
        if key.startswith("@") or not named:
            selector = key
        else:
            known = self.classes.get(key)
            selector = "." + known if known else None
        options = RuleOptions(named=named, sheet=self)
        rule = self.jss.build_rule(selector, style, options)
        if known:
            rule.class_name = known
        self.rules[key] = rule
        self._register_classes(key, style, rule)
        logger.debug("Added %r under %r", rule, key)
        self.jss.plugins.run(rule)
        return rule

    def add_rules(self, styles: Mapping[str, Any]) -> list[Rule]:
        """Add every entry of *styles* in order."""
        return [self.add_rule(key, style) for key, style in styles.items()]

    def get_rule(self, key: str) -> Rule | None:
        return self.rules.get(key)

    def _register_classes(self, key: str, style: Any, rule: Rule) -> None:
        if rule.class_name:
            self.classes[key] = rule.class_name
        elif rule.kind is RuleKind.CONDITIONAL:
            # Keys inside a media query share class names with top-level keys.
            for child_key, child in zip(style, rule.children):
                if child.class_name:
                    self.classes.setdefault(child_key, child.class_name)

    def to_string(self) -> str:
        return "\n".join(rule.to_string() for rule in self.rules.values())

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"StyleSheet(rules={list(self.rules)}, named={self.named})"
