"""Nested-selector plugin: lift ``&``-keyed bodies into sibling rules.

Input::

    {"color": "red", "&:hover": {"color": "blue"}}

added to a sheet as ``.jss-0-0`` yields a second rule ``.jss-0-0:hover``.
Only rules that belong to a StyleSheet are touched.  Top-level rules get
their siblings added to the sheet; rules inside a media query get them
appended to the same query, so the condition still applies.
"""

from __future__ import annotations

from jss.declarations import is_nested
from jss.model.options import RuleOptions
from jss.model.rule import Rule, RuleKind


def nested(rule: Rule) -> None:
    sheet = rule.options.sheet
    if sheet is None or rule.kind is not RuleKind.REGULAR or not rule.selector:
        return
    parent = rule.parent
    for key in [k for k, v in rule.style.items() if is_nested(v) and "&" in k]:
        body = rule.style.pop(key)
        selector = key.replace("&", rule.selector)
        if parent is None or parent.kind is not RuleKind.CONDITIONAL:
            sheet.add_rule(selector, body, named=False)
            continue
        sibling = sheet.jss.build_rule(selector, body, RuleOptions(named=False, sheet=sheet))
        sibling.parent = parent
        # The pipeline's walk over parent.children also visits the new rule.
        parent.children.append(sibling)
