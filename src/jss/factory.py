"""Rule construction: classify a selector and build the matching rule kind.

Classification order:
    1. ``@media`` / ``@supports``  -> conditional
    2. ``@keyframes``              -> keyframe
    3. any other ``@`` rule except ``@font-face`` -> simple
    4. everything else (including no selector)     -> regular
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jss.declarations import is_nested
from jss.errors import InvalidRuleInput
from jss.model.options import RuleOptions
from jss.model.rule import Rule, RuleKind
from jss.uid import IdGenerator

__all__ = ["classify", "build_rule"]

_CONDITIONAL_PREFIXES = ("@media", "@supports")
_KEYFRAMES_PREFIX = "@keyframes"
_FONT_FACE = "@font-face"


def classify(selector: str | None) -> RuleKind:
    """Return the rule kind implied by the shape of *selector*."""
    if not selector or not selector.startswith("@"):
        return RuleKind.REGULAR
    if selector.startswith(_CONDITIONAL_PREFIXES):
        return RuleKind.CONDITIONAL
    if selector.startswith(_KEYFRAMES_PREFIX):
        return RuleKind.KEYFRAME
    if selector.startswith(_FONT_FACE):
        return RuleKind.REGULAR
    return RuleKind.SIMPLE


def build_rule(
    selector: str | None,
    value: Any,
    options: RuleOptions,
    uid: IdGenerator,
) -> Rule:
    """Build a rule (and, for containers, its children) without running plugins.

    Raises:
        InvalidRuleInput: If *value* does not fit the kind *selector* implies.
    """
    kind = classify(selector)
    if kind is RuleKind.CONDITIONAL:
        return _build_conditional(selector, value, options, uid)
    if kind is RuleKind.KEYFRAME:
        return _build_keyframe(selector, value, options)
    if kind is RuleKind.SIMPLE:
        return _build_simple(selector, value, options)
    return _build_regular(selector, value, options, uid)


def _build_regular(
    selector: str | None, value: Any, options: RuleOptions, uid: IdGenerator
) -> Rule:
    if value is None:
        value = {}
    _require_mapping(value, selector, RuleKind.REGULAR)
    class_name = None
    if selector is None and options.named:
        class_name = uid.next()
        selector = "." + class_name
    return Rule(
        RuleKind.REGULAR,
        selector,
        style=dict(value),
        class_name=class_name,
        options=options,
    )


def _build_simple(selector: str, value: Any, options: RuleOptions) -> Rule:
    if not isinstance(value, str):
        raise InvalidRuleInput(
            f"{selector} expects a string value, got {type(value).__name__}",
            selector=selector,
            kind=RuleKind.SIMPLE.value,
        )
    return Rule(RuleKind.SIMPLE, selector, value=value, options=options)


def _build_keyframe(selector: str, value: Any, options: RuleOptions) -> Rule:
    _require_nested_mapping(value, selector, RuleKind.KEYFRAME)
    # Offsets ("from", "30%", "60%, 70%") are used verbatim, never auto-named.
    children = [
        Rule(RuleKind.REGULAR, offset, style=dict(body), options=options)
        for offset, body in value.items()
    ]
    return Rule(RuleKind.KEYFRAME, selector, children=children, options=options)


def _build_conditional(
    selector: str, value: Any, options: RuleOptions, uid: IdGenerator
) -> Rule:
    _require_nested_mapping(value, selector, RuleKind.CONDITIONAL)
    children = []
    for key, body in value.items():
        if key.startswith("@") or not options.named:
            children.append(build_rule(key, body, options, uid))
            continue
        known = options.sheet.classes.get(key) if options.sheet is not None else None
        if known is None:
            children.append(build_rule(None, body, options, uid))
            continue
        # A key the sheet already named keeps its class inside the query.
        child = build_rule("." + known, body, options, uid)
        child.class_name = known
        children.append(child)
    return Rule(RuleKind.CONDITIONAL, selector, children=children, options=options)


def _require_mapping(value: Any, selector: str | None, kind: RuleKind) -> None:
    if not isinstance(value, Mapping):
        raise InvalidRuleInput(
            f"{selector or 'rule'} expects a mapping of declarations, got {type(value).__name__}",
            selector=selector,
            kind=kind.value,
        )


def _require_nested_mapping(value: Any, selector: str, kind: RuleKind) -> None:
    _require_mapping(value, selector, kind)
    for key, body in value.items():
        if not is_nested(body):
            raise InvalidRuleInput(
                f"{selector} expects a mapping of nested rules; {key!r} maps to {type(body).__name__}",
                selector=selector,
                kind=kind.value,
            )
