"""Rule engine: an explicit context owning the id generator and plugin registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jss.config import JssConfig
from jss.errors import InvalidRuleInput
from jss.factory import build_rule
from jss.model.options import RuleOptions
from jss.model.rule import Rule
from jss.plugins.registry import Plugin, PluginRegistry
from jss.uid import IdGenerator

if TYPE_CHECKING:
    from jss.stylesheet import StyleSheet

logger = logging.getLogger(__name__)


class Jss:
    """Entry point for building rules.

    Each instance has its own class-name counters and plugin registry, so
    independent instances never see each other's names or plugins.
    """

    def __init__(
        self,
        config: JssConfig | None = None,
        *,
        plugins: PluginRegistry | None = None,
        uid: IdGenerator | None = None,
    ) -> None:
        self.config = config or JssConfig()
        self.uid = uid if uid is not None else IdGenerator(
            self.config.class_prefix, self.config.namespace
        )
        self.plugins = plugins if plugins is not None else PluginRegistry()

    def use(self, *plugins: Plugin) -> Jss:
        """Register one or more plugins, in order."""
        for plugin in plugins:
            self.plugins.use(plugin)
        return self

    def build_rule(
        self,
        selector_or_style: str | Mapping[str, Any] | None = None,
        style: Any = None,
        options: RuleOptions | None = None,
    ) -> Rule:
        """Build a rule without running plugins.

        Accepts the same argument forms as ``create_rule``.
        """
        selector, style, options = _split_args(selector_or_style, style, options)
        return build_rule(selector, style, options or RuleOptions(), self.uid)

    def create_rule(
        self,
        selector_or_style: str | Mapping[str, Any] | None = None,
        style: Any = None,
        options: RuleOptions | None = None,
    ) -> Rule:
        """Build a rule and run the plugin pipeline over it.

        Accepted forms::

            create_rule(style)
            create_rule(style, options)
            create_rule(selector, style)
            create_rule(selector, style, options)

        Raises:
            InvalidRuleInput: If the value does not fit the selector's rule kind.
        """
        rule = self.build_rule(selector_or_style, style, options)
        logger.debug("Created %r", rule)
        self.plugins.run(rule)
        return rule

    def create_style_sheet(
        self, styles: Mapping[str, Any] | None = None, *, named: bool = True
    ) -> StyleSheet:
        """Create a StyleSheet whose rules are built by this engine."""
        from jss.stylesheet import StyleSheet

        return StyleSheet(self, styles, named=named)

    def __repr__(self) -> str:
        return f"Jss(uid={self.uid!r}, plugins={len(self.plugins)})"


def _split_args(
    selector_or_style: Any, style: Any, options: RuleOptions | None
) -> tuple[str | None, Any, RuleOptions | None]:
    """Normalize the overloaded ``create_rule`` arguments to (selector, style, options)."""
    if isinstance(selector_or_style, Mapping):
        if style is not None and not isinstance(style, RuleOptions):
            raise InvalidRuleInput(
                f"Expected RuleOptions after a style mapping, got {type(style).__name__}"
            )
        return None, selector_or_style, style or options
    if selector_or_style is not None and not isinstance(selector_or_style, str):
        raise InvalidRuleInput(
            f"Selector must be a string, got {type(selector_or_style).__name__}"
        )
    return selector_or_style, style, options
