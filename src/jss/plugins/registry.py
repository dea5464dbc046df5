"""Ordered plugin registry run over every constructed rule tree."""

from __future__ import annotations

import logging
from typing import Callable

from jss.model.rule import Rule

logger = logging.getLogger(__name__)

Plugin = Callable[[Rule], None]


class PluginRegistry:
    """Append-only list of plugins called on each rule in registration order.

    Plugins communicate by mutating the rule; return values are ignored.
    Exceptions raised by a plugin are not caught and abort the run.
    """

    def __init__(self) -> None:
        self.registry: list[Plugin] = []

    def use(self, plugin: Plugin) -> None:
        """Append *plugin* to the registry."""
        self.registry.append(plugin)

    def clear(self) -> None:
        """Remove every registered plugin."""
        self.registry.clear()

    def run(self, rule: Rule) -> None:
        """Run all plugins over *rule*, children first for container rules."""
        if not self.registry:
            return
        for child in rule.children:
            self.run(child)
        logger.debug("Running %d plugin(s) on %r", len(self.registry), rule)
        for plugin in self.registry:
            plugin(rule)

    def __len__(self) -> int:
        return len(self.registry)
