"""Built-in logging plugin."""

from __future__ import annotations

import logging

from jss.model.rule import Rule
from jss.plugins.registry import Plugin


def logging_plugin(logger: logging.Logger | None = None) -> Plugin:
    """Create a plugin that logs each rule's kind and selector."""
    log = logger or logging.getLogger("jss")

    def plugin(rule: Rule) -> None:
        log.debug(
            "Rule built: kind=%s selector=%s declarations=%d children=%d",
            rule.type,
            rule.selector,
            len(rule.style),
            len(rule.children),
        )

    return plugin
