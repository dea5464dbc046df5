"""Plugins run over every constructed rule."""

from jss.plugins.log import logging_plugin
from jss.plugins.nested import nested
from jss.plugins.registry import Plugin, PluginRegistry

__all__ = [
    "Plugin",
    "PluginRegistry",
    "nested",
    "logging_plugin",
]
