"""jss: build CSS rules from Python mappings.

    >>> import jss
    >>> print(jss.create_rule("a", {"float": "left"}))
    a {
      float: left;
    }

The module-level functions share one process-wide engine, ``jss.default``.
Create a separate ``Jss`` instance for isolated class names and plugins.
"""

from jss.config import JssConfig
from jss.engine import Jss
from jss.errors import InvalidRuleInput, JssError
from jss.model import InlineStyle, LiveContext, Rule, RuleKind, RuleOptions
from jss.plugins import PluginRegistry, logging_plugin, nested
from jss.stylesheet import StyleSheet
from jss.uid import IdGenerator

__version__ = "0.1.0"

default = Jss()

create_rule = default.create_rule
create_style_sheet = default.create_style_sheet
use = default.use

__all__ = [
    "__version__",
    "Jss",
    "JssConfig",
    "JssError",
    "InvalidRuleInput",
    "Rule",
    "RuleKind",
    "RuleOptions",
    "LiveContext",
    "InlineStyle",
    "PluginRegistry",
    "IdGenerator",
    "StyleSheet",
    "nested",
    "logging_plugin",
    "default",
    "create_rule",
    "create_style_sheet",
    "use",
]
