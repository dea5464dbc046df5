"""Command-line interface for jss."""

from jss.cli.main import cli

__all__ = ["cli"]
