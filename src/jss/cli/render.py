"""CLI commands: jss render / jss classes -- build a style sheet from a JSON file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from jss.engine import Jss
from jss.errors import InvalidRuleInput
from jss.plugins import nested as nested_plugin
from jss.stylesheet import StyleSheet


def _load_sheet(stylefile: str, named: bool, nested: bool) -> StyleSheet:
    """Read *stylefile* and build a StyleSheet, exiting with code 1 on bad input."""
    path = Path(stylefile)
    try:
        styles = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {path.name}: {exc}", err=True)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        click.echo(f"{path.name} is not UTF-8 text: {exc}", err=True)
        sys.exit(1)
    if not isinstance(styles, dict):
        click.echo(f"{path.name} must contain a JSON object of styles", err=True)
        sys.exit(1)

    engine = Jss()
    if nested:
        engine.use(nested_plugin)
    try:
        return engine.create_style_sheet(styles, named=named)
    except InvalidRuleInput as exc:
        click.echo(f"Invalid rule: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("stylefile", type=click.Path(exists=True))
@click.option("--named/--no-named", default=True, help="Generate class names for plain keys")
@click.option("--nested/--no-nested", default=True, help="Expand '&' nested selectors")
def render(stylefile: str, named: bool, nested: bool) -> None:
    """Render a JSON style file to CSS.

    The file holds a JSON object mapping rule keys to styles.  With
    --named (the default) plain keys get generated class names; with
    --no-named they are used as selectors.
    """
    sheet = _load_sheet(stylefile, named, nested)
    click.echo(sheet.to_string())


@click.command()
@click.argument("stylefile", type=click.Path(exists=True))
@click.option("--nested/--no-nested", default=True, help="Expand '&' nested selectors")
def classes(stylefile: str, nested: bool) -> None:
    """Print the generated class names of a JSON style file as JSON."""
    sheet = _load_sheet(stylefile, True, nested)
    click.echo(json.dumps(sheet.classes, indent=2))
