"""jss CLI entry point: Click group with subcommands."""

import logging

import click

from jss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="jss")
@click.option("-v", "--verbose", is_flag=True, help="Log rule construction to stderr")
def cli(verbose: bool) -> None:
    """jss - build CSS from JSON style definitions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from jss.cli.render import classes, render  # noqa: E402

cli.add_command(render)
cli.add_command(classes)
