"""gquery CLI entry point: Click group with subcommands."""

import logging

import click

from gquery import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gquery")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """gquery - jQuery-style selectors over JSON data."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from gquery.cli.parse import parse  # noqa: E402
from gquery.cli.query import query  # noqa: E402

cli.add_command(query)
cli.add_command(parse)
