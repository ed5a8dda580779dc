"""CLI command: gquery parse -- display the parts of a selector."""

from __future__ import annotations

import sys

import click

from gquery.errors import ParseError
from gquery.selector import parse_selector


@click.command()
@click.argument("selector")
def parse(selector: str) -> None:
    """Parse SELECTOR and print one line per selector part."""
    try:
        parts = parse_selector(selector)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not parts:
        click.echo("(no parts)")
        return

    for i, part in enumerate(parts):
        click.echo(f"  {i}: {part}")
