"""CLI command: gquery query -- run a selector against a JSON file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from gquery import gquery
from gquery.config import AdapterOptions
from gquery.errors import ParseError


@click.command()
@click.argument("datafile", type=click.Path(exists=True, dir_okay=False))
@click.argument("selector")
@click.option("--id", "id_field", default=None, help="Field holding a record's id")
@click.option("--name", "name_field", default=None, help="Field holding a record's name")
@click.option("--class", "class_field", default=None, help="Field holding a record's class")
@click.option("--children", "children_field", default=None, help="Field holding a record's children")
@click.option("--prop", "prop_name", default=None, help="Print this property of the first match")
def query(
    datafile: str,
    selector: str,
    id_field: str | None,
    name_field: str | None,
    class_field: str | None,
    children_field: str | None,
    prop_name: str | None,
) -> None:
    """Load DATAFILE as JSON and print the records matching SELECTOR."""
    try:
        data = json.loads(Path(datafile).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)

    options = AdapterOptions(
        id=id_field,
        name=name_field,
        class_=class_field,
        children=children_field,
    )

    try:
        result = gquery(data, options)(selector)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if prop_name is not None:
        click.echo(json.dumps(result.prop(prop_name)))
        return

    click.echo(result.inspect())
