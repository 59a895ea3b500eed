"""CLI commands: cascade rectangle / cascade decode."""

from __future__ import annotations

import sys
from typing import BinaryIO

import click

from cascade.config import CascadeConfig
from cascade.errors import CascadeError
from cascade.serialization import deserialize, serialize
from cascade.shapes import Rectangle, make_rectangle


def _number(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rectangle(config: CascadeConfig, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    try:
        rect = make_rectangle(_number(width), _number(height))
        output = serialize(rect, config=config) if as_json else f"{rect.area():g}"
    except CascadeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(output)


@click.command()
@click.argument("source", type=click.File("rb"))
@click.option(
    "--field",
    "fields",
    multiple=True,
    help="JSON key to pass to the constructor, in order (repeatable)",
)
def decode(source: BinaryIO, fields: tuple[str, ...]) -> None:
    """Read rectangle JSON from SOURCE ('-' for stdin) and describe it.

    Without --field the object's values are used in key order.
    """
    try:
        rect = deserialize(Rectangle, source.read(), fields=fields or None)
    except CascadeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"width={rect.width:g} height={rect.height:g} area={rect.area():g}")
