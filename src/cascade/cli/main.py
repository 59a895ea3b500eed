"""Cascade CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cascade import __version__
from cascade.config import CascadeConfig


@click.group()
@click.version_option(version=__version__, prog_name="cascade")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option("--indent", default=None, type=int, help="Indent JSON output")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort JSON keys")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None, sort_keys: bool) -> None:
    """Cascade - build CSS selectors and convert shapes to and from JSON."""
    config = CascadeConfig(
        json_indent=indent, json_sort_keys=sort_keys, log_level=log_level.upper()
    )
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


# Import and register subcommands
from cascade.cli.selector import selector  # noqa: E402
from cascade.cli.shapes import decode, rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
cli.add_command(decode)
