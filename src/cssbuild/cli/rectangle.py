"""CLI command: cssbuild rectangle -- print a rectangle and its area as JSON."""

from __future__ import annotations

import click

from cssbuild.config import CssbuildConfig
from cssbuild.objects import Rectangle, to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.option("--sort-keys", is_flag=True, help="Sort JSON keys")
def rectangle(width: float, height: float, indent: int | None, sort_keys: bool) -> None:
    """Print a WIDTH x HEIGHT rectangle with its area as JSON."""
    config = CssbuildConfig(json_indent=indent, sort_keys=sort_keys)
    rect = Rectangle(width=width, height=height)
    payload = {"width": rect.width, "height": rect.height, "area": rect.area}
    click.echo(to_json(payload, indent=config.json_indent, sort_keys=config.sort_keys))
