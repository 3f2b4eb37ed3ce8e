"""CLI command: objects-tasks rect -- show a rectangle's area or JSON."""

from __future__ import annotations

import dataclasses

import click

from objects_tasks.config import ObjectsTasksConfig
from objects_tasks.serialization import get_json
from objects_tasks.shapes import make_rectangle


def _format_area(area: float) -> str:
    if area.is_integer():
        return str(int(area))
    return repr(area)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.option("--indent", type=int, default=None, help="JSON indentation")
@click.pass_obj
def rect(
    config: ObjectsTasksConfig | None,
    width: float,
    height: float,
    as_json: bool,
    indent: int | None,
) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rectangle = make_rectangle(width, height)
    if as_json:
        cfg = dataclasses.replace(config or ObjectsTasksConfig(), json_indent=indent)
        click.echo(get_json(rectangle, cfg))
        return
    click.echo(_format_area(rectangle.get_area()))
