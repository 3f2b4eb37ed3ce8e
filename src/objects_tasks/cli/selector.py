"""CLI command: objects-tasks selector -- build a selector from parts."""

from __future__ import annotations

import sys

import click

from objects_tasks.errors import SelectorError
from objects_tasks.selector import PartKind, SelectorBuilder

_ALIASES = {"attr": "attribute"}


def _parse_token(token: str) -> tuple[PartKind, str]:
    label, sep, value = token.partition(":")
    if not sep:
        raise click.BadParameter(
            f"expected KIND:VALUE, got {token!r}", param_hint="TOKEN"
        )
    try:
        kind = PartKind.from_label(_ALIASES.get(label, label))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="TOKEN") from exc
    return kind, value


@click.command()
@click.argument("tokens", metavar="TOKEN...", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build a compound selector from KIND:VALUE tokens, in order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.

    Example: objects-tasks selector element:a id:main class:x
    """
    parsed = [_parse_token(token) for token in tokens]

    builder = SelectorBuilder()
    try:
        for kind, value in parsed:
            builder.add(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
