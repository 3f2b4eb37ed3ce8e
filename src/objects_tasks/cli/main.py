"""objects-tasks CLI entry point: Click group with subcommands."""

import logging

import click

from objects_tasks import __version__
from objects_tasks.config import ObjectsTasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objects-tasks")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objects-tasks - rectangle, JSON and CSS selector utilities."""
    config = ObjectsTasksConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from objects_tasks.cli.selector import selector  # noqa: E402
from objects_tasks.cli.rect import rect  # noqa: E402

cli.add_command(selector)
cli.add_command(rect)
