"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=SelectorKitConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """selectorkit - build and check CSS selector strings."""
    config = SelectorKitConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.selectors import build, check, combine  # noqa: E402
from selectorkit.cli.tickets import tickets  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(combine)
cli.add_command(tickets)
