"""CLI command: selectorkit tickets -- simulate the change-making queue."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.helpers import sell_tickets


@click.command()
@click.argument("bills", nargs=-1, type=int, required=True)
@click.option("--price", type=int, default=None, help="Ticket price (default from config)")
@click.pass_obj
def tickets(config: SelectorKitConfig | None, bills: tuple[int, ...], price: int | None) -> None:
    """Check whether every customer paying BILLS can get exact change."""
    config = config or SelectorKitConfig()
    ok = sell_tickets(bills, price=price if price is not None else config.ticket_price)
    click.echo("yes" if ok else "no")
    sys.exit(0 if ok else 1)
