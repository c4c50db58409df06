"""CLI commands: selectorkit build / check / combine."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.parser import ParseError, parse_selector
from selectorkit.selector import SelectorError, css_selector_builder


@click.command()
@click.option("--element", "element_", default=None, help="Element (type) selector")
@click.option("--id", "id_", default=None, help="Id selector, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute body, repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable")
@click.option("--pseudo-element", default=None, help="Pseudo-element, without '::'")
def build(
    element_: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Assemble a compound selector from its parts in canonical order."""
    expr = css_selector_builder
    if element_:
        expr = expr.element(element_)
    if id_:
        expr = expr.id(id_)
    for name in classes:
        expr = expr.class_(name)
    for body in attrs:
        expr = expr.attr(body)
    for name in pseudo_classes:
        expr = expr.pseudo_class(name)
    if pseudo_element:
        expr = expr.pseudo_element(pseudo_element)
    click.echo(expr.stringify())


@click.command()
@click.argument("selectors", nargs=-1, required=True)
def check(selectors: tuple[str, ...]) -> None:
    """Parse each selector and report order or duplicate violations.

    Exits with code 1 if any selector is rejected.
    """
    failures = 0
    for source in selectors:
        try:
            expr = parse_selector(source)
        except ParseError as exc:
            failures += 1
            where = f" at {exc.location}" if exc.location else ""
            click.echo(f"Parse error in {source!r}{where}", err=True)
        except SelectorError as exc:
            failures += 1
            click.echo(f"Error in {source!r}: {exc}", err=True)
        else:
            click.echo(f"OK: {expr.stringify()}")

    if failures:
        click.echo(f"Summary: {failures} of {len(selectors)} selector(s) rejected", err=True)
        sys.exit(1)


@click.command()
@click.argument("left")
@click.argument("combinator", type=click.Choice(list(SelectorKitConfig.combinators)))
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two selectors with a combinator (' ', '+', '~' or '>')."""
    try:
        result = css_selector_builder.combine(
            parse_selector(left), combinator, parse_selector(right)
        )
    except (ParseError, SelectorError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())
