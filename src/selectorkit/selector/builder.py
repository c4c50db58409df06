"""Module-level builder facade over a shared empty root expression."""

from __future__ import annotations

from selectorkit.selector.expression import SelectorExpression

__all__ = [
    "COMBINATORS",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
]

# Descendant, adjacent sibling, general sibling, child.
COMBINATORS = (" ", "+", "~", ">")

css_selector_builder = SelectorExpression()


def element(value: str) -> SelectorExpression:
    return css_selector_builder.element(value)


def id_(value: str) -> SelectorExpression:
    return css_selector_builder.id(value)


def class_(value: str) -> SelectorExpression:
    return css_selector_builder.class_(value)


def attr(value: str) -> SelectorExpression:
    return css_selector_builder.attr(value)


def pseudo_class(value: str) -> SelectorExpression:
    return css_selector_builder.pseudo_class(value)


def pseudo_element(value: str) -> SelectorExpression:
    return css_selector_builder.pseudo_element(value)


def combine(
    left: SelectorExpression, combinator: str, right: SelectorExpression
) -> SelectorExpression:
    """Render ``left combinator right`` as a new, stateless expression."""
    return css_selector_builder.combine(left, combinator, right)


def stringify(expr: SelectorExpression) -> str:
    return expr.stringify()
