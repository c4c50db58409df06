"""Lark Transformer that replays a selector parse tree through the builder."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from selectorkit.parser.errors import ParseError
from selectorkit.selector.builder import css_selector_builder
from selectorkit.selector.category import PartCategory
from selectorkit.selector.expression import SelectorExpression

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger(__name__)

# Terminal name -> category appended for it.
_TOKEN_CATEGORIES: dict[str, PartCategory] = {
    "ELEMENT": PartCategory.ELEMENT,
    "ID": PartCategory.ID,
    "CLASS": PartCategory.CLASS,
    "ATTRIBUTE": PartCategory.ATTRIBUTE,
    "PSEUDO_CLASS": PartCategory.PSEUDO_CLASS,
    "PSEUDO_ELEMENT": PartCategory.PSEUDO_ELEMENT,
}


def _strip_tokens(raw: str, category: PartCategory) -> str:
    """Remove the category's prefix/suffix from a raw token."""
    end = len(raw) - len(category.suffix)
    return raw[len(category.prefix):end]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a :class:`SelectorExpression`."""

    def compound(self, items: list[Token]) -> SelectorExpression:
        # Parts are appended in source order so the builder rejects
        # misordered or repeated parts exactly as a hand-built chain would.
        expr = css_selector_builder
        for token in items:
            category = _TOKEN_CATEGORIES[token.type]
            expr = expr.append(category, _strip_tokens(str(token), category))
        return expr

    def complex(self, items: list[object]) -> SelectorExpression:
        compounds: list[SelectorExpression] = items[0::2]  # type: ignore[assignment]
        combinators = [str(t).strip() or " " for t in items[1::2]]

        # Fold right: a + b ~ c -> combine(a, '+', combine(b, '~', c)).
        result = compounds[-1]
        for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
            result = css_selector_builder.combine(left, combinator, result)
        return result


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_selector(source: str) -> SelectorExpression:
    """Parse selector text into a SelectorExpression.

    Raises :class:`ParseError` for text outside the grammar, and the
    builder's own errors for misordered or duplicated parts.
    """
    text = source.strip()
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e

    try:
        expr = SelectorTransformer().transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
    log.debug("Parsed %r -> %r", source, expr.stringify())
    return expr
