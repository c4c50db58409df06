"""Immutable selector expression and the fluent builder operations on it.

Every part operation returns a new :class:`SelectorExpression`; the receiver
is left untouched so a common prefix can be branched freely::

    base = css_selector_builder.element("div")
    base.class_("a").stringify()   # 'div.a'
    base.class_("b").stringify()   # 'div.b'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from selectorkit.selector.category import PartCategory
from selectorkit.selector.errors import DuplicatePartError, OrderViolationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorExpression:
    """A rendered selector plus the chain state needed to validate appends.

    Attributes:
        text: The accumulated (or combined) rendering.
        rank: Rank of the most recently appended category, ``None`` for a
            fresh or combined expression.
        seen: Once-only categories already appended in this chain.
    """

    text: str = ""
    rank: int | None = None
    seen: frozenset[PartCategory] = field(default_factory=frozenset)

    # --- chain state ----------------------------------------------------------

    @property
    def has_element(self) -> bool:
        return PartCategory.ELEMENT in self.seen

    @property
    def has_id(self) -> bool:
        return PartCategory.ID in self.seen

    @property
    def has_pseudo_element(self) -> bool:
        return PartCategory.PSEUDO_ELEMENT in self.seen

    # --- part operations ------------------------------------------------------

    def element(self, value: str) -> SelectorExpression:
        return self.append(PartCategory.ELEMENT, value)

    def id(self, value: str) -> SelectorExpression:
        return self.append(PartCategory.ID, value)

    def class_(self, value: str) -> SelectorExpression:
        return self.append(PartCategory.CLASS, value)

    def attr(self, value: str) -> SelectorExpression:
        return self.append(PartCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorExpression:
        return self.append(PartCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorExpression:
        return self.append(PartCategory.PSEUDO_ELEMENT, value)

    def append(self, category: PartCategory, value: str) -> SelectorExpression:
        """Return a successor with *value* appended as a *category* part.

        Once-only categories are checked for duplicates before the order
        check, so ``id('a').id('b')`` raises :class:`DuplicatePartError`.
        """
        if category.once and category in self.seen:
            log.debug("Rejected duplicate %s %r after %r", category.label, value, self.text)
            raise DuplicatePartError(category)
        if self.rank is not None and self.rank > category.rank:
            log.debug("Rejected out-of-order %s %r after %r", category.label, value, self.text)
            raise OrderViolationError(category, self.rank)

        seen = self.seen | {category} if category.once else self.seen
        return SelectorExpression(
            text=self.text + category.render(value),
            rank=category.rank,
            seen=seen,
        )

    # --- composition ----------------------------------------------------------

    def combine(
        self, left: SelectorExpression, combinator: str, right: SelectorExpression
    ) -> SelectorExpression:
        """Join two expressions with *combinator*.

        The receiver's own state is not used. The combinator is taken
        verbatim and the result starts a fresh chain.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        log.debug("Combined selector: %r", text)
        return SelectorExpression(text=text)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
