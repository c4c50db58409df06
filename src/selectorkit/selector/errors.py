"""Error types raised while building selectors."""

from __future__ import annotations

from selectorkit.selector.category import PartCategory

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for malformed selector construction."""

    def __init__(self, message: str, *, category: PartCategory) -> None:
        super().__init__(message)
        self.category = category


class OrderViolationError(SelectorError):
    """A part was appended after a higher-ranked part in the same chain."""

    def __init__(self, category: PartCategory, previous_rank: int) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
        self.previous_rank = previous_rank


class DuplicatePartError(SelectorError):
    """element, id or pseudo-element was appended twice in the same chain."""

    def __init__(self, category: PartCategory) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category)
