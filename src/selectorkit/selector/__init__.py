from selectorkit.selector.builder import (
    COMBINATORS,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
    stringify,
)
from selectorkit.selector.category import PartCategory
from selectorkit.selector.errors import DuplicatePartError, OrderViolationError, SelectorError
from selectorkit.selector.expression import SelectorExpression

__all__ = [
    "COMBINATORS",
    "PartCategory",
    "SelectorExpression",
    "SelectorError",
    "OrderViolationError",
    "DuplicatePartError",
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
