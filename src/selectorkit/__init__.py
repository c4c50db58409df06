"""selectorkit: fluent CSS selector builder and small data helpers."""

from selectorkit.config import SelectorKitConfig
from selectorkit.parser import ParseError, parse_selector
from selectorkit.selector import (
    DuplicatePartError,
    OrderViolationError,
    SelectorError,
    SelectorExpression,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SelectorKitConfig",
    "SelectorExpression",
    "SelectorError",
    "OrderViolationError",
    "DuplicatePartError",
    "css_selector_builder",
    "ParseError",
    "parse_selector",
]
