from __future__ import annotations

from dataclasses import dataclass

from selectorkit.helpers.tickets import TICKET_PRICE
from selectorkit.selector.builder import COMBINATORS


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    ticket_price: int = TICKET_PRICE
    combinators: tuple[str, ...] = COMBINATORS
