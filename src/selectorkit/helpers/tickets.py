"""Greedy change-making for a single-price ticket queue."""

from __future__ import annotations

import logging
from collections.abc import Iterable

log = logging.getLogger(__name__)

TICKET_PRICE = 25


def sell_tickets(queue: Iterable[int], price: int = TICKET_PRICE) -> bool:
    """Return True if every customer in *queue* can be given exact change.

    The seller starts with no money and serves customers strictly in order.
    Change is taken greedily from the largest bills received so far that
    still fit the amount owed.
    """
    bank: list[int] = []  # largest bill first
    for position, bill in enumerate(queue):
        owed = bill - price
        if owed < 0:
            log.debug("Customer %d paid %d, below the price of %d", position, bill, price)
            return False
        if owed > 0:
            given = 0
            kept: list[int] = []
            for note in bank:
                if given + note <= owed:
                    given += note
                else:
                    kept.append(note)
            if given != owed:
                log.debug("Customer %d paid %d, short of change by %d", position, bill, owed - given)
                return False
            bank = kept
        bank.append(bill)
        bank.sort(reverse=True)
    return True
