"""Selector part categories and their fixed syntax order."""

from __future__ import annotations

from enum import Enum


class PartCategory(Enum):
    """One kind of compound-selector fragment.

    Each member carries its rank in the required syntax order
    (``element#id.class[attr]:pseudo-class::pseudo-element``), the tokens
    wrapped around the value when rendered, and whether it may occur only
    once per chain.
    """

    ELEMENT = (1, "", "", True)
    ID = (2, "#", "", True)
    CLASS = (3, ".", "", False)
    ATTRIBUTE = (4, "[", "]", False)
    PSEUDO_CLASS = (5, ":", "", False)
    PSEUDO_ELEMENT = (6, "::", "", True)

    def __init__(self, rank: int, prefix: str, suffix: str, once: bool) -> None:
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.once = once

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"
