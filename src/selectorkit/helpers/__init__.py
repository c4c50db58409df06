"""Stateless helpers that sit alongside the selector builder."""

from selectorkit.helpers.grouping import group, sort_cities_array
from selectorkit.helpers.objects import (
    FrozenObject,
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    merge_objects,
    remove_properties,
    shallow_copy,
)
from selectorkit.helpers.serialization import Rectangle, from_json, get_json
from selectorkit.helpers.tickets import TICKET_PRICE, sell_tickets

__all__ = [
    # objects
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "FrozenObject",
    "make_immutable",
    "make_word",
    # tickets
    "TICKET_PRICE",
    "sell_tickets",
    # serialization
    "Rectangle",
    "get_json",
    "from_json",
    # grouping
    "sort_cities_array",
    "group",
]
