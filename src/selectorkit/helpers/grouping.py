"""Sorting and grouping of record sequences."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def sort_cities_array(
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str] = ("country", "city"),
) -> list[Mapping[str, Any]]:
    """Return *records* sorted ascending by each of *fields* in turn."""
    return sorted(records, key=lambda record: tuple(record[name] for name in fields))


def group(
    items: Iterable[T],
    key_selector: Callable[[T], K],
    value_selector: Callable[[T], V],
) -> dict[K, list[V]]:
    """Build a multimap of ``key_selector(item) -> [value_selector(item), ...]``.

    Keys keep first-seen order; values keep input order.
    """
    result: defaultdict[K, list[V]] = defaultdict(list)
    for item in items:
        result[key_selector(item)].append(value_selector(item))
    return dict(result)
