"""Small helpers over flat mappings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

log = logging.getLogger(__name__)


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict sharing *obj*'s top-level values."""
    return dict(obj)


def merge_objects(objects: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge mappings left to right, summing values of overlapping keys."""
    result: dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            if key in result:
                result[key] += value
            else:
                result[key] = value
    return result


def remove_properties(obj: dict[str, Any], keys: Iterable[str] | str) -> dict[str, Any]:
    """Delete *keys* from *obj* in place and return it.

    Missing keys are ignored; a bare string is treated as a single key.
    """
    if isinstance(keys, str):
        keys = [keys]
    for key in keys:
        obj.pop(key, None)
    return obj


def compare_objects(first: Mapping[str, Any], second: Mapping[str, Any]) -> bool:
    """Shallow equality: same key count and equal values for every key."""
    if len(first) != len(second):
        return False
    return all(key in second and first[key] == second[key] for key in first)


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return not obj


class FrozenObject(Mapping[str, Any]):
    """Read-only view of a mapping whose writes are silently dropped.

    Values are reachable both as items and as attributes.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_data", dict(data))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setitem__(self, key: str, value: Any) -> None:
        log.debug("Ignored write to frozen key %r", key)

    def __delitem__(self, key: str) -> None:
        log.debug("Ignored delete of frozen key %r", key)

    def __setattr__(self, name: str, value: Any) -> None:
        log.debug("Ignored write to frozen attribute %r", name)

    def __delattr__(self, name: str) -> None:
        log.debug("Ignored delete of frozen attribute %r", name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FrozenObject({self._data!r})"


def make_immutable(obj: Mapping[str, Any]) -> FrozenObject:
    return FrozenObject(obj)


def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """Rebuild a word from a letter -> positions mapping.

    >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
    'aabbcc'
    """
    placed = [
        (position, letter)
        for letter, positions in letters.items()
        for position in positions
    ]
    placed.sort(key=lambda pair: pair[0])
    return "".join(letter for _, letter in placed)
