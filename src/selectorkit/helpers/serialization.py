"""Minimal JSON rendering and typed parsing for flat values.

Only a top-level list or a flat mapping is rendered; nested containers are
out of scope. Parsing rebuilds an instance from a flat JSON object by
passing its values positionally, in key order, to a constructor.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass
class Rectangle:
    """A width x height rectangle."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def get_json(obj: Any) -> str:
    """Render a list/tuple or flat mapping as compact JSON.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    >>> get_json({"width": 10, "height": 20})
    '{"width":10,"height":20}'
    """
    if isinstance(obj, (list, tuple)):
        return "[" + ",".join(_scalar(item) for item in obj) + "]"
    if isinstance(obj, Mapping):
        pairs = (f"{_scalar(str(key))}:{_scalar(value)}" for key, value in obj.items())
        return "{" + ",".join(pairs) + "}"
    return ""


def from_json(constructor: Callable[..., T], text: str) -> T:
    """Build ``constructor(*values)`` from a flat JSON object.

    Raises ``json.JSONDecodeError`` for malformed text and ``TypeError``
    when the payload is not a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    return constructor(*data.values())
