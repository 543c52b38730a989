# Role: Ordered optional-field lookups. Walks loosely-shaped JSON (dicts/lists) without raising and picks
# the first usable value from a list of candidates, falling back to a default.

from __future__ import annotations

import math
from typing import Any, Iterable, Union

PathKey = Union[str, int]


def dig(data: Any, *path: PathKey) -> Any:
    """
    Follow `path` through nested dicts (str keys) and lists (int indexes).
    Returns None as soon as any step is missing or has the wrong shape.
    """
    current = data
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(current, (list, tuple)) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
    return current


def is_present(value: Any) -> bool:
    # Key line: only null / false / "" / 0 / NaN count as absent. Empty objects and arrays are present.
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not math.isnan(value)
    return True


def first_present(candidates: Iterable[Any], default: Any) -> Any:
    for value in candidates:
        if is_present(value):
            return value
    return default
