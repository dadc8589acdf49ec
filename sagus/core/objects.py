"""Object-shape helpers: trimming, key selection, validity, iteration."""

from __future__ import annotations

import math
from collections.abc import Collection, Iterable, Iterator, Mapping
from typing import Any

from sagus.core.types import Entry


def is_valid(value: Any) -> bool:
    """False for ``None``, NaN and empty or whitespace-only strings."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def is_valid_object(value: Any) -> bool:
    """Like :func:`is_valid`, but empty mappings and collections are invalid too."""
    if not is_valid(value):
        return False
    if isinstance(value, (str, bytes)):
        return True
    if isinstance(value, (Mapping, Collection)):
        return len(value) > 0
    return True


def trim_object(obj: Mapping[Any, Any]) -> dict[Any, Any]:
    """Copy of ``obj`` without invalid values, recursing into nested mappings."""
    trimmed: dict[Any, Any] = {}
    for key, value in obj.items():
        if not is_valid(value):
            continue
        if isinstance(value, Mapping):
            trimmed[key] = trim_object(value)
        else:
            trimmed[key] = value
    return trimmed


def pick_keys(obj: Mapping[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    return {key: obj[key] for key in keys if key in obj}


def remove_keys(obj: Mapping[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def iterate(obj: Mapping[Any, Any] | Iterable[Any]) -> Iterator[Entry]:
    """Lazily yield ``Entry(key, value)`` pairs.

    Mappings yield their items in insertion order; sequences yield
    ``(index, item)``.
    """
    if isinstance(obj, Mapping):
        for key, value in obj.items():
            yield Entry(key, value)
    else:
        for index, value in enumerate(obj):
            yield Entry(index, value)
