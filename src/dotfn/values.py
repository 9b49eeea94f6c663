"""Truthiness and indexing rules for dynamically shaped values.

Path getters walk arbitrary nested data: dicts, lists, strings, plain objects
and primitives mixed freely. This module pins down the two operations such a
walk needs:

* ``is_falsy`` decides when a walk stops early. Falsy values are ``None``,
  ``False``, numeric zero, ``NaN`` and the empty string. Empty containers are
  truthy, which differs from Python's own ``bool()``.
* ``index`` reads one segment out of a value and returns ``None`` instead of
  raising when the segment does not exist.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["is_falsy", "is_truthy", "index"]

_PRIMITIVES = (numbers.Number, bytes, bytearray)


def is_falsy(value: Any) -> bool:
    """Return True for None, False, numeric zero, NaN and the empty string."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, numbers.Number) and not isinstance(value, complex):
        # NaN is the only value not equal to itself
        return value == 0 or value != value
    return False


def is_truthy(value: Any) -> bool:
    """Inverse of :func:`is_falsy`."""
    return not is_falsy(value)


def _as_position(key: str) -> int | None:
    if key.isdigit() and key.isascii():
        return int(key)
    return None


def index(value: Any, key: str) -> Any:
    """Look up ``key`` in ``value``, returning None when it is absent.

    Args:
        value: The container (or non-container) to index.
        key: A single path segment.

    Returns:
        The found value, or None. Never raises for a missing key or an
        unindexable value.
    """
    if value is None or isinstance(value, _PRIMITIVES):
        return None

    if isinstance(value, Mapping):
        if key in value:
            return value[key]
        position = _as_position(key)
        if position is not None:
            return value.get(position)
        return None

    if isinstance(value, Sequence):
        position = _as_position(key)
        if position is None or position >= len(value):
            return None
        return value[position]

    if key.startswith("_"):
        return None
    return getattr(value, key, None)
