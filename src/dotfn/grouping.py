"""Build dicts from iterables keyed by a path or key function."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Union

from dotfn.functional import ensure_fn

__all__ = ["group_by", "index_by", "map_keys", "for_each_key"]

KeySpec = Union[Callable[[Any], Any], str]


def _group_key(value: Any) -> Any:
    # unhashable keys (lists, dicts) group under their str() form
    try:
        hash(value)
    except TypeError:
        return str(value)
    return value


def group_by(key: KeySpec, items: Iterable[Any]) -> dict[Any, list[Any]]:
    """Group ``items`` into lists by the key derived from each item.

    Args:
        key: Dot path or function deriving the group key from an item.
        items: The items to group.

    Returns:
        A dict from derived key to the items sharing it, in input order.
        Unhashable keys are replaced by their ``str()`` form.
    """
    key_fn = ensure_fn(key)
    groups: dict[Any, list[Any]] = {}
    for item in items:
        groups.setdefault(_group_key(key_fn(item)), []).append(item)
    return groups


def index_by(key: KeySpec, items: Iterable[Any]) -> dict[Any, Any]:
    """Like :func:`group_by` but keeps only the last item for each key."""
    key_fn = ensure_fn(key)
    return {_group_key(key_fn(item)): item for item in items}


def map_keys(obj: Mapping[Any, Any], fn: Callable[[Any, Any], Any]) -> list[Any]:
    """Call ``fn(key, value)`` for each entry and collect the results."""
    return [fn(k, v) for k, v in obj.items()]


def for_each_key(obj: Mapping[Any, Any], fn: Callable[[Any, Any], Any]) -> None:
    """Call ``fn(key, value)`` for each entry."""
    for k, v in obj.items():
        fn(k, v)
