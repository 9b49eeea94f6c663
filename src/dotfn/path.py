"""Dot-path getters and setters with a memoized getter compiler."""

from __future__ import annotations

import logging
import threading
from collections.abc import MutableMapping
from typing import Any, Callable

from dotfn.values import index, is_falsy

__all__ = ["Getter", "GetterCache", "default_cache", "parse_path", "getter", "G", "get", "set"]

_logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]


def parse_path(path: str | None) -> tuple[str, ...]:
    """Split a dot-delimited path into its segments.

    A falsy path (None or "") has no segments.
    """
    if not path:
        return ()
    return tuple(path.split("."))


def _compile(segments: tuple[str, ...]) -> Getter:
    def read(ctx: Any) -> Any:
        result = ctx
        for key in segments:
            if is_falsy(result):
                break
            result = index(result, key)
        return result

    return read


class GetterCache:
    """Maps path strings to compiled getter functions.

    Entries are created on first request and kept until :meth:`clear` is
    called; there is no size limit. None and "" share the same entry.

    Thread safety:
        Inserts are synchronized. When two threads compile the same path at
        once, the first stored function is returned to both.
    """

    def __init__(self) -> None:
        self._getters: dict[str, Getter] = {}
        self._lock = threading.Lock()

    def get_or_compile(self, path: str | None) -> Getter:
        """Return the cached getter for ``path``, compiling it on first use."""
        key = path or ""
        cached = self._getters.get(key)
        if cached is not None:
            return cached

        compiled = _compile(parse_path(key))
        with self._lock:
            cached = self._getters.setdefault(key, compiled)
        if cached is compiled:
            _logger.debug("Compiled getter for path %r", key)
        return cached

    def clear(self) -> None:
        """Drop every cached getter."""
        with self._lock:
            self._getters.clear()

    def __contains__(self, path: object) -> bool:
        return (path or "") in self._getters

    def __len__(self) -> int:
        return len(self._getters)


default_cache = GetterCache()


def getter(path: str | None = None, cache: GetterCache | None = None) -> Getter:
    """Return a function reading the value at ``path`` from its argument.

    The walk stops at the first falsy intermediate value and returns it, so
    ``getter("a.b")({"a": 0})`` is ``0`` and ``getter("a.b")({})`` is None.
    Repeated calls with the same path return the same function object.

    Args:
        path: Dot-delimited path. None or "" yields an identity accessor.
        cache: Cache to compile into. Defaults to the process-wide cache.
    """
    return (cache if cache is not None else default_cache).get_or_compile(path)


G = getter


def get(obj: Any, path: str | None, cache: GetterCache | None = None) -> Any:
    """Read the value at ``path`` inside ``obj``."""
    return getter(path, cache)(obj)


def set(obj: MutableMapping[str, Any], path: str | None, value: Any) -> MutableMapping[str, Any]:
    """Write ``value`` at ``path`` inside ``obj`` and return ``obj``.

    Missing intermediate keys are created as empty dicts. An intermediate
    value that is not a mutable mapping is replaced by an empty dict. The
    object is mutated in place.
    """
    segments = parse_path(path)
    if not segments:
        return obj

    current = obj
    for key in segments[:-1]:
        child = current.get(key)
        if not isinstance(child, MutableMapping):
            child = {}
            current[key] = child
        current = child
    current[segments[-1]] = value
    return obj
