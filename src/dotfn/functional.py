"""Small combinators: identity, compose, negation and friends."""

from __future__ import annotations

from typing import Any, Callable

from dotfn.path import getter
from dotfn.values import is_falsy

__all__ = ["identity", "compose", "ensure_fn", "not_", "is_none", "is_array", "as_array"]

_MISSING: Any = object()


def _loop(value: Any) -> Any:
    return value


def identity(value: Any = _MISSING) -> Callable[..., Any]:
    """Return a function yielding ``value``, or its own argument when called bare.

    ``identity()(x)`` is ``x``; ``identity(55)(anything)`` is ``55``.
    """
    if value is _MISSING:
        return _loop

    def constant(*args: Any, **kwargs: Any) -> Any:
        return value

    return constant


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Chain functions left to right: ``compose(f, g)(x) == g(f(x))``.

    The first function receives every call argument; each later function
    receives the previous result. With no functions the identity is returned.
    """
    if not fns:
        return _loop

    first, *rest = fns

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = first(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return composed


def ensure_fn(value: Any, factory: Callable[[Any], Callable[..., Any]] = getter) -> Callable[..., Any]:
    """Return ``value`` if callable, otherwise ``factory(value)``."""
    if callable(value):
        return value
    return factory(value)


def not_(fn_or_path: Callable[..., Any] | str) -> Callable[..., bool]:
    """Negate a predicate. A path string is turned into a getter first."""
    fn = ensure_fn(fn_or_path)

    def negated(*args: Any, **kwargs: Any) -> bool:
        return is_falsy(fn(*args, **kwargs))

    return negated


def is_none(value: Any) -> bool:
    """True only for None; other falsy values are not none."""
    return value is None


def is_array(value: Any) -> bool:
    """True for lists and tuples."""
    return isinstance(value, (list, tuple))


def as_array(value: Any) -> list[Any] | tuple[Any, ...]:
    """Return lists and tuples unchanged, wrap anything else in a list."""
    if is_array(value):
        return value
    return [value]
