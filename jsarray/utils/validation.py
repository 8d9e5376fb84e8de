"""Argument validation helpers shared by the container."""

from __future__ import annotations

from collections.abc import Callable
from numbers import Integral


def ensure_index(value: object, *, name: str = "index") -> int:
    """Coerce ``value`` to a plain ``int`` index.

    Python and numpy integers are accepted. Booleans and everything else are
    rejected with :class:`TypeError`.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)
    return int(value)


def ensure_non_negative(value: object, *, name: str) -> int:
    result = ensure_index(value, name=name)
    if result < 0:
        msg = f"{name} must be non-negative, got {result}"
        raise ValueError(msg)
    return result


def ensure_callable(value: object, *, name: str) -> Callable[..., object]:
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)
    return value
