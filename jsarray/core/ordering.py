"""Comparator adaptation for ``Sequence.sort``."""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")

LessThan = Callable[[T, T], bool]


def less_than_key(less: LessThan) -> Callable[[T], Any]:
    """Turn a strict ``less(a, b)`` predicate into a ``sorted`` key.

    Two elements where neither is less than the other compare equal.
    """

    def compare(left: T, right: T) -> int:
        if less(left, right):
            return -1
        if less(right, left):
            return 1
        return 0

    return cmp_to_key(compare)
