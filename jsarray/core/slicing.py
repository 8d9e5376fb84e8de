"""Negative-index aware bounds for ``Sequence.slice``."""

from __future__ import annotations


def normalize_bounds(begin: int, end: int | None, length: int) -> range:
    """Return the live indices selected by ``slice(begin, end)``.

    ``begin`` and an explicit ``end`` must both lie in ``[-length, length)``;
    negative values count back from the end (``k -> length + k``). Anything
    out of range, or an ``end`` that does not come after ``begin``, selects
    nothing. Omitting ``end`` (``None``) runs through the last element.

    >>> normalize_bounds(1, -1, 10)
    range(1, 9)
    >>> normalize_bounds(-1, 1, 10)
    range(0, 0)
    """
    if not -length <= begin < length:
        return range(0)
    if end is None:
        end = length
    elif not -length <= end < length:
        return range(0)

    if begin < 0:
        begin += length
    if end < 0:
        end += length
    if end <= begin:
        return range(0)
    return range(begin, end)
