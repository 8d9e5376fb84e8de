"""Owned storage with slack at both ends.

``SlackBuffer`` keeps the live elements in the window ``[head, head + length)``
of a numpy array. The unused cells before and after that window (the head and
tail slack) absorb ``push_front``/``push_back`` without moving anything; once a
side runs dry the live window is relocated into a larger array with fresh
slack on both sides, which keeps inserts at either end amortized O(1).

Invariant: ``head_slack + length + tail_slack == capacity``. Cells outside the
live window are never read; in object buffers they hold ``None`` so that no
stale reference outlives a ``pop``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator

import numpy as np

from jsarray.core.errors import EmptyContainerError, SequenceIndexError

_LOGGER = logging.getLogger(__name__)


class SlackBuffer:
    """Contiguous double-ended storage; the sole owner of its numpy array."""

    __slots__ = ("_data", "_head", "_length", "_growth_factor", "_min_capacity", "_factory")

    def __init__(
        self,
        capacity: int = 0,
        *,
        dtype: np.dtype | None = None,
        growth_factor: float = 2.0,
        min_capacity: int = 8,
        factory: Callable[[], object] | None = None,
    ) -> None:
        self._data = np.empty(capacity, dtype=np.dtype(object) if dtype is None else dtype)
        self._head = capacity // 2
        self._length = 0
        self._growth_factor = growth_factor
        self._min_capacity = min_capacity
        self._factory = factory
        self._release(0, capacity)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def capacity(self) -> int:
        return int(self._data.shape[0])

    @property
    def head_slack(self) -> int:
        return self._head

    @property
    def tail_slack(self) -> int:
        return self.capacity - self._head - self._length

    @property
    def holds_objects(self) -> bool:
        return self._data.dtype.kind == "O"

    def __len__(self) -> int:
        return self._length

    def live(self) -> np.ndarray:
        """Return a view of the live window. Writes through it hit the buffer."""
        return self._data[self._head : self._head + self._length]

    def __iter__(self) -> Iterator[object]:
        index = 0
        while index < self._length:
            yield self._data[self._head + index]
            index += 1

    # ------------------------------------------------------------------
    # Bounds-checked element access
    # ------------------------------------------------------------------
    def read(self, index: int) -> object:
        if not 0 <= index < self._length:
            raise SequenceIndexError(index, self._length)
        return self._data[self._head + index]

    def write(self, index: int, value: object) -> None:
        if not 0 <= index < self._length:
            raise SequenceIndexError(index, self._length, action="write")
        self._data[self._head + index] = value

    # ------------------------------------------------------------------
    # Double-ended growth and removal
    # ------------------------------------------------------------------
    def push_back(self, value: object) -> None:
        if self.tail_slack < 1:
            self._relocate(front=0, back=1)
        self._data[self._head + self._length] = value
        self._length += 1

    def push_front(self, value: object) -> None:
        if self._head < 1:
            self._relocate(front=1, back=0)
        self._data[self._head - 1] = value
        self._head -= 1
        self._length += 1

    def pop_back(self) -> object:
        if self._length == 0:
            msg = "pop from an empty sequence"
            raise EmptyContainerError(msg)
        position = self._head + self._length - 1
        value = self._data[position]
        self._release(position, position + 1)
        self._length -= 1
        return value

    def pop_front(self) -> object:
        if self._length == 0:
            msg = "shift from an empty sequence"
            raise EmptyContainerError(msg)
        value = self._data[self._head]
        self._release(self._head, self._head + 1)
        self._head += 1
        self._length -= 1
        return value

    def grow_back(self, count: int) -> None:
        """Append ``count`` default-initialized elements."""
        if count <= 0:
            return
        if self.tail_slack < count:
            self._relocate(front=0, back=count)
        start = self._head + self._length
        self._fill_defaults(start, start + count)
        self._length += count

    def extend_back(self, values: Iterable[object]) -> None:
        items = values if isinstance(values, (list, tuple)) else list(values)
        if self.tail_slack < len(items):
            self._relocate(front=0, back=len(items))
        position = self._head + self._length
        for item in items:
            self._data[position] = item
            position += 1
        self._length += len(items)

    def assign(self, values: Iterable[object]) -> None:
        """Overwrite the live window, in order, with exactly ``length`` values."""
        position = self._head
        for item in values:
            self._data[position] = item
            position += 1
        if position != self._head + self._length:
            msg = "assign() must supply exactly one value per live element"
            raise ValueError(msg)

    def reverse(self) -> None:
        left = self._head
        right = self._head + self._length - 1
        data = self._data
        while left < right:
            data[left], data[right] = data[right], data[left]
            left += 1
            right -= 1

    def truncate(self, length: int) -> None:
        """Drop live elements from the tail until only ``length`` remain."""
        length = max(length, 0)
        if length >= self._length:
            return
        self._release(self._head + length, self._head + self._length)
        self._length = length

    def clear(self) -> None:
        self._release(self._head, self._head + self._length)
        self._head = self.capacity // 2
        self._length = 0

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------
    def copy(self, start: int = 0, stop: int | None = None) -> SlackBuffer:
        """Deep-copy ``[start, stop)`` of the live window into a new buffer."""
        stop = self._length if stop is None else stop
        count = max(stop - start, 0)
        clone = self.empty_like(count)
        if count:
            clone._head = 0
            clone._data[:count] = self._data[self._head + start : self._head + stop]
            clone._length = count
        return clone

    def empty_like(self, capacity: int = 0, *, dtype: np.dtype | None = None) -> SlackBuffer:
        return SlackBuffer(
            capacity,
            dtype=self._data.dtype if dtype is None else dtype,
            growth_factor=self._growth_factor,
            min_capacity=self._min_capacity,
            factory=self._factory,
        )

    def transfer(self) -> SlackBuffer:
        """Move the storage into a new handle and leave this one empty.

        No elements are copied; the returned buffer becomes the only owner.
        """
        moved = SlackBuffer.__new__(SlackBuffer)
        moved._data = self._data
        moved._head = self._head
        moved._length = self._length
        moved._growth_factor = self._growth_factor
        moved._min_capacity = self._min_capacity
        moved._factory = self._factory
        self._data = np.empty(0, dtype=self._data.dtype)
        self._head = 0
        self._length = 0
        return moved

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _relocate(self, *, front: int, back: int) -> None:
        """Move the live window so at least ``front``/``back`` slack is free."""
        old_capacity = self.capacity
        required = self._length + front + back
        if required * 2 <= old_capacity:
            # Plenty of room overall, it is just on the wrong side.
            new_capacity = old_capacity
        else:
            new_capacity = max(
                self._min_capacity,
                math.ceil(old_capacity * self._growth_factor),
                required,
            )
        spare = new_capacity - required
        head = front + (spare - spare // 2 if front > back else spare // 2)

        data = np.empty(new_capacity, dtype=self._data.dtype)
        if self.holds_objects:
            data[:] = None
        data[head : head + self._length] = self.live()
        self._data = data
        self._head = head
        _LOGGER.debug(
            "Relocated buffer: capacity %d -> %d, head slack %d, tail slack %d",
            old_capacity,
            new_capacity,
            self.head_slack,
            self.tail_slack,
        )

    def _fill_defaults(self, start: int, stop: int) -> None:
        if not self.holds_objects:
            self._data[start:stop] = self._data.dtype.type()
            return
        factory = self._factory
        for position in range(start, stop):
            self._data[position] = None if factory is None else factory()

    def _release(self, start: int, stop: int) -> None:
        if self.holds_objects and stop > start:
            self._data[start:stop] = None
