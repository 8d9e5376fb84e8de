"""JavaScript-style array container."""

from __future__ import annotations

import collections.abc
import dataclasses
import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

import numpy as np

from jsarray.core.buffer import SlackBuffer
from jsarray.core.errors import EmptyContainerError, SequenceIndexError
from jsarray.core.ordering import LessThan, less_than_key
from jsarray.core.slicing import normalize_bounds
from jsarray.utils.config import SequenceConfig
from jsarray.utils.validation import ensure_callable, ensure_index, ensure_non_negative

T = TypeVar("T")
R = TypeVar("R")

_LOGGER = logging.getLogger(__name__)
_MISSING: Any = object()


class ElementRef(Generic[T]):
    """Read/write handle on one slot of a :class:`Sequence`.

    Assigning ``ref.value`` writes through to the owning sequence.
    """

    __slots__ = ("_sequence", "index")

    def __init__(self, sequence: Sequence[T], index: int) -> None:
        self._sequence = sequence
        self.index = index

    @property
    def value(self) -> T:
        return self._sequence.get(self.index)

    @value.setter
    def value(self, new_value: T) -> None:
        self._sequence.set(self.index, new_value)

    def __repr__(self) -> str:
        return f"ElementRef(index={self.index}, value={self.value!r})"


class Sequence(Generic[T]):
    """Growable double-ended sequence with ECMAScript ``Array`` semantics.

    ``Sequence(n)`` holds ``n`` default elements, ``Sequence(iterable)`` copies
    the iterable in order, and ``Sequence(other_sequence)`` deep-copies the
    other sequence's storage. Writing past the end auto-extends the sequence
    unless ``config.auto_extend_on_write`` is ``False``; reads never extend.

    ``slice``, ``map``, ``filter`` and ``copy`` return new sequences that own
    their storage outright. Freshly built results are moved into the returned
    object rather than copied a second time.

    Not thread-safe: callers sharing a sequence across threads must lock.
    """

    __slots__ = ("_buffer", "_config")

    def __init__(
        self,
        source: int | Iterable[T] | None = None,
        *,
        config: SequenceConfig | None = None,
        dtype: object = None,
    ) -> None:
        if config is None and isinstance(source, Sequence):
            config = source._config
        config = config or SequenceConfig()
        if dtype is not None:
            config = dataclasses.replace(config, dtype=dtype)
        self._config = config

        if isinstance(source, Sequence) and source._config is config:
            self._buffer = source._buffer.copy()
            return

        self._buffer = _new_buffer(config)
        if source is None:
            return
        if isinstance(source, (int, np.integer)) and not isinstance(source, bool):
            self._buffer.grow_back(ensure_non_negative(source, name="length"))
        elif isinstance(source, Iterable):
            self._buffer.extend_back(source)
        else:
            msg = f"Cannot build a Sequence from {type(source).__name__}"
            raise TypeError(msg)

    @classmethod
    def _adopt(cls, buffer: SlackBuffer, config: SequenceConfig) -> Sequence[Any]:
        result = cls.__new__(cls)
        result._buffer = buffer.transfer()
        result._config = config
        return result

    # ------------------------------------------------------------------
    # Size and buffer introspection
    # ------------------------------------------------------------------
    @property
    def config(self) -> SequenceConfig:
        return self._config

    @property
    def length(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    @property
    def head_slack(self) -> int:
        return self._buffer.head_slack

    @property
    def tail_slack(self) -> int:
        return self._buffer.tail_slack

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------
    def get(self, index: int) -> T:
        """Return the element at ``index``. Never extends the sequence."""
        return self._buffer.read(ensure_index(index))  # type: ignore[return-value]

    def set(self, index: int, value: T) -> None:
        """Store ``value`` at ``index``, auto-extending when allowed."""
        length = len(self._buffer)
        position = self._writable(index)
        try:
            self._buffer.write(position, value)
        except Exception:
            # Roll back the auto-extension.
            self._buffer.truncate(length)
            raise

    def ref(self, index: int) -> ElementRef[T]:
        """Return a writable handle on ``index``, auto-extending when allowed."""
        return ElementRef(self, self._writable(index))

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def _writable(self, index: int) -> int:
        position = ensure_index(index)
        length = len(self._buffer)
        if position < 0:
            raise SequenceIndexError(position, length, action="write")
        if position >= length:
            if not self._config.auto_extend_on_write:
                raise SequenceIndexError(position, length, action="write")
            _LOGGER.debug("Auto-extending sequence from %d to %d elements", length, position + 1)
            self._buffer.grow_back(position + 1 - length)
        return position

    def index_of(self, item: T) -> int:
        """Return the first index holding ``item``, or ``-1``."""
        for index, value in enumerate(self._buffer):
            if value == item:
                return index
        return -1

    def last_index_of(self, item: T) -> int:
        """Return the last index holding ``item``, or ``-1``."""
        for index in range(len(self._buffer) - 1, -1, -1):
            if self._buffer.read(index) == item:
                return index
        return -1

    def includes(self, item: T) -> bool:
        return self.index_of(item) != -1

    def __contains__(self, item: object) -> bool:
        return self.includes(item)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Double-ended mutation
    # ------------------------------------------------------------------
    def push(self, value: T) -> int:
        """Append ``value`` and return the new length."""
        self._buffer.push_back(value)
        return len(self._buffer)

    def pop(self) -> T:
        """Remove and return the last element."""
        return self._buffer.pop_back()  # type: ignore[return-value]

    def unshift(self, value: T) -> int:
        """Prepend ``value`` and return the new length."""
        self._buffer.push_front(value)
        return len(self._buffer)

    def shift(self) -> T:
        """Remove and return the first element."""
        return self._buffer.pop_front()  # type: ignore[return-value]

    def clear(self) -> None:
        self._buffer.clear()

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def reverse(self) -> None:
        self._buffer.reverse()

    def sort(
        self,
        comparator: LessThan[T] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
    ) -> None:
        """Sort in place.

        ``comparator(a, b)`` must return ``True`` when ``a`` belongs before
        ``b``. ``key`` is the usual Python alternative; pass one or the other.
        Without either, elements are ordered by ``<``. Stability is not
        guaranteed.
        """
        if comparator is not None and key is not None:
            msg = "Pass either comparator or key, not both"
            raise ValueError(msg)
        if comparator is not None:
            key = less_than_key(ensure_callable(comparator, name="comparator"))

        if key is None and not self._buffer.holds_objects:
            self._buffer.live().sort(kind="quicksort")
            return
        self._buffer.assign(sorted(self._buffer.live(), key=key))

    def slice(self, begin: int = 0, end: int | None = None) -> Sequence[T]:
        """Copy ``[begin, end)`` into a new sequence.

        Negative bounds count from the end. Bounds outside ``[-length, length)``
        or an ``end`` at or before ``begin`` give an empty sequence, not an
        error. Omit ``end`` to copy through the last element.
        """
        begin = ensure_index(begin, name="begin")
        if end is not None:
            end = ensure_index(end, name="end")
        selected = normalize_bounds(begin, end, len(self._buffer))
        return self._adopt(self._buffer.copy(selected.start, selected.stop), self._config)

    # ------------------------------------------------------------------
    # Functional combinators
    # ------------------------------------------------------------------
    def for_each(self, callback: Callable[[ElementRef[T]], object]) -> None:
        """Call ``callback`` with a writable :class:`ElementRef` per element.

        Elements appended during the walk are not visited.
        """
        ensure_callable(callback, name="callback")
        for index in range(len(self._buffer)):
            if index >= len(self._buffer):
                break
            callback(ElementRef(self, index))

    def map(self, callback: Callable[[T], R], *, dtype: object = None) -> Sequence[R]:
        """Collect ``callback(value)`` for every element into a new sequence.

        Results land in an object buffer unless ``dtype`` names a typed one;
        the source dtype is never carried over.
        """
        ensure_callable(callback, name="callback")
        config = self._config
        if dtype is not None or config.dtype is not None:
            config = dataclasses.replace(config, dtype=dtype)
        result = _new_buffer(config)
        result.extend_back([callback(value) for value in self._buffer])
        return self._adopt(result, config)

    def filter(self, test: Callable[[T], bool]) -> Sequence[T]:
        ensure_callable(test, name="test")
        result = self._buffer.empty_like()
        result.extend_back([value for value in self._buffer if test(value)])
        return self._adopt(result, self._config)

    def every(self, condition: Callable[[T], bool]) -> bool:
        ensure_callable(condition, name="condition")
        return all(condition(value) for value in self._buffer)

    def some(self, condition: Callable[[T], bool]) -> bool:
        ensure_callable(condition, name="condition")
        return any(condition(value) for value in self._buffer)

    def reduce(
        self,
        callback: Callable[[T, T], T] = operator.add,
        initial: T = _MISSING,
        start_from: int = 0,
    ) -> T:
        """Fold left to right.

        With ``initial`` the fold starts at ``start_from``. Without it the
        element at index 0 seeds the fold, which then starts at index 1 and
        ``start_from`` is ignored; an empty sequence raises
        :class:`EmptyContainerError`.
        """
        ensure_callable(callback, name="callback")
        if initial is _MISSING:
            if len(self._buffer) == 0:
                msg = "reduce of an empty sequence with no initial value"
                raise EmptyContainerError(msg)
            accumulator = self._buffer.read(0)
            start = 1
        else:
            accumulator = initial
            start = ensure_non_negative(start_from, name="start_from")

        for index in range(start, len(self._buffer)):
            accumulator = callback(accumulator, self._buffer.read(index))
        return accumulator  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def copy(self) -> Sequence[T]:
        return self._adopt(self._buffer.copy(), self._config)

    __copy__ = copy

    def to_list(self) -> list[T]:
        return list(self._buffer)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self._buffer)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence):
            values = list(other._buffer)
        elif isinstance(other, collections.abc.Sequence) and not isinstance(other, (str, bytes)):
            values = list(other)
        else:
            return NotImplemented
        if len(values) != len(self._buffer):
            return False
        return all(bool(left == right) for left, right in zip(self._buffer, values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Sequence({self.to_list()!r})"


def _new_buffer(config: SequenceConfig) -> SlackBuffer:
    return SlackBuffer(
        dtype=config.numpy_dtype,
        growth_factor=config.growth_factor,
        min_capacity=config.min_capacity,
        factory=config.default_factory,
    )
