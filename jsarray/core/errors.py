"""Container error taxonomy."""

from __future__ import annotations


class SequenceError(Exception):
    """Base class for failures raised by :class:`~jsarray.core.sequence.Sequence`."""


class EmptyContainerError(SequenceError, IndexError):
    """Raised by ``pop``/``shift``/seedless ``reduce`` on an empty sequence.

    Subclasses :class:`IndexError` so callers that already guard ``list.pop()``
    keep working unchanged.
    """


class SequenceIndexError(SequenceError, IndexError):
    """Raised for reads past the live range and for non-extending writes."""

    def __init__(self, index: int, length: int, *, action: str = "read") -> None:
        self.index = index
        self.length = length
        msg = f"Cannot {action} index {index} of a sequence with length {length}"
        super().__init__(msg)


__all__ = ["EmptyContainerError", "SequenceError", "SequenceIndexError"]
