"""Core primitives.

``SlackBuffer`` manages storage; ``Sequence`` layers the ECMAScript ``Array``
operations on top of it.
"""

from .buffer import SlackBuffer
from .errors import EmptyContainerError, SequenceError, SequenceIndexError
from .sequence import ElementRef, Sequence

__all__ = [
    "ElementRef",
    "EmptyContainerError",
    "Sequence",
    "SequenceError",
    "SequenceIndexError",
    "SlackBuffer",
]
