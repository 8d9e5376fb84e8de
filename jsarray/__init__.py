"""jsarray public interface.

``Sequence`` is the container; ``SequenceConfig`` tunes growth and the
auto-extend-on-write behaviour.
"""

from __future__ import annotations

from .core import (
    ElementRef,
    EmptyContainerError,
    Sequence,
    SequenceError,
    SequenceIndexError,
)
from .utils import SequenceConfig

__all__ = [
    "ElementRef",
    "EmptyContainerError",
    "Sequence",
    "SequenceConfig",
    "SequenceError",
    "SequenceIndexError",
]

__version__ = "0.1.0"
