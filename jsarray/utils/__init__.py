"""Utility exports."""

from .config import SequenceConfig
from .logging import disable_console_logging, enable_console_logging, get_logger
from .validation import ensure_callable, ensure_index, ensure_non_negative

__all__ = [
    "SequenceConfig",
    "disable_console_logging",
    "enable_console_logging",
    "get_logger",
    "ensure_callable",
    "ensure_index",
    "ensure_non_negative",
]
