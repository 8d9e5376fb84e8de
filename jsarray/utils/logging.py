"""Opt-in console logging for the ``jsarray`` logger tree.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves. Applications that want to watch buffer relocations or
config warnings call :func:`enable_console_logging` once.
"""

from __future__ import annotations

import logging
from typing import IO, Final

_ROOT: Final = "jsarray"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATEFMT: Final = "%Y-%m-%d %H:%M:%S"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return ``jsarray`` or its ``jsarray.<component>`` child, unconfigured."""
    return logging.getLogger(f"{_ROOT}.{component}" if component else _ROOT)


def enable_console_logging(level: int = logging.DEBUG, *, stream: IO[str] | None = None) -> logging.Handler:
    """Route ``jsarray`` records at ``level`` and above to ``stream`` (stderr).

    Repeated calls reuse the handler installed by the first one and only
    adjust the level.
    """
    logger = get_logger()
    for handler in logger.handlers:
        if getattr(handler, "_jsarray_console", False):
            handler.setLevel(level)
            logger.setLevel(level)
            return handler

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    handler.setLevel(level)
    handler._jsarray_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def disable_console_logging() -> None:
    logger = get_logger()
    for handler in list(logger.handlers):
        if getattr(handler, "_jsarray_console", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
