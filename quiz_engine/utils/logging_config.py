"""Logging configuration helpers for the quiz engine.

The engine modules only log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. An application embedding the engine calls
:func:`configure_logging` once at startup to see those messages.
"""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.INFO) -> Logger:
    """Configure basic logging for the engine and return its package logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("quiz_engine")
