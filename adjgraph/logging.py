"""Structured logging configuration using ``structlog``.

Call :func:`setup_logging` once from the entry point.  Library modules only
ask for loggers via ``structlog.get_logger(__name__)`` and never configure
logging themselves.

Log output goes to ``stderr`` so it never interleaves with the matrix
rendering written to ``stdout``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(log_level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure ``structlog`` and the standard-library root logger.

    Args:
        log_level: Minimum severity level (e.g. ``"DEBUG"``, ``"INFO"``).
            Unknown names fall back to ``INFO``.
        stream: Destination for log lines; defaults to ``sys.stderr``.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    stream = stream or sys.stderr

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # Reconfiguration (tests, repeated CLI runs) must take effect.
        cache_logger_on_first_use=False,
    )
