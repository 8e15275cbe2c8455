"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from datefmt.config import Settings


def setup_logging(log_level: str | None = None):
    """Configure structlog with JSON output to stdout.

    Should be called once by the host application; the library itself never
    configures logging on import. Without an explicit level, ``DATEFMT_LOG_LEVEL``
    is used.
    """
    level = (log_level or Settings().log_level).upper()
    levels = logging.getLevelNamesMapping()
    if level not in levels:
        raise ValueError(f"Unknown log level: {log_level!r}")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(levels[level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
