"""structlog setup for hosts of the cart information projector."""

import logging
from typing import Optional, TextIO

import structlog


def configure_logging(level: str = "INFO", file: Optional[TextIO] = None) -> None:
    """Configure structlog with JSON rendering and ISO timestamps.

    Args:
        level: Minimum level name ("DEBUG", "INFO", ...).
        file: Stream to write to; stdout when omitted.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file),
    )


def log_level(name: str) -> int:
    """Return the numeric level for ``name``; raise ValueError if unknown."""
    value = logging.getLevelName(name.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {name!r}")
    return value
