"""
Logging configuration for the application.

Sets up structured logging with a consistent format and registers a
TRACE level below DEBUG, so the full Trace/Debug/Info/Warn/Error/Fatal
ladder is available through the standard `logging` module.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log `msg` at TRACE level on `logger`."""
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)


def resolve_level(level: str) -> int:
    """Translate a level name into its numeric value.

    Unknown names fall back to INFO. ``WARN`` and ``FATAL`` are accepted
    as aliases of WARNING and CRITICAL.
    """
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
