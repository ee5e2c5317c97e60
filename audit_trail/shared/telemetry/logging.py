"""Logging configuration for the audit trail service."""

import logging
import sys

from audit_trail.core.config import get_settings

# Third-party loggers that are noisy at DEBUG (per-request HTTP and Redis chatter).
_QUIET_LOGGERS = ("httpx", "httpcore", "redis")


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Translator skips are logged at DEBUG, successful
    ingestions at INFO and swallowed ingestion failures at ERROR.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
