"""Logging configuration for the application."""

import logging
import sys

from taxwise.core.config import Settings, get_settings
from taxwise.middleware.request_id import RequestIdLogFilter


def setup_logging(settings: Settings | None = None) -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout; every line carries the current request id.
    httpx request lines are kept at WARNING so signed URLs (which carry
    access tokens in their query string) stay out of logs.
    """
    s = settings or get_settings()
    log_level = logging.DEBUG if s.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdLogFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
