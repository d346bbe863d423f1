"""Logging configuration for the reporting service."""

import logging
import sys

from portal.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure root logging once per process.

    DEBUG when settings.debug is set, INFO otherwise; records go to stdout.
    The httpx client logs every request at INFO, so it is held at WARNING
    unless debugging.
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(level if settings.debug else logging.WARNING)
