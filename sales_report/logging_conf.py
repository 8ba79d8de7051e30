"""Logging setup for the ``sales_report`` package.

Modules only call ``logging.getLogger(__name__)``; the entrypoint calls
``setup_logging`` once to attach a single stream handler to the package
logger.
"""
import logging
import sys
from typing import Optional, Union

from sales_report.config import config

_PKG_LOGGER_NAME = "sales_report"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the package logger exactly once and return it."""
    global _configured

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
    if not isinstance(level, int):
        level = logging.getLevelName(config.LOG_LEVEL.strip().upper())
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        _configured = True
    return logger
