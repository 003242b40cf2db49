"""
Logging setup for shopcart.

A stdout handler is attached to the root logger on first import, unless the
host application already configured one. Modules get loggers through
``get_logger(__name__)``.
"""

import logging
import sys
from functools import cache

from shopcart.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _install_stdout_handler() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if settings.log_simple else LOG_FORMAT))

    root.setLevel(level)
    root.addHandler(handler)


_install_stdout_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    """Named logger, cached per name."""
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make an item label safe to embed in a log line.

    CR, LF and TAB become their backslash escapes so a label cannot start a
    forged log record, NUL bytes are dropped, and anything past
    ``max_length`` is cut and marked with "...". Empty or None gives "N/A".
    """
    if not value:
        return "N/A"
    safe_value = (
        str(value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_string_for_logging",
]
