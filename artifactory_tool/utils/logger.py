"""
Logging configuration for the Artifactory tool package.

Provides the logging setup used by the CLI, a wrapping formatter for long
messages, and a helper that strips credentials from headers before they
are logged.
"""

import logging
from typing import Dict, Mapping, Optional

from .constants import DEFAULT_LOG_WIDTH, SENSITIVE_HEADERS

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Loggers of the HTTP stack, only shown at the highest verbosity
HTTP_LOGGERS = ("httpx", "httpcore")


class WrappingFormatter(logging.Formatter):
    """
    Formatter that wraps long log messages at word boundaries.

    Messages shorter than ``width`` are left untouched.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted

        lines = []
        current_line = ""
        for word in formatted.split():
            candidate = f"{current_line} {word}" if current_line else word
            if len(candidate) <= self.width:
                current_line = candidate
                continue
            if current_line:
                lines.append(current_line)
            current_line = word

        if current_line:
            lines.append(current_line)

        return "\n".join(lines)


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Configure the root logger from a verbosity count.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG including HTTP client logs
        use_wrapping: If True, install a WrappingFormatter on a fresh stream handler

    Example:
        >>> from artifactory_tool.utils import setup_logging
        >>> setup_logging(1)  # INFO level
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every request at INFO level
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Return a copy of ``headers`` with credential values replaced."""
    safe_headers = {}
    for key, value in headers.items():
        safe_headers[key] = "[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value
    return safe_headers


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


__all__ = [
    "WrappingFormatter",
    "setup_logging",
    "redact_headers",
    "get_logger",
]
