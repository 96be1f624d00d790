"""
Error handling utilities for standardized error logging and handling.

Used by the CLI commands to turn exceptions into readable log output.
"""

import json
import logging
import traceback
from typing import Any, Optional

import httpx

from .constants import MAX_LOGGED_BODY_LENGTH


def _status_code_of(error: httpx.HTTPError) -> Optional[int]:
    """Find the HTTP status code carried by an error, if any."""
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    return None


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status_code = _status_code_of(error)

    if status_code == 401:
        logging.error(
            "Authentication failed during %s: Invalid credentials. "
            "Please check the token or API key in the configuration file.",
            operation,
        )
    elif status_code == 403:
        logging.error(
            "Authentication failed during %s: You don't have permission to access this resource.",
            operation,
        )
    elif status_code == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif status_code is not None and status_code >= 500:
        logging.error("Server error during %s: %s", operation, error)
    elif isinstance(error, httpx.TransportError):
        logging.error("Connection error during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def try_parse_json(content: str, operation: str, *, default: Optional[Any] = None, raise_on_error: bool = True) -> Any:
    """
    Attempt to parse JSON content with error handling.

    Args:
        content: JSON string to parse
        operation: Description of operation for error messages
        default: Default value to return on error (if raise_on_error is False)
        raise_on_error: If True, raise exception on parse error

    Raises:
        ValueError: If parsing fails and raise_on_error is True
    """
    try:
        return json.loads(content)
    except ValueError as e:
        logging.error("Failed to parse JSON during %s: %s", operation, e)
        logging.debug("Content preview: %s", content[:MAX_LOGGED_BODY_LENGTH])

        if raise_on_error:
            raise ValueError(f"Invalid JSON during {operation}: {e}") from e

        return default


__all__ = [
    "handle_http_error",
    "handle_generic_error",
    "try_parse_json",
]
