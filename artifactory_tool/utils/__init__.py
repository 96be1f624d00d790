"""
Utility modules for Artifactory operations.
"""

from .checksums import calculate_md5_checksum, checksum_headers
from .config_manager import ConfigManager
from .logger import WrappingFormatter, get_logger, redact_headers, setup_logging
from .session import create_session
from .url import build_url, content_url, normalize_base_url, storage_url
from .validation import (
    is_stream,
    iter_stream_chunks,
    open_stream_chunks,
    validate_destination_directory,
    validate_file_path,
)

from . import constants
from . import error_handling
from . import response_utils

__all__ = [
    "calculate_md5_checksum",
    "checksum_headers",
    "ConfigManager",
    "WrappingFormatter",
    "get_logger",
    "redact_headers",
    "setup_logging",
    "create_session",
    "build_url",
    "content_url",
    "normalize_base_url",
    "storage_url",
    "is_stream",
    "iter_stream_chunks",
    "open_stream_chunks",
    "validate_destination_directory",
    "validate_file_path",
    "constants",
    "error_handling",
    "response_utils",
]
