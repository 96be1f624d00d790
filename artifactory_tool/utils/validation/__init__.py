"""
Validation utilities for Artifactory operations.

Modules:
    - file: Local file and directory checks
    - stream: Upload payload checks
"""

from .file import validate_destination_directory, validate_file_path
from .stream import is_stream, is_text_stream, iter_stream_chunks, open_stream_chunks

__all__ = [
    "validate_file_path",
    "validate_destination_directory",
    "is_stream",
    "is_text_stream",
    "iter_stream_chunks",
    "open_stream_chunks",
]
