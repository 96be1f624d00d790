"""
File path validation utilities.

Both checks run before any network activity so a bad local path never
costs a request.
"""

import logging
import os


def validate_file_path(file_path: str) -> str:
    """
    Validate that a file to upload exists and is readable.

    Args:
        file_path: Absolute or relative path to the file

    Returns:
        The absolute path of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
    """
    resolved = os.path.abspath(file_path)

    if not os.path.isfile(resolved):
        raise FileNotFoundError(f"The file to upload {file_path} does not exist")

    if not os.access(resolved, os.R_OK):
        raise PermissionError(f"Cannot read file to upload: {file_path}")

    logging.debug("File to upload %s: %d bytes", resolved, os.path.getsize(resolved))
    return resolved


def validate_destination_directory(destination_file: str) -> str:
    """
    Validate that the directory which will hold a download exists.

    Returns:
        The absolute path of the destination file

    Raises:
        FileNotFoundError: If the parent directory does not exist
    """
    resolved = os.path.abspath(destination_file)
    directory = os.path.dirname(resolved)

    if not os.path.isdir(directory):
        raise FileNotFoundError(f"The destination folder {directory} does not exist.")

    return resolved


__all__ = ["validate_file_path", "validate_destination_directory"]
