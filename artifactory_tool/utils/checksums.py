"""
Checksum helpers for uploads and integrity checks.
"""

import hashlib
import os
from typing import Dict, Optional

from ..models.artifactory_api import Checksums
from .constants import CHECKSUM_MD5_HEADER, CHECKSUM_SHA1_HEADER, HASH_CHUNK_SIZE


def calculate_md5_checksum(file_path: str) -> str:
    """
    Calculate the MD5 checksum of a file.

    Args:
        file_path: Path to the file to hash

    Returns:
        MD5 checksum as hexadecimal string

    Raises:
        FileNotFoundError: If the file does not exist
        IOError: If there's an error reading the file
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    md5_hash = hashlib.md5()  # nosec B324 - matches the server's checksum, not a security use

    try:
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
                md5_hash.update(chunk)
    except IOError as e:
        raise IOError(f"Error calculating MD5 of {file_path}: {e}") from e

    return md5_hash.hexdigest()


def checksum_headers(checksums: Optional[Checksums]) -> Dict[str, str]:
    """
    Select the checksum hint header for an upload.

    SHA1 wins over MD5; at most one header is returned.
    """
    if checksums is None:
        return {}
    if checksums.sha1:
        return {CHECKSUM_SHA1_HEADER: checksums.sha1}
    if checksums.md5:
        return {CHECKSUM_MD5_HEADER: checksums.md5}
    return {}


__all__ = ["calculate_md5_checksum", "checksum_headers"]
