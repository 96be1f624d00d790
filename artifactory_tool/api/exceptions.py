"""
Exceptions raised by the Artifactory client.

Every failure the client detects itself derives from ArtifactoryError.
Transport failures (connection errors, timeouts) are httpx.TransportError
and propagate unchanged.
"""

from typing import Optional

import httpx


class ArtifactoryError(Exception):
    """Base class for Artifactory client errors."""


class ArtifactoryHTTPError(ArtifactoryError, httpx.HTTPError):
    """The server answered with a status code the operation does not accept."""

    def __init__(self, message: str, *, status_code: int, details: str = "", url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
        self.url = url


class InvalidCredentialError(ArtifactoryError, ValueError):
    """No usable credential was configured on the client."""


class InvalidStreamError(ArtifactoryError, TypeError):
    """The upload payload cannot be consumed as a stream of bytes."""


class InvalidBuildInfoError(ArtifactoryError, ValueError):
    """Build info lacks a usable name or number."""


class ArtifactExistsError(ArtifactoryError):
    """The target artifact exists and the upload was not forced."""


class ChecksumMismatchError(ArtifactoryError):
    """The downloaded file does not match the MD5 reported by the server."""

    def __init__(self, message: str, *, expected: Optional[str], actual: str) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


__all__ = [
    "ArtifactoryError",
    "ArtifactoryHTTPError",
    "InvalidCredentialError",
    "InvalidStreamError",
    "InvalidBuildInfoError",
    "ArtifactExistsError",
    "ChecksumMismatchError",
]
