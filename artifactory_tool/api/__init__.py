"""
Artifactory API client modules.

This package provides:
- ArtifactoryClient for file storage and build info operations
- Authentication header construction
- The exception hierarchy raised by the client
"""

from .artifactory_client import ArtifactoryClient
from .auth import auth_headers
from .exceptions import (
    ArtifactExistsError,
    ArtifactoryError,
    ArtifactoryHTTPError,
    ChecksumMismatchError,
    InvalidBuildInfoError,
    InvalidCredentialError,
    InvalidStreamError,
)

# Import API models for convenience
from ..models.artifactory_api import BuildInfo, Checksums, CreationInfo, FileInfo
from ..models.credentials import ApiKeyAuth, BasicAuth

__all__ = [
    "ArtifactoryClient",
    "auth_headers",
    # Exceptions
    "ArtifactoryError",
    "ArtifactoryHTTPError",
    "ArtifactExistsError",
    "ChecksumMismatchError",
    "InvalidBuildInfoError",
    "InvalidCredentialError",
    "InvalidStreamError",
    # API Models
    "BuildInfo",
    "Checksums",
    "CreationInfo",
    "FileInfo",
    "ApiKeyAuth",
    "BasicAuth",
]
