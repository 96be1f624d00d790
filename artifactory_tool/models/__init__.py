"""
Pydantic models for artifactory-tool.

- artifactory_api: Models for Artifactory API payloads
- credentials: Authentication credentials
- results: Operation results
- config: Client configuration
"""

from .artifactory_api import ArtifactInfo, BuildInfo, Checksums, CreationInfo, FileInfo
from .base import ArtifactoryBaseModel, ToolBaseModel
from .config import ArtifactoryConfig
from .credentials import ApiKeyAuth, BasicAuth, Credential
from .results import DeleteResult, DownloadResult

__all__ = [
    # Artifactory API Models
    "ArtifactoryBaseModel",
    "ArtifactInfo",
    "BuildInfo",
    "Checksums",
    "CreationInfo",
    "FileInfo",
    # Domain Models
    "ToolBaseModel",
    "ArtifactoryConfig",
    "ApiKeyAuth",
    "BasicAuth",
    "Credential",
    "DeleteResult",
    "DownloadResult",
]
