"""
Pydantic models for Artifactory API payloads.

Response models keep unknown fields so newer server versions do not break
parsing. See the Artifactory REST API documentation for the full shapes:
https://www.jfrog.com/confluence/display/RTF/Artifactory+REST+API
"""

import math
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from .base import ArtifactoryBaseModel

# ============================================================================
# Checksums
# ============================================================================


class Checksums(ArtifactoryBaseModel):
    """Checksums of an artifact, as reported by the server or supplied on upload."""

    md5: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None


# ============================================================================
# Storage Models
# ============================================================================


class ArtifactInfo(ArtifactoryBaseModel):
    """Fields shared by file info and deploy responses."""

    uri: Optional[str] = None
    download_uri: Optional[str] = Field(default=None, alias="downloadUri")
    repo: Optional[str] = None
    path: Optional[str] = None
    created: Optional[str] = None
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    size: Optional[Union[int, str]] = None
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    checksums: Checksums = Field(default_factory=Checksums)
    original_checksums: Optional[Checksums] = Field(default=None, alias="originalChecksums")

    @property
    def size_bytes(self) -> Optional[int]:
        """Size as an integer; the server reports it as a string."""
        if self.size is None:
            return None
        return int(self.size)


class FileInfo(ArtifactInfo):
    """Response of GET /api/storage/{repoKey}{filePath}."""

    remote_url: Optional[str] = Field(default=None, alias="remoteUrl")
    last_modified: Optional[str] = Field(default=None, alias="lastModified")
    modified_by: Optional[str] = Field(default=None, alias="modifiedBy")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")


class CreationInfo(ArtifactInfo):
    """Response of a successful PUT /{repoKey}{filePath}."""


# ============================================================================
# Build Models
# ============================================================================


class BuildInfo(ArtifactoryBaseModel):
    """
    Build info record published to /api/build.

    Only ``name`` and ``number`` are checked; every other field is passed to
    the server as given. Format reference:
    https://github.com/JFrogDev/build-info#build-info-json-format
    """

    name: str
    number: str

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("Build name must be a string")
        value = value.strip()
        if not value:
            raise ValueError("Build name must not be empty")
        return value

    @field_validator("number", mode="before")
    @classmethod
    def normalize_number(cls, value: Any) -> str:
        # bool is an int subclass but never a build number
        if isinstance(value, bool):
            raise ValueError("Build number must be a string or a number")
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError("Build number must be a finite number")
            # 5.0 is published as "5"
            value = str(int(value)) if value.is_integer() else str(value)
        elif isinstance(value, int):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError("Build number must be a string or a number")
        value = value.strip()
        if not value:
            raise ValueError("Build number must not be empty")
        return value


__all__ = [
    "Checksums",
    "ArtifactInfo",
    "FileInfo",
    "CreationInfo",
    "BuildInfo",
]
