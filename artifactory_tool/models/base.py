"""Base models for the Artifactory tool."""

from pydantic import BaseModel, ConfigDict


class ArtifactoryBaseModel(BaseModel):
    """Base model for Artifactory API payloads; unknown server fields are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ToolBaseModel(BaseModel):
    """Base model for the tool's own domain objects."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )


__all__ = ["ArtifactoryBaseModel", "ToolBaseModel"]
