"""Result models returned by ArtifactoryClient operations."""

from typing import Optional

from .base import ToolBaseModel


class DeleteResult(ToolBaseModel):
    """
    Outcome of a successful delete.

    Attributes:
        success: Always True; failures raise instead
        details: Raw response body from the server
    """

    success: bool = True
    details: str = ""


class DownloadResult(ToolBaseModel):
    """
    Outcome of a successful download.

    Attributes:
        destination: Absolute path of the written file
        message: Human readable result message
        md5: MD5 that was verified against the server, when integrity checking ran
    """

    destination: str
    message: str
    md5: Optional[str] = None

    @property
    def verified(self) -> bool:
        """Whether the download was checked against the server's MD5."""
        return self.md5 is not None


__all__ = ["DeleteResult", "DownloadResult"]
