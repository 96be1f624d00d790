"""
Artifactory Tool - A Python client for the Artifactory REST API.

This package provides a client for uploading, downloading, inspecting and
deleting artifacts, and for publishing build info, with basic or API key
authentication.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import (
    ApiKeyAuth,
    ArtifactoryClient,
    ArtifactoryError,
    ArtifactoryHTTPError,
    BasicAuth,
    BuildInfo,
    Checksums,
)
from .utils import ConfigManager, create_session, get_logger, setup_logging
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "ArtifactoryClient",
    "ApiKeyAuth",
    "BasicAuth",
    "BuildInfo",
    "Checksums",
    "ArtifactoryError",
    "ArtifactoryHTTPError",
    "ConfigManager",
    "create_session",
    "get_logger",
    "setup_logging",
    "cli_main",
    "cli_group",
]
