"""Version information for artifactory-tool."""

__version__ = "1.0.0"
