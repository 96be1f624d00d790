"""
URL utilities for Artifactory operations.

Builds the storage, content and build URLs from a base URL, a repository
key and a file path. Repository keys are fully percent-encoded; file paths
keep their "/" separators.
"""

from urllib.parse import quote

from .constants import BUILD_API_PATH, STORAGE_API_PATH


def normalize_base_url(base_url: str) -> str:
    """
    Strip trailing slashes from the base URL.

    Raises:
        ValueError: If the base URL is empty
    """
    normalized = base_url.strip().rstrip("/")
    if not normalized:
        raise ValueError("Artifactory base URL must not be empty")
    return normalized


def repository_path(repo_key: str, file_path: str) -> str:
    """
    Build the encoded "/{repo_key}{file_path}" part of an artifact URL.

    A leading slash is added to ``file_path`` when missing.

    Example:
        >>> repository_path("libs-release", "/org/app 1.0.jar")
        '/libs-release/org/app%201.0.jar'
    """
    if not repo_key or not repo_key.strip():
        raise ValueError("Repository key must not be empty")
    if not file_path.startswith("/"):
        file_path = f"/{file_path}"
    return f"/{quote(repo_key, safe='')}{quote(file_path, safe='/')}"


def content_url(base_url: str, repo_key: str, file_path: str) -> str:
    """URL of the artifact content: {base}/{repo_key}{file_path}."""
    return normalize_base_url(base_url) + repository_path(repo_key, file_path)


def storage_url(base_url: str, repo_key: str, file_path: str) -> str:
    """URL of the artifact metadata: {base}/api/storage/{repo_key}{file_path}."""
    return normalize_base_url(base_url) + STORAGE_API_PATH + repository_path(repo_key, file_path)


def build_url(base_url: str) -> str:
    """URL of the build info endpoint: {base}/api/build."""
    return normalize_base_url(base_url) + BUILD_API_PATH


__all__ = ["normalize_base_url", "repository_path", "content_url", "storage_url", "build_url"]
