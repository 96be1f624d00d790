"""
Tests for URL utilities.

This module tests how content, storage and build URLs are assembled
and encoded.
"""

import pytest

from artifactory_tool.utils import build_url, content_url, normalize_base_url, storage_url
from artifactory_tool.utils.url import repository_path

BASE = "https://host/artifactory"


class TestNormalizeBaseUrl:
    """Test normalize_base_url."""

    @pytest.mark.parametrize(
        "base_url",
        ["https://host/artifactory", "https://host/artifactory/", "https://host/artifactory//", "  https://host/artifactory "],
    )
    def test_trailing_slashes(self, base_url):
        """Trailing slashes and whitespace are removed."""
        assert normalize_base_url(base_url) == BASE

    @pytest.mark.parametrize("base_url", ["", "   ", "/"])
    def test_empty(self, base_url):
        """Empty base URLs are rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            normalize_base_url(base_url)


class TestRepositoryPath:
    """Test repository_path encoding."""

    def test_plain(self):
        """Plain keys and paths are joined unchanged."""
        assert repository_path("libs-release", "/org/app/1.0/app.jar") == "/libs-release/org/app/1.0/app.jar"

    def test_leading_slash_added(self):
        """A missing leading slash is added to the path."""
        assert repository_path("libs", "app.jar") == "/libs/app.jar"

    def test_path_encoding_keeps_separators(self):
        """Path segments are encoded but "/" is kept."""
        assert repository_path("libs", "/my dir/file#1?.txt") == "/libs/my%20dir/file%231%3F.txt"

    def test_repo_key_fully_encoded(self):
        """Slashes in the repository key are encoded."""
        assert repository_path("team/libs", "/a.txt") == "/team%2Flibs/a.txt"

    @pytest.mark.parametrize("repo_key", ["", "  "])
    def test_empty_repo_key(self, repo_key):
        """Empty repository keys are rejected."""
        with pytest.raises(ValueError, match="Repository key"):
            repository_path(repo_key, "/a.txt")


class TestUrlBuilders:
    """Test the URL builders."""

    def test_content_url(self):
        """Content URLs sit directly under the base URL."""
        assert content_url(BASE + "/", "libs", "/a/b.jar") == f"{BASE}/libs/a/b.jar"

    def test_storage_url(self):
        """Storage URLs use the storage API prefix."""
        assert storage_url(BASE, "libs", "/a/b.jar") == f"{BASE}/api/storage/libs/a/b.jar"

    def test_build_url(self):
        """The build URL does not depend on the build."""
        assert build_url(BASE + "/") == f"{BASE}/api/build"
