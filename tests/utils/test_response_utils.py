"""Tests for response parsing helpers."""

import httpx
import pytest

from artifactory_tool.models import FileInfo
from artifactory_tool.utils.response_utils import parse_json_response, parse_model_response


class TestParseJsonResponse:
    """Test parse_json_response."""

    def test_object(self):
        """JSON objects are returned as dicts."""
        response = httpx.Response(200, json={"repo": "libs"})

        assert parse_json_response(response, "get file info") == {"repo": "libs"}

    def test_invalid_json(self):
        """Non-JSON bodies raise ValueError naming the operation."""
        response = httpx.Response(200, text="<html>proxy error</html>")

        with pytest.raises(ValueError, match="Invalid JSON response from Artifactory during get file info"):
            parse_json_response(response, "get file info")

    def test_not_an_object(self):
        """JSON arrays are rejected."""
        response = httpx.Response(200, json=["a", "b"])

        with pytest.raises(ValueError, match="got list"):
            parse_json_response(response, "upload")


class TestParseModelResponse:
    """Test parse_model_response."""

    def test_model(self, mock_file_info):
        """The body is validated into the model."""
        info = parse_model_response(httpx.Response(200, json=mock_file_info), FileInfo, "get file info")

        assert info.repo == mock_file_info["repo"]

    def test_wrong_shape(self):
        """Validation failures raise ValueError."""
        response = httpx.Response(200, json={"checksums": "not-an-object"})

        with pytest.raises(ValueError, match="Unexpected response from Artifactory during get file info"):
            parse_model_response(response, FileInfo, "get file info")
