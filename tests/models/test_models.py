"""
Tests for data models in artifactory_tool.models.

This test file covers:
- artifactory_api.py: API payload models
- credentials.py: Credential models
- config.py: Client configuration model
- results.py: Operation result models
"""

import pytest
from pydantic import SecretStr, TypeAdapter, ValidationError

from artifactory_tool.models import (
    ApiKeyAuth,
    ArtifactoryConfig,
    BasicAuth,
    BuildInfo,
    Checksums,
    CreationInfo,
    Credential,
    DeleteResult,
    DownloadResult,
    FileInfo,
)


class TestFileInfo:
    """Test FileInfo and CreationInfo parsing."""

    def test_aliases(self, mock_file_info):
        """Server field names map to snake_case attributes."""
        info = FileInfo.model_validate(mock_file_info)

        assert info.download_uri == mock_file_info["downloadUri"]
        assert info.created_by == "admin"
        assert info.last_modified == mock_file_info["lastModified"]
        assert info.mime_type == "application/java-archive"
        assert info.original_checksums.sha1 == mock_file_info["originalChecksums"]["sha1"]
        assert info.checksums.sha256 == "f" * 64

    def test_unknown_fields_kept(self):
        """Fields added by newer servers are preserved."""
        info = FileInfo.model_validate({"repo": "libs", "newField": "value"})

        assert info.model_extra == {"newField": "value"}

    def test_minimal_payload(self):
        """Missing fields default to None and empty checksums."""
        info = CreationInfo.model_validate({})

        assert info.repo is None
        assert info.checksums == Checksums()
        assert info.size_bytes is None

    def test_size_bytes(self):
        """The size is converted to an integer."""
        assert FileInfo.model_validate({"size": "1024"}).size_bytes == 1024
        assert FileInfo.model_validate({"size": 2048}).size_bytes == 2048

    def test_dump_by_alias(self, mock_creation_info):
        """Dumping by alias restores the server's field names."""
        dumped = CreationInfo.model_validate(mock_creation_info).model_dump(by_alias=True, exclude_none=True)

        assert dumped["downloadUri"] == mock_creation_info["downloadUri"]
        assert "download_uri" not in dumped


class TestBuildInfo:
    """Test BuildInfo validation."""

    def test_number_converted_to_string(self):
        """Integer build numbers become strings."""
        assert BuildInfo.model_validate({"name": "rel", "number": 5}).number == "5"

    @pytest.mark.parametrize("number, expected", [(5.0, "5"), (-0.0, "0"), (1.25, "1.25"), (10, "10")])
    def test_float_number_formatting(self, number, expected):
        """Integral floats are formatted without a fraction."""
        assert BuildInfo.model_validate({"name": "rel", "number": number}).number == expected

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_number(self, number):
        """NaN and infinity are not build numbers."""
        with pytest.raises(ValidationError):
            BuildInfo.model_validate({"name": "rel", "number": number})

    def test_values_stripped(self):
        """Surrounding whitespace is removed."""
        build = BuildInfo(name="  rel ", number=" 42\n")

        assert build.name == "rel"
        assert build.number == "42"

    def test_extra_fields_passed_through(self, mock_build_info):
        """Fields other than name and number are kept unchanged."""
        dumped = BuildInfo.model_validate(mock_build_info).model_dump(mode="json")

        assert dumped["modules"] == mock_build_info["modules"]
        assert dumped["started"] == mock_build_info["started"]
        assert dumped["number"] == "5"

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "number": "1"},
            {"name": "   ", "number": "1"},
            {"name": "rel", "number": ""},
            {"name": "rel", "number": "\t"},
            {"name": "rel", "number": None},
            {"name": "rel", "number": False},
            {"name": 5, "number": "1"},
            {"name": "rel", "number": ["1"]},
            {"name": "rel"},
            {"number": "1"},
        ],
    )
    def test_invalid(self, payload):
        """Missing, blank or mistyped name/number fails validation."""
        with pytest.raises(ValidationError):
            BuildInfo.model_validate(payload)


class TestCredentials:
    """Test credential models."""

    def test_from_username_password(self):
        """The basic token is base64 of user:password."""
        credential = BasicAuth.from_username_password("admin", "password")

        assert credential.token.get_secret_value() == "YWRtaW46cGFzc3dvcmQ="
        assert credential.kind == "basic"

    def test_secret_hidden_in_repr(self):
        """Secrets never appear in repr."""
        assert "AKCp" not in repr(ApiKeyAuth(api_key="AKCp-secret"))
        assert "dXNlcjpwYXNz" not in repr(BasicAuth(token="dXNlcjpwYXNz"))

    @pytest.mark.parametrize("model, field", [(BasicAuth, "token"), (ApiKeyAuth, "api_key")])
    def test_empty_secret_rejected(self, model, field):
        """Empty or blank secrets are rejected."""
        with pytest.raises(ValidationError):
            model(**{field: "  "})

    def test_frozen(self):
        """Credentials cannot be modified after creation."""
        credential = ApiKeyAuth(api_key="key")

        with pytest.raises(ValidationError):
            credential.api_key = SecretStr("other")

    def test_discriminated_union(self):
        """The kind field selects the credential type."""
        adapter = TypeAdapter(Credential)

        assert isinstance(adapter.validate_python({"kind": "api_key", "api_key": "key"}), ApiKeyAuth)
        assert isinstance(adapter.validate_python({"kind": "basic", "token": "abc"}), BasicAuth)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "bearer", "token": "abc"})


class TestArtifactoryConfig:
    """Test ArtifactoryConfig validation."""

    def test_api_key(self):
        """An API key config builds an ApiKeyAuth credential."""
        config = ArtifactoryConfig(base_url="https://host/artifactory/", api_key="key")

        assert config.normalized_base_url() == "https://host/artifactory"
        assert config.credential() == ApiKeyAuth(api_key="key")
        assert config.verify_ssl is True
        assert config.timeout == 120
        assert config.retries == 0

    def test_base_url_normalized(self):
        """Whitespace and trailing slashes are removed like the client does."""
        config = ArtifactoryConfig(base_url="  https://host/artifactory// ", api_key="key")

        assert config.normalized_base_url() == "https://host/artifactory"

    def test_blank_base_url(self):
        """A blank base URL cannot be normalized."""
        config = ArtifactoryConfig(base_url="  ", api_key="key")

        with pytest.raises(ValueError, match="must not be empty"):
            config.normalized_base_url()

    def test_token(self):
        """A token config builds a BasicAuth credential."""
        config = ArtifactoryConfig(base_url="https://host", token="dXNlcjpwYXNz")

        assert config.credential() == BasicAuth(token="dXNlcjpwYXNz")

    def test_username_password(self):
        """Username and password are encoded into a basic token."""
        config = ArtifactoryConfig(base_url="https://host", username="user", password="pass")

        assert config.credential().token.get_secret_value() == "dXNlcjpwYXNz"

    @pytest.mark.parametrize(
        "auth",
        [
            {},
            {"api_key": "key", "token": "abc"},
            {"api_key": "key", "username": "user", "password": "pass"},
            {"username": "user"},
            {"password": "pass"},
        ],
    )
    def test_invalid_authentication(self, auth):
        """Exactly one complete authentication method is required."""
        with pytest.raises(ValidationError):
            ArtifactoryConfig(base_url="https://host", **auth)

    @pytest.mark.parametrize("field, value", [("timeout", 0), ("timeout", -1), ("retries", -1)])
    def test_invalid_network_settings(self, field, value):
        """Timeouts must be positive and retries non-negative."""
        with pytest.raises(ValidationError):
            ArtifactoryConfig(base_url="https://host", api_key="key", **{field: value})

    def test_unknown_field_rejected(self):
        """Typos in the configuration file are reported."""
        with pytest.raises(ValidationError):
            ArtifactoryConfig(base_url="https://host", api_key="key", verify_tls=False)


class TestResults:
    """Test result models."""

    def test_delete_result_defaults(self):
        """DeleteResult defaults to a successful empty result."""
        result = DeleteResult()

        assert result.success is True
        assert result.details == ""

    def test_download_result_verified(self):
        """A download is verified only when an MD5 was checked."""
        assert DownloadResult(destination="/tmp/a", message="ok").verified is False
        assert DownloadResult(destination="/tmp/a", message="ok", md5="abc").verified is True
