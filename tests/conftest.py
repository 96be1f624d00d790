"""
Test fixtures and mock data for artifactory-tool tests.

HTTP traffic is mocked with respx through the ``httpx_mock`` fixture.
Temporary files go through pytest's ``tmp_path`` so they are cleaned up
automatically.
"""

import hashlib

import pytest
import respx

BASE_URL = "https://artifactory.example.com/artifactory"

REPO_KEY = "libs-release-local"

FILE_PATH = "/org/acme/app/1.0/app-1.0.jar"

FILE_CONTENT = b"artifact content\n" * 64

FILE_MD5 = hashlib.md5(FILE_CONTENT).hexdigest()

FILE_SHA1 = hashlib.sha1(FILE_CONTENT).hexdigest()


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking; unmatched requests fail the test."""
    with respx.mock(assert_all_mocked=True, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def api_key_credential():
    """API key credential."""
    from artifactory_tool.models.credentials import ApiKeyAuth

    return ApiKeyAuth(api_key="test-api-key")


@pytest.fixture
def basic_credential():
    """Basic auth credential for user "admin" with password "password"."""
    from artifactory_tool.models.credentials import BasicAuth

    return BasicAuth.from_username_password("admin", "password")


@pytest.fixture
def client(api_key_credential, httpx_mock):
    """ArtifactoryClient authenticated with an API key, talking to a mocked server."""
    from artifactory_tool.api import ArtifactoryClient

    artifactory_client = ArtifactoryClient(BASE_URL, api_key_credential)
    yield artifactory_client
    artifactory_client.close()


@pytest.fixture
def content_url():
    """Content URL of the test artifact."""
    return f"{BASE_URL}/{REPO_KEY}{FILE_PATH}"


@pytest.fixture
def storage_url():
    """Storage API URL of the test artifact."""
    return f"{BASE_URL}/api/storage/{REPO_KEY}{FILE_PATH}"


@pytest.fixture
def mock_file_info():
    """File info JSON as returned by the storage API."""
    return {
        "uri": f"{BASE_URL}/api/storage/{REPO_KEY}{FILE_PATH}",
        "downloadUri": f"{BASE_URL}/{REPO_KEY}{FILE_PATH}",
        "repo": REPO_KEY,
        "path": FILE_PATH,
        "created": "2024-05-01T10:00:00.000Z",
        "createdBy": "admin",
        "lastModified": "2024-05-01T10:00:00.000Z",
        "modifiedBy": "admin",
        "lastUpdated": "2024-05-01T10:00:00.000Z",
        "size": str(len(FILE_CONTENT)),
        "mimeType": "application/java-archive",
        "checksums": {"md5": FILE_MD5, "sha1": FILE_SHA1, "sha256": "f" * 64},
        "originalChecksums": {"md5": FILE_MD5, "sha1": FILE_SHA1},
    }


@pytest.fixture
def mock_creation_info():
    """Deploy response JSON."""
    return {
        "uri": f"{BASE_URL}/api/storage/{REPO_KEY}{FILE_PATH}",
        "downloadUri": f"{BASE_URL}/{REPO_KEY}{FILE_PATH}",
        "repo": REPO_KEY,
        "path": FILE_PATH,
        "created": "2024-05-01T10:00:00.000Z",
        "createdBy": "admin",
        "size": str(len(FILE_CONTENT)),
        "mimeType": "application/java-archive",
        "checksums": {"md5": FILE_MD5, "sha1": FILE_SHA1},
        "originalChecksums": {"md5": FILE_MD5, "sha1": FILE_SHA1},
    }


@pytest.fixture
def mock_build_info():
    """Minimal build info record."""
    return {
        "version": "1.0.1",
        "name": "rel",
        "number": 5,
        "started": "2024-05-01T10:00:00.000+0000",
        "modules": [{"id": "org.acme:app:1.0", "artifacts": []}],
    }


@pytest.fixture
def local_file(tmp_path):
    """Local file holding FILE_CONTENT."""
    path = tmp_path / "app-1.0.jar"
    path.write_bytes(FILE_CONTENT)
    return path


@pytest.fixture
def temp_config_file(tmp_path):
    """Client configuration file using an API key."""
    config_path = tmp_path / "client.toml"
    config_path.write_text(
        "[client]\n"
        f'base_url = "{BASE_URL}/"\n'
        'api_key = "test-api-key"\n'
        "verify_ssl = false\n"
        "timeout = 30\n"
    )
    return config_path
