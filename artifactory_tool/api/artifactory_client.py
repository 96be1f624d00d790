"""
Artifactory API client for storing and retrieving artifacts.

This module provides the ArtifactoryClient class, a thin layer over the
Artifactory REST API. Every operation follows the same steps:

    1. Build the URL from the repository key and file path
    2. Build the authentication headers from the credential
    3. Issue a single HTTP request
    4. Turn the status code into a result or an ArtifactoryError

Two operations issue a second, dependent request: uploads check whether the
artifact exists first, and downloads with integrity checking fetch the file
info after writing the file.

API documentation:
- https://www.jfrog.com/confluence/display/RTF/Artifactory+REST+API
"""

# Standard library imports
import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional, Union

# Third-party imports
import httpx
from pydantic import ValidationError

# Local imports
from ..models.artifactory_api import BuildInfo, Checksums, CreationInfo, FileInfo
from ..models.config import ArtifactoryConfig
from ..models.credentials import Credential
from ..models.results import DeleteResult, DownloadResult
from ..utils import (
    ConfigManager,
    build_url,
    calculate_md5_checksum,
    checksum_headers,
    content_url,
    create_session,
    is_stream,
    normalize_base_url,
    open_stream_chunks,
    redact_headers,
    storage_url,
    validate_destination_directory,
    validate_file_path,
)
from ..utils.constants import (
    BUILD_UPLOAD_DOCS_URL,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    DOWNLOAD_SUCCESS_MESSAGE,
    HTTP_CREATED,
    HTTP_NO_CONTENT,
    HTTP_NOT_FOUND,
    HTTP_OK,
    MAX_LOGGED_BODY_LENGTH,
)
from ..utils.response_utils import parse_model_response
from .auth import auth_headers
from .exceptions import (
    ArtifactExistsError,
    ArtifactoryHTTPError,
    ChecksumMismatchError,
    InvalidBuildInfoError,
    InvalidStreamError,
)

ChecksumsLike = Union[Checksums, Mapping]
BuildInfoLike = Union[BuildInfo, Mapping]


class ArtifactoryClient:
    """
    A client for interacting with the Artifactory REST API.

    The base URL and credential are fixed at construction. The client holds
    one httpx.Client; call close() or use it as a context manager to release
    its connections.

    Calls share no state besides the connection pool, so they may run from
    several threads. The client does not coordinate them: two uploads to the
    same path can both pass the existence check, and the server keeps the
    last write.

    Example:
        >>> with ArtifactoryClient("https://host/artifactory", ApiKeyAuth(api_key="key")) as client:
        ...     client.upload_file("libs-release", "/org/app/1.0/app.jar", "build/app.jar")
    """

    def __init__(
        self,
        base_url: str,
        credential: Optional[Credential],
        *,
        verify_ssl: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize the Artifactory client.

        Args:
            base_url: Server base URL including the context path,
                      e.g. "https://host/artifactory"
            credential: BasicAuth or ApiKeyAuth. Operations fail with
                        InvalidCredentialError when this is missing.
            verify_ssl: Verify the server's TLS certificate
            timeout: Request timeout in seconds
            retries: Connection retries performed by the transport
            chunk_size: Chunk size for streamed uploads and downloads
        """
        self._base_url = normalize_base_url(base_url)
        self._credential = credential
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.retries = retries
        self.chunk_size = chunk_size
        self.session = self._create_session()
        logging.debug("ArtifactoryClient initialized for %s", self._base_url)

    @property
    def base_url(self) -> str:
        """Server base URL without a trailing slash."""
        return self._base_url

    @property
    def credential(self) -> Optional[Credential]:
        """The credential used to authenticate requests."""
        return self._credential

    def _create_session(self) -> httpx.Client:
        return create_session(verify_ssl=self.verify_ssl, timeout=self.timeout, retries=self.retries)

    @classmethod
    def from_config(cls, config: ArtifactoryConfig) -> "ArtifactoryClient":
        """Create a client from a validated configuration model."""
        return cls(
            config.normalized_base_url(),
            config.credential(),
            verify_ssl=config.verify_ssl,
            timeout=config.timeout,
            retries=config.retries,
        )

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None) -> "ArtifactoryClient":
        """
        Create a client from the [client] section of a TOML configuration file.

        Args:
            path: Config file path (default: ~/.config/artifactory/client.toml)
        """
        return cls.from_config(ConfigManager(path).client_config())

    def close(self) -> None:
        """Close the session and release all connections."""
        self.session.close()
        logging.debug("ArtifactoryClient session closed and connections released")

    def __enter__(self) -> "ArtifactoryClient":
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        self.close()

    # ============================================================================
    # Request Helpers
    # ============================================================================

    def _get_auth_headers(self) -> Dict[str, str]:
        """
        Build the authentication headers for the configured credential.

        Raises:
            InvalidCredentialError: If no valid credential is configured
        """
        return auth_headers(self._credential)

    def _request_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = self._get_auth_headers()
        if extra:
            headers.update(extra)
        return headers

    def _log_failed_response(self, response: httpx.Response, operation: str) -> None:
        """Log a rejected response; server errors get the full request details."""
        if response.status_code < 500:
            logging.debug("Failed to %s: %s - %s", operation, response.status_code, response.text)
            return

        logging.error("=" * 80)
        logging.error("SERVER ERROR (%s) during %s", response.status_code, operation)
        logging.error("=" * 80)
        logging.error("  Method: %s", response.request.method)
        logging.error("  URL: %s", response.url)
        logging.error("  Request Headers: %s", redact_headers(response.request.headers))
        logging.error("  Response Headers: %s", dict(response.headers))
        logging.error("  Response Body: %s", response.text[:MAX_LOGGED_BODY_LENGTH])
        logging.error("=" * 80)

    def _check_status(self, response: httpx.Response, expected: int, operation: str) -> None:
        """
        Raise ArtifactoryHTTPError unless the response has the expected status.

        Streamed responses must be read before calling this.
        """
        if response.status_code != expected:
            self._raise_for_status(response, operation)

    def _raise_for_status(self, response: httpx.Response, operation: str) -> None:
        """Log a rejected response and raise ArtifactoryHTTPError for it."""
        self._log_failed_response(response, operation)
        message = f"Failed to {operation}: server returned {response.status_code}"
        if response.text:
            message += f" - {response.text[:MAX_LOGGED_BODY_LENGTH]}"
        raise ArtifactoryHTTPError(
            message,
            status_code=response.status_code,
            details=response.text,
            url=str(response.url),
        )

    # ============================================================================
    # File Operations
    # ============================================================================

    def get_file_info(self, repo_key: str, path: str) -> FileInfo:
        """
        Get the metadata of a stored artifact.

        Args:
            repo_key: Key of the repository holding the file
            path: Path of the file inside the repository

        Returns:
            FileInfo with size, timestamps and checksums

        Raises:
            ArtifactoryHTTPError: If the server does not answer 200
        """
        headers = self._request_headers()
        url = storage_url(self._base_url, repo_key, path)

        logging.debug("Getting file info: %s", url)
        response = self.session.get(url, headers=headers)
        self._check_status(response, HTTP_OK, f"get file info for {repo_key}{path}")
        return parse_model_response(response, FileInfo, "get file info")

    def file_exists(self, repo_key: str, path: str) -> bool:
        """
        Check whether an artifact exists.

        Returns:
            True on 200, False on 404

        Raises:
            ArtifactoryHTTPError: On any other status
        """
        headers = self._request_headers()
        url = content_url(self._base_url, repo_key, path)

        response = self.session.head(url, headers=headers)
        if response.status_code == HTTP_NOT_FOUND:
            logging.debug("Artifact not found: %s", url)
            return False

        self._check_status(response, HTTP_OK, f"check existence of {repo_key}{path}")
        logging.debug("Artifact exists: %s", url)
        return True

    def upload_file(
        self,
        repo_key: str,
        path: str,
        local_file_path: str,
        force_upload: bool = False,
        checksums: Optional[ChecksumsLike] = None,
    ) -> CreationInfo:
        """
        Upload a local file.

        Args:
            repo_key: Key of the target repository
            path: Target path inside the repository
            local_file_path: Absolute or relative path of the file to upload
            force_upload: Overwrite the artifact if it already exists
            checksums: Optional md5/sha1 hints sent to the server

        Raises:
            FileNotFoundError: If the local file does not exist
        """
        resolved = validate_file_path(local_file_path)

        logging.info("Uploading %s to %s%s", resolved, repo_key, path)
        with open(resolved, "rb") as fp:
            return self.upload_stream(repo_key, path, fp, force_upload, checksums)

    def upload_stream(
        self,
        repo_key: str,
        path: str,
        stream: Union[Iterable[bytes], Any],
        force_upload: bool = False,
        checksums: Optional[ChecksumsLike] = None,
    ) -> CreationInfo:
        """
        Upload the content of a binary stream.

        The existence check and the PUT are two separate requests: another
        writer can create the artifact in between. Do not rely on
        ``force_upload=False`` to arbitrate concurrent uploads.

        Args:
            repo_key: Key of the target repository
            path: Target path inside the repository
            stream: Binary file-like object or iterable of bytes chunks
            force_upload: Overwrite the artifact if it already exists
            checksums: Optional md5/sha1 hints; sha1 wins when both are set

        Returns:
            CreationInfo describing the deployed artifact

        Raises:
            InvalidStreamError: If ``stream`` is not a binary stream
            ArtifactExistsError: If the artifact exists and ``force_upload`` is false
            ArtifactoryHTTPError: If the server does not answer 201
        """
        if not is_stream(stream):
            raise InvalidStreamError(f"The provided object {stream!r} is not a stream")
        try:
            chunks = open_stream_chunks(stream, self.chunk_size)
        except TypeError as e:
            raise InvalidStreamError(f"The provided object {stream!r} is not a stream of bytes: {e}") from e

        if checksums is not None and not isinstance(checksums, Checksums):
            checksums = Checksums.model_validate(dict(checksums))
        headers = self._request_headers(checksum_headers(checksums))
        url = content_url(self._base_url, repo_key, path)

        if self.file_exists(repo_key, path) and not force_upload:
            raise ArtifactExistsError(
                f"File {repo_key}{path} already exists and forceUpload flag was not provided with a TRUE value."
            )

        logging.debug("Uploading stream to %s", url)
        response = self.session.put(url, content=chunks, headers=headers)
        self._check_status(response, HTTP_CREATED, f"upload {repo_key}{path}")

        logging.info("Uploaded %s%s", repo_key, path)
        return parse_model_response(response, CreationInfo, "upload")

    def download_file(
        self, repo_key: str, path: str, destination_file_path: str, check_integrity: bool = False
    ) -> DownloadResult:
        """
        Download an artifact to a local file.

        Args:
            repo_key: Key of the repository holding the file
            path: Path of the file inside the repository
            destination_file_path: File to create; its directory must exist
            check_integrity: Compare the MD5 of the written file with the server's

        Raises:
            FileNotFoundError: If the destination directory does not exist
            ArtifactoryHTTPError: If the server does not answer 200
            ChecksumMismatchError: If integrity checking finds a different MD5
        """
        destination = validate_destination_directory(destination_file_path)

        logging.info("Downloading %s%s to %s", repo_key, path, destination)
        with self.get_download_stream(repo_key, path) as chunks, open(destination, "wb") as f:
            for chunk in chunks:
                f.write(chunk)

        if not check_integrity:
            return DownloadResult(destination=destination, message=DOWNLOAD_SUCCESS_MESSAGE)

        file_info = self.get_file_info(repo_key, path)
        expected = file_info.checksums.md5
        actual = calculate_md5_checksum(destination)

        if expected is None or actual != expected.lower():
            raise ChecksumMismatchError(
                f"Error downloading file {content_url(self._base_url, repo_key, path)}. "
                f"Checksum (MD5) validation failed. Expected: {expected} - Actual downloaded: {actual}",
                expected=expected,
                actual=actual,
            )

        return DownloadResult(
            destination=destination,
            message=f"{DOWNLOAD_SUCCESS_MESSAGE} even checking expected checksum MD5 ({expected})",
            md5=actual,
        )

    @contextmanager
    def get_download_stream(self, repo_key: str, path: str) -> Iterator[Iterator[bytes]]:
        """
        Stream the content of an artifact.

        The status is checked when entering the context, so a failed
        download raises before any chunk is produced.

        Example:
            >>> with client.get_download_stream("libs-release", "/app.jar") as chunks:
            ...     for chunk in chunks:
            ...         sink.write(chunk)

        Raises:
            ArtifactoryHTTPError: If the server does not answer 200
        """
        headers = self._request_headers()
        url = content_url(self._base_url, repo_key, path)

        logging.debug("Opening download stream: %s", url)
        with self.session.stream("GET", url, headers=headers) as response:
            if response.status_code != HTTP_OK:
                response.read()
                self._check_status(response, HTTP_OK, f"download {repo_key}{path}")
            yield response.iter_bytes(chunk_size=self.chunk_size)

    def delete_file(self, repo_key: str, path: str) -> DeleteResult:
        """
        Delete an artifact.

        Returns:
            DeleteResult holding the raw response body

        Raises:
            ArtifactoryHTTPError: If the server does not answer 2xx
        """
        headers = self._request_headers()
        url = content_url(self._base_url, repo_key, path)

        response = self.session.delete(url, headers=headers)
        if not response.is_success:
            self._raise_for_status(response, f"delete file {url}")

        logging.info("Deleted %s%s", repo_key, path)
        return DeleteResult(success=True, details=response.text)

    # ============================================================================
    # Build Operations
    # ============================================================================

    def upload_build(self, build_info: BuildInfoLike) -> None:
        """
        Publish build info.

        ``name`` and ``number`` are stripped and ``number`` is converted to a
        string; every other field is sent as given. The caller's object is
        not modified.

        Raises:
            InvalidBuildInfoError: If name or number is missing or blank
            ArtifactoryHTTPError: If the server does not answer 204
        """
        build = self._validate_build_info(build_info)
        headers = self._request_headers()

        logging.info("Publishing build %s #%s", build.name, build.number)
        response = self.session.put(build_url(self._base_url), json=build.model_dump(mode="json"), headers=headers)
        self._check_status(response, HTTP_NO_CONTENT, f"upload build {build.name} #{build.number}")

    @staticmethod
    def _validate_build_info(build_info: BuildInfoLike) -> BuildInfo:
        message = f"Build Info must include a name and number. See {BUILD_UPLOAD_DOCS_URL} for more info"

        if isinstance(build_info, BuildInfo):
            payload: Dict[str, Any] = build_info.model_dump()
        elif isinstance(build_info, Mapping):
            payload = dict(build_info)
        else:
            raise InvalidBuildInfoError(message)

        try:
            return BuildInfo.model_validate(payload)
        except ValidationError as e:
            raise InvalidBuildInfoError(message) from e


__all__ = ["ArtifactoryClient"]
