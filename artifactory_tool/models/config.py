"""Configuration model for connecting to an Artifactory server."""

from typing import Optional

from pydantic import Field, SecretStr, model_validator

from ..utils.constants import DEFAULT_RETRIES, DEFAULT_TIMEOUT
from ..utils.url import normalize_base_url
from .base import ToolBaseModel
from .credentials import ApiKeyAuth, BasicAuth, Credential


class ArtifactoryConfig(ToolBaseModel):
    """
    Settings from the ``[client]`` section of the configuration file.

    Exactly one authentication method must be configured: ``token``,
    ``username`` with ``password``, or ``api_key``.
    """

    base_url: str = Field(description="Base URL of the server, e.g. https://host/artifactory")
    token: Optional[SecretStr] = Field(default=None, description="Base64 basic auth token")
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    api_key: Optional[SecretStr] = Field(default=None, description="Artifactory API key")
    verify_ssl: bool = True
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    retries: int = Field(default=DEFAULT_RETRIES, ge=0)

    @model_validator(mode="after")
    def check_authentication(self) -> "ArtifactoryConfig":
        if bool(self.username) != bool(self.password):
            raise ValueError("username and password must be configured together")

        methods = [self.token is not None, self.username is not None, self.api_key is not None]
        if sum(methods) != 1:
            raise ValueError("Configure exactly one of: token, username/password, api_key")
        return self

    def normalized_base_url(self) -> str:
        """Return the base URL without surrounding whitespace or trailing slashes."""
        return normalize_base_url(self.base_url)

    def credential(self) -> Credential:
        """Build the credential described by this configuration."""
        if self.api_key is not None:
            return ApiKeyAuth(api_key=self.api_key)
        if self.token is not None:
            return BasicAuth(token=self.token)
        # check_authentication guarantees both are set here
        return BasicAuth.from_username_password(
            str(self.username), self.password.get_secret_value()  # type: ignore[union-attr]
        )


__all__ = ["ArtifactoryConfig"]
