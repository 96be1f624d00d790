"""
Credentials accepted by the Artifactory client.

A credential is exactly one of ``BasicAuth`` or ``ApiKeyAuth``; the
``kind`` field discriminates the two when loading from configuration.
"""

import base64
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, SecretStr, field_validator

from .base import ToolBaseModel


class _CredentialModel(ToolBaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("*", mode="after")
    @classmethod
    def not_empty(cls, value):
        if isinstance(value, SecretStr) and not value.get_secret_value().strip():
            raise ValueError("Credential value must not be empty")
        return value


class BasicAuth(_CredentialModel):
    """HTTP basic authentication with a pre-encoded base64 ``user:password`` token."""

    kind: Literal["basic"] = "basic"
    token: SecretStr

    @classmethod
    def from_username_password(cls, username: str, password: str) -> "BasicAuth":
        """Build the basic token from a username and password."""
        raw = f"{username}:{password}".encode("utf-8")
        return cls(token=SecretStr(base64.b64encode(raw).decode("ascii")))


class ApiKeyAuth(_CredentialModel):
    """Authentication with an Artifactory API key."""

    kind: Literal["api_key"] = "api_key"
    api_key: SecretStr


Credential = Annotated[Union[BasicAuth, ApiKeyAuth], Field(discriminator="kind")]


__all__ = ["BasicAuth", "ApiKeyAuth", "Credential"]
