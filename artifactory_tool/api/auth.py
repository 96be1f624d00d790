"""
Authentication headers for the Artifactory API.

Header selection is a pure function of the credential: basic credentials
produce an ``Authorization`` header, API keys the vendor header.
"""

from typing import Any, Dict

from ..models.credentials import ApiKeyAuth, BasicAuth
from ..utils.constants import API_KEY_HEADER, AUTHORIZATION_HEADER
from .exceptions import InvalidCredentialError


def describe_credential(credential: Any) -> str:
    """Describe a credential for error messages without leaking secrets."""
    if credential is None:
        return "None"
    if isinstance(credential, (BasicAuth, ApiKeyAuth)):
        return repr(credential)
    return type(credential).__name__


def auth_headers(credential: Any) -> Dict[str, str]:
    """
    Build the authentication headers for a credential.

    Args:
        credential: BasicAuth or ApiKeyAuth instance

    Returns:
        Dictionary with the single authentication header

    Raises:
        InvalidCredentialError: If the credential is missing or of an unknown type
    """
    if isinstance(credential, BasicAuth):
        return {AUTHORIZATION_HEADER: f"Basic {credential.token.get_secret_value()}"}
    if isinstance(credential, ApiKeyAuth):
        return {API_KEY_HEADER: credential.api_key.get_secret_value()}
    raise InvalidCredentialError(f"Invalid auth object: {describe_credential(credential)}")


__all__ = ["auth_headers", "describe_credential"]
