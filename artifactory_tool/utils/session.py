"""
Session utilities for Artifactory operations.

This module creates the httpx client every ArtifactoryClient talks through:
connection pooling, timeouts, TLS verification and optional HTTP/2.
"""

import importlib.util
import logging

import httpx
from httpx import HTTPTransport

from .constants import DEFAULT_RETRIES, DEFAULT_TIMEOUT


def _http2_available() -> bool:
    """Check whether the optional h2 package is installed."""
    try:
        return importlib.util.find_spec("h2") is not None
    except (ImportError, ValueError):
        return False


def create_session(
    *,
    verify_ssl: bool = True,
    timeout: float = DEFAULT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
    max_connections: int = 20,
) -> httpx.Client:
    """
    Create an httpx client for talking to an Artifactory server.

    Args:
        verify_ssl: Verify the server's TLS certificate. Only disable this
                    for servers with self-signed certificates you trust.
        timeout: Read/write/pool timeout in seconds (connect is capped at 10s)
        retries: Number of connection retries performed by the transport.
                 Only connection failures are retried, never HTTP responses.
        max_connections: Maximum number of connections in the pool

    Returns:
        Configured httpx.Client

    Example:
        >>> client = create_session(verify_ssl=False, timeout=300.0)
    """
    if not verify_ssl:
        logging.warning("TLS certificate verification is disabled")

    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(5, max_connections // 4),
    )
    timeout_config = httpx.Timeout(timeout, connect=min(10.0, timeout))

    use_http2 = _http2_available()
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    transport = HTTPTransport(limits=limits, retries=retries, verify=verify_ssl, http2=use_http2)

    return httpx.Client(transport=transport, timeout=timeout_config, follow_redirects=True)


__all__ = ["create_session"]
