"""
Central constants for the Artifactory tool package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# API Paths
# ============================================================================

# Storage API prefix, used for file info lookups
STORAGE_API_PATH = "/api/storage"

# Build info publishing endpoint
BUILD_API_PATH = "/api/build"

# Documentation for the build info upload endpoint
BUILD_UPLOAD_DOCS_URL = (
    "https://www.jfrog.com/confluence/display/RTF/Artifactory+REST+API#ArtifactoryRESTAPI-BuildUpload"
)

# ============================================================================
# HTTP Headers
# ============================================================================

AUTHORIZATION_HEADER = "Authorization"

# Vendor specific header for API key authentication
API_KEY_HEADER = "X-JFrog-Art-Api"

CHECKSUM_SHA1_HEADER = "X-Checksum-Sha1"
CHECKSUM_MD5_HEADER = "X-Checksum-Md5"

# Headers whose values must never appear in logs
SENSITIVE_HEADERS = ["authorization", "cookie", API_KEY_HEADER.lower()]

# ============================================================================
# Expected Status Codes
# ============================================================================

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_NOT_FOUND = 404

# ============================================================================
# Network Constants
# ============================================================================

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 120

# Connection retries at the transport level; 0 means every failure surfaces once
DEFAULT_RETRIES = 0

# ============================================================================
# File Transfer Constants
# ============================================================================

# Chunk size used when streaming uploads and downloads
DEFAULT_CHUNK_SIZE = 65536

# Chunk size used when hashing local files
HASH_CHUNK_SIZE = 4096

# ============================================================================
# Configuration
# ============================================================================

DEFAULT_CONFIG_PATH = "~/.config/artifactory/client.toml"

# TOML section holding client settings
CONFIG_SECTION = "client"

# ============================================================================
# Result Messages
# ============================================================================

DOWNLOAD_SUCCESS_MESSAGE = "Download was SUCCESSFUL"

# ============================================================================
# Logging and Display Constants
# ============================================================================

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

# Maximum number of body characters included in error logs
MAX_LOGGED_BODY_LENGTH = 500


__all__ = [
    "STORAGE_API_PATH",
    "BUILD_API_PATH",
    "BUILD_UPLOAD_DOCS_URL",
    "AUTHORIZATION_HEADER",
    "API_KEY_HEADER",
    "CHECKSUM_SHA1_HEADER",
    "CHECKSUM_MD5_HEADER",
    "SENSITIVE_HEADERS",
    "HTTP_OK",
    "HTTP_CREATED",
    "HTTP_NO_CONTENT",
    "HTTP_NOT_FOUND",
    "DEFAULT_TIMEOUT",
    "DEFAULT_RETRIES",
    "DEFAULT_CHUNK_SIZE",
    "HASH_CHUNK_SIZE",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_SECTION",
    "DOWNLOAD_SUCCESS_MESSAGE",
    "DEFAULT_LOG_WIDTH",
    "MAX_LOGGED_BODY_LENGTH",
]
