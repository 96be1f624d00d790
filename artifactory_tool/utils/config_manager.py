"""
Configuration management utilities.

Loads the TOML configuration file and validates the client section.
"""

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import ValidationError

from .constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH

if TYPE_CHECKING:
    from ..models.config import ArtifactoryConfig


class ConfigManager:
    """
    Manages configuration loading and access.

    Example configuration::

        [client]
        base_url = "https://artifactory.example.com/artifactory"
        api_key = "AKCp..."
        verify_ssl = true
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "client.base_url").
        """
        value: Any = self.load()
        for k in key.split("."):
            if not isinstance(value, dict) or value.get(k) is None:
                return default
            value = value[k]
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section, or an empty dict."""
        return self.load().get(section, {})

    def has_key(self, key: str) -> bool:
        """Check if a configuration key exists."""
        try:
            self.load()
        except (FileNotFoundError, ValueError):
            return False
        marker = object()
        return self.get(key, marker) is not marker

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._config = None
        self.load()

    def client_config(self) -> "ArtifactoryConfig":
        """
        Validate the client section.

        Raises:
            ValueError: If the section is missing or invalid
        """
        from ..models.config import ArtifactoryConfig  # pylint: disable=import-outside-toplevel

        section = self.get_section(CONFIG_SECTION)
        if not section:
            raise ValueError(f"Missing [{CONFIG_SECTION}] section in {self.config_path}")
        try:
            return ArtifactoryConfig.model_validate(section)
        except ValidationError as e:
            raise ValueError(f"Invalid [{CONFIG_SECTION}] section in {self.config_path}: {e}") from e


__all__ = ["ConfigManager"]
