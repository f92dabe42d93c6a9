"""
Configuration management for plistbridge.

This module handles loading and accessing configuration values from config.yaml.
Settings cover logging and the defaults used when writing property lists.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
import logging


class ConfigManager:
    """
    Manages configuration loading and access for plistbridge.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        # Set once a file is chosen explicitly; a missing file is then reported
        self._required = False
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

            logging.info(f"Configuration loaded from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            if self._required:
                logging.warning(f"Failed to load configuration, using defaults: {e}")
            else:
                logging.debug(f"Using default configuration: {e}")
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "logging": {
                "level": "WARNING",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "paths": {
                "log_file": None
            },
            "output": {
                "binary": False,
                "sort_keys": False,
                "json_indent": 2
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "output.binary")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("output.sort_keys")  # Returns False
            config.get("logging.level")  # Returns "WARNING"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def load(self, config_path: str) -> None:
        """
        Switch to a different configuration file and load it.

        Args:
            config_path: Path to the new configuration file
        """
        self.config_path = Path(config_path)
        self._required = True
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return self.get("logging.level", "WARNING")

    @property
    def log_format(self) -> str:
        """Get logging format string."""
        return self.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @property
    def log_filename(self) -> Optional[str]:
        """Get log file name, or None to log to the console only."""
        return self.get("paths.log_file")

    @property
    def binary_output(self) -> bool:
        """Whether property lists are written in binary format by default."""
        return bool(self.get("output.binary", False))

    @property
    def sort_keys(self) -> bool:
        """Whether dictionary keys are sorted when writing property lists."""
        return bool(self.get("output.sort_keys", False))

    @property
    def json_indent(self) -> Optional[int]:
        """Get indentation used when printing dynamic values as JSON."""
        return self.get("output.json_indent", 2)


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
