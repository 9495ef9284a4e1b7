"""
Configuration facade for the Bookmark Converter.

Wraps the Pydantic-based ConfigurationManager with the small interface the
command-line layer needs.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from .pydantic_config import ConfigurationManager, ConverterConfig


class Configuration:
    """Configuration loaded from file, environment and command line."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> ConverterConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_file(self) -> Optional[Path]:
        return self._config.logging.log_file

    def __repr__(self) -> str:
        return f"Configuration({self._config!r})"
