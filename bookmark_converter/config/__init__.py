"""Configuration loading for the Bookmark Converter."""

from .configuration import Configuration
from .pydantic_config import (
    ConfigurationManager,
    ConverterConfig,
    LoggingConfig,
    OutputConfig,
    ParsingConfig,
    format_config_error,
)

__all__ = [
    "Configuration",
    "ConfigurationManager",
    "ConverterConfig",
    "LoggingConfig",
    "OutputConfig",
    "ParsingConfig",
    "format_config_error",
]
