"""
Utility modules for the Bookmark Converter.

This package contains the exception hierarchy, logging setup and
command-line argument validation.
"""

from .error_handler import (
    BookmarkConverterError,
    ConfigurationError,
    ConversionError,
    DocumentParseError,
    InputReadError,
    StructureParseError,
    ValidationError,
)

__all__ = [
    "BookmarkConverterError",
    "ConfigurationError",
    "ConversionError",
    "DocumentParseError",
    "InputReadError",
    "StructureParseError",
    "ValidationError",
]
