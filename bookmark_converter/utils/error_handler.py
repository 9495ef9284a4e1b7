"""
Exception hierarchy for the Bookmark Converter.

Every failure raised by the conversion pipeline derives from
BookmarkConverterError so callers can handle the whole family at once.
"""

from typing import Optional


# ============================================================================
# Unified Exception Hierarchy for Bookmark Converter
# ============================================================================
# All custom exceptions for the bookmark converter project are defined here.
# Import these exceptions from bookmark_converter.utils.error_handler
# ============================================================================


class BookmarkConverterError(Exception):
    """Base exception for all bookmark converter errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(BookmarkConverterError):
    """Invalid command-line arguments or user input."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(BookmarkConverterError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Conversion Errors
# ============================================================================


class ConversionError(BookmarkConverterError):
    """Base class for failures while converting a bookmark document."""

    pass


class InputReadError(ConversionError):
    """The input could not be fully read or decoded."""

    pass


class DocumentParseError(ConversionError):
    """The document builder rejected the normalized markup."""

    pass


class StructureParseError(ConversionError):
    """
    Extraction of a nested folder failed.

    Attributes:
        message: Error description
        folder_name: Name of the enclosing folder, if any
        original_error: The failure that caused this one
    """

    def __init__(
        self,
        message: str,
        folder_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.folder_name = folder_name
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.folder_name is None:
            return self.message
        return f"parsing children for folder '{self.folder_name}': {self.message}"

    @classmethod
    def wrap(cls, folder_name: str, error: Exception) -> "StructureParseError":
        """Wrap a nested failure with the name of the folder being extracted."""
        return cls(str(error), folder_name=folder_name, original_error=error)
