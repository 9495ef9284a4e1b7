"""
Base classes for bookmark exporters.

This module provides the abstract base class and common utilities
for bookmark tree export formats.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

from ..data_models import Bookmark, BookmarkItem, Folder, Separator
from ...utils.error_handler import BookmarkConverterError

# Serialized field order for each item type, after "type"
BOOKMARK_FIELDS = (
    "name",
    "href",
    "tags",
    "id",
    "add_date",
    "last_modified",
    "icon",
    "icon_uri",
)
FOLDER_FIELDS = ("name", "id", "add_date", "last_modified")


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the exported file
        count: Number of top-level items exported
        format_name: Name of the export format used
        exported_at: Timestamp of the export
        additional_info: Any format-specific additional information
        warnings: List of non-fatal warnings during export
    """

    path: Path
    count: int
    format_name: str
    exported_at: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


class ExportError(BookmarkConverterError):
    """
    Exception raised when export fails.

    Attributes:
        message: Error description
        format_name: Name of the export format
        path: Target path if available
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.format_name = format_name
        self.path = path
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.format_name:
            parts.append(f"[{self.format_name}]")
        parts.append(self.message)
        if self.path:
            parts.append(f"(path: {self.path})")
        if self.original_error:
            parts.append(f"Caused by: {type(self.original_error).__name__}: {self.original_error}")
        return " ".join(parts)


class BookmarkExporter(ABC):
    """
    Abstract base class for bookmark tree exporters.

    All exporters must implement the export() method and define
    format_name and file_extension properties.

    Example:
        >>> exporter = JSONExporter()
        >>> result = exporter.export(items, Path("output.json"))
        >>> print(f"Exported {result.count} items to {result.path}")
    """

    def __init__(self):
        """Initialize the exporter."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def export(
        self,
        items: Sequence[BookmarkItem],
        output_path: Path
    ) -> ExportResult:
        """
        Export a bookmark tree to the specified path.

        Args:
            items: Top-level items of the tree
            output_path: Target path for the export

        Returns:
            ExportResult with details about the export

        Raises:
            ExportError: If export fails
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Human-readable name of the export format (e.g., "JSON")."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Default file extension for this format, without leading dot."""
        pass

    def validate_items(self, items: Sequence[BookmarkItem]) -> List[str]:
        """
        Collect non-fatal warnings about a tree before export.

        Args:
            items: Top-level items of the tree

        Returns:
            List of warning messages for any issues found
        """
        warnings = []

        if not items:
            warnings.append("No bookmark items to export")
            return warnings

        no_url_count = 0
        unnamed_folders = 0
        stack = list(items)
        while stack:
            item = stack.pop()
            if isinstance(item, Bookmark) and not item.href:
                no_url_count += 1
            elif isinstance(item, Folder):
                if not item.name:
                    unnamed_folders += 1
                stack.extend(item.children)

        if no_url_count > 0:
            warnings.append(f"{no_url_count} bookmark(s) have no URL")
        if unnamed_folders > 0:
            warnings.append(f"{unnamed_folders} folder(s) have no name")

        return warnings

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Prepare and validate the output path.

        Args:
            output_path: Target path for export

        Returns:
            Validated Path object

        Raises:
            ExportError: If the parent directory cannot be created
        """
        path = Path(output_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied creating path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to prepare output path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        return path

    def item_to_dict(self, item: BookmarkItem) -> Dict[str, Any]:
        """
        Convert a tree item to a dictionary for serialization.

        Empty fields are left out entirely, and so is an empty children
        list; "type" is always present.

        Args:
            item: Bookmark, folder or separator

        Returns:
            Dictionary representation of the item
        """
        data: Dict[str, Any] = {"type": item.item_type}

        if isinstance(item, Separator):
            return data

        field_names = BOOKMARK_FIELDS if isinstance(item, Bookmark) else FOLDER_FIELDS
        for name in field_names:
            value = getattr(item, name)
            if value:
                data[name] = value

        if isinstance(item, Folder) and item.children:
            data["children"] = [self.item_to_dict(child) for child in item.children]

        return data

    def items_to_list(self, items: Sequence[BookmarkItem]) -> List[Dict[str, Any]]:
        """Convert top-level items to a list of dictionaries."""
        return [self.item_to_dict(item) for item in items]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"
