"""
JSON bookmark exporter.

Exports a bookmark tree as a JSON array that mirrors the folder hierarchy.
"""

import json
from pathlib import Path
from typing import Sequence, TextIO

from .base import BookmarkExporter, ExportResult, ExportError
from ..data_models import BookmarkItem


class JSONExporter(BookmarkExporter):
    """
    Export a bookmark tree to JSON.

    Every item is an object with a "type" key; folders nest their children
    under "children". Empty fields are omitted.

    Example:
        >>> exporter = JSONExporter(indent=2)
        >>> print(exporter.to_json(items))
    """

    def __init__(
        self,
        indent: int = 2,
        ensure_ascii: bool = False,
        compact: bool = False
    ):
        """
        Initialize the JSON exporter.

        Args:
            indent: Number of spaces for indentation
            ensure_ascii: Whether to escape non-ASCII characters
            compact: If True, emit a single line (overrides indent)
        """
        super().__init__()
        self.indent = None if compact else indent
        self.ensure_ascii = ensure_ascii
        self.compact = compact

    @classmethod
    def from_config(cls, config) -> "JSONExporter":
        """Create an exporter from the output section of a ConverterConfig."""
        output = config.output
        return cls(
            indent=output.indent,
            ensure_ascii=output.ensure_ascii,
            compact=output.compact,
        )

    @property
    def format_name(self) -> str:
        return "JSON"

    @property
    def file_extension(self) -> str:
        return "json"

    def to_json(self, items: Sequence[BookmarkItem]) -> str:
        """
        Serialize a bookmark tree to JSON text.

        Args:
            items: Top-level items of the tree

        Returns:
            JSON array text without a trailing newline
        """
        separators = (",", ":") if self.compact else None
        return json.dumps(
            self.items_to_list(items),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            separators=separators,
        )

    def write(self, items: Sequence[BookmarkItem], stream: TextIO) -> None:
        """
        Write a bookmark tree to an open text stream, newline terminated.

        Raises:
            ExportError: If the stream cannot be written
        """
        try:
            stream.write(self.to_json(items))
            stream.write("\n")
            stream.flush()
        except OSError as e:
            raise ExportError(
                f"Failed to write JSON: {e}",
                format_name=self.format_name,
                original_error=e
            )

    def export(
        self,
        items: Sequence[BookmarkItem],
        output_path: Path
    ) -> ExportResult:
        """
        Export a bookmark tree to a JSON file.

        Args:
            items: Top-level items of the tree
            output_path: Path for the JSON file

        Returns:
            ExportResult with export details

        Raises:
            ExportError: If export fails
        """
        warnings = self.validate_items(items)
        path = self.prepare_output_path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                self.write(items, f)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied writing to {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to export JSON: {e}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        self.logger.info(f"Exported {len(items)} top-level items to {path}")

        return ExportResult(
            path=path,
            count=len(items),
            format_name=self.format_name,
            additional_info={
                "compact": self.compact,
                "file_size": path.stat().st_size
            },
            warnings=warnings
        )
