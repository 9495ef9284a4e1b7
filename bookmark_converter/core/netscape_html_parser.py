"""
Netscape HTML bookmark parser module.

This module converts Netscape bookmark file exports (the HTML format used by
Chrome, Firefox, Edge and most bookmark managers for interchange) into the
hierarchical bookmark model. It reads and decodes the input, normalizes the
markup, builds the document tree and extracts the folder structure.
"""

import logging
import re
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Union

from bookmark_converter.core.data_models import BookmarkItem, summarize_items
from bookmark_converter.core.document import build_document
from bookmark_converter.core.preprocessor import strip_ambiguous_tags
from bookmark_converter.core.tree_extractor import (
    DEFAULT_MAX_DEPTH,
    extract_items,
    find_root_list,
)
from bookmark_converter.utils.error_handler import InputReadError

DEFAULT_ENCODINGS = ("utf-8-sig", "iso-8859-1")


class NetscapeHTMLParser:
    """
    Parser for Netscape bookmark file exports.

    Example:
        >>> parser = NetscapeHTMLParser()
        >>> items = parser.parse_file("bookmarks.html")
    """

    DOCTYPE_PATTERN = r"<!DOCTYPE\s+NETSCAPE-Bookmark-file-1>"

    def __init__(
        self,
        parser_backend: str = "html.parser",
        encodings: Sequence[str] = DEFAULT_ENCODINGS,
        max_nesting_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Initialize the Netscape HTML parser.

        Args:
            parser_backend: BeautifulSoup tree builder ("html.parser" or "lxml")
            encodings: Encodings tried in order when decoding raw bytes
            max_nesting_depth: Maximum folder nesting depth accepted
        """
        self.parser_backend = parser_backend
        self.encodings = tuple(encodings)
        self.max_nesting_depth = max_nesting_depth
        self.logger = logging.getLogger(__name__)

        # Facts about the most recent input, for reporting
        self.input_size = 0
        self.has_netscape_doctype = False

    @classmethod
    def from_config(cls, config) -> "NetscapeHTMLParser":
        """Create a parser from the parsing section of a ConverterConfig."""
        parsing = config.parsing
        return cls(
            parser_backend=parsing.parser_backend,
            encodings=parsing.encodings,
            max_nesting_depth=parsing.max_nesting_depth,
        )

    def parse_file(self, file_path: Union[str, Path]) -> List[BookmarkItem]:
        """
        Parse a Netscape bookmark file.

        Args:
            file_path: Path to the bookmark file

        Returns:
            Top-level bookmark items in document order

        Raises:
            InputReadError: If the file cannot be read or decoded
            DocumentParseError: If the markup cannot be parsed
            StructureParseError: If the folder structure cannot be extracted
        """
        file_path = Path(file_path)

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise InputReadError(f"failed to read input {file_path}: {e}") from e

        self.logger.debug(f"Read {len(data)} bytes from {file_path}")
        return self.parse_bytes(data)

    def parse_stream(self, stream: BinaryIO) -> List[BookmarkItem]:
        """
        Read a binary stream to the end and parse it.

        Raises:
            InputReadError: If the stream cannot be read or decoded
        """
        try:
            data = stream.read()
        except OSError as e:
            raise InputReadError(f"failed to read input: {e}") from e

        if isinstance(data, str):
            return self.parse_text(data)
        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> List[BookmarkItem]:
        """Decode raw bytes and parse them."""
        text = self._decode(data)
        items = self.parse_text(text)
        self.input_size = len(data)
        return items

    def parse_text(self, text: str) -> List[BookmarkItem]:
        """
        Parse bookmark markup that has already been decoded.

        A document without any bookmark list is not an error: it yields an
        empty list.
        """
        self.input_size = len(text.encode("utf-8"))
        self.has_netscape_doctype = self._has_doctype(text[:1024])

        markup = strip_ambiguous_tags(text)
        document = build_document(markup, self.parser_backend)

        root_list = find_root_list(document)
        if root_list is None:
            self.logger.warning("No bookmark list found in document")
            return []

        items = extract_items(root_list, max_depth=self.max_nesting_depth)

        summary = summarize_items(items)
        self.logger.info(
            f"Parsed {summary['bookmarks']} bookmarks, {summary['folders']} folders "
            f"and {summary['separators']} separators"
        )
        return items

    def _decode(self, data: bytes) -> str:
        """
        Decode input bytes using the first encoding that accepts them.

        Raises:
            InputReadError: If none of the configured encodings applies
        """
        for encoding in self.encodings:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                self.logger.debug(f"Input is not valid {encoding}")
                continue
            except LookupError as e:
                raise InputReadError(f"unknown input encoding: {encoding}") from e

        raise InputReadError(
            f"unable to decode input with supported encodings: "
            f"{', '.join(self.encodings)}"
        )

    def validate_file(self, file_path: Union[str, Path]) -> bool:
        """
        Check whether a file looks like a Netscape bookmark export.

        Args:
            file_path: Path to the file to validate

        Returns:
            True if the file starts with the Netscape bookmark DOCTYPE
        """
        file_path = Path(file_path)

        if not file_path.is_file():
            return False

        try:
            with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
                header = f.read(1024)
        except OSError as e:
            self.logger.debug(f"Cannot read {file_path}: {e}")
            return False

        return self._has_doctype(header)

    def _has_doctype(self, header: str) -> bool:
        return bool(re.search(self.DOCTYPE_PATTERN, header, re.IGNORECASE))

    def get_file_info(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Get information about a bookmark file.

        Args:
            file_path: Path to the file

        Returns:
            Dictionary with file information
        """
        file_path = Path(file_path)

        info = {
            "path": str(file_path),
            "exists": file_path.exists(),
            "size_bytes": 0,
            "is_netscape_bookmarks": False,
            "estimated_bookmark_count": 0,
        }

        if not info["exists"]:
            return info

        try:
            info["size_bytes"] = file_path.stat().st_size
            info["is_netscape_bookmarks"] = self.validate_file(file_path)

            # Estimate bookmark count by counting <A ...> openings
            content = file_path.read_text(encoding="utf-8", errors="ignore")
            info["estimated_bookmark_count"] = len(
                re.findall(r"<A\s", content, re.IGNORECASE)
            )
        except OSError as e:
            self.logger.warning(f"Error getting file info for {file_path}: {e}")

        return info


def parse_netscape_bookmarks(
    source: Union[bytes, str, BinaryIO],
    parser: Optional[NetscapeHTMLParser] = None,
) -> List[BookmarkItem]:
    """
    Parse a Netscape bookmark document with default settings.

    Args:
        source: Raw bytes, decoded text or a binary stream
        parser: Optional preconfigured parser

    Returns:
        Top-level bookmark items in document order
    """
    parser = parser or NetscapeHTMLParser()

    if isinstance(source, bytes):
        return parser.parse_bytes(source)
    if isinstance(source, str):
        return parser.parse_text(source)
    return parser.parse_stream(source)
