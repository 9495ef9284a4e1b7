"""
Tests for the Netscape HTML bookmark parser.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from bookmark_converter.core.data_models import Bookmark, Folder, Separator
from bookmark_converter.core.netscape_html_parser import (
    NetscapeHTMLParser,
    parse_netscape_bookmarks,
)
from bookmark_converter.utils.error_handler import (
    DocumentParseError,
    InputReadError,
    StructureParseError,
)
from tests.fixtures.test_data import (
    BODY_WRAPPED_HTML,
    CHROME_EXPORT_HTML,
    EMPTY_LIST_HTML,
    FULL_ATTRIBUTE_HTML,
    MIXED_CASE_TAGS_HTML,
    NO_LIST_HTML,
    SEPARATOR_HTML,
    SIMPLE_BOOKMARK_HTML,
    SIMPLE_FOLDER_HTML,
    THREE_LEVEL_HTML,
    netscape_document,
)


class TestNetscapeHTMLParser:
    """Test cases for NetscapeHTMLParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = NetscapeHTMLParser()

    def test_init(self):
        """Test parser initialization."""
        assert self.parser.parser_backend == "html.parser"
        assert self.parser.encodings == ("utf-8-sig", "iso-8859-1")
        assert hasattr(self.parser, "logger")

    def test_simple_bookmark(self):
        """Test a single link at the root."""
        items = self.parser.parse_text(SIMPLE_BOOKMARK_HTML)

        assert items == [
            Bookmark(
                name="Example",
                href="https://example.com",
                add_date="1678886400",
            )
        ]

    def test_all_bookmark_attributes(self):
        """Test every recognized link attribute is carried verbatim."""
        items = self.parser.parse_text(FULL_ATTRIBUTE_HTML)

        assert items == [
            Bookmark(
                name="Example",
                href="https://example.com",
                tags="tag1,tag2",
                id="test_id_1",
                add_date="1678886400",
                last_modified="1678886401",
                icon="data:image/png;base64,iVBORw0KGgo=",
                icon_uri="https://example.com/icon.png",
            )
        ]

    def test_simple_folder(self):
        """Test a heading followed by its list becomes a folder."""
        items = self.parser.parse_text(SIMPLE_FOLDER_HTML)

        assert items == [
            Folder(
                name="My Folder",
                id="folder_id_1",
                add_date="1678886400",
                last_modified="1678886401",
                children=[Bookmark(name="Child Link", href="https://child.com")],
            )
        ]

    def test_separator_between_bookmarks(self):
        """Test separators keep their position between siblings."""
        items = self.parser.parse_text(SEPARATOR_HTML)

        assert items == [
            Bookmark(name="Site 1", href="https://site1.com"),
            Separator(),
            Bookmark(name="Site 2", href="https://site2.com"),
        ]

    def test_empty_root_list(self):
        """Test an empty root list yields no items."""
        assert self.parser.parse_text(EMPTY_LIST_HTML) == []

    def test_no_root_list_is_not_an_error(self):
        """Test a document without any list yields no items."""
        assert self.parser.parse_text(NO_LIST_HTML) == []

    def test_empty_input(self):
        """Test empty input yields no items."""
        assert self.parser.parse_bytes(b"") == []

    def test_three_level_nesting(self):
        """Test nested folders are reproduced level by level."""
        items = self.parser.parse_text(THREE_LEVEL_HTML)

        assert items == [
            Folder(
                name="Level 1",
                children=[
                    Folder(
                        name="Level 2",
                        children=[
                            Folder(
                                name="Level 3",
                                children=[
                                    Bookmark(
                                        name="Deep Link",
                                        href="https://deep.example.com",
                                    )
                                ],
                            )
                        ],
                    )
                ],
            )
        ]

    def test_mixed_case_paragraph_and_term_tags(self):
        """Test stray <P> and <DT> tags do not disturb the structure."""
        items = self.parser.parse_text(MIXED_CASE_TAGS_HTML)

        assert items == [
            Folder(
                name="Folder 1",
                children=[
                    Bookmark(name="Link 1", href="http://link1.com"),
                    Bookmark(name="Link 2", href="http://link2.com"),
                ],
            ),
            Separator(),
            Bookmark(name="Link 3", href="http://link3.com"),
        ]

    def test_chrome_export(self):
        """Test a realistic Chrome export."""
        items = self.parser.parse_text(CHROME_EXPORT_HTML)

        assert len(items) == 2
        bar, other = items

        assert bar.name == "Bookmarks bar"
        assert bar.add_date == "1715434444"
        assert bar.last_modified == "1717526901"
        assert [child.name for child in bar.children] == [
            "Machine Learning",
            "Direct Bookmark",
        ]

        machine_learning = bar.children[0]
        assert [b.href for b in machine_learning.children] == [
            "https://example.com/",
            "https://test.com/",
        ]

        assert other.name == "Other Folder"
        assert other.children == (
            Bookmark(
                name="Nested Bookmark",
                href="https://nested.com/",
                add_date="1634868593",
            ),
        )

    def test_root_list_under_body(self):
        """Test the list directly under <BODY> is used."""
        items = self.parser.parse_text(BODY_WRAPPED_HTML)

        assert items == [Bookmark(name="In Body", href="https://in-body.com")]

    def test_nesting_depth_limit(self):
        """Test exceeding the nesting limit fails with the folder path."""
        parser = NetscapeHTMLParser(max_nesting_depth=2)

        with pytest.raises(StructureParseError) as exc_info:
            parser.parse_text(THREE_LEVEL_HTML)

        message = str(exc_info.value)
        assert message.startswith("parsing children for folder 'Level 1': ")
        assert "parsing children for folder 'Level 2': " in message
        assert "maximum folder nesting depth of 2 exceeded" in message
        assert exc_info.value.folder_name == "Level 1"

    def test_nesting_depth_at_limit(self):
        """Test nesting exactly at the limit is accepted."""
        parser = NetscapeHTMLParser(max_nesting_depth=3)

        items = parser.parse_text(THREE_LEVEL_HTML)

        assert items[0].children[0].children[0].name == "Level 3"

    def test_document_parse_failure(self):
        """Test tree builder failures surface as DocumentParseError."""
        with patch(
            "bookmark_converter.core.document.BeautifulSoup",
            side_effect=RuntimeError("rejected"),
        ):
            with pytest.raises(DocumentParseError, match="rejected"):
                self.parser.parse_text(SIMPLE_BOOKMARK_HTML)

    def test_unsupported_parser_backend(self):
        """Test an unknown tree builder is reported as a parse failure."""
        parser = NetscapeHTMLParser(parser_backend="html5lib")

        with pytest.raises(DocumentParseError, match="Unsupported parser backend"):
            parser.parse_text(SIMPLE_BOOKMARK_HTML)


class TestInputHandling:
    """Test cases for reading and decoding input."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = NetscapeHTMLParser()

    def test_parse_file(self, chrome_export_file):
        """Test parsing a file from disk."""
        items = self.parser.parse_file(chrome_export_file)

        assert [item.name for item in items] == ["Bookmarks bar", "Other Folder"]

    def test_parse_file_not_found(self, tmp_path):
        """Test a missing file fails with InputReadError."""
        with pytest.raises(InputReadError, match="failed to read input"):
            self.parser.parse_file(tmp_path / "missing.html")

    def test_parse_stream(self):
        """Test parsing a binary stream."""
        stream = io.BytesIO(SIMPLE_BOOKMARK_HTML.encode("utf-8"))

        items = self.parser.parse_stream(stream)

        assert items[0].href == "https://example.com"

    def test_parse_stream_read_failure(self):
        """Test a failing stream is reported as InputReadError."""
        stream = MagicMock()
        stream.read.side_effect = OSError("broken pipe")

        with pytest.raises(InputReadError, match="broken pipe"):
            self.parser.parse_stream(stream)

    def test_records_input_facts(self):
        """Test each parse records the input size and DOCTYPE presence."""
        data = SIMPLE_BOOKMARK_HTML.encode("utf-8")

        self.parser.parse_bytes(data)
        assert self.parser.input_size == len(data)
        assert self.parser.has_netscape_doctype is True

        self.parser.parse_bytes(b"<DL></DL>")
        assert self.parser.input_size == 9
        assert self.parser.has_netscape_doctype is False

    def test_utf8_with_bom(self):
        """Test a UTF-8 byte order mark is dropped."""
        data = b"\xef\xbb\xbf" + SIMPLE_BOOKMARK_HTML.encode("utf-8")

        items = self.parser.parse_bytes(data)

        assert items[0].name == "Example"

    def test_non_ascii_names(self):
        """Test UTF-8 encoded names are decoded."""
        html = netscape_document(
            '<DL><p><DT><A HREF="https://cafe.example">Café ☕</A></DL><p>'
        )

        items = self.parser.parse_bytes(html.encode("utf-8"))

        assert items[0].name == "Café ☕"

    def test_latin1_fallback(self):
        """Test input that is not valid UTF-8 falls back to ISO-8859-1."""
        html = netscape_document(
            '<DL><p><DT><A HREF="https://cafe.example">Café</A></DL><p>'
        )

        items = self.parser.parse_bytes(html.encode("iso-8859-1"))

        assert items[0].name == "Café"

    def test_undecodable_input(self):
        """Test input no configured encoding accepts fails."""
        parser = NetscapeHTMLParser(encodings=["utf-8"])

        with pytest.raises(InputReadError, match="unable to decode input"):
            parser.parse_bytes(b"<DL><A HREF='x'>\xff\xfe</A></DL>")

    def test_unknown_encoding(self):
        """Test an unknown codec name fails with InputReadError."""
        parser = NetscapeHTMLParser(encodings=["no-such-codec"])

        with pytest.raises(InputReadError, match="unknown input encoding"):
            parser.parse_bytes(b"<DL></DL>")


class TestConvenienceFunction:
    """Test cases for parse_netscape_bookmarks."""

    def test_accepts_bytes(self):
        items = parse_netscape_bookmarks(SEPARATOR_HTML.encode("utf-8"))
        assert len(items) == 3

    def test_accepts_text(self):
        items = parse_netscape_bookmarks(SEPARATOR_HTML)
        assert isinstance(items[1], Separator)

    def test_accepts_stream(self):
        items = parse_netscape_bookmarks(io.BytesIO(SEPARATOR_HTML.encode("utf-8")))
        assert items[0].name == "Site 1"

    def test_large_export_with_descriptions(self):
        """Test a long list with unclosed <DD> descriptions parses without error."""
        entries = "".join(
            f'<DT><A HREF="https://e{i}.example">E{i}</A>\n<DD>description {i}\n'
            for i in range(1200)
        )

        items = parse_netscape_bookmarks(
            netscape_document(f"<DL><p>{entries}</DL><p>")
        )

        assert items[0].name == "E0"

    def test_deep_nesting_fails_cleanly(self):
        """Test nesting far beyond the limit raises StructureParseError."""
        levels = 1200
        markup = netscape_document(
            "<DL><p>"
            + "".join(f"<DT><H3>F{i}</H3>\n<DL><p>" for i in range(levels))
            + "</DL><p>" * (levels + 1)
        )

        with pytest.raises(StructureParseError, match="maximum folder nesting depth"):
            parse_netscape_bookmarks(markup)

    def test_uses_given_parser(self):
        parser = NetscapeHTMLParser(max_nesting_depth=1)

        with pytest.raises(StructureParseError):
            parse_netscape_bookmarks(THREE_LEVEL_HTML, parser=parser)


class TestFileInfo:
    """Test cases for file validation and information."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = NetscapeHTMLParser()

    def test_validate_file_valid(self, chrome_export_file):
        """Test validation of a Netscape bookmark file."""
        assert self.parser.validate_file(chrome_export_file) is True

    def test_validate_file_invalid(self, tmp_path):
        """Test validation of an ordinary HTML page."""
        path = tmp_path / "page.html"
        path.write_text("<html><body>Not bookmarks</body></html>", encoding="utf-8")

        assert self.parser.validate_file(path) is False

    def test_validate_file_nonexistent(self, tmp_path):
        """Test validation of a non-existent file."""
        assert self.parser.validate_file(tmp_path / "missing.html") is False

    def test_get_file_info_existing(self, chrome_export_file):
        """Test getting file info for an existing file."""
        info = self.parser.get_file_info(chrome_export_file)

        assert info["exists"] is True
        assert info["size_bytes"] == chrome_export_file.stat().st_size
        assert info["is_netscape_bookmarks"] is True
        assert info["estimated_bookmark_count"] == 4

    def test_get_file_info_nonexistent(self, tmp_path):
        """Test getting file info for a non-existent file."""
        info = self.parser.get_file_info(Path(tmp_path / "missing.html"))

        assert info["exists"] is False
        assert info["size_bytes"] == 0
        assert info["is_netscape_bookmarks"] is False
        assert info["estimated_bookmark_count"] == 0
