"""
Document tree access for the bookmark extractor.

The extractor only needs a handful of node capabilities: the tag name,
attribute lookup, first child / next sibling traversal and text extraction.
They are described by the DocumentNode protocol; SoupNode adapts
BeautifulSoup elements to it, and build_document() runs the lenient markup
parser that produces them.
"""

import logging
from typing import Iterator, Optional, Protocol

from bs4 import BeautifulSoup, Tag

from bookmark_converter.utils.error_handler import DocumentParseError

logger = logging.getLogger(__name__)

SUPPORTED_PARSER_BACKENDS = ("html.parser", "lxml")


class DocumentNode(Protocol):
    """Minimal read-only view of a parsed markup node."""

    @property
    def tag_name(self) -> Optional[str]:
        """Lowercase tag name, or None for text, comments and the like."""
        ...

    @property
    def first_child(self) -> Optional["DocumentNode"]:
        ...

    @property
    def next_sibling(self) -> Optional["DocumentNode"]:
        ...

    def get_attribute(self, name: str) -> str:
        """Attribute value matched case-insensitively, empty when absent."""
        ...

    def text_content(self) -> str:
        """Concatenated descendant text in document order."""
        ...


def iter_children(node: DocumentNode) -> Iterator[DocumentNode]:
    """Yield the direct children of a node in document order."""
    child = node.first_child
    while child is not None:
        yield child
        child = child.next_sibling


def is_element(node: DocumentNode, tag_name: Optional[str] = None) -> bool:
    """Check whether a node is an element, optionally with the given tag."""
    if node.tag_name is None:
        return False
    return tag_name is None or node.tag_name == tag_name


class SoupNode:
    """DocumentNode adapter over a BeautifulSoup page element."""

    __slots__ = ("_element",)

    def __init__(self, element):
        self._element = element

    @classmethod
    def wrap(cls, element) -> Optional["SoupNode"]:
        return cls(element) if element is not None else None

    @property
    def element(self):
        """The wrapped BeautifulSoup element."""
        return self._element

    @property
    def tag_name(self) -> Optional[str]:
        if not isinstance(self._element, Tag):
            return None
        # The BeautifulSoup object itself is a Tag named "[document]"
        if isinstance(self._element, BeautifulSoup):
            return None
        return self._element.name.lower()

    @property
    def first_child(self) -> Optional["SoupNode"]:
        if not isinstance(self._element, Tag) or not self._element.contents:
            return None
        return SoupNode(self._element.contents[0])

    @property
    def next_sibling(self) -> Optional["SoupNode"]:
        return SoupNode.wrap(self._element.next_sibling)

    def get_attribute(self, name: str) -> str:
        if not isinstance(self._element, Tag):
            return ""

        wanted = name.lower()
        for key, value in self._element.attrs.items():
            if key.lower() == wanted:
                if isinstance(value, list):
                    return " ".join(value)
                return value or ""
        return ""

    def text_content(self) -> str:
        if isinstance(self._element, Tag):
            return self._element.get_text()
        return str(self._element)

    def __eq__(self, other) -> bool:
        return isinstance(other, SoupNode) and other._element is self._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        return f"SoupNode({self.tag_name or type(self._element).__name__})"


def build_document(markup: str, parser_backend: str = "html.parser") -> SoupNode:
    """
    Parse markup into a document tree.

    Args:
        markup: Normalized bookmark markup
        parser_backend: BeautifulSoup tree builder to use

    Returns:
        Root node of the parsed document

    Raises:
        DocumentParseError: If the tree builder is unavailable or rejects
            the markup
    """
    if parser_backend not in SUPPORTED_PARSER_BACKENDS:
        raise DocumentParseError(
            f"Unsupported parser backend '{parser_backend}'. "
            f"Supported backends: {', '.join(SUPPORTED_PARSER_BACKENDS)}"
        )

    try:
        # Attribute values are passed through verbatim, never split
        soup = BeautifulSoup(markup, parser_backend, multi_valued_attributes=None)
    except Exception as e:
        raise DocumentParseError(f"failed to parse HTML content: {e}") from e

    logger.debug(f"Built document tree with {parser_backend}")
    return SoupNode(soup)
