"""
Bookmark tree extraction.

Netscape exports express folder membership by adjacency rather than
containment: a folder is an <H3> heading whose children live in the <DL>
list that immediately follows it as a sibling. This module locates the root
list of a parsed document and rebuilds the folder hierarchy from it.

Both functions work purely against the DocumentNode protocol, so any tree
builder can be used as long as its nodes are adapted to it.
"""

import logging
from typing import List, Optional

from bookmark_converter.core.data_models import (
    Bookmark,
    BookmarkItem,
    Folder,
    Separator,
)
from bookmark_converter.core.document import DocumentNode, is_element, iter_children
from bookmark_converter.utils.error_handler import StructureParseError

logger = logging.getLogger(__name__)

LIST_TAG = "dl"
LINK_TAG = "a"
FOLDER_TAG = "h3"
SEPARATOR_TAG = "hr"
BODY_TAG = "body"

DEFAULT_MAX_DEPTH = 200


def _find_first(node: DocumentNode, tag_name: str) -> Optional[DocumentNode]:
    """
    Depth-first, pre-order search for the first element with a tag.

    Uses an explicit stack of child iterators: unclosed tags such as <DD>
    can nest thousands of levels deep, far beyond the recursion limit.
    """
    stack = [iter_children(node)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        if is_element(child, tag_name):
            return child
        stack.append(iter_children(child))
    return None


def find_root_list(document: DocumentNode) -> Optional[DocumentNode]:
    """
    Locate the root bookmark list of a document.

    The list is normally the first <DL> directly under <BODY>. Exports often
    have no <BODY> at all, so when that lookup fails the whole document is
    searched for the first <DL>.

    Args:
        document: Root node of the parsed document

    Returns:
        The root list node, or None if the document has no list
    """
    body = _find_first(document, BODY_TAG)
    if body is not None:
        for child in iter_children(body):
            if is_element(child, LIST_TAG):
                return child

    return _find_first(document, LIST_TAG)


def _next_element_sibling(node: DocumentNode) -> Optional[DocumentNode]:
    sibling = node.next_sibling
    while sibling is not None and not is_element(sibling):
        sibling = sibling.next_sibling
    return sibling


def _node_name(node: DocumentNode) -> str:
    return node.text_content().strip()


def _build_bookmark(node: DocumentNode) -> Bookmark:
    return Bookmark(
        name=_node_name(node),
        href=node.get_attribute("href"),
        tags=node.get_attribute("tags"),
        id=node.get_attribute("id"),
        add_date=node.get_attribute("add_date"),
        last_modified=node.get_attribute("last_modified"),
        icon=node.get_attribute("icon"),
        icon_uri=node.get_attribute("icon_uri"),
    )


def extract_items(
    list_node: DocumentNode,
    max_depth: int = DEFAULT_MAX_DEPTH,
    _depth: int = 0,
) -> List[BookmarkItem]:
    """
    Build the bookmark items held by a <DL> list element.

    Children are visited left to right. Links become bookmarks, rules become
    separators and headings become folders; any other element is skipped.
    A heading whose next element sibling is a <DL> takes that list's items
    as its children, and the list is consumed so it is not visited again.

    Args:
        list_node: The <DL> node to extract
        max_depth: Maximum folder nesting depth below this list

    Returns:
        Items of the list in document order

    Raises:
        StructureParseError: If nesting exceeds max_depth; each enclosing
            folder adds its name to the message
    """
    if _depth > max_depth:
        raise StructureParseError(
            f"maximum folder nesting depth of {max_depth} exceeded"
        )

    items: List[BookmarkItem] = []

    node = list_node.first_child
    while node is not None:
        tag_name = node.tag_name

        if tag_name == LINK_TAG:
            items.append(_build_bookmark(node))

        elif tag_name == SEPARATOR_TAG:
            items.append(Separator())

        elif tag_name == FOLDER_TAG:
            folder_name = _node_name(node)
            children: List[BookmarkItem] = []

            child_list = _next_element_sibling(node)
            if child_list is not None and is_element(child_list, LIST_TAG):
                try:
                    children = extract_items(child_list, max_depth, _depth + 1)
                except StructureParseError as e:
                    raise StructureParseError.wrap(folder_name, e) from e
            else:
                child_list = None

            items.append(
                Folder(
                    name=folder_name,
                    id=node.get_attribute("id"),
                    add_date=node.get_attribute("add_date"),
                    last_modified=node.get_attribute("last_modified"),
                    children=children,
                )
            )

            if child_list is not None:
                node = child_list

        node = node.next_sibling

    return items
