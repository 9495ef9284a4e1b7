"""
Data models for the Bookmark Converter.

This module defines the bookmark tree produced by the Netscape HTML parser.
A tree item is exactly one of Bookmark, Folder or Separator; each variant
only carries its own fields.
"""

from dataclasses import dataclass, field, fields
from typing import ClassVar, Dict, Iterable, Tuple, Union


def _normalize_text_fields(item) -> None:
    """Replace None in string fields with an empty string."""
    for f in fields(item):
        if f.type is str and getattr(item, f.name) is None:
            object.__setattr__(item, f.name, "")


@dataclass(frozen=True)
class Bookmark:
    """A link to a target URI with its optional metadata."""

    item_type: ClassVar[str] = "bookmark"

    name: str = ""
    href: str = ""
    tags: str = ""
    id: str = ""
    add_date: str = ""
    last_modified: str = ""
    icon: str = ""
    icon_uri: str = ""

    def __post_init__(self):
        _normalize_text_fields(self)


@dataclass(frozen=True)
class Separator:
    """A horizontal separator between siblings."""

    item_type: ClassVar[str] = "separator"


@dataclass(frozen=True)
class Folder:
    """
    A named folder and its children in document order.

    Children are stored as a tuple; a list passed at construction is
    converted so the folder cannot be mutated afterwards.
    """

    item_type: ClassVar[str] = "folder"

    name: str = ""
    id: str = ""
    add_date: str = ""
    last_modified: str = ""
    children: Tuple["BookmarkItem", ...] = field(default_factory=tuple)

    def __post_init__(self):
        _normalize_text_fields(self)

        children = tuple(self.children or ())
        for child in children:
            if not isinstance(child, (Bookmark, Folder, Separator)):
                raise TypeError(
                    f"Folder children must be bookmark items, "
                    f"got {type(child).__name__}"
                )
        object.__setattr__(self, "children", children)


BookmarkItem = Union[Bookmark, Folder, Separator]


def summarize_items(items: Iterable[BookmarkItem]) -> Dict[str, int]:
    """
    Count the items of a bookmark tree.

    Args:
        items: Top-level items of the tree

    Returns:
        Dictionary with bookmark, folder and separator counts and the
        maximum folder nesting depth
    """
    summary = {"bookmarks": 0, "folders": 0, "separators": 0, "max_depth": 0}

    def visit(level: Iterable[BookmarkItem], depth: int) -> None:
        for item in level:
            if isinstance(item, Bookmark):
                summary["bookmarks"] += 1
            elif isinstance(item, Separator):
                summary["separators"] += 1
            elif isinstance(item, Folder):
                summary["folders"] += 1
                summary["max_depth"] = max(summary["max_depth"], depth + 1)
                visit(item.children, depth + 1)

    visit(items, 0)
    return summary
