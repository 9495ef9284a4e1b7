"""
Core bookmark conversion modules.

This package contains the bookmark data model, markup normalization,
document tree access, folder structure extraction and export.
"""

from .data_models import Bookmark, BookmarkItem, Folder, Separator, summarize_items
from .netscape_html_parser import NetscapeHTMLParser, parse_netscape_bookmarks

__all__ = [
    'Bookmark',
    'BookmarkItem',
    'Folder',
    'Separator',
    'summarize_items',
    'NetscapeHTMLParser',
    'parse_netscape_bookmarks',
]
