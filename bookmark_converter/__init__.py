"""
Netscape Bookmark Converter.

Converts Netscape bookmark file exports into hierarchical JSON that keeps
folder nesting, bookmark metadata and separators.
"""

__version__ = "1.0.0"
