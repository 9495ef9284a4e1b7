"""
Bookmark tree exporters.

This module provides the exporter base class and the JSON exporter used to
serialize parsed bookmark trees.
"""

from .base import BookmarkExporter, ExportResult, ExportError
from .json_exporter import JSONExporter

__all__ = [
    "BookmarkExporter",
    "ExportResult",
    "ExportError",
    "JSONExporter",
]
