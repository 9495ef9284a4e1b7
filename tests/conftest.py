"""
Pytest configuration and shared fixtures for bookmark converter tests.

This module provides common fixtures shared across multiple test modules.
"""

from pathlib import Path

import pytest

from bookmark_converter.config.pydantic_config import ENV_LOG_LEVEL, ENV_PARSER
from bookmark_converter.core.netscape_html_parser import NetscapeHTMLParser
from tests.fixtures.test_data import (
    CHROME_EXPORT_HTML,
    SIMPLE_BOOKMARK_HTML,
)


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment overrides out of every test."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_PARSER, raising=False)


# ============================================================================
# Parser Fixtures
# ============================================================================


@pytest.fixture
def parser() -> NetscapeHTMLParser:
    """Parser with default settings."""
    return NetscapeHTMLParser()


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def chrome_export_file(tmp_path: Path) -> Path:
    """Chrome-style Netscape export written to a temporary file."""
    path = tmp_path / "bookmarks.html"
    path.write_text(CHROME_EXPORT_HTML, encoding="utf-8")
    return path


@pytest.fixture
def simple_bookmark_file(tmp_path: Path) -> Path:
    """Single-bookmark Netscape export written to a temporary file."""
    path = tmp_path / "simple.html"
    path.write_text(SIMPLE_BOOKMARK_HTML, encoding="utf-8")
    return path
