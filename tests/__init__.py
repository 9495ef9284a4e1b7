"""Tests for the Bookmark Converter."""
