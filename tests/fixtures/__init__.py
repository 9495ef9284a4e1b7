"""Shared test data for the Bookmark Converter tests."""
