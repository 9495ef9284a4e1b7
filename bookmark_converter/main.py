#!/usr/bin/env python3
"""
Main entry point for the Bookmark Converter.

This module serves as the console script entry point.
"""

import sys
from bookmark_converter.cli import main


if __name__ == "__main__":
    sys.exit(main())
