"""
Input validation utilities for the Bookmark Converter.

This module provides validation functions for command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional, Union

from bookmark_converter.utils.error_handler import ValidationError


def validate_input_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate that the input file exists and is readable.

    Args:
        file_path: Path to the input file, or None to read stdin

    Returns:
        Validated Path object, or None for stdin

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    return path.absolute()


def validate_output_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate that the output file path is writable.

    Args:
        file_path: Path to the output file, or None to write stdout

    Returns:
        Validated Path object, or None for stdout

    Raises:
        ValidationError: If path isn't writable or parent can't be created
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if path.exists() and path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    # Missing directories are created at export time; the closest existing
    # one must allow that
    parent = path.absolute().parent
    while not parent.exists():
        parent = parent.parent

    if not parent.is_dir():
        raise ValidationError(f"Output location is not a directory: {parent}")

    if not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {file_path}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist, isn't readable or has an
            unsupported extension
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in [".toml", ".json"]:
        raise ValidationError(
            f"Configuration file must be .toml or .json file, got: {path.suffix}"
        )

    return path.absolute()


def validate_indent(indent: Optional[int]) -> Optional[int]:
    """
    Validate JSON indentation is within reasonable bounds.

    Raises:
        ValidationError: If indent is invalid
    """
    if indent is None:
        return None

    if indent < 0:
        raise ValidationError("Indent cannot be negative")

    if indent > 8:
        raise ValidationError("Indent cannot exceed 8")

    return indent


def validate_conflicting_arguments(indent: Optional[int], compact: bool) -> None:
    """
    Validate that conflicting arguments aren't both set.

    Raises:
        ValidationError: If conflicting arguments are set
    """
    if indent is not None and compact:
        raise ValidationError(
            "Cannot use --indent and --compact together. "
            "Choose one or the other."
        )
