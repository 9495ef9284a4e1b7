"""
Logging configuration for the Bookmark Converter.

This module sets up logging based on configuration settings. Console output
goes to stderr because stdout carries the converted JSON.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    config=None,
    log_file: Optional[Union[str, Path]] = None,
    verbose: bool = False,
) -> None:
    """
    Set up logging configuration.

    Args:
        config: ConverterConfig providing the logging section, if any
        log_file: Optional log file path override
        verbose: Force DEBUG level
    """
    log_level = "WARNING"
    if config is not None:
        log_level = config.logging.level
        if log_file is None:
            log_file = config.logging.log_file
    if verbose:
        log_level = "DEBUG"

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file is not None:
        logger.debug(f"Log file: {log_file}")

    # Reduce noise from libraries
    logging.getLogger("bs4").setLevel(logging.WARNING)
