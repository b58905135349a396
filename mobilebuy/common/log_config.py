"""
Logging Configuration

Configures logging for the SDK package logger. Console output goes to
stderr to keep stdout clean for the inspection report; an optional log
file receives the same records with timestamps.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "mobilebuy"


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the SDK.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING
        log_file: Also append records to this file
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
