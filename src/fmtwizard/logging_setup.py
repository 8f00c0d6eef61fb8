"""Logging setup for the fmtwizard command line.

Library modules only call logging.getLogger(__name__); handlers are attached
here, once, by the CLI.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "fmtwizard"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure the fmtwizard logger with console and optional file output.

    Clears any existing handlers so repeated calls do not duplicate output.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format string for log records
        log_file: Optional file path that also receives log records

    Returns:
        The configured fmtwizard logger
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root_logger.setLevel(numeric_level)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at level %s", level)
    return root_logger
