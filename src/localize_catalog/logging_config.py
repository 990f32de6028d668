"""Logging setup for the command-line tool."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "localize_catalog"

# Minimum levels for chatty components; parsers log one debug line per skipped variation
LOGGING_CONFIG = {
    "localize_catalog.extraction": logging.INFO,
    "localize_catalog.merge": logging.DEBUG,
    "localize_catalog.analysis": logging.DEBUG,
}


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """
    Install a rich handler on the package logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...); unknown names fall back to WARNING
        console: Console to log to; stderr when omitted
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    logger.addHandler(handler)

    for name, floor in LOGGING_CONFIG.items():
        logging.getLogger(name).setLevel(max(numeric_level, floor))
