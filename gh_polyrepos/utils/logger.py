"""Logging utilities for gh-polyrepos."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "gh_polyrepos"
LOG_DIR = Path.home() / ".gh-polyrepos" / "logs"


def _install_handlers(root_logger: logging.Logger) -> None:
    """Attach the rich console handler and the debug log file."""
    console_handler = RichHandler(
        console=Console(),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_DIR / "gh-polyrepos.log")
    except OSError:
        # Read-only home: console logging only
        return
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger below the package logger.

    The package logger gets its handlers on first use; module loggers
    propagate to it.

    Args:
        name: Module name, normally ``__name__``

    Returns:
        Logger instance
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        root_logger.setLevel(logging.DEBUG)
        _install_handlers(root_logger)
    return logging.getLogger(name)


def enable_verbose_logging() -> None:
    """Show debug messages on the console."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(logging.DEBUG)

    root_logger.debug("Verbose logging enabled")
