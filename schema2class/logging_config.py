"""
Logging setup shared by every schema2class module.

Modules grab a named logger with ``get_logger(__name__)``; the CLI calls
``configure_logging`` once so records render through rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_ROOT = "schema2class"


def configure_logging(
    level: int = logging.WARNING, console: Optional[Console] = None
) -> None:
    """
    Install a RichHandler on the package root logger.

    Args:
        level: Logging level for the package loggers
        console: Console to log through (defaults to stderr)
    """
    root = logging.getLogger(LOGGER_ROOT)
    root.setLevel(level)

    # Re-configuring replaces the previous handler instead of stacking them
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
