"""Logging setup for command-line use.

Library modules only call logging.getLogger(__name__); nothing is
configured until an application asks for it here.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "imdchecker"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a Rich stderr handler to the package logger and set its level.

    Raises ValueError for an unknown level name. Safe to call repeatedly.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
