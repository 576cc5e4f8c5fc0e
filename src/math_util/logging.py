"""Logging configuration for the math-util command-line front end.

The numeric kernels never log; only the CLI layer does.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "math_util"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``math_util``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Safe to call repeatedly: the handler is installed once and later calls
    only change the level.

    Args:
        level: Level name ('DEBUG', 'info', ...) or numeric level.

    Returns:
        The package root logger.

    Raises:
        ValueError: If level is an unknown level name.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            msg = f"Unknown log level: {level}"
            raise ValueError(msg)
        level = numeric

    app_logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, RichHandler) for h in app_logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        app_logger.addHandler(handler)
        app_logger.propagate = False

    app_logger.setLevel(level)
    for handler in app_logger.handlers:
        handler.setLevel(level)

    return app_logger
