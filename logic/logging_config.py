"""Logging configuration for the TicTacToe engine."""

import logging
import sys


FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging for the whole application.

    The core never calls this itself; entry points (main.py, tests) decide.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_style: "simple" or "detailed".
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    log_format = FORMATS.get(format_style, FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the package prefix trimmed from the name.

    Args:
        name: Module name, usually __name__.

    Returns:
        Logger named e.g. 'game_engine' for 'logic.game_engine'.
    """
    if name.startswith("logic."):
        name = name[len("logic."):]
    return logging.getLogger(name)
