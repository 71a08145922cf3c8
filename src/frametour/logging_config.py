"""Logging configuration for the ``frametour`` namespace."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.WARNING, log_file: str | Path | None = None) -> None:
    """Configure the logger shared by all FrameTour modules.

    Can be invoked multiple times, previously installed
    handlers are replaced instead of being duplicated.

    :param level: Logging level, like ``logging.DEBUG`` or ``"INFO"``.
    :param log_file: Optional path of a file where logs are also saved.
    """
    if isinstance(level, str):
        levelno = logging.getLevelName(level.upper())
        if not isinstance(levelno, int):
            raise ValueError(f"Unknown log level: {level}")
        level = levelno

    logger = logging.getLogger("frametour")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    # Logs go to stderr, stdout is reserved for the lessons output.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
