"""Logging setup for the application."""
from __future__ import annotations
import logging
from pathlib import Path

from .config import LOGGER_NAME, LOG_FORMAT


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | Path | None = None,
    fmt: str = LOG_FORMAT,
) -> logging.Logger:
    """Configure the dedicated application logger.

    Output goes to the console and, if log_file is given, to that file.
    The root logger is left alone so third-party libraries (pygame) keep
    their own logging behaviour.

    Args:
        level: Logging level name or number
        log_file: Optional path of a file to also log into
        fmt: Format string for both handlers

    Returns:
        The configured "random_graph" logger
    """
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(fmt)

    # Clear existing handlers so calling this twice doesn't duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized. Level: %s. Log file: %s", logging.getLevelName(logger.level), log_file)
    return logger
