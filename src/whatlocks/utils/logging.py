"""Logging configuration for whatlocks."""

import logging
import os
import sys

from whatlocks.utils.config import Config
from logging.handlers import RotatingFileHandler


def _has_file_handler(logger: logging.Logger, log_file: str) -> bool:
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == log_file
        for h in logger.handlers
    )


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(
        type(h) is logging.StreamHandler and h.stream is sys.stdout
        for h in logger.handlers
    )


def setup_logging(config: Config, console_output: bool = False) -> None:
    """
    Set up logging for whatlocks.

    Safe to call once per command: handlers already attached for the same
    log file (or stdout) are not added again.

    Args:
        config: Application configuration
        console_output: Whether to output logs to console (default: False)
    """
    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(format_str)

    # Console format is simpler (no timestamp)
    console_format = "%(levelname)s - %(name)s - %(message)s"
    console_formatter = logging.Formatter(console_format)

    root_logger = logging.getLogger("whatlocks")
    root_logger.setLevel(logging.DEBUG)

    config.logging_path.mkdir(parents=True, exist_ok=True)
    log_file = os.path.abspath(config.logging_path / "whatlocks.log")
    if not _has_file_handler(root_logger, log_file):
        file_handler = RotatingFileHandler(log_file, maxBytes=10000, backupCount=3)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    # Optionally log to console (for interactive debugging)
    if console_output and not _has_console_handler(root_logger):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)
