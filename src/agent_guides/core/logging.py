"""Logging infrastructure for agent-guides."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "agent-guides"

# Log level mapping for environment variable
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log file settings
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB per file
BACKUP_COUNT = 3


def get_log_level_from_env() -> int:
    """Get logging level from GUIDES_LOG_LEVEL environment variable.

    Returns:
        Logging level constant. Defaults to WARNING if not set or invalid.
    """
    level_str = os.environ.get("GUIDES_LOG_LEVEL", "WARNING").upper()
    return LOG_LEVEL_MAP.get(level_str, logging.WARNING)


def setup_logging(
    level: int | str | None = None,
    log_file: Path | None = None,
    console_output: bool = True,
    rich_console: bool = True,
) -> None:
    """Configure logging for agent-guides.

    The console level is resolved from, in order:
    1. Explicit level parameter
    2. GUIDES_LOG_LEVEL environment variable
    3. Default level (WARNING)

    Unlike an interactive application, a registry is usually embedded in a
    host tool, so file logging is off unless a log_file is given.

    Args:
        level: Logging level as int or name. If None, uses env var or default.
        log_file: File to write logs to with rotation. None disables it.
        console_output: Show logs on stderr (default: True).
        rich_console: Use Rich for console formatting (default: True).
    """
    handlers: list[logging.Handler] = []

    if level is None:
        level = get_log_level_from_env()
    elif isinstance(level, str):
        level = LOG_LEVEL_MAP.get(level.upper(), logging.WARNING)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        # File handler captures everything
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    if console_output:
        if rich_console:
            console_handler: logging.Handler = RichHandler(
                rich_tracebacks=True,
                show_time=False,
                show_path=False,
                level=level,
            )
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            console_handler.setLevel(level)
        handlers.append(console_handler)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    for handler in handlers:
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: The name for the logger (will be prefixed with 'agent-guides.').

    Returns:
        A Logger under the package root logger.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
