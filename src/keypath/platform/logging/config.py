"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Attach the Rich console handler and an optional debug log file to the ``keypath`` logger.
Why: The CLI configures output once; library code only ever uses the named logger.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import KeyRichHandler


LOGGER_NAME: Final[str] = "keypath"
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    """Create a rotating UTF-8 file handler, creating the parent directory.

    Raises:
        OSError: If the directory or file cannot be created.
    """
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        log_file: Debug log destination. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to INFO.
        file_level: Logging level for file output. Defaults to DEBUG.
        console: Rich console to write to. Defaults to a new stderr console.

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        OSError: If ``log_file`` cannot be opened; existing handlers are kept.
    """
    logger = logging.getLogger(LOGGER_NAME)

    handlers: list[logging.Handler] = []
    if log_file is not None:
        handlers.append(_file_handler(log_file, file_level))

    console_handler = KeyRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    handlers.insert(0, console_handler)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.setLevel(logging.DEBUG)
    for handler in handlers:
        logger.addHandler(handler)
    return logger


# Unconfigured until setup_logger() runs; the library itself never logs.
logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
