"""
Centralized logging configuration for mosaic.

Usage:
    from mosaic.logging_config import setup_logging
    setup_logging(verbose=True)  # Call once at startup

All mosaic.* loggers write to stderr at the console level and, if a log file
is given, DEBUG and above to that file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "mosaic"


def setup_logging(
    verbose: bool = False,
    log_file: Path | str | None = None,
    console_level: int | None = None,
) -> logging.Logger:
    """
    Configure the mosaic logger hierarchy.

    Args:
        verbose: Show DEBUG output on the console (default: INFO)
        log_file: Optional path for a rotating DEBUG log
        console_level: Explicit console level, overrides `verbose`

    Returns:
        The configured "mosaic" root logger
    """
    if console_level is None:
        console_level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers (for re-initialization)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(fmt="%(levelname)-8s | %(name)-25s | %(message)s")
    )
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-30s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    return root_logger
