"""
Logging helpers for queue_search.

Library modules log through ``logging.getLogger(__name__)`` and stay silent unless
the caller configures a handler. ``get_logger`` is the one-call setup used by the
benchmark scripts.
"""

import logging
import os
from typing import Optional

_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(
    name: str, log_file: Optional[str] = None, level: int = logging.INFO
) -> logging.Logger:
    """
    Get a configured logger under the ``queue_search`` namespace.

    Args:
        name: Logger name suffix (e.g. "benchmarks")
        log_file: Optional file path to also write logs to
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(f"queue_search.{name}")

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    return logger


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its numeric value."""
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default
