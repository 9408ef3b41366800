"""
Logging setup

- Records go to stderr, the menu owns stdout.
- Optionally also to a rotating file in logs/.
- Modules fetch their logger with get_logger(__name__).
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(log_file: Optional[str], log_dir: str) -> List[logging.Handler]:
    """stderr handler, plus a file handler when log_file is given."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        folder = Path(log_dir)
        folder.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(folder / log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        )
    return handlers


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None, log_dir: str = "logs") -> None:
    """
    Configures the root logger for one run.
    Handlers from an earlier call are replaced.
    """
    numeric_level = logging.getLevelName(level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()

    for handler in _build_handlers(log_file, log_dir):
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if log_file:
        root.info("Logging to file: %s", Path(log_dir) / log_file)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
