"""
Settings loaded from environment or defaults.

Command-line flags in main.py override these values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_TRUE_VALUES = ("1", "true", "yes", "on")


def get_seed_file() -> Optional[str]:
    """Path of a JSON seed file, None means the built-in catalog."""
    return os.getenv("MOVIE_RATINGS_SEED_FILE") or None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "WARNING").upper()


def get_log_file() -> Optional[str]:
    """Log file name inside logs/, None means stderr only."""
    return os.getenv("MOVIE_RATINGS_LOG_FILE") or None


def get_color_enabled() -> bool:
    """Colors are on unless NO_COLOR is set to anything."""
    return os.getenv("NO_COLOR") is None


def get_show_returned() -> bool:
    """Print the returned result objects after each menu action."""
    return os.getenv("MOVIE_RATINGS_SHOW_RETURNED", "").strip().lower() in _TRUE_VALUES


@dataclass(slots=True)
class Settings:
    """All settings of one run."""
    seed_file: Optional[str] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    color: bool = True
    show_returned: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            seed_file=get_seed_file(),
            log_level=get_log_level(),
            log_file=get_log_file(),
            color=get_color_enabled(),
            show_returned=get_show_returned(),
        )
