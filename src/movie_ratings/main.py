"""
Entry point for the movie rating system.
This module starts the application.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import Settings
from .controller import EXIT_MESSAGE, MenuController
from .logging_config import get_logger, setup_logging
from .persistence import JsonSeedLoader, SeedDataError, default_seeds
from .store import RatingStore
from .view import ConsoleView

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_args(argv: Optional[List[str]] = None) -> Settings:
    """
    Reads command-line flags.
    Defaults come from the environment (config.py).
    """
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Interactive movie rating tracker")
    parser.add_argument("--seed-file", default=settings.seed_file,
                        help="JSON file with the movie catalog (default: built-in catalog)")
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=LOG_LEVELS, type=str.upper,
                        help="Logging level")
    parser.add_argument("--log-file", default=settings.log_file,
                        help="Also log to logs/<LOG_FILE>")
    parser.add_argument("--no-color", dest="color", action="store_false", default=settings.color,
                        help="Plain output without ANSI colors")
    parser.add_argument("--show-returned", action="store_true", default=settings.show_returned,
                        help="Print the returned result object after each action")
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL '{args.log_level}' (choose from {', '.join(LOG_LEVELS)})")

    return Settings(
        seed_file=args.seed_file,
        log_level=args.log_level,
        log_file=args.log_file,
        color=args.color,
        show_returned=args.show_returned,
    )


def build_store(settings: Settings) -> RatingStore:
    """Seed file if configured, else the built-in catalog."""
    if settings.seed_file:
        seeds = JsonSeedLoader(settings.seed_file).load()
    else:
        seeds = default_seeds()
    return RatingStore(seeds)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Start of the application.
    Flow:
    - read settings
    - set up logging
    - build store, view, controller
    - run the menu
    """
    settings = parse_args(argv)
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    try:
        store = build_store(settings)
    except (SeedDataError, ValueError) as e:
        logger.error("Startup failed: %s", e)
        print(f"ERROR: {e}")
        sys.exit(1)

    view = ConsoleView(color=settings.color, show_returned=settings.show_returned)
    controller = MenuController(store, view)

    try:
        controller.run()
    except KeyboardInterrupt:
        print(f"\n{EXIT_MESSAGE}")
        sys.exit(0)


if __name__ == "__main__":
    main()
