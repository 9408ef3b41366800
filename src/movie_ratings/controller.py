"""
Controller layer

The MenuController runs the menu. It connects RatingStore and ConsoleView.

Tasks:
- show movies and menu
- read input and parse ids and ratings
- call exactly one store operation per option
- hand the result to the view
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from .logging_config import get_logger
from .store import RatingStore
from .view import ConsoleView

logger = get_logger(__name__)

EXIT_MESSAGE = "Exiting movie rating system."


def parse_int(raw: str) -> Optional[int]:
    """Reads an integer, None if the text is not one."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_rating(raw: str) -> Optional[Union[int, float]]:
    """
    Reads a rating.
    Integers stay int. Decimals like 4.5 become float, the store rejects them.
    """
    value = parse_int(raw)
    if value is not None:
        return value
    try:
        return float(raw.strip())
    except ValueError:
        return None


class MenuController:
    """
    Main controller.

    The store is passed in, there is no global instance.
    """

    def __init__(self, store: RatingStore, view: ConsoleView) -> None:
        self._store = store
        self._view = view

    def run(self) -> None:
        """
        Menu loop until option 5 or end of input.
        End of input also ends the loop inside a sub-prompt.
        Ctrl+C is handled in main().
        """
        while True:
            self._view.render_menu(self._store)
            try:
                if not self._dispatch(self._view.prompt("> ").strip()):
                    break
            except EOFError:
                break

        self._view.show_message(EXIT_MESSAGE)

    def _dispatch(self, choice: str) -> bool:
        """Runs one option. False means exit."""
        if choice == "1":
            self.add_rating()
        elif choice == "2":
            self.average_rating()
        elif choice == "3":
            self.top_rated_movie()
        elif choice == "4":
            self.all_ratings()
        elif choice == "5":
            return False
        else:
            self._view.show_error("Invalid option, please choose again.")
        return True

        self._view.show_message(EXIT_MESSAGE)

    def add_rating(self) -> None:
        """Option 1: input "movieId rating"."""
        raw = self._view.prompt("Enter Movie ID and Rating (e.g., 1 5): ")
        parsed = self._parse_id_and_rating(raw)
        if parsed is None:
            self._view.show_error("Please enter a movie ID and a rating, e.g. 1 5.")
            return

        movie_id, rating = parsed
        self._view.render_result(self._store.add_rating(movie_id, rating))

    def average_rating(self) -> None:
        """Option 2."""
        movie_id = self._prompt_movie_id()
        if movie_id is None:
            return
        self._view.render_result(self._store.get_average_rating(movie_id))

    def top_rated_movie(self) -> None:
        """Option 3, no input."""
        self._view.render_result(self._store.get_top_rated_movie())

    def all_ratings(self) -> None:
        """Option 4."""
        movie_id = self._prompt_movie_id()
        if movie_id is None:
            return
        self._view.render_result(self._store.get_all_ratings(movie_id))

    def _prompt_movie_id(self) -> Optional[int]:
        raw = self._view.prompt("Enter Movie ID: ")
        movie_id = parse_int(raw)
        if movie_id is None:
            logger.debug("Unparseable movie id %r", raw)
            self._view.show_error("Movie ID must be a whole number.")
        return movie_id

    def _parse_id_and_rating(self, raw: str) -> Optional[Tuple[int, Union[int, float]]]:
        """
        Splits "movieId rating".
        - exactly two parts
        - id must be an int, rating a number
        """
        parts = raw.split()
        if len(parts) != 2:
            return None

        movie_id = parse_int(parts[0])
        rating = parse_rating(parts[1])
        if movie_id is None or rating is None:
            logger.debug("Unparseable rating input %r", raw)
            return None
        return movie_id, rating
