"""
UI layer for the console

This view does all printing for the menu.
- ANSI colors (can be switched off)
- Menu and movie list
- Input prompts
- Rendering of result objects
"""

from __future__ import annotations

from pprint import pformat
from typing import Optional

from .domain import (
    AllRatings,
    AverageRating,
    Failure,
    RatingAdded,
    Result,
    TopRatedMovie,
)
from .store import RatingStore

COLORS = {
    "reset": "\x1b[0m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
}


class ConsoleView:
    """
    View for the console.

    With color=False all text is printed unchanged, e.g. for pipes or NO_COLOR.
    """

    def __init__(self, color: bool = True, show_returned: bool = False) -> None:
        self._color = color
        self._show_returned = show_returned

    def colorize(self, text: object, color: str) -> str:
        """Wraps text in an ANSI color. Unknown colors leave it plain."""
        if not self._color or color not in COLORS or color == "reset":
            return str(text)
        return f"{COLORS[color]}{text}{COLORS['reset']}"

    def render_menu(self, store: RatingStore) -> None:
        """Shows the current movies and the menu."""
        print()
        print("Current Movies:")
        print(store.get_movie_list(paint=self.colorize))
        print()
        print("Choose an option:")
        print("1. Add Rating")
        print("2. Get Average Rating")
        print("3. Get Top Rated Movie")
        print("4. Get All Ratings")
        print("5. Exit")

    def prompt(self, question: str) -> str:
        return input(question)

    def show_message(self, text: str, color: Optional[str] = None) -> None:
        print(self.colorize(text, color) if color else text)

    def show_error(self, text: str) -> None:
        self.show_message(text, "red")

    def render_result(self, result: Result) -> None:
        """
        Prints one result.
        - Failure in red
        - Success with its own sentence
        - Optionally the returned object itself
        """
        if isinstance(result, Failure):
            self.show_error(f"Error: {result.error}")
        elif isinstance(result, RatingAdded):
            self.show_message(result.success, "green")
        elif isinstance(result, AverageRating):
            self.show_message(
                f"Average rating for '{result.title}' is "
                f"{self.colorize(result.rating, 'blue')} based on {result.total_ratings} ratings."
            )
        elif isinstance(result, TopRatedMovie):
            self.show_message(
                f"Top rated movie is '{result.title}' with an average rating of "
                f"{self.colorize(result.average_rating, 'green')} based on {result.total_ratings} ratings."
            )
        elif isinstance(result, AllRatings):
            self.show_message(f"Ratings for '{result.title}': {result.ratings.display()}")

        if self._show_returned:
            self._render_returned(result)

    def _render_returned(self, result: Result) -> None:
        """Shows type and content of the returned object."""
        print()
        print("--- Returned ---")
        print(f"Type: {type(result).__name__}")
        print(f"Content: {pformat(result.to_dict())}")
        print("----------------------")
        print()
