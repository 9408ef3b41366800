"""
Shared fixtures for the movie rating tests.
"""

import pytest

from movie_ratings.persistence import default_seeds
from movie_ratings.store import RatingStore


@pytest.fixture
def store():
    """Store built from the built-in catalog (Bigfoot already filtered to [5])."""
    return RatingStore(default_seeds())


@pytest.fixture
def empty_store():
    """Store whose movies have no ratings at all."""
    return RatingStore([
        {"id": 0, "title": "Alpha", "ratings": []},
        {"id": 1, "title": "Beta", "ratings": []},
    ])


class ScriptedView:
    """
    Stand-in for ConsoleView.
    Answers prompts from a list and records everything shown.
    """

    def __init__(self, answers):
        self._answers = list(answers)
        self.messages = []
        self.errors = []
        self.results = []
        self.menus = 0

    def render_menu(self, store):
        self.menus += 1

    def prompt(self, question):
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def show_message(self, text, color=None):
        self.messages.append(text)

    def show_error(self, text):
        self.errors.append(text)

    def render_result(self, result):
        self.results.append(result)


@pytest.fixture
def scripted_view():
    """Factory for ScriptedView instances."""
    return ScriptedView
