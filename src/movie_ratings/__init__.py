"""
movie_ratings package

Console prototype of an in-memory movie rating tracker.

Layers:
- domain.py: Movie, rating rules, result objects
- store.py: RatingStore (add, average, top rated, list)
- persistence.py: seed catalog and JSON seed loading
- view.py: console output
- controller.py: menu loop
- config.py / logging_config.py: settings and logging
- main.py: entry point
"""

from .domain import ErrorKind, Failure, Movie, is_valid_rating
from .store import RatingStore

__all__ = ["ErrorKind", "Failure", "Movie", "RatingStore", "is_valid_rating"]
