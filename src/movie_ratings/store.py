"""
Store layer

The RatingStore owns the movies and implements the rating operations.
It only returns result objects from domain.py and never prints.
Console output is left to the view.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from .domain import (
    AllRatings,
    AverageRating,
    ErrorKind,
    Failure,
    Movie,
    RatingAdded,
    TopRatedMovie,
    is_valid_rating,
    ratings_view,
    rounded_mean,
)
from .logging_config import get_logger
from .persistence import MovieSeed, ensure_unique_ids

logger = get_logger(__name__)

MAX_LISTED_RATINGS = 10

Paint = Callable[[str, str], str]


def _no_paint(text: str, color: str) -> str:
    return text


class RatingStore:
    """
    In-memory rating store.

    - Movies are fixed at construction, order is kept.
    - Invalid seed ratings are filtered once, with a warning.
    - At runtime invalid input is rejected with a Failure.
    """

    def __init__(self, seeds: Iterable[Union[MovieSeed, Mapping[str, Any]]]) -> None:
        """
        Builds the movies from seed records.
        Raises ValueError for duplicate ids.
        """
        records = [s if isinstance(s, MovieSeed) else MovieSeed.model_validate(s) for s in seeds]
        ensure_unique_ids(records)

        self._movies: List[Movie] = []
        for record in records:
            valid = [r for r in record.ratings if is_valid_rating(r)]
            if len(valid) < len(record.ratings):
                logger.warning("Invalid ratings removed from '%s'.", record.title)
            self._movies.append(Movie(id=record.id, title=record.title, ratings=valid))

    @property
    def movies(self) -> List[Movie]:
        """The movies in collection order (a copy of the list, same objects)."""
        return list(self._movies)

    @staticmethod
    def is_valid_rating(value: Any) -> bool:
        return is_valid_rating(value)

    def find_movie(self, movie_id: Any) -> Optional[Movie]:
        """
        Linear scan by exact id. None is a normal answer.
        Only real ints match, True is not id 1.
        """
        if isinstance(movie_id, bool) or not isinstance(movie_id, int):
            return None
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        return None

    def add_rating(self, movie_id: Any, rating: Any) -> Union[RatingAdded, Failure]:
        """
        Appends one rating.
        - NOT_FOUND if the id is unknown
        - INVALID_RATING if the rating is not an int in 1..5
        """
        movie = self.find_movie(movie_id)
        if movie is None:
            return self._not_found(movie_id)

        if not is_valid_rating(rating):
            logger.debug("Rejected rating %r for movie %s", rating, movie.id)
            return Failure(ErrorKind.INVALID_RATING, "Rating must be between 1 and 5.")

        movie.ratings.append(rating)
        message = f"Rating '{rating}' added to '{movie.title}'"
        logger.info(message)
        return RatingAdded(success=message, movie=movie)

    def get_average_rating(self, movie_id: Any) -> Union[AverageRating, Failure]:
        """Rounded mean of one movie."""
        movie = self.find_movie(movie_id)
        if movie is None:
            return self._not_found(movie_id)

        if not movie.has_ratings():
            logger.debug("No ratings for movie %s", movie.id)
            return Failure(ErrorKind.NO_RATINGS, f"No ratings available for '{movie.title}'.")

        return AverageRating(
            title=movie.title,
            rating=rounded_mean(movie.ratings),
            total_ratings=len(movie.ratings),
        )

    def get_top_rated_movie(self) -> Union[TopRatedMovie, Failure]:
        """
        Movie with the highest mean.
        - Only movies with ratings count.
        - The comparison uses the unrounded mean.
        - On a tie the earlier movie wins.
        """
        top: Optional[Movie] = None
        top_mean = 0.0
        for movie in self._movies:
            mean = movie.mean()
            if mean is None:
                continue
            if top is None or mean > top_mean:
                top, top_mean = movie, mean

        if top is None:
            logger.debug("Top rated requested, but no movie has ratings")
            return Failure(ErrorKind.NO_RATED_MOVIES, "No movies have ratings yet.")

        return TopRatedMovie(
            title=top.title,
            average_rating=rounded_mean(top.ratings),
            total_ratings=len(top.ratings),
        )

    def get_all_ratings(self, movie_id: Any) -> Union[AllRatings, Failure]:
        """All ratings of one movie, EmptyRatings if there are none."""
        movie = self.find_movie(movie_id)
        if movie is None:
            return self._not_found(movie_id)
        return AllRatings(title=movie.title, ratings=ratings_view(movie.ratings))

    def get_movie_list(self, paint: Paint = _no_paint) -> str:
        """
        One line per movie: "id: title (Ratings: ...)".
        Shows at most 10 ratings, the rest is counted.
        """
        lines = []
        for movie in self._movies:
            shown = ", ".join(str(r) for r in movie.ratings[:MAX_LISTED_RATINGS])
            extra = len(movie.ratings) - MAX_LISTED_RATINGS
            if extra > 0:
                shown += f"... (and {extra} more)"
            lines.append(
                f"{movie.id}: {paint(movie.title, 'cyan')} "
                f"(Ratings: {paint(shown or 'No ratings', 'yellow')})"
            )
        return "\n".join(lines)

    def _not_found(self, movie_id: Any) -> Failure:
        logger.debug("Movie %r not found", movie_id)
        return Failure(ErrorKind.NOT_FOUND, f"Movie with ID {movie_id} not found.")
