"""
Domain: entity, rating rules and result objects

This module holds only the rating logic.
It contains no console, logging or JSON code.

- Movie is a dataclass. Id and title are fixed, ratings grow.
- A rating is an int in 1..5.
- Averages are rounded half away from zero to one decimal.
- Every store operation returns a result object, never raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

MIN_RATING = 1
MAX_RATING = 5


def is_valid_rating(value: Any) -> bool:
    """
    Checks a single rating.
    - Must be an int (bool does not count)
    - Must lie in 1..5
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING


def rounded_mean(values: Sequence[int], places: int = 1) -> float:
    """
    Mean of the values, rounded half away from zero.

    The division is done in Decimal, so 81/20 is exactly 4.05 and becomes 4.1.
    """
    if not values:
        raise ValueError("rounded_mean needs at least one value.")
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True, eq=False)
class Movie:
    """
    A movie with its ratings.
    id and title cannot be reassigned. The ratings list is appended to in place.
    """
    id: int
    title: str
    ratings: List[int] = field(default_factory=list)

    def has_ratings(self) -> bool:
        return bool(self.ratings)

    def mean(self) -> Optional[float]:
        """Unrounded mean, None without ratings."""
        if not self.ratings:
            return None
        return sum(self.ratings) / len(self.ratings)


class ErrorKind(Enum):
    """Expected failures of the store. None of them is fatal."""
    NOT_FOUND = "NotFound"
    INVALID_RATING = "InvalidRating"
    NO_RATINGS = "NoRatings"
    NO_RATED_MOVIES = "NoRatedMovies"


@dataclass(frozen=True, slots=True)
class Failure:
    """Error payload. Maps to {"error": ...}."""
    kind: ErrorKind
    error: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}


@dataclass(frozen=True, slots=True)
class EmptyRatings:
    """A movie without ratings. Displayed as the sentinel "None"."""

    def display(self) -> str:
        return "None"

    def to_payload(self) -> Union[str, List[int]]:
        return "None"


@dataclass(frozen=True, slots=True)
class RatingSequence:
    """The ratings of a movie, in the order they were given."""
    values: Tuple[int, ...]

    def display(self) -> str:
        return ", ".join(str(v) for v in self.values)

    def to_payload(self) -> Union[str, List[int]]:
        return list(self.values)


RatingsView = Union[EmptyRatings, RatingSequence]


def ratings_view(ratings: Sequence[int]) -> RatingsView:
    """Picks the variant for a ratings list."""
    if not ratings:
        return EmptyRatings()
    return RatingSequence(tuple(ratings))


@dataclass(frozen=True, slots=True)
class RatingAdded:
    """Result of add_rating. Holds the same Movie object that was changed."""
    success: str
    movie: Movie

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "movie": {
                "id": self.movie.id,
                "title": self.movie.title,
                "ratings": list(self.movie.ratings),
            },
        }


@dataclass(frozen=True, slots=True)
class AverageRating:
    """Result of get_average_rating."""
    title: str
    rating: float
    total_ratings: int

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "rating": self.rating, "totalRatings": self.total_ratings}


@dataclass(frozen=True, slots=True)
class TopRatedMovie:
    """Result of get_top_rated_movie."""
    title: str
    average_rating: float
    total_ratings: int

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "averageRating": self.average_rating,
            "totalRatings": self.total_ratings,
        }


@dataclass(frozen=True, slots=True)
class AllRatings:
    """Result of get_all_ratings."""
    title: str
    ratings: RatingsView

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "ratings": self.ratings.to_payload()}


Result = Union[Failure, RatingAdded, AverageRating, TopRatedMovie, AllRatings]
