"""
Seed data

The catalog is loaded once at startup and never written back.
- MovieSeed: pydantic schema of one seed record
- DEFAULT_MOVIES: built-in catalog
- FileStorage: reads text files
- JsonSeedLoader: JSON file -> list of MovieSeed

Ratings are not range-checked here. The store filters them on construction,
so a seed with [5, 6, 7] still loads.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictInt, ValidationError

from .logging_config import get_logger

logger = get_logger(__name__)


class SeedDataError(Exception):
    """Raised when seed data cannot be read or does not match the schema."""
    pass


class MovieSeed(BaseModel):
    """One seed record: {id, title, ratings}."""

    id: StrictInt = Field(..., ge=0)
    title: str = Field(..., min_length=1)
    ratings: List[Any] = Field(default_factory=list)


DEFAULT_MOVIES: List[MovieSeed] = [
    MovieSeed(id=0, title="Inception", ratings=[5, 4, 5]),
    MovieSeed(id=1, title="The Matrix", ratings=[4, 4, 4]),
    MovieSeed(id=2, title="Interstellar", ratings=[]),
    MovieSeed(id=3, title="Bigfoot", ratings=[5, 6, 7]),
    MovieSeed(id=4, title="Rotten", ratings=[]),
]


def default_seeds() -> List[MovieSeed]:
    """Fresh copies of the built-in catalog, so one store cannot change another."""
    return [seed.model_copy(deep=True) for seed in DEFAULT_MOVIES]


def ensure_unique_ids(seeds: List[MovieSeed]) -> None:
    """Raises ValueError if two seed records share an id."""
    seen = set()
    for seed in seeds:
        if seed.id in seen:
            raise ValueError(f"Duplicate movie id {seed.id} in seed data.")
        seen.add(seed.id)


class FileStorage:
    """
    Reads files.
    - Only reading, the catalog is never saved.
    - UTF-8 is fixed.
    """

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()


class JsonSeedLoader:
    """
    Loads seed records from a JSON file.

    Expected format: a list of {"id": int, "title": str, "ratings": [int, ...]}.
    """

    def __init__(self, path: str, storage: Optional[FileStorage] = None) -> None:
        self._path = path
        self._storage = storage or FileStorage()

    def load(self) -> List[MovieSeed]:
        """
        Reads and validates the file.
        Every problem is reported as SeedDataError.
        """
        try:
            raw = self._storage.read_text(self._path)
        except OSError as e:
            raise SeedDataError(f"Cannot read seed file '{self._path}': {e}") from e

        seeds = self.parse(raw)
        logger.info("Loaded %d movies from %s", len(seeds), self._path)
        return seeds

    def parse(self, raw: str) -> List[MovieSeed]:
        """Builds MovieSeed records from JSON text."""
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SeedDataError(f"Seed file is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise SeedDataError("Seed file must contain a list of movies.")

        try:
            seeds = [MovieSeed.model_validate(item) for item in payload]
        except ValidationError as e:
            raise SeedDataError(f"Invalid movie record in seed file: {e}") from e

        try:
            ensure_unique_ids(seeds)
        except ValueError as e:
            raise SeedDataError(str(e)) from e

        return seeds
