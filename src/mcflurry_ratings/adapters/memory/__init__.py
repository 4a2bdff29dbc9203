"""In-memory persistence adapter."""

from mcflurry_ratings.adapters.memory.in_memory_rating_repository import (
    InMemoryRatingRepository,
)

__all__ = ["InMemoryRatingRepository"]
