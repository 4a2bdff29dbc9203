"""Ports (interfaces) for the ports-and-adapters architecture."""

from mcflurry_ratings.domain.ports.position_provider import PositionProvider
from mcflurry_ratings.domain.ports.rating_repository import RatingRepository

__all__ = [
    "PositionProvider",
    "RatingRepository",
]
