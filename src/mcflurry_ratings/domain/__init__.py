"""Domain layer - core business logic and models."""

from mcflurry_ratings.domain.geo_distance import distance_between, distance_km
from mcflurry_ratings.domain.models import (
    Location,
    Rating,
    RatingSubmission,
    TextureCategory,
    UserPosition,
)
from mcflurry_ratings.domain.ports import PositionProvider, RatingRepository

__all__ = [
    "Location",
    "PositionProvider",
    "Rating",
    "RatingRepository",
    "RatingSubmission",
    "TextureCategory",
    "UserPosition",
    "distance_between",
    "distance_km",
]
