"""Rating domain models."""

from dataclasses import dataclass
from datetime import datetime

from mcflurry_ratings.domain.models.texture_category import TextureCategory


@dataclass(frozen=True)
class RatingSubmission:
    """A pending rating, before the persistence layer assigns id and timestamp."""

    location_id: int
    texture: TextureCategory
    stars: int
    has_mixin: bool
    sauce_level: int
    comment: str = ""


@dataclass(frozen=True)
class Rating:
    """A persisted rating for the McFlurry of one location."""

    id: int | str
    location_id: int
    texture: TextureCategory
    stars: float
    has_mixin: bool
    sauce_level: int
    comment: str
    created_at: datetime
