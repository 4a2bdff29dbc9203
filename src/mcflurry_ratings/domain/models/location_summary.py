"""Location summary domain model."""

from dataclasses import dataclass

from mcflurry_ratings.domain.models.location import Location


@dataclass(frozen=True)
class LocationSummary:
    """Aggregate rating statistics of one location."""

    location: Location
    average_stars: float | None
    rating_count: int
