"""Ranked location domain model."""

from dataclasses import dataclass

from mcflurry_ratings.domain.models.location import Location


@dataclass(frozen=True)
class RankedLocation:
    """A catalog location annotated with its distance to the user, if known."""

    location: Location
    distance_km: float | None = None
