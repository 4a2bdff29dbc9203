"""Protocol for formatting ratings for display."""

from typing import Protocol

from mcflurry_ratings.domain.models.rating import Rating


class RatingFormatterProtocol(Protocol):
    """Protocol for turning numeric rating values into display text."""

    def sauce_label(self, sauce_level: float) -> str:
        """Describe a sauce level.

        Args:
            sauce_level: Sauce level on the 1-5 scale.

        Returns:
            Label like "too little", "perfect" or "too much".
        """
        ...

    def format_stars(self, stars: float) -> str:
        """Format a star score with one decimal place (e.g. '4.0/5')."""
        ...

    def format_average(self, average: float | None) -> str:
        """Format an average star score, or a placeholder when there is none."""
        ...

    def format_distance(self, distance_km: float | None) -> str:
        """Format a distance (e.g. '12.3 km'), or an empty string when unknown."""
        ...

    def mixin_label(self, has_mixin: bool) -> str:
        """Describe whether the McFlurry had a chocolate mixin."""
        ...

    def format_rating(self, rating: Rating) -> str:
        """Format a single rating as a one-line summary."""
        ...
