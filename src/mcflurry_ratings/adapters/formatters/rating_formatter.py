"""Formatter for rating values."""

from mcflurry_ratings.domain.contracts.rating_formatter import RatingFormatterProtocol
from mcflurry_ratings.domain.models.rating import Rating

PERFECT_SAUCE_LEVEL = 3
MAX_TOO_LITTLE_SAUCE_LEVEL = 2


class RatingFormatter(RatingFormatterProtocol):
    """Turns numeric rating values into display text."""

    def sauce_label(self, sauce_level: float) -> str:
        """Describe a sauce level (3 is perfect)."""
        if sauce_level <= MAX_TOO_LITTLE_SAUCE_LEVEL:
            return "too little"
        if sauce_level == PERFECT_SAUCE_LEVEL:
            return "perfect"
        return "too much"

    def format_stars(self, stars: float) -> str:
        return f"{stars:.1f}/5"

    def format_average(self, average: float | None) -> str:
        if average is None:
            return "No ratings yet"
        return self.format_stars(average)

    def format_distance(self, distance_km: float | None) -> str:
        if distance_km is None:
            return ""
        return f"{distance_km:.1f} km"

    def mixin_label(self, has_mixin: bool) -> str:
        return "with chocolate" if has_mixin else "without chocolate"

    def format_rating(self, rating: Rating) -> str:
        """One-line summary, e.g. '4.0/5 · creamy · sauce: perfect · with chocolate'."""
        parts = [
            self.format_stars(rating.stars),
            rating.texture.value,
            f"sauce: {self.sauce_label(rating.sauce_level)}",
            self.mixin_label(rating.has_mixin),
        ]
        summary = " · ".join(parts)
        if rating.comment:
            summary += f' · "{rating.comment}"'
        return summary
