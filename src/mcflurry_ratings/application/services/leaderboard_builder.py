"""Leaderboard and per-location summaries over the rating store."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from mcflurry_ratings.domain.models import Location, LocationSummary

if TYPE_CHECKING:
    from mcflurry_ratings.application.services.rating_store import RatingStore

DEFAULT_LEADERBOARD_SIZE = 3


class LeaderboardBuilder:
    """Builds ranked summaries from the catalog and the current store contents."""

    def overview(self, catalog: Sequence[Location], store: "RatingStore") -> list[LocationSummary]:
        """Summaries for every catalog location, in catalog order.

        Locations without ratings have an average of None and a count of 0.
        """
        return [
            LocationSummary(
                location=location,
                average_stars=store.average_stars(location.id),
                rating_count=store.rating_count(location.id),
            )
            for location in catalog
        ]

    def top_n(
        self,
        catalog: Sequence[Location],
        store: "RatingStore",
        n: int = DEFAULT_LEADERBOARD_SIZE,
    ) -> list[LocationSummary]:
        """Best rated locations, highest average first.

        Only locations with at least one rating are included. Equal averages
        keep catalog order; there is no secondary tie-break.
        """
        if n <= 0:
            return []
        rated = [
            summary
            for summary in self.overview(catalog, store)
            if summary.average_stars is not None
        ]
        rated.sort(key=lambda summary: summary.average_stars or 0.0, reverse=True)
        return rated[:n]
