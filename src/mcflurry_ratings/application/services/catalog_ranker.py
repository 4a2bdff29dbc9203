"""Distance ranking and text filtering of the location catalog."""

import logging
from collections.abc import Sequence

from mcflurry_ratings.domain.geo_distance import distance_between
from mcflurry_ratings.domain.models import Location, RankedLocation, UserPosition

logger = logging.getLogger(__name__)


class CatalogRanker:
    """Produces the ordered, filtered catalog view shown to the user.

    Stateless: the same inputs always produce the same output.
    """

    def rank(
        self,
        catalog: Sequence[Location],
        position: UserPosition | None,
        query: str = "",
    ) -> list[RankedLocation]:
        """Rank the catalog by distance to the user and filter it by a text query.

        With a position, every location is annotated with its distance and the
        list is sorted nearest first (ties keep catalog order). Without a
        position, catalog order is kept and no distance is attached. Filtering
        happens after sorting, so matches keep their distance order.

        Args:
            catalog: The static location catalog, in declaration order.
            position: The user's position, or None if unknown.
            query: Case-insensitive substring matched against "<name> <city>".
                An empty query matches everything.

        Returns:
            Ranked locations, nearest first when a position is given.
        """
        ranked = self._annotate(catalog, position)
        matches = [entry for entry in ranked if self._matches(entry.location, query)]
        logger.debug(
            f"Ranked {len(catalog)} location(s), {len(matches)} match query {query!r}"
        )
        return matches

    @staticmethod
    def _annotate(
        catalog: Sequence[Location], position: UserPosition | None
    ) -> list[RankedLocation]:
        if position is None:
            return [RankedLocation(location=location) for location in catalog]

        ranked = [
            RankedLocation(location=location, distance_km=distance_between(position, location))
            for location in catalog
        ]
        # list.sort is stable, equal distances keep catalog order
        ranked.sort(key=lambda entry: entry.distance_km or 0.0)
        return ranked

    @staticmethod
    def _matches(location: Location, query: str) -> bool:
        if not query:
            return True
        return query.casefold() in location.search_text.casefold()
