"""In-memory rating collection backed by a persistence repository."""

import logging
from statistics import fmean
from typing import TYPE_CHECKING

from mcflurry_ratings.domain.errors import ExternalReadFailure, ExternalWriteFailure
from mcflurry_ratings.domain.models import (
    ErrorDetails,
    Rating,
    RatingRecord,
    RatingSubmission,
    TextureCategory,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mcflurry_ratings.domain.ports import RatingRepository


class RatingStore:
    """Owned state container for the ratings of one session.

    The collection only grows through ``insert`` or is replaced wholesale by
    ``load_all``. It is kept newest first. Aggregates are always computed from
    the current contents.
    """

    def __init__(self, repository: "RatingRepository") -> None:
        """Initialize with a rating repository."""
        self._repository = repository
        self._ratings: list[Rating] = []
        self._load_sequence = 0
        # Ratings inserted since the last applied load
        self._recent_inserts: list[Rating] = []

    def __len__(self) -> int:
        return len(self._ratings)

    @property
    def ratings(self) -> tuple[Rating, ...]:
        """Snapshot of all ratings, newest first."""
        return tuple(self._ratings)

    async def load_all(self) -> list[Rating]:
        """Replace the collection with all ratings from the repository.

        If another load is started before this one completes, this load's
        result is returned but not applied. Ratings inserted while the load was
        in flight are kept when they are missing from its result.

        Returns:
            The ratings now held by the store, newest first (the loaded ratings
            for a stale load).

        Raises:
            ExternalReadFailure: If the repository read fails or returns an
                unusable row. The previous contents are kept.
        """
        self._load_sequence += 1
        sequence = self._load_sequence
        inserts_before = len(self._recent_inserts)

        records = await self._repository.fetch_all()
        try:
            ratings = [self._to_rating(record) for record in records]
        except ValueError as e:
            raise ExternalReadFailure(
                "Received an invalid rating from the backend",
                ErrorDetails(reason=str(e)),
            ) from e
        ratings.sort(key=lambda rating: rating.created_at, reverse=True)

        if sequence != self._load_sequence:
            logger.info(
                f"Discarding stale rating load #{sequence} (latest is #{self._load_sequence})"
            )
            return ratings

        loaded_ids = {rating.id for rating in ratings}
        missing = [
            rating
            for rating in self._recent_inserts[inserts_before:]
            if rating.id not in loaded_ids
        ]
        self._ratings = sorted([*missing, *ratings], key=lambda r: r.created_at, reverse=True)
        self._recent_inserts = []
        logger.info(f"Loaded {len(ratings)} rating(s)")
        return list(self._ratings)

    async def insert(self, submission: RatingSubmission) -> Rating:
        """Persist a submission and prepend the canonical rating.

        Raises:
            ExternalWriteFailure: If persisting fails. The store is unchanged.
        """
        stored = await self._repository.insert(self._to_record(submission))
        try:
            rating = self._to_rating(stored)
        except ValueError as e:
            raise ExternalWriteFailure(
                "Backend returned an invalid rating",
                ErrorDetails(reason=str(e)),
            ) from e

        self._ratings = [rating, *self._ratings]
        self._recent_inserts.append(rating)
        logger.debug(f"Stored rating {rating.id} for location {rating.location_id}")
        return rating

    def ratings_for(self, location_id: int) -> list[Rating]:
        """All ratings of a location, newest first."""
        return [rating for rating in self._ratings if rating.location_id == location_id]

    def rating_count(self, location_id: int) -> int:
        """Number of ratings of a location."""
        return len(self.ratings_for(location_id))

    def average_stars(self, location_id: int) -> float | None:
        """Mean star score of a location, or None if it has no ratings."""
        ratings = self.ratings_for(location_id)
        if not ratings:
            return None
        return fmean(rating.stars for rating in ratings)

    @staticmethod
    def _to_rating(record: RatingRecord) -> Rating:
        return Rating(
            id=record.id,
            location_id=record.restaurant_id,
            texture=TextureCategory.from_wire(record.consistency),
            stars=record.stars,
            has_mixin=record.has_choco,
            sauce_level=record.sauce_amount,
            comment=record.comment,
            created_at=record.created_at,
        )

    @staticmethod
    def _to_record(submission: RatingSubmission) -> dict[str, object]:
        return {
            "restaurant_id": submission.location_id,
            "consistency": submission.texture.wire_value,
            "stars": submission.stars,
            "has_choco": submission.has_mixin,
            "sauce_amount": submission.sauce_level,
            "comment": submission.comment,
        }
