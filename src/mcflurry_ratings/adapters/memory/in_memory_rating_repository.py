"""In-memory rating repository for offline use and tests."""

import itertools
from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import ValidationError

from mcflurry_ratings.domain.errors import ExternalWriteFailure
from mcflurry_ratings.domain.models.error_details import ErrorDetails
from mcflurry_ratings.domain.models.rating_record import RatingRecord
from mcflurry_ratings.domain.ports.rating_repository import RatingRepository


class InMemoryRatingRepository(RatingRepository):
    """Keeps rating rows in process memory. Nothing survives a restart."""

    def __init__(self, records: Iterable[RatingRecord] = ()) -> None:
        """Initialize with optional seed rows."""
        self._records = list(records)
        numeric_ids = [r.id for r in self._records if isinstance(r.id, int)]
        self._ids = itertools.count(max(numeric_ids, default=0) + 1)

    async def fetch_all(self) -> list[RatingRecord]:
        """Return all rows, newest first."""
        return sorted(self._records, key=lambda record: record.created_at, reverse=True)

    async def insert(self, record: dict[str, object]) -> RatingRecord:
        """Store a row, assigning id and creation time."""
        try:
            stored = RatingRecord.model_validate(
                {**record, "id": next(self._ids), "created_at": datetime.now(UTC)}
            )
        except ValidationError as e:
            raise ExternalWriteFailure(
                "Rating rejected", ErrorDetails(reason=f"{e.error_count()} validation error(s)")
            ) from e
        self._records.append(stored)
        return stored
