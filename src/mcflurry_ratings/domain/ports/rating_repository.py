"""Rating repository port."""

from typing import Protocol

from mcflurry_ratings.domain.models.rating_record import RatingRecord


class RatingRepository(Protocol):
    """Port for reading and writing persisted ratings."""

    async def fetch_all(self) -> list[RatingRecord]:
        """Fetch all ratings, newest first.

        Raises:
            ExternalReadFailure: If the backend cannot be read.
        """
        ...

    async def insert(self, record: dict[str, object]) -> RatingRecord:
        """Persist one rating record and return the canonical stored row.

        Args:
            record: Row without ``id`` and ``created_at`` (backend field names).

        Raises:
            ExternalWriteFailure: If the row could not be stored.
        """
        ...
