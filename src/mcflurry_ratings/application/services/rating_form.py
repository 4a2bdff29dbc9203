"""Pending rating form state held by the caller."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mcflurry_ratings.domain.errors import (
    ExternalWriteFailure,
    NoLocationSelectedError,
    RatingValidationError,
    SubmissionInProgressError,
    UnknownLocationError,
)
from mcflurry_ratings.domain.models import (
    Location,
    PhotoAttachment,
    Rating,
    RatingSubmission,
    TextureCategory,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mcflurry_ratings.application.services.rating_store import RatingStore

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class SubmittedRating:
    """A stored rating together with the photos attached while submitting it."""

    rating: Rating
    photos: tuple[PhotoAttachment, ...] = ()


class RatingForm:
    """Pending submission for one session.

    Photos stay here and are handed back with the stored rating; they never
    enter the store. On a failed submission all fields are kept so the user
    can resubmit.
    """

    def __init__(self, catalog: Sequence[Location]) -> None:
        """Initialize with the catalog used to validate the selected location."""
        self._catalog_ids = {location.id for location in catalog}
        self.location: Location | None = None
        self.texture: TextureCategory | str = TextureCategory.CREAMY
        self.stars = 4
        self.has_mixin = False
        self.sauce_level = 3
        self.comment = ""
        self.photos: list[PhotoAttachment] = []
        self._saving = False

    @property
    def saving(self) -> bool:
        """True while a submission is in flight."""
        return self._saving

    def select_location(self, location: Location) -> None:
        """Select the location to rate."""
        self.location = location

    def attach_photos(self, photos: Iterable[PhotoAttachment]) -> None:
        """Replace the attached photos."""
        self.photos = list(photos)

    def build_submission(self) -> RatingSubmission:
        """Validate the form and turn it into a submission.

        Raises:
            NoLocationSelectedError: If no location is selected.
            UnknownLocationError: If the location is not in the catalog.
            RatingValidationError: If stars, sauce level or texture are invalid.
        """
        if self.location is None:
            raise NoLocationSelectedError("Select a location before submitting a rating")
        if self.location.id not in self._catalog_ids:
            raise UnknownLocationError(f"Location {self.location.id} is not in the catalog")
        _check_score("stars", self.stars)
        _check_score("sauce_level", self.sauce_level)
        try:
            texture = TextureCategory.from_wire(self.texture)
        except ValueError as e:
            raise RatingValidationError(str(e)) from e

        return RatingSubmission(
            location_id=self.location.id,
            texture=texture,
            stars=self.stars,
            has_mixin=bool(self.has_mixin),
            sauce_level=self.sauce_level,
            comment=self.comment.strip(),
        )

    async def submit(self, store: "RatingStore") -> SubmittedRating:
        """Submit the form through the store.

        Raises:
            SubmissionInProgressError: If a submission is already pending.
            ExternalWriteFailure: If the store could not persist the rating.
                The form keeps its contents.
        """
        if self._saving:
            raise SubmissionInProgressError("A rating is already being saved")

        submission = self.build_submission()
        self._saving = True
        try:
            rating = await store.insert(submission)
        except ExternalWriteFailure:
            logger.warning(f"Saving rating for location {submission.location_id} failed")
            raise
        finally:
            self._saving = False

        result = SubmittedRating(rating=rating, photos=tuple(self.photos))
        self.comment = ""
        self.photos = []
        return result


def _check_score(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RatingValidationError(f"{name} must be a whole number, got {value!r}")
    if not MIN_SCORE <= value <= MAX_SCORE:
        raise RatingValidationError(
            f"{name} must be between {MIN_SCORE} and {MAX_SCORE}, got {value}"
        )
