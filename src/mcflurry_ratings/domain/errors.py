"""Error taxonomy for McFlurry ratings.

None of these errors is fatal to the process; all are recoverable at the
caller boundary.
"""

from mcflurry_ratings.domain.models.error_details import ErrorDetails


class McFlurryRatingsError(Exception):
    """Base class for all errors raised by this package."""


class ExternalFailure(McFlurryRatingsError):
    """A call to an external collaborator failed."""

    def __init__(self, message: str, details: ErrorDetails | None = None) -> None:
        super().__init__(message)
        self.details = details

    def __str__(self) -> str:
        message = super().__str__()
        if self.details is None:
            return message
        return f"{message} ({self.details})"


class ExternalReadFailure(ExternalFailure):
    """Loading ratings from the persistence backend failed."""


class ExternalWriteFailure(ExternalFailure):
    """Persisting a rating failed; nothing was stored."""


class SensorUnavailable(McFlurryRatingsError):
    """No position could be acquired (no capability or permission denied)."""


class CatalogError(McFlurryRatingsError):
    """The location catalog configuration is malformed."""


class SubmissionError(McFlurryRatingsError):
    """A rating submission was rejected before reaching the store."""


class RatingValidationError(SubmissionError):
    """A submitted value is out of range."""


class UnknownLocationError(SubmissionError):
    """The submission references a location that is not in the catalog."""


class NoLocationSelectedError(SubmissionError):
    """A rating was submitted without selecting a location first."""


class SubmissionInProgressError(SubmissionError):
    """A submission is already pending."""
