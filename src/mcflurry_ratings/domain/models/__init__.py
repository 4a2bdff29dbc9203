"""Domain models for McFlurry ratings."""

from mcflurry_ratings.domain.models.error_details import ErrorDetails
from mcflurry_ratings.domain.models.location import Location
from mcflurry_ratings.domain.models.location_summary import LocationSummary
from mcflurry_ratings.domain.models.photo_attachment import PhotoAttachment
from mcflurry_ratings.domain.models.ranked_location import RankedLocation
from mcflurry_ratings.domain.models.rating import Rating, RatingSubmission
from mcflurry_ratings.domain.models.rating_record import RatingRecord
from mcflurry_ratings.domain.models.texture_category import TextureCategory
from mcflurry_ratings.domain.models.user_position import UserPosition

__all__ = [
    "ErrorDetails",
    "Location",
    "LocationSummary",
    "PhotoAttachment",
    "RankedLocation",
    "Rating",
    "RatingRecord",
    "RatingSubmission",
    "TextureCategory",
    "UserPosition",
]
