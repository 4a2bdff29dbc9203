"""Great-circle distance between coordinates (haversine formula)."""

import math

from mcflurry_ratings.domain.models.location import Location
from mcflurry_ratings.domain.models.user_position import UserPosition

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in kilometers between two points.

    Coordinates are in degrees and are not range-checked.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a slightly past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(position: UserPosition, location: Location) -> float:
    """Distance in kilometers from a user position to a catalog location."""
    return distance_km(position.latitude, position.longitude, location.latitude, location.longitude)
