"""Position provider adapters."""

from mcflurry_ratings.adapters.position.ip_geolocation_position_provider import (
    IpGeolocationPositionProvider,
)
from mcflurry_ratings.adapters.position.static_position_provider import StaticPositionProvider

__all__ = ["IpGeolocationPositionProvider", "StaticPositionProvider"]
