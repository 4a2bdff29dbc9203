"""Adapters layer - external system integrations."""

from mcflurry_ratings.adapters.config import AppConfig, CatalogLoader
from mcflurry_ratings.adapters.memory import InMemoryRatingRepository
from mcflurry_ratings.adapters.position import (
    IpGeolocationPositionProvider,
    StaticPositionProvider,
)
from mcflurry_ratings.adapters.supabase_api import SupabaseRatingRepository

__all__ = [
    "AppConfig",
    "CatalogLoader",
    "InMemoryRatingRepository",
    "IpGeolocationPositionProvider",
    "StaticPositionProvider",
    "SupabaseRatingRepository",
]
