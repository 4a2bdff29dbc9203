"""Supabase (PostgREST) persistence adapter."""

from mcflurry_ratings.adapters.supabase_api.supabase_rating_repository import (
    SupabaseRatingRepository,
)

__all__ = ["SupabaseRatingRepository"]
