"""Application services (use cases) for rating and ranking locations."""

from mcflurry_ratings.application.services.catalog_ranker import CatalogRanker
from mcflurry_ratings.application.services.leaderboard_builder import LeaderboardBuilder
from mcflurry_ratings.application.services.rating_form import RatingForm, SubmittedRating
from mcflurry_ratings.application.services.rating_store import RatingStore

__all__ = [
    "CatalogRanker",
    "LeaderboardBuilder",
    "RatingForm",
    "RatingStore",
    "SubmittedRating",
]
