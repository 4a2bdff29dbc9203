"""Presentation formatters."""

from mcflurry_ratings.adapters.formatters.rating_formatter import RatingFormatter

__all__ = ["RatingFormatter"]
