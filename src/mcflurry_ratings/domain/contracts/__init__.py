"""Contracts (protocols) for components outside the core."""

from mcflurry_ratings.domain.contracts.rating_formatter import RatingFormatterProtocol

__all__ = ["RatingFormatterProtocol"]
