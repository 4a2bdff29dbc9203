"""Shared fixtures for McFlurry ratings tests."""

import itertools
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from mcflurry_ratings.adapters.catalog import DEFAULT_CATALOG
from mcflurry_ratings.domain.models import Location, RatingRecord

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def catalog() -> list[Location]:
    """The built-in catalog of ten German stores."""
    return list(DEFAULT_CATALOG)


@pytest.fixture
def make_record() -> Callable[..., RatingRecord]:
    """Factory for rating rows; each call gets the next id."""
    ids = itertools.count(1)

    def _make(
        restaurant_id: int = 1,
        stars: float = 4,
        minutes: int = 0,
        consistency: str = "cremig",
        has_choco: bool = False,
        sauce_amount: int = 3,
        comment: str | None = "",
    ) -> RatingRecord:
        return RatingRecord.model_validate(
            {
                "id": next(ids),
                "restaurant_id": restaurant_id,
                "consistency": consistency,
                "stars": stars,
                "has_choco": has_choco,
                "sauce_amount": sauce_amount,
                "comment": comment,
                "created_at": BASE_TIME + timedelta(minutes=minutes),
            }
        )

    return _make
