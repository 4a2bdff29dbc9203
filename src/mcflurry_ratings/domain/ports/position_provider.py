"""Position provider port."""

from typing import Protocol

from mcflurry_ratings.domain.models.user_position import UserPosition


class PositionProvider(Protocol):
    """Port for acquiring the user's current position (one-shot, no retry)."""

    async def current_position(self) -> UserPosition | None:
        """Return the current position, or None if it is unavailable or denied."""
        ...
