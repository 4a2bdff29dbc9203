"""Position provider returning a fixed position."""

from mcflurry_ratings.domain.models.user_position import UserPosition
from mcflurry_ratings.domain.ports.position_provider import PositionProvider


class StaticPositionProvider(PositionProvider):
    """Returns the position given at construction (None when the user did not opt in)."""

    def __init__(self, position: UserPosition | None = None) -> None:
        self._position = position

    async def current_position(self) -> UserPosition | None:
        return self._position
