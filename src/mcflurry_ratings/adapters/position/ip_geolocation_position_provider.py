"""Position provider approximating the user's position from their IP address."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from mcflurry_ratings.adapters.api_request_logger import log_api_request
from mcflurry_ratings.domain.errors import SensorUnavailable
from mcflurry_ratings.domain.models.user_position import UserPosition
from mcflurry_ratings.domain.ports.position_provider import PositionProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class IpGeolocationPositionProvider(PositionProvider):
    """One-shot IP geolocation lookup. Any failure means no position."""

    def __init__(
        self,
        url: str,
        session: "ClientSession | None" = None,
        timeout_seconds: float = 5,
    ) -> None:
        """Initialize with the lookup endpoint and optional aiohttp session."""
        self._url = url
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def current_position(self) -> UserPosition | None:
        """Look up the position, or return None if it cannot be determined."""
        try:
            return await self._lookup()
        except SensorUnavailable as e:
            logger.warning(f"Position unavailable: {e}")
            return None

    async def _lookup(self) -> UserPosition:
        if not self._session:
            raise SensorUnavailable("No HTTP session available")

        log_api_request("GET", self._url)
        try:
            async with self._session.get(self._url, timeout=self._timeout) as response:
                if response.status != 200:
                    raise SensorUnavailable(f"Lookup returned status {response.status}")
                data = await response.json()
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            raise SensorUnavailable(f"Lookup failed: {e!r}") from e

        return self._parse_position(data)

    @staticmethod
    def _parse_position(data: Any) -> UserPosition:
        """Read coordinates from 'lat'/'lon' or 'latitude'/'longitude' keys."""
        if not isinstance(data, dict):
            raise SensorUnavailable("Unexpected lookup response")
        if data.get("status") == "fail":
            raise SensorUnavailable(f"Lookup refused: {data.get('message', 'unknown reason')}")

        latitude = data.get("lat", data.get("latitude"))
        longitude = data.get("lon", data.get("longitude"))
        try:
            return UserPosition(latitude=float(latitude), longitude=float(longitude))
        except (TypeError, ValueError) as e:
            raise SensorUnavailable("Lookup response has no coordinates") from e
