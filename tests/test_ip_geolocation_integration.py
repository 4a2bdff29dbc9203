"""Integration test against the real IP geolocation endpoint.

Requires network access. Run with: pytest -m integration
"""

import aiohttp
import pytest

from mcflurry_ratings.adapters.config import AppConfig
from mcflurry_ratings.adapters.position import IpGeolocationPositionProvider


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ip_lookup_returns_plausible_position() -> None:
    """Given network access, when looking up the position, then coordinates are in range."""
    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    async with aiohttp.ClientSession() as session:
        provider = IpGeolocationPositionProvider(config.geolocation_url, session=session)
        position = await provider.current_position()

    if position is None:
        pytest.skip("Geolocation service unavailable")
    assert -90.0 <= position.latitude <= 90.0
    assert -180.0 <= position.longitude <= 180.0
