"""Rating repository backed by a Supabase (PostgREST) table.

API Documentation: https://postgrest.org/en/stable/references/api/tables_views.html
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from mcflurry_ratings.adapters.api_request_logger import log_api_request
from mcflurry_ratings.domain.errors import (
    ExternalFailure,
    ExternalReadFailure,
    ExternalWriteFailure,
)
from mcflurry_ratings.domain.models.error_details import ErrorDetails
from mcflurry_ratings.domain.models.rating_record import RatingRecord
from mcflurry_ratings.domain.ports.rating_repository import RatingRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

REST_PATH = "/rest/v1"


class SupabaseRatingRepository(RatingRepository):
    """Adapter reading and writing ratings through the PostgREST API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        session: "ClientSession | None" = None,
        table: str = "ratings",
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the repository.

        Args:
            base_url: Project URL without trailing slash.
            api_key: Key sent as 'apikey' header and bearer token.
            session: aiohttp session used for all requests.
            table: Name of the ratings table.
            timeout_seconds: Total timeout per request.
        """
        self._url = f"{base_url.rstrip('/')}{REST_PATH}/{table}"
        self._api_key = api_key
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _headers(self, **extra: str) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
            **extra,
        }

    async def fetch_all(self) -> list[RatingRecord]:
        """Fetch all ratings ordered newest first."""
        if not self._session:
            raise ExternalReadFailure("No HTTP session available")

        params = {"select": "*", "order": "created_at.desc"}
        headers = self._headers()
        log_api_request("GET", self._url, params=params, headers=headers)

        try:
            async with self._session.get(
                self._url, params=params, headers=headers, timeout=self._timeout
            ) as response:
                rows = await self._read_rows(response, ExternalReadFailure)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning(f"Error loading ratings from {self._url}: {e!r}")
            raise ExternalReadFailure(
                "Could not load ratings", ErrorDetails(reason=str(e) or type(e).__name__)
            ) from e

        return [self._parse_record(row, ExternalReadFailure) for row in rows]

    async def insert(self, record: dict[str, object]) -> RatingRecord:
        """Insert one rating and return the stored row."""
        if not self._session:
            raise ExternalWriteFailure("No HTTP session available")

        headers = self._headers(Prefer="return=representation")
        payload = [record]
        log_api_request("POST", self._url, headers=headers, payload=payload)

        try:
            async with self._session.post(
                self._url, json=payload, headers=headers, timeout=self._timeout
            ) as response:
                rows = await self._read_rows(response, ExternalWriteFailure)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning(f"Error saving rating to {self._url}: {e!r}")
            raise ExternalWriteFailure(
                "Could not save rating", ErrorDetails(reason=str(e) or type(e).__name__)
            ) from e

        if not rows:
            raise ExternalWriteFailure(
                "Backend did not return the stored rating",
                ErrorDetails(reason="empty response"),
            )
        return self._parse_record(rows[0], ExternalWriteFailure)

    async def _read_rows(
        self, response: "ClientResponse", failure: type[ExternalFailure]
    ) -> list[dict[str, Any]]:
        """Return the JSON rows of a response, raising ``failure`` on error status."""
        if not 200 <= response.status < 300:
            error_text = await response.text()
            reason = error_text[:200] or response.reason or "(empty response body)"
            logger.warning(f"Backend returned status {response.status} for {self._url}: {reason}")
            raise failure(
                f"Backend returned status {response.status}",
                ErrorDetails(status_code=response.status, reason=reason),
            )

        data = await response.json()
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise failure(
                "Unexpected response from backend",
                ErrorDetails(status_code=response.status, reason=type(data).__name__),
            )
        return [row for row in data if isinstance(row, dict)]

    @staticmethod
    def _parse_record(row: dict[str, Any], failure: type[ExternalFailure]) -> RatingRecord:
        try:
            return RatingRecord.model_validate(row)
        except ValidationError as e:
            raise failure(
                "Received an invalid rating row",
                ErrorDetails(reason=f"{e.error_count()} validation error(s): {row.get('id')!r}"),
            ) from e
