"""Marvel Rivals statistics API client.

Thin async wrapper around the public Marvel Rivals API. It fetches a
player's statistics snapshot and turns every failure into an
``UpstreamError`` carrying the provider's HTTP status, so callers can decide
which failures to skip (private or unknown players) and which to surface.

API Integration:
- Authentication: API key sent in the ``x-api-key`` header
- Player stats: ``GET {base_url}/player/{username}?season=...``
- No retries: one request per call, the caller owns the error policy
"""

import logging
from typing import Any, Protocol
from urllib.parse import quote

import httpx
from httpx import HTTPError, TimeoutException

from ..config.settings import Settings
from ..core.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

Filters = dict[str, int | float | str]


class PlayerStatsProvider(Protocol):
    """Anything that can return a player's statistics snapshot."""

    async def get_player_stats(self, username: str, filters: Filters | None = None) -> Any: ...


class MarvelRivalsClient:
    """Async client for the Marvel Rivals player statistics endpoint.

    Use as an async context manager or call ``aclose()`` when done:

        async with MarvelRivalsClient(api_key="...") as client:
            stats = await client.get_player_stats("someone", {"season": 2})
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = "https://marvelrivalsapi.com/api/v1",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Marvel Rivals API key (requests go out unauthenticated if missing)
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests to mock the API
        """
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid statistics provider base URL: {base_url!r}")
        if not api_key:
            logger.warning(
                "No Marvel Rivals API key configured. Upstream requests will be rejected. "
                "Set the MARVEL_RIVALS_KEY environment variable"
            )

        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={
                "x-api-key": api_key or "",
                "Content-Type": "application/json",
                "User-Agent": "Rivals-Stats-API/0.1",
            },
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MarvelRivalsClient":
        return cls(
            api_key=settings.marvel_rivals_key,
            base_url=settings.marvel_rivals_base_url,
            timeout=settings.request_timeout,
        )

    async def __aenter__(self) -> "MarvelRivalsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def get_player_stats(self, username: str, filters: Filters | None = None) -> Any:
        """Fetch one player's statistics snapshot.

        Args:
            username: Player name or UID as accepted by the API
            filters: Extra query parameters, e.g. ``{"season": 2}``

        Returns:
            Decoded JSON payload (``heroes_unranked`` among other fields)

        Raises:
            UpstreamError: Non-2xx response (``status_code`` set) or transport
                failure (``status_code`` None)
        """
        url = f"{self.base_url}/player/{quote(username, safe='')}"
        logger.debug(f"Fetching player stats from {url} filters={filters}")

        try:
            response = await self.client.get(url, params=filters or None)
        except TimeoutException as e:
            raise UpstreamError(f"Request to statistics provider timed out: {e}") from e
        except HTTPError as e:
            raise UpstreamError(f"Statistics provider request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(_error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "Statistics provider returned invalid JSON", status_code=response.status_code
            ) from e


def _error_message(response: httpx.Response) -> str:
    """Prefer the provider's own error text, fall back to the status line."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "error"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]
    return f"Request failed with status code {response.status_code}"
