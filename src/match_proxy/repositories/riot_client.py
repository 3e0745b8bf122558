"""Riot Games API client.

Issues authenticated GET requests against the regional Riot API host and
translates transport and HTTP failures into match_proxy errors. There is
no retry logic: a failed attempt is surfaced to the caller immediately.

Endpoints used:
- /riot/account/v1/accounts/by-riot-id/{gameName}/{tagLine}
- /lol/match/v5/matches/by-puuid/{puuid}/ids
- /lol/match/v5/matches/{matchId}
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from match_proxy.config import settings
from match_proxy.errors import MalformedInput, UpstreamRejected, UpstreamTimeout, UpstreamUnavailable

logger = logging.getLogger(__name__)


class RiotApiClient:
    """Asynchronous Riot API client.

    This class satisfies the MatchDataProvider protocol through structural
    typing. The only shared state is the immutable API key and the httpx
    connection pool, so concurrent calls are safe.

    Example:
        ```python
        client = RiotApiClient.create()
        account = await client.get_account("lolarmon1", "NA1")
        match_ids = await client.get_match_ids(account["puuid"], count=5)
        await client.close()
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Riot API client.

        Args:
            api_key: Riot API key sent as X-Riot-Token. Defaults to settings.riot_api_key.
            base_url: Regional API host. Defaults to settings.riot_api_base_url.
            timeout: Per-request timeout in seconds. Defaults to settings.riot_request_timeout.
            transport: Optional httpx transport (used by tests).
        """
        self._api_key = api_key if api_key is not None else settings.riot_api_key
        self._base_url = (base_url or settings.riot_api_base_url).rstrip("/")
        self._timeout = timeout or settings.riot_request_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "RiotApiClient":
        """Factory method to create RiotApiClient with defaults.

        Args:
            api_key: API key. If None, uses settings.
            base_url: API host. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured RiotApiClient
        """
        return cls(api_key=api_key, base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"X-Riot-Token": self._api_key},
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )
        return self._client

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a GET request and decode the JSON body.

        Raises:
            UpstreamTimeout: If Riot does not answer in time
            UpstreamUnavailable: If the request cannot complete
            UpstreamRejected: If Riot answers with a non-2xx status
            MalformedInput: If the body is not valid JSON
        """
        logger.info("Requesting Riot API: %s", path)

        try:
            response = await self.client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error("Riot API timed out for %s: %s", path, e)
            raise UpstreamTimeout(f"Riot API timed out: {path}") from e
        except httpx.HTTPError as e:
            logger.error("Network error calling Riot API for %s: %s", path, e)
            raise UpstreamUnavailable(f"Riot API unreachable: {e}") from e

        logger.info("Riot API status %s for %s", response.status_code, path)

        if not response.is_success:
            raise UpstreamRejected(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedInput(f"Riot API returned invalid JSON for {path}") from e

    async def get_account(self, game_name: str, tag_line: str) -> dict[str, Any]:
        """Resolve a Riot ID to its account payload (puuid, gameName, tagLine).

        Args:
            game_name: The name part of the Riot ID
            tag_line: The tag part of the Riot ID (without "#")

        Returns:
            The account payload, unchanged
        """
        path = (
            "/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        data = await self._get(path)
        if not isinstance(data, dict):
            raise MalformedInput("Account payload is not a JSON object")
        return data

    async def get_match_ids(self, puuid: str, count: int = 20, start: int = 0) -> list[str]:
        """List recent match IDs for a player, most recent first.

        Args:
            puuid: The player's PUUID
            count: Number of IDs to return (Riot allows up to 100)
            start: Offset into the player's history

        Returns:
            List of match identifiers
        """
        data = await self._get(
            f"/lol/match/v5/matches/by-puuid/{quote(puuid, safe='')}/ids",
            params={"start": start, "count": count},
        )
        if not isinstance(data, list):
            raise MalformedInput("Match ID payload is not a JSON list")
        return [str(match_id) for match_id in data]

    async def get_match(self, match_id: str) -> dict[str, Any]:
        """Fetch the full record of one match.

        Args:
            match_id: The Riot match identifier (e.g. "NA1_4923456789")

        Returns:
            The raw match record
        """
        data = await self._get(f"/lol/match/v5/matches/{quote(match_id, safe='')}")
        if not isinstance(data, dict):
            raise MalformedInput(f"Match payload for {match_id} is not a JSON object")
        return data

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
