"""HTTP handlers for match operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error mapping.
"""

import logging

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from match_proxy.dto import HealthCheckResponse, MatchListQuery, MatchSummaryResponse
from match_proxy.errors import MatchProxyError, UpstreamRejected
from match_proxy.services import MatchService

logger = logging.getLogger(__name__)

UPSTREAM_REJECTED_MESSAGE = "Failed to fetch data from Riot API"
FAILED_MATCHES_HEADER = "X-Failed-Match-Ids"
LOGGED_BODY_LIMIT = 500


def to_http_error(error: MatchProxyError) -> HTTPException:
    """Map a service error to the HTTP error sent to the client.

    Upstream rejections keep Riot's status code; everything else is a 500.
    The body Riot sent with a rejection is logged, never returned.
    """
    if isinstance(error, UpstreamRejected):
        logger.error("Riot API responded %s: %s", error.status_code, error.body[:LOGGED_BODY_LIMIT])
        return HTTPException(status_code=error.status_code, detail=UPSTREAM_REJECTED_MESSAGE)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Server error: {error}",
    )


class MatchHandler:
    """HTTP handlers for match operations.

    This handler delegates business logic to MatchService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Forwarding upstream status codes
    - Error handling and responses
    """

    def __init__(self, match_service: MatchService) -> None:
        """Initialize the match handler.

        Args:
            match_service: The match service for business logic (required).
        """
        self._matches = match_service

    async def match_history(self) -> MatchSummaryResponse:
        """Handle GET /api/match-history requests.

        Returns:
            MatchSummaryResponse for the fixture match

        Raises:
            HTTPException: If the fixture cannot be summarized
        """
        try:
            summary = await self._matches.match_history_summary()
        except MatchProxyError as e:
            logger.error("Match history error: %s", e)
            raise to_http_error(e) from e

        return MatchSummaryResponse.from_entity(summary)

    async def get_summoner(self, game_name: str, tag_line: str) -> dict:
        """Handle GET /api/summoner/{gameName}/{tagLine} requests.

        Returns:
            The Riot account payload (puuid, gameName, tagLine)

        Raises:
            HTTPException: With Riot's status code, or 500
        """
        try:
            return await self._matches.get_account(game_name, tag_line)
        except MatchProxyError as e:
            logger.error("Summoner lookup error for %s#%s: %s", game_name, tag_line, e)
            raise to_http_error(e) from e

    async def list_matches(self, puuid: str, query: MatchListQuery) -> JSONResponse:
        """Handle GET /api/matches/{puuid} requests.

        Matches that could not be fetched are left out of the body and
        listed in the X-Failed-Match-Ids header.

        Returns:
            JSON array of match records in match-ID order

        Raises:
            HTTPException: If the ID list or every match fetch failed
        """
        try:
            batch = await self._matches.list_matches(puuid, count=query.count, mode=query.mode)
        except MatchProxyError as e:
            logger.error("Match fetch error for %s: %s", puuid, e)
            raise to_http_error(e) from e

        headers = {}
        if batch.failures:
            headers[FAILED_MATCHES_HEADER] = ",".join(batch.failed_ids)

        return JSONResponse(content=batch.matches, headers=headers)

    async def get_match(self, match_id: str) -> dict:
        """Handle GET /api/match/{matchId} requests.

        Returns:
            The raw match record, cached or fresh

        Raises:
            HTTPException: With Riot's status code, or 500
        """
        try:
            return await self._matches.get_match(match_id)
        except MatchProxyError as e:
            logger.error("Match fetch error for %s: %s", match_id, e)
            raise to_http_error(e) from e

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._matches.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )
