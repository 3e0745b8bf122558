"""Match service for core retrieval logic.

This service decides whether a match is served from the cache or fetched
from the Riot API, populates the cache, fans out match-detail fetches and
builds match summaries.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from match_proxy.config import settings
from match_proxy.entities import MatchBatch, MatchFetchFailure, MatchRecord, MatchSummary
from match_proxy.errors import MalformedInput, MatchProxyError, StorageFailure, UpstreamRejected, UpstreamTimeout
from match_proxy.protocols import MatchDataProvider, MatchStore
from match_proxy.services.match_normalizer import normalize

logger = logging.getLogger(__name__)


class MatchService:
    """Match retrieval orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - MatchStore: the match cache (Redis by default)
    - MatchDataProvider: the upstream match source (the Riot API by default)

    Example:
        ```python
        from match_proxy.repositories import RedisMatchRepository, RiotApiClient
        from match_proxy.services import MatchService

        service = MatchService.create(
            store=RedisMatchRepository.create(),
            upstream=RiotApiClient.create(),
        )
        match = await service.get_match("NA1_4923456789")
        ```
    """

    def __init__(
        self,
        store: MatchStore,
        upstream: MatchDataProvider,
        fixture_path: str | Path | None = None,
        fixture_participant: str | None = None,
        fanout_timeout: float | None = None,
    ) -> None:
        """Initialize the match service.

        Args:
            store: Match cache backend (required).
            upstream: Upstream match data source (required).
            fixture_path: Match file used for the match-history summary. Defaults to settings.
            fixture_participant: Participant summarized from that file. Defaults to settings.
            fanout_timeout: Deadline in seconds for one fan-out batch. Defaults to settings.
        """
        self._store = store
        self._upstream = upstream
        self._fixture_path = Path(fixture_path or settings.match_fixture_path)
        self._fixture_participant = fixture_participant or settings.fixture_participant
        self._fanout_timeout = fanout_timeout or settings.fanout_timeout

    @classmethod
    def create(
        cls,
        store: MatchStore,
        upstream: MatchDataProvider,
        fixture_path: str | Path | None = None,
        fixture_participant: str | None = None,
        fanout_timeout: float | None = None,
    ) -> "MatchService":
        """Factory method to create MatchService with settings defaults.

        Args:
            store: Match cache backend (required).
            upstream: Upstream match data source (required).
            fixture_path: Match history fixture. If None, uses settings.
            fixture_participant: Participant name. If None, uses settings.
            fanout_timeout: Fan-out deadline. If None, uses settings.

        Returns:
            Configured MatchService instance
        """
        return cls(
            store=store,
            upstream=upstream,
            fixture_path=fixture_path,
            fixture_participant=fixture_participant,
            fanout_timeout=fanout_timeout,
        )

    async def get_account(self, game_name: str, tag_line: str) -> dict[str, Any]:
        """Resolve a Riot ID. Not cached.

        Args:
            game_name: Name part of the Riot ID
            tag_line: Tag part of the Riot ID

        Returns:
            The upstream account payload, unchanged
        """
        return await self._upstream.get_account(game_name, tag_line)

    async def list_matches(
        self,
        puuid: str,
        count: int | None = None,
        mode: str | None = None,
    ) -> MatchBatch:
        """Fetch a player's recent matches.

        Business logic:
        1. Fetch the list of match IDs (failure aborts everything)
        2. Fetch every match concurrently, keeping the ID order
        3. Collect per-match failures next to the successes
        4. Keep only matches whose game mode equals `mode`, when given

        Args:
            puuid: The player's PUUID
            count: Number of matches. Defaults to settings.default_match_count.
            mode: Exact, case-sensitive game mode filter (e.g. "ARAM")

        Returns:
            MatchBatch with the matches in ID order and any per-match failures

        Raises:
            MatchProxyError: If the ID list cannot be fetched, if every match
                failed, or if the batch exceeds the fan-out deadline
        """
        count = count or settings.default_match_count
        match_ids = await self._upstream.get_match_ids(puuid, count=count)

        if not match_ids:
            return MatchBatch()

        try:
            results = await asyncio.wait_for(
                asyncio.gather(
                    *(self._upstream.get_match(match_id) for match_id in match_ids),
                    return_exceptions=True,
                ),
                timeout=self._fanout_timeout,
            )
        except asyncio.TimeoutError as e:
            raise UpstreamTimeout(
                f"Fetching {len(match_ids)} matches exceeded {self._fanout_timeout}s"
            ) from e

        matches: list[MatchRecord] = []
        failures: list[MatchFetchFailure] = []
        first_error: MatchProxyError | None = None

        for match_id, result in zip(match_ids, results):
            if isinstance(result, MatchProxyError):
                logger.warning("Failed to fetch match %s: %s", match_id, result)
                first_error = first_error or result
                failures.append(
                    MatchFetchFailure(
                        match_id=match_id,
                        message=str(result),
                        status_code=result.status_code if isinstance(result, UpstreamRejected) else None,
                    )
                )
            elif isinstance(result, BaseException):
                raise result
            else:
                matches.append(result)

        if first_error is not None and not matches:
            raise first_error

        if mode:
            matches = [match for match in matches if game_mode_of(match) == mode]

        return MatchBatch(matches=matches, failures=failures)

    async def get_match(self, match_id: str) -> MatchRecord:
        """Get a match, cache first.

        Business logic:
        1. Look the match up in the cache; return it on a hit
        2. On a miss, fetch it from upstream
        3. Cache it (best effort - a failed write is logged, not raised)
        4. Return the fetched record

        Args:
            match_id: The Riot match identifier

        Returns:
            The raw match record

        Raises:
            StorageFailure: If the cache cannot be read
            MatchProxyError: If the upstream fetch fails
        """
        cached = await self._store.get(match_id)
        if cached is not None:
            logger.info("Returning cached match %s", match_id)
            return cached

        logger.info("Cache miss for match %s", match_id)
        record = await self._upstream.get_match(match_id)

        try:
            await self._store.put(match_id, record)
        except StorageFailure as e:
            logger.warning("Could not cache match %s: %s", match_id, e)

        return record

    async def match_history_summary(self) -> MatchSummary:
        """Summarize the fixture match for the configured participant.

        Returns:
            MatchSummary of the fixture participant

        Raises:
            MalformedInput: If the fixture is missing or not valid JSON
            ParticipantNotFound: If the participant is not in the fixture
        """
        try:
            raw = await asyncio.to_thread(self._fixture_path.read_text, encoding="utf-8")
        except OSError as e:
            raise MalformedInput(f"Cannot read match fixture {self._fixture_path}: {e}") from e

        try:
            record = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedInput(f"Match fixture {self._fixture_path} is not valid JSON") from e

        return normalize(record, self._fixture_participant)

    async def is_healthy(self) -> bool:
        """Check if the match cache is reachable."""
        return await self._store.health_check()


def game_mode_of(record: MatchRecord) -> str | None:
    """Return info.gameMode of a match record, or None if absent."""
    info = record.get("info")
    if isinstance(info, dict):
        return info.get("gameMode")
    return None
