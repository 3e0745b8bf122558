"""Upstream match data protocol.

Defines the interface of the authoritative source of account and match
data (the Riot API in production, fakes in tests).
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MatchDataProvider(Protocol):
    """Protocol for upstream match data sources."""

    async def get_account(self, game_name: str, tag_line: str) -> dict[str, Any]:
        """Resolve a Riot ID (gameName#tagLine) to an account payload."""
        ...

    async def get_match_ids(self, puuid: str, count: int = 20, start: int = 0) -> list[str]:
        """List the most recent match identifiers for a player."""
        ...

    async def get_match(self, match_id: str) -> dict[str, Any]:
        """Fetch the full record of one match."""
        ...
