"""Result of a fan-out match fetch."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MatchFetchFailure:
    """One match that could not be fetched during a fan-out.

    Attributes:
        match_id: The match that failed
        message: Why it failed
        status_code: Upstream status code when the Riot API rejected the request
    """

    match_id: str
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class MatchBatch:
    """Matches fetched for a player, in the order Riot listed their IDs."""

    matches: list[dict[str, Any]] = field(default_factory=list)
    failures: list[MatchFetchFailure] = field(default_factory=list)

    @property
    def failed_ids(self) -> list[str]:
        return [failure.match_id for failure in self.failures]
