"""Match cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MatchCacheEntry:
    """A match document as held by the cache.

    Attributes:
        match_id: Riot match identifier (unique per entry)
        data: The raw match record exactly as fetched
        cached_at: When the entry was written (Unix timestamp)
    """

    match_id: str
    data: dict[str, Any]
    cached_at: float

    def to_document(self) -> dict[str, Any]:
        return {"matchId": self.match_id, "data": self.data, "cachedAt": self.cached_at}

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "MatchCacheEntry":
        return cls(
            match_id=document["matchId"],
            data=document["data"],
            cached_at=float(document.get("cachedAt", 0)),
        )
