"""Match storage protocol.

Defines the interface for any persistent store that can hold raw match
documents keyed by match identifier.

Implementations can include:
- Redis (default)
- MongoDB
- Any other document or key-value store
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MatchStore(Protocol):
    """Protocol for match cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    async def get(self, match_id: str) -> dict[str, Any] | None:
        """Look up a cached match.

        Args:
            match_id: The Riot match identifier

        Returns:
            The cached match record, or None if the match is not cached

        Raises:
            StorageFailure: If the store cannot be read
        """
        ...

    async def put(self, match_id: str, record: dict[str, Any]) -> None:
        """Cache a match record. A later put for the same key wins.

        Args:
            match_id: The Riot match identifier
            record: The raw match record

        Raises:
            StorageFailure: If the store cannot be written
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
