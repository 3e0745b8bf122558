"""Redis implementation of MatchStore.

Each match is stored as one JSON document under "<prefix>:<match_id>".
Entries are written once per cache miss and never updated or deleted by
the service; concurrent writes to the same key are last-write-wins.
"""

import json
import logging
import time
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from match_proxy.config import get_redis_client, settings
from match_proxy.entities import MatchCacheEntry
from match_proxy.errors import StorageFailure

logger = logging.getLogger(__name__)


class RedisMatchRepository:
    """Redis implementation of the MatchStore protocol.

    This class satisfies the MatchStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis match repository.

        Args:
            redis_client: Asyncio Redis client. If None, creates default.
            prefix: Key prefix for match documents.
            ttl: Expiry in seconds for new entries. 0 keeps entries forever.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = prefix or settings.match_cache_prefix
        self._ttl = settings.match_cache_ttl if ttl is None else ttl

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisMatchRepository":
        """Factory method to create RedisMatchRepository with defaults.

        Args:
            redis_client: Client to use. If None, one is built from settings.
            prefix: Key prefix. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisMatchRepository
        """
        return cls(redis_client=redis_client, prefix=prefix, ttl=ttl)

    def _key(self, match_id: str) -> str:
        return f"{self._prefix}:{match_id}"

    async def get(self, match_id: str) -> dict[str, Any] | None:
        """Look up a cached match.

        Args:
            match_id: The Riot match identifier

        Returns:
            The cached match record, or None on a cache miss

        Raises:
            StorageFailure: If Redis is unreachable or the document is corrupt
        """
        try:
            raw = await self._client.get(self._key(match_id))
        except RedisError as e:
            raise StorageFailure(f"Failed to read match {match_id} from cache: {e}") from e

        if raw is None:
            return None

        try:
            entry = MatchCacheEntry.from_document(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise StorageFailure(f"Corrupt cache entry for match {match_id}: {e}") from e

        return entry.data

    async def put(self, match_id: str, record: dict[str, Any]) -> None:
        """Cache a match record.

        Args:
            match_id: The Riot match identifier
            record: The raw match record

        Raises:
            StorageFailure: If Redis cannot be written
        """
        entry = MatchCacheEntry(match_id=match_id, data=record, cached_at=time.time())
        document = json.dumps(entry.to_document())

        try:
            await self._client.set(self._key(match_id), document, ex=self._ttl or None)
        except RedisError as e:
            raise StorageFailure(f"Failed to cache match {match_id}: {e}") from e

        logger.debug("Cached match %s", match_id)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()
