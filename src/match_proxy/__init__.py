"""Match Proxy - League of Legends match data proxy with match caching.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (MatchStore, MatchDataProvider)
    - repositories: Data access implementations (Redis, Riot API)
    - services: Retrieval orchestration and match normalization
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from match_proxy import MatchService, RedisMatchRepository, RiotApiClient

    service = MatchService.create(
        store=RedisMatchRepository.create(),
        upstream=RiotApiClient.create(),
    )
    ```

For HTTP API:
    ```python
    from match_proxy.api.app import app
    ```
"""

__version__ = "0.1.0"

from match_proxy.config import get_redis_client, settings
from match_proxy.entities import MatchBatch, MatchCacheEntry, MatchSummary, Outcome
from match_proxy.errors import (
    MalformedInput,
    MatchProxyError,
    ParticipantNotFound,
    StorageFailure,
    UpstreamRejected,
    UpstreamTimeout,
    UpstreamUnavailable,
)
from match_proxy.handlers import MatchHandler
from match_proxy.protocols import MatchDataProvider, MatchStore
from match_proxy.repositories import RedisMatchRepository, RiotApiClient
from match_proxy.services import MatchService, normalize

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "MatchStore",
    "MatchDataProvider",
    # Services (business logic)
    "MatchService",
    "normalize",
    # Handlers (HTTP)
    "MatchHandler",
    # Repositories (data access)
    "RedisMatchRepository",
    "RiotApiClient",
    # Entities (domain models)
    "MatchSummary",
    "Outcome",
    "MatchCacheEntry",
    "MatchBatch",
    # Errors
    "MatchProxyError",
    "UpstreamUnavailable",
    "UpstreamTimeout",
    "UpstreamRejected",
    "StorageFailure",
    "ParticipantNotFound",
    "MalformedInput",
]
