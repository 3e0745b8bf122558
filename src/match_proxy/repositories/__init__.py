"""Repository layer for data access.

This layer wraps external dependencies (Redis, the Riot API) behind the
protocol-based interfaces in match_proxy.protocols. Any class implementing
the required methods satisfies the protocol, so services can be tested
with fakes.
"""

from match_proxy.protocols import MatchDataProvider, MatchStore

from .redis_match_repository import RedisMatchRepository
from .riot_client import RiotApiClient

__all__ = [
    "MatchStore",
    "MatchDataProvider",
    "RedisMatchRepository",
    "RiotApiClient",
]
