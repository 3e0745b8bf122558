"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> MongoDB, live Riot API -> fixtures)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from match_proxy.protocols import MatchStore, MatchDataProvider

    store: MatchStore = RedisMatchRepository.create()
    upstream: MatchDataProvider = RiotApiClient.create()
    ```
"""

from .match_data_provider import MatchDataProvider
from .match_store import MatchStore

__all__ = [
    "MatchStore",
    "MatchDataProvider",
]
