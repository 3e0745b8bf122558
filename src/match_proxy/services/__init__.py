"""Service layer for business logic.

This layer contains the core retrieval logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from match_proxy.services import MatchService, normalize

    service = MatchService.create(store=store, upstream=upstream)
    summary = normalize(match_record, "lolarmon1")
    ```
"""

from .match_normalizer import normalize
from .match_service import MatchService

__all__ = [
    "MatchService",
    "normalize",
]
