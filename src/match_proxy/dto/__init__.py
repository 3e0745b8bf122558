"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import MatchListQuery
from .responses import ErrorResponse, HealthCheckResponse, MatchSummaryResponse, ServiceInfoResponse

__all__ = [
    "MatchListQuery",
    "MatchSummaryResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
