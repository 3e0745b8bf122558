"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from match_proxy.config import settings


class MatchListQuery(BaseModel):
    """Query parameters for GET /api/matches/{puuid}."""

    count: int = Field(
        settings.default_match_count,
        description="Number of recent matches to fetch",
        ge=1,
        le=100,
    )
    mode: str | None = Field(
        None,
        description="Only return matches with exactly this game mode (case-sensitive, e.g. 'ARAM')",
    )
