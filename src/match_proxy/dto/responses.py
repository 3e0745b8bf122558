"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from match_proxy.entities import MatchSummary


class MatchSummaryResponse(BaseModel):
    """Compact match summary as consumed by the frontend."""

    model_config = ConfigDict(populate_by_name=True)

    game_mode: str = Field(..., alias="gameMode", description="Riot game mode")
    outcome: str = Field(..., description="'Win' or 'Loss'")
    duration: str = Field(..., description="Game length as M:SS")
    kda: str = Field(..., description="Kills/deaths/assists as K/D/A")
    cs: str = Field(..., description="Creep score with per-minute rate, e.g. '200 (20.0)'")
    cs_per_minute: str | None = Field(
        None,
        alias="csPerMinute",
        description="Creep score per minute (null for a zero-length game)",
    )
    champ_level: int = Field(..., alias="champLevel", ge=0)
    champion_id: int = Field(..., alias="championId")
    item_ids: list[int] = Field(..., alias="itemIds", description="Six item slots, 0 = empty")
    summoner_spells: list[int] = Field(..., alias="summonerSpells")
    runes: list[int] = Field(..., description="First selected perk of each rune style")
    vision_score: int = Field(..., alias="visionScore")
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, summary: MatchSummary) -> "MatchSummaryResponse":
        return cls(
            game_mode=summary.game_mode,
            outcome=summary.outcome.value,
            duration=summary.duration,
            kda=summary.kda,
            cs=summary.cs,
            cs_per_minute=summary.cs_per_minute,
            champ_level=summary.champion_level,
            champion_id=summary.champion_id,
            item_ids=list(summary.item_ids),
            summoner_spells=list(summary.summoner_spells),
            runes=list(summary.runes),
            vision_score=summary.vision_score,
            tags=list(summary.tags),
        )


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    error: str = Field(..., description="Human-readable error message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the match cache is reachable")


class ServiceInfoResponse(BaseModel):
    """Response DTO for the API information endpoint."""

    name: str
    version: str
    description: str
    endpoints: dict[str, str]
