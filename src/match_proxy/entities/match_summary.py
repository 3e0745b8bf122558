"""Match summary domain entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Raw match payload as decoded from the Riot API (info.participants[], info.gameMode, ...)
MatchRecord = dict[str, Any]


class Outcome(str, Enum):
    """Result of the match for the summarized participant."""

    WIN = "Win"
    LOSS = "Loss"


@dataclass(frozen=True)
class MatchSummary:
    """Compact view of one participant's game.

    Always derived from exactly one MatchRecord and one participant.
    Never persisted.

    Attributes:
        game_mode: Riot game mode (e.g. "CLASSIC", "ARAM")
        outcome: Win or Loss
        duration: Game length formatted as "M:SS"
        kda: Kills/deaths/assists formatted as "K/D/A"
        creep_score: Total minions killed
        cs_per_minute: Creep score per minute with one decimal, None for a zero-length game
        champion_level: Final champion level
        champion_id: Riot champion identifier
        item_ids: The six item slots in order (0 = empty)
        summoner_spells: The two summoner spell identifiers
        runes: First selected perk of each rune style, in style order
        vision_score: Vision score
        tags: Free-form annotations (currently always empty)
    """

    game_mode: str
    outcome: Outcome
    duration: str
    kda: str
    creep_score: int
    cs_per_minute: str | None
    champion_level: int
    champion_id: int
    item_ids: tuple[int, ...]
    summoner_spells: tuple[int, int]
    runes: tuple[int, ...]
    vision_score: int
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def cs(self) -> str:
        """Creep score as shown to players, e.g. "200 (20.0)"."""
        if self.cs_per_minute is None:
            return str(self.creep_score)
        return f"{self.creep_score} ({self.cs_per_minute})"
