"""Reshape raw Riot match records into MatchSummary entities."""

from typing import Any

from match_proxy.entities import MatchRecord, MatchSummary, Outcome
from match_proxy.errors import MalformedInput, ParticipantNotFound

ITEM_SLOTS = 6


def format_duration(seconds: int) -> str:
    """Format a game length in seconds as "M:SS" (125 -> "2:05")."""
    return f"{seconds // 60}:{seconds % 60:02d}"


def cs_per_minute(creep_score: int, seconds: int) -> str | None:
    """Creep score per minute with one decimal, or None for a zero-length game."""
    if seconds <= 0:
        return None
    return f"{creep_score / (seconds / 60):.1f}"


def find_participant(participants: list[dict[str, Any]], participant_key: str) -> dict[str, Any]:
    """Find the participant whose display name equals participant_key.

    Matches summonerName first, then riotIdGameName for records where
    Riot no longer fills in summoner names.

    Raises:
        ParticipantNotFound: If nobody in the match has that name
        MalformedInput: If a participant entry is not an object
    """
    if not all(isinstance(participant, dict) for participant in participants):
        raise MalformedInput("Match participants must be JSON objects")

    for field_name in ("summonerName", "riotIdGameName"):
        for participant in participants:
            if participant.get(field_name) == participant_key:
                return participant
    raise ParticipantNotFound(participant_key)


def _int(participant: dict[str, Any], key: str) -> int:
    try:
        return int(participant[key])
    except KeyError as e:
        raise MalformedInput(f"Participant is missing '{key}'") from e
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"Participant field '{key}' is not a number") from e


def _item(participant: dict[str, Any], slot: int) -> int:
    value = participant.get(f"item{slot}")
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"Participant field 'item{slot}' is not a number") from e


def _runes(participant: dict[str, Any]) -> tuple[int, ...]:
    try:
        styles = participant["perks"]["styles"]
        return tuple(int(style["selections"][0]["perk"]) for style in styles)
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedInput("Participant perks are malformed") from e


def normalize(record: MatchRecord, participant_key: str) -> MatchSummary:
    """Build the summary of one participant's game.

    Args:
        record: Raw match record (Riot match-v5 shape)
        participant_key: Display name of the participant to summarize

    Returns:
        The participant's MatchSummary

    Raises:
        ParticipantNotFound: If no participant has that name
        MalformedInput: If the record is missing required fields
    """
    info = record.get("info") if isinstance(record, dict) else None
    if not isinstance(info, dict):
        raise MalformedInput("Match record has no 'info' object")

    participants = info.get("participants")
    if not isinstance(participants, list):
        raise MalformedInput("Match record has no participant list")

    participant = find_participant(participants, participant_key)

    game_mode = info.get("gameMode")
    if not isinstance(game_mode, str):
        raise MalformedInput("Match record has no 'gameMode'")

    win = participant.get("win")
    if not isinstance(win, bool):
        raise MalformedInput("Participant is missing 'win'")

    seconds = _int(info, "gameDuration")
    creep_score = _int(participant, "totalMinionsKilled")

    return MatchSummary(
        game_mode=game_mode,
        outcome=Outcome.WIN if win else Outcome.LOSS,
        duration=format_duration(seconds),
        kda=f"{_int(participant, 'kills')}/{_int(participant, 'deaths')}/{_int(participant, 'assists')}",
        creep_score=creep_score,
        cs_per_minute=cs_per_minute(creep_score, seconds),
        champion_level=_int(participant, "champLevel"),
        champion_id=_int(participant, "championId"),
        item_ids=tuple(_item(participant, slot) for slot in range(ITEM_SLOTS)),
        summoner_spells=(_int(participant, "summoner1Id"), _int(participant, "summoner2Id")),
        runes=_runes(participant),
        vision_score=_int(participant, "visionScore"),
        tags=(),
    )
