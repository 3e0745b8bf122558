"""
Tests for match normalization.
"""

import copy

import pytest

from match_proxy.entities import Outcome
from match_proxy.errors import MalformedInput, ParticipantNotFound
from match_proxy.services import normalize
from match_proxy.services.match_normalizer import cs_per_minute, format_duration


def with_participant(record, **overrides):
    """Copy a record and override fields of its first participant."""
    record = copy.deepcopy(record)
    record["info"]["participants"][0].update(overrides)
    return record


def test_normalize_fixture_participant(sample_match):
    """Test the summary of the bundled match."""
    summary = normalize(sample_match, "lolarmon1")

    assert summary.game_mode == "CLASSIC"
    assert summary.outcome is Outcome.WIN
    assert summary.duration == "30:25"
    assert summary.kda == "7/3/12"
    assert summary.creep_score == 182
    assert summary.cs_per_minute == "6.0"
    assert summary.cs == "182 (6.0)"
    assert summary.champion_level == 16
    assert summary.champion_id == 103
    assert summary.item_ids == (6655, 3020, 3165, 4645, 3089, 0)
    assert summary.summoner_spells == (4, 14)
    assert summary.runes == (8112, 8139)
    assert summary.vision_score == 24
    assert summary.tags == ()


def test_normalize_losing_participant(sample_match):
    """Test that a participant on the losing team gets a Loss."""
    summary = normalize(sample_match, "RedSide2")

    assert summary.outcome is Outcome.LOSS
    assert summary.kda == "5/7/5"


def test_normalize_matches_riot_id_game_name(sample_match):
    """Test the riotIdGameName fallback when summonerName is blank."""
    record = with_participant(sample_match, summonerName="", riotIdGameName="NewName")

    summary = normalize(record, "NewName")

    assert summary.champion_id == 103


def test_normalize_unknown_participant(sample_match):
    """Test that a missing participant is reported explicitly."""
    with pytest.raises(ParticipantNotFound) as exc_info:
        normalize(sample_match, "nobody")

    assert exc_info.value.participant_key == "nobody"


def test_participant_name_is_case_sensitive(sample_match):
    """Test that names are compared exactly."""
    with pytest.raises(ParticipantNotFound):
        normalize(sample_match, "LOLARMON1")


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(125, "2:05"), (60, "1:00"), (59, "0:59"), (0, "0:00"), (3600, "60:00")],
)
def test_format_duration(seconds, expected):
    """Test M:SS formatting with zero-padded seconds."""
    assert format_duration(seconds) == expected


def test_duration_and_kda_follow_record(sample_match):
    """Test duration and KDA for arbitrary stats."""
    record = with_participant(sample_match, kills=0, deaths=11, assists=2)
    record["info"]["gameDuration"] = 125

    summary = normalize(record, "lolarmon1")

    assert summary.duration == "2:05"
    assert summary.kda == "0/11/2"


def test_cs_per_minute_example():
    """Test 200 minions over 10 minutes."""
    assert cs_per_minute(200, 600) == "20.0"


def test_cs_per_minute_zero_duration(sample_match):
    """Test that a zero-length game has no per-minute rate."""
    record = copy.deepcopy(sample_match)
    record["info"]["gameDuration"] = 0

    summary = normalize(record, "lolarmon1")

    assert summary.cs_per_minute is None
    assert summary.cs == "182"
    assert summary.duration == "0:00"


def test_missing_items_are_zero(sample_match):
    """Test that absent item slots become 0."""
    record = copy.deepcopy(sample_match)
    del record["info"]["participants"][0]["item4"]
    record["info"]["participants"][0]["item5"] = None

    summary = normalize(record, "lolarmon1")

    assert summary.item_ids == (6655, 3020, 3165, 4645, 0, 0)
    assert len(summary.item_ids) == 6


def test_runes_keep_style_order(sample_match):
    """Test that runes follow the style list order."""
    record = copy.deepcopy(sample_match)
    styles = record["info"]["participants"][0]["perks"]["styles"]
    styles.reverse()

    summary = normalize(record, "lolarmon1")

    assert summary.runes == (8139, 8112)


def test_malformed_perks(sample_match):
    """Test that a style without selections is malformed input."""
    record = copy.deepcopy(sample_match)
    record["info"]["participants"][0]["perks"]["styles"][0]["selections"] = []

    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


def test_missing_stat_field(sample_match):
    """Test that a missing required stat is malformed input."""
    record = copy.deepcopy(sample_match)
    del record["info"]["participants"][0]["kills"]

    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


def test_non_numeric_item(sample_match):
    """Test that an item slot holding a non-number is malformed input."""
    record = with_participant(sample_match, item2="boots")

    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


def test_non_object_participant(sample_match):
    """Test that a participant entry that is not an object is malformed input."""
    record = copy.deepcopy(sample_match)
    record["info"]["participants"].insert(0, None)

    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


def test_missing_game_mode(sample_match):
    """Test that a record without a game mode is malformed input."""
    record = copy.deepcopy(sample_match)
    del record["info"]["gameMode"]

    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


@pytest.mark.parametrize("win", [None, "true", 1])
def test_missing_or_non_boolean_win(sample_match, win):
    """Test that the outcome is never guessed from an absent or non-boolean win flag."""
    record = with_participant(sample_match, win=win)

    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


@pytest.mark.parametrize("record", [{}, {"info": None}, {"info": {"gameMode": "ARAM"}}])
def test_record_without_participants(record):
    """Test records missing info or participants."""
    with pytest.raises(MalformedInput):
        normalize(record, "lolarmon1")


def test_normalize_is_deterministic(sample_match):
    """Test that identical inputs give identical summaries and leave the record untouched."""
    original = copy.deepcopy(sample_match)

    first = normalize(sample_match, "lolarmon1")
    second = normalize(sample_match, "lolarmon1")

    assert first == second
    assert sample_match == original
