"""
Shared fixtures and fakes for the match proxy tests.
"""

import asyncio
import copy
import json
from pathlib import Path
from typing import Any

import pytest

from match_proxy.errors import StorageFailure

FIXTURE_PATH = Path(__file__).resolve().parents[1] / "data" / "match.json"


def make_match(match_id: str, game_mode: str = "CLASSIC") -> dict[str, Any]:
    """Build a minimal match record."""
    return {
        "metadata": {"matchId": match_id},
        "info": {"gameMode": game_mode, "gameDuration": 600, "participants": []},
    }


class FakeMatchStore:
    """In-memory MatchStore that counts calls."""

    def __init__(self, fail_reads: bool = False, fail_writes: bool = False) -> None:
        self.entries: dict[str, dict[str, Any]] = {}
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.get_calls = 0
        self.put_calls = 0

    async def get(self, match_id: str) -> dict[str, Any] | None:
        self.get_calls += 1
        if self.fail_reads:
            raise StorageFailure("store is down")
        record = self.entries.get(match_id)
        return copy.deepcopy(record) if record is not None else None

    async def put(self, match_id: str, record: dict[str, Any]) -> None:
        self.put_calls += 1
        if self.fail_writes:
            raise StorageFailure("store is down")
        self.entries[match_id] = copy.deepcopy(record)

    async def health_check(self) -> bool:
        return not self.fail_reads


class FakeUpstream:
    """In-memory MatchDataProvider with optional per-match delays and failures."""

    def __init__(
        self,
        matches: dict[str, dict[str, Any]] | None = None,
        match_ids: list[str] | None = None,
        accounts: dict[tuple[str, str], dict[str, Any]] | None = None,
    ) -> None:
        self.matches = matches or {}
        self.match_ids = match_ids if match_ids is not None else list(self.matches)
        self.accounts = accounts or {}
        self.delays: dict[str, float] = {}
        self.failures: dict[str, Exception] = {}
        self.id_list_error: Exception | None = None
        self.match_calls: list[str] = []
        self.completed: list[str] = []
        self.requested_counts: list[int] = []

    async def get_account(self, game_name: str, tag_line: str) -> dict[str, Any]:
        return self.accounts[(game_name, tag_line)]

    async def get_match_ids(self, puuid: str, count: int = 20, start: int = 0) -> list[str]:
        self.requested_counts.append(count)
        if self.id_list_error is not None:
            raise self.id_list_error
        return self.match_ids[start : start + count]

    async def get_match(self, match_id: str) -> dict[str, Any]:
        self.match_calls.append(match_id)
        await asyncio.sleep(self.delays.get(match_id, 0))
        if match_id in self.failures:
            raise self.failures[match_id]
        self.completed.append(match_id)
        return copy.deepcopy(self.matches[match_id])


@pytest.fixture
def fixture_path() -> Path:
    """Path of the bundled match fixture."""
    return FIXTURE_PATH


@pytest.fixture
def sample_match() -> dict[str, Any]:
    """The bundled match fixture as a record."""
    return json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def store() -> FakeMatchStore:
    return FakeMatchStore()


@pytest.fixture
def upstream() -> FakeUpstream:
    matches = {match_id: make_match(match_id) for match_id in ("NA1_1", "NA1_2", "NA1_3")}
    return FakeUpstream(matches=matches)
