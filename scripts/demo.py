#!/usr/bin/env python3
"""
Demo script for the match proxy.

Resolves a Riot ID, lists the player's recent matches, fetches one match
twice to show the cache at work, and prints a summary of each match for
that player. Needs RIOT_API_KEY and a running Redis (REDIS_URL).

Usage:
    python scripts/demo.py <gameName> <tagLine> [count]
"""

import asyncio
import sys
import time

from match_proxy import MatchProxyError, MatchService, RedisMatchRepository, RiotApiClient, normalize
from match_proxy.logging_config import configure_logging


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo(game_name: str, tag_line: str, count: int) -> None:
    repository = RedisMatchRepository.create()
    upstream = RiotApiClient.create()
    service = MatchService.create(store=repository, upstream=upstream)

    try:
        print_section("Account")
        account = await service.get_account(game_name, tag_line)
        print(f"  {account['gameName']}#{account['tagLine']} -> {account['puuid']}")

        print_section(f"Last {count} matches")
        batch = await service.list_matches(account["puuid"], count=count)
        for match in batch.matches:
            summary = normalize(match, account["gameName"])
            print(
                f"  {match['metadata']['matchId']:<16} {summary.game_mode:<10} "
                f"{summary.outcome.value:<5} {summary.duration:>6}  KDA {summary.kda:<9} CS {summary.cs}"
            )
        for failure in batch.failures:
            print(f"  ✗ {failure.match_id}: {failure.message}")

        if not batch.matches:
            return

        print_section("Cache")
        match_id = batch.matches[0]["metadata"]["matchId"]
        for attempt in ("first", "second"):
            start_time = time.time()
            await service.get_match(match_id)
            print(f"  {attempt} fetch of {match_id}: {(time.time() - start_time) * 1000:.1f}ms")

    except MatchProxyError as e:
        print(f"\n  ✗ {type(e).__name__}: {e}")
    finally:
        await upstream.close()
        await repository.close()


def main() -> None:
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(1)

    configure_logging("WARNING")
    count = int(sys.argv[3]) if len(sys.argv) > 3 else 5
    asyncio.run(demo(sys.argv[1], sys.argv[2], count))


if __name__ == "__main__":
    main()
