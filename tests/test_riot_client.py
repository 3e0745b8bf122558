"""
Tests for the Riot API client against a mocked transport.
"""

import asyncio

import httpx
import pytest

from match_proxy.errors import MalformedInput, UpstreamRejected, UpstreamTimeout, UpstreamUnavailable
from match_proxy.protocols import MatchDataProvider
from match_proxy.repositories import RiotApiClient

BASE_URL = "https://americas.api.riotgames.com"


def make_client(handler) -> tuple[RiotApiClient, list[httpx.Request]]:
    """Build a client whose requests are answered by `handler` and recorded."""
    requests: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    client = RiotApiClient(
        api_key="RGAPI-test",
        base_url=BASE_URL,
        timeout=5.0,
        transport=httpx.MockTransport(recording_handler),
    )
    return client, requests


def call(client: RiotApiClient, method: str, *args, **kwargs):
    """Run one client call and close the client afterwards."""

    async def run():
        try:
            return await getattr(client, method)(*args, **kwargs)
        finally:
            await client.close()

    return asyncio.run(run())


def test_client_satisfies_protocol():
    """Test structural typing against MatchDataProvider."""
    assert isinstance(RiotApiClient(api_key="x"), MatchDataProvider)


def test_get_account_sends_token_and_path():
    """Test the account endpoint and credential header."""
    account = {"puuid": "abc", "gameName": "lolarmon1", "tagLine": "NA1"}
    client, requests = make_client(lambda request: httpx.Response(200, json=account))

    assert call(client, "get_account", "lolarmon1", "NA1") == account

    request = requests[0]
    assert request.method == "GET"
    assert request.headers["X-Riot-Token"] == "RGAPI-test"
    assert request.url.path == "/riot/account/v1/accounts/by-riot-id/lolarmon1/NA1"


def test_get_account_encodes_riot_id():
    """Test that spaces and slashes in a Riot ID stay inside one path segment."""
    client, requests = make_client(lambda request: httpx.Response(200, json={}))

    call(client, "get_account", "Faker Fan/1", "KR 1")

    assert requests[0].url.raw_path.startswith(
        b"/riot/account/v1/accounts/by-riot-id/Faker%20Fan%2F1/KR%201"
    )


def test_get_match_ids_query():
    """Test the match-ID listing request."""
    client, requests = make_client(lambda request: httpx.Response(200, json=["NA1_1", "NA1_2"]))

    assert call(client, "get_match_ids", "puuid-1", count=20) == ["NA1_1", "NA1_2"]

    url = requests[0].url
    assert url.path == "/lol/match/v5/matches/by-puuid/puuid-1/ids"
    assert url.params["start"] == "0"
    assert url.params["count"] == "20"


def test_get_match(sample_match):
    """Test fetching a match record."""
    client, requests = make_client(lambda request: httpx.Response(200, json=sample_match))

    assert call(client, "get_match", "NA1_5012345678") == sample_match
    assert requests[0].url.path == "/lol/match/v5/matches/NA1_5012345678"


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 429, 500, 503])
def test_non_success_status_is_rejected(status_code):
    """Test that non-2xx statuses keep their code and body."""
    client, _ = make_client(lambda request: httpx.Response(status_code, text="nope"))

    with pytest.raises(UpstreamRejected) as exc_info:
        call(client, "get_match", "NA1_1")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.body == "nope"


def test_no_retry_on_failure():
    """Test that a failed request is attempted exactly once."""
    client, requests = make_client(lambda request: httpx.Response(503))

    with pytest.raises(UpstreamRejected):
        call(client, "get_match", "NA1_1")

    assert len(requests) == 1


def test_network_error_is_unavailable():
    """Test that transport errors become UpstreamUnavailable."""

    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    client, _ = make_client(handler)

    with pytest.raises(UpstreamUnavailable) as exc_info:
        call(client, "get_match", "NA1_1")

    assert not isinstance(exc_info.value, UpstreamTimeout)


def test_timeout_is_reported():
    """Test that timeouts become UpstreamTimeout."""

    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client, _ = make_client(handler)

    with pytest.raises(UpstreamTimeout):
        call(client, "get_match", "NA1_1")


def test_invalid_json_body():
    """Test that an undecodable body is malformed input."""
    client, _ = make_client(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(MalformedInput):
        call(client, "get_match", "NA1_1")


def test_unexpected_payload_shape():
    """Test that a non-list ID payload is malformed input."""
    client, _ = make_client(lambda request: httpx.Response(200, json={"ids": []}))

    with pytest.raises(MalformedInput):
        call(client, "get_match_ids", "puuid-1")


def test_close_is_idempotent():
    """Test closing a client that never made a request."""
    client = RiotApiClient(api_key="x")

    asyncio.run(client.close())
    asyncio.run(client.close())
