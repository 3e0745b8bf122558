"""Error taxonomy for match retrieval.

Every failure the service can report derives from MatchProxyError so the
HTTP layer can turn it into an error envelope in one place.
"""


class MatchProxyError(Exception):
    """Base class for all match proxy errors."""


class UpstreamUnavailable(MatchProxyError):
    """The request to the Riot API could not complete (network/transport)."""


class UpstreamTimeout(UpstreamUnavailable):
    """The Riot API did not answer within the configured time."""


class UpstreamRejected(MatchProxyError):
    """The Riot API answered with a non-success status code.

    Attributes:
        status_code: HTTP status returned by the Riot API
        body: Raw response body, kept for diagnostics
    """

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Riot API responded with status {status_code}")


class StorageFailure(MatchProxyError):
    """The match cache could not be read or written."""


class ParticipantNotFound(MatchProxyError):
    """No participant in the match has the requested name."""

    def __init__(self, participant_key: str) -> None:
        self.participant_key = participant_key
        super().__init__(f"Participant not found in match: {participant_key}")


class MalformedInput(MatchProxyError):
    """A payload did not have the expected shape."""
