"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_entry import MatchCacheEntry
from .match_batch import MatchBatch, MatchFetchFailure
from .match_summary import MatchRecord, MatchSummary, Outcome

__all__ = [
    "MatchRecord",
    "MatchSummary",
    "Outcome",
    "MatchCacheEntry",
    "MatchBatch",
    "MatchFetchFailure",
]
