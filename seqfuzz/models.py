"""Result types for fuzzy matching."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one candidate against a query.

    ``positions`` holds the indices into the candidate where query
    characters were located, in increasing order. For a non-match it may
    be a partial (greedy prefix) alignment or empty.
    """

    matched: bool
    score: int
    positions: tuple[int, ...] = ()
