"""Sequential fuzzy matching (Sublime Text style).

    >>> match("Hello, world!", "hellw")
    MatchResult(matched=True, score=187, positions=(0, 1, 2, 3, 7))

The walk is greedy: each query character is bound to its first
case-insensitive occurrence after the previous one. It never backtracks,
so the alignment found is *a* valid one, not necessarily the best scoring
one. Scores are calibrated against this greedy alignment.
"""

from .config import DEFAULT_CONFIG, ScoringConfig
from .models import MatchResult
from .scorer import score

__all__ = ["locate", "match"]


def locate(candidate: str, query: str) -> list[int]:
    """Find positions in candidate where query chars appear in order.

    Args:
        candidate: Text to search in.
        query: Characters to search for.

    Returns:
        Increasing candidate indices, one per query character located.
        Shorter than query if the candidate ran out first.
    """
    # Lowercase per character so indices stay aligned even when a
    # character's lowercase form is longer than one code point.
    cand_lower = [c.lower() for c in candidate]
    query_lower = [c.lower() for c in query]

    positions: list[int] = []
    cand_idx, query_idx = 0, 0
    cand_len, query_len = len(cand_lower), len(query_lower)
    while cand_idx < cand_len and query_idx < query_len:
        if cand_lower[cand_idx] == query_lower[query_idx]:
            positions.append(cand_idx)
            query_idx += 1
        cand_idx += 1
    return positions


def match(candidate: str, query: str, config: ScoringConfig = DEFAULT_CONFIG) -> MatchResult:
    """Match query against candidate and score the result.

    An empty query or an empty candidate is never a match and gets
    ``config.default_empty_score`` without running the scorer.

    Args:
        candidate: String being ranked.
        query: String the user typed.
        config: Scoring weights.

    Returns:
        MatchResult with matched flag, score and matched positions.
    """
    if not query or not candidate:
        return MatchResult(matched=False, score=config.default_empty_score, positions=())

    positions = locate(candidate, query)
    return MatchResult(
        matched=len(positions) == len(query),
        score=score(positions, candidate, query, config),
        positions=tuple(positions),
    )
