"""Score a sequence of matched positions.

The score is ``initial_score`` plus seven independent terms. Each term is
a pure function of the positions, the two strings and the config, so
they can be tested (and tuned) in isolation.
"""

from collections.abc import Sequence

from .config import DEFAULT_CONFIG, ScoringConfig

__all__ = [
    "case_match_bonus",
    "first_letter_bonus",
    "leading_letter_penalty",
    "neighbor_bonus",
    "score",
    "sequential_bonus",
    "string_match_bonus",
    "unmatched_letter_penalty",
]


def leading_letter_penalty(positions: Sequence[int], config: ScoringConfig) -> int:
    """Penalty for starting the match late, clamped at the max penalty."""
    if not positions:
        return config.max_leading_letter_penalty
    return max(config.leading_letter_penalty * positions[0], config.max_leading_letter_penalty)


def sequential_bonus(positions: Sequence[int], config: ScoringConfig) -> int:
    """Bonus for each pair of adjacent matched characters."""
    runs = sum(1 for curr, nxt in zip(positions, positions[1:]) if nxt - curr == 1)
    return runs * config.sequential_bonus


def unmatched_letter_penalty(
    positions: Sequence[int], candidate: str, config: ScoringConfig
) -> int:
    """Penalty for candidate characters left between (and after) matches.

    The trailing pair runs from the last match to the last candidate
    index. When the last match *is* the last index that pair has a gap of
    0 and counts as -1 unmatched letters.
    """
    if not positions:
        return config.unmatched_letter_penalty * len(candidate)

    ends = list(positions[1:])
    ends.append(len(candidate) - 1)
    unmatched = sum(nxt - curr - 1 for curr, nxt in zip(positions, ends) if nxt - curr != 1)
    return unmatched * config.unmatched_letter_penalty


def neighbor_bonus(positions: Sequence[int], candidate: str, config: ScoringConfig) -> int:
    """Bonus for matches that start a word: after a separator or at a camelCase hump."""
    total = 0
    for pos in positions:
        if pos == 0:
            continue
        prev = candidate[pos - 1]
        if config.is_separator(prev):
            total += config.separator_bonus
        elif candidate[pos].isupper() and prev.islower():
            total += config.camel_bonus
    return total


def first_letter_bonus(positions: Sequence[int], config: ScoringConfig) -> int:
    """Bonus when the first candidate character is matched."""
    # positions is increasing, so 0 can only ever be first
    if positions and positions[0] == 0:
        return config.first_letter_bonus
    return 0


def case_match_bonus(
    positions: Sequence[int], candidate: str, query: str, config: ScoringConfig
) -> int:
    """Bonus for every matched character whose case agrees with the query."""
    same_case = sum(1 for q_idx, pos in enumerate(positions) if query[q_idx] == candidate[pos])
    return same_case * config.case_match_bonus


def string_match_bonus(candidate: str, query: str, config: ScoringConfig) -> int:
    """Bonus when candidate and query are equal ignoring case."""
    if candidate.lower() == query.lower():
        return config.string_match_bonus
    return 0


def score(
    positions: Sequence[int],
    candidate: str,
    query: str,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> int:
    """Score matched positions of ``query`` within ``candidate``.

    Args:
        positions: Increasing indices into candidate, one per located
            query character (may be a partial alignment or empty).
        candidate: The string being ranked.
        query: The string the user typed.
        config: Scoring weights.

    Returns:
        Integer score; higher is a better match.
    """
    return (
        config.initial_score
        + leading_letter_penalty(positions, config)
        + sequential_bonus(positions, config)
        + unmatched_letter_penalty(positions, candidate, config)
        + neighbor_bonus(positions, candidate, config)
        + first_letter_bonus(positions, config)
        + case_match_bonus(positions, candidate, query, config)
        + string_match_bonus(candidate, query, config)
    )
