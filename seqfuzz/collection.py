"""Apply the matcher across a collection of items."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .config import DEFAULT_CONFIG, ScoringConfig
from .matcher import match
from .models import MatchResult

logger = logging.getLogger(__name__)

__all__ = ["fuzzy_filter", "match_all"]

T = TypeVar("T")


def _identity(item: Any) -> str:
    return item


def match_all(
    items: Iterable[T],
    query: str,
    accessor: Callable[[T], str] = _identity,
    *,
    filter: bool = False,
    sort: bool = False,
    metadata: bool = True,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[tuple[T, MatchResult]] | list[T]:
    """Match query against every item.

    Args:
        items: Items to match; order is preserved unless sorting.
        query: String the user typed.
        accessor: Extracts the string to match from an item.
        filter: Drop items that don't match.
        sort: Order by score, highest first. Equal scores keep input order.
        metadata: Return ``(item, MatchResult)`` pairs. When False, return
            bare items.
        config: Scoring weights.

    Returns:
        List of ``(item, MatchResult)`` pairs, or of items if metadata is False.

    Example:
        >>> match_all(["Hello Goodbye", "Hell on Wheels", "Hello, world!"], "hellw",
        ...           filter=True, sort=True, metadata=False)
        ['Hello, world!', 'Hell on Wheels']
    """
    results = [(item, match(accessor(item), query, config)) for item in items]
    total = len(results)

    if filter:
        results = [pair for pair in results if pair[1].matched]
    if sort:
        # sorted() is stable, and reverse=True keeps ties in input order
        results = sorted(results, key=lambda pair: pair[1].score, reverse=True)

    logger.debug("Matched %r against %d items: %d kept", query, total, len(results))

    if not metadata:
        return [item for item, _ in results]
    return results


def fuzzy_filter(
    items: Iterable[T],
    query: str,
    accessor: Callable[[T], str] = _identity,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[T]:
    """Return only the items matching query, best match first.

    Example:
        >>> items = [(1, "Hello Goodbye"), (2, "Hell on Wheels"), (3, "Hello, world!")]
        >>> fuzzy_filter(items, "hellw", lambda item: item[1])
        [(3, 'Hello, world!'), (2, 'Hell on Wheels')]
    """
    return match_all(items, query, accessor, filter=True, sort=True, metadata=False, config=config)
