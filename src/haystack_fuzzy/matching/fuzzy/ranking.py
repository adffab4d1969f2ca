# haystack_fuzzy/matching/fuzzy/ranking.py
from __future__ import annotations

"""
ranking.py

Does: Turn the matcher's multiset into the final result list:
      dedupe (first seen wins) → stable sort by distance to the query → cap.
Returns: dedupe(), rank(), finalize().
Used by: engine.Haystack.
"""

from collections.abc import Iterable

from .levenshtein import distance

__all__ = ["dedupe", "rank", "finalize"]


def dedupe(items: Iterable[str]) -> list[str]:
    """Does: Remove duplicates keeping first occurrence order. Returns: list[str]."""
    return list(dict.fromkeys(items))


def rank(items: Iterable[str], query: str) -> list[str]:
    """Does: Stable ascending sort by edit distance to `query`. Returns: list[str]."""
    return sorted(items, key=lambda item: distance(query, item))


def finalize(matches: Iterable[str], canonical_query: str, limit: int = 1) -> list[str]:
    """
    Does: dedupe → rank → keep the first `limit` entries.
    Returns: list[str] (empty when there were no matches); ValueError when limit < 1.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be an int >= 1, got {limit!r}")
    return rank(dedupe(matches), canonical_query)[:limit]
