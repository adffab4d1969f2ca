# haystack_fuzzy/matching/fuzzy/levenshtein.py
from __future__ import annotations

"""
levenshtein.py

Does: Levenshtein edit distance (unit-cost insert/delete/substitute) between two strings.
Returns: distance() -> int >= 0, within_distance() -> bool.
Used by: fuzzy.matcher (threshold test) and fuzzy.ranking (sort key).
"""

from functools import lru_cache

from rapidfuzz.distance import Levenshtein

__all__ = ["distance", "within_distance"]

__docformat__ = "google"


@lru_cache(maxsize=50_000)
def distance(a: str, b: str) -> int:
    """
    Does: Minimum number of single-character edits turning `a` into `b`.
          distance("", s) == len(s); symmetric; distance(a, a) == 0.
    Returns: int.
    """
    return Levenshtein.distance(a, b)


def within_distance(a: str, b: str, max_distance: int) -> bool:
    """
    Does: True iff distance(a, b) <= max_distance; stops early once the cutoff is exceeded.
    Returns: Boolean.
    """
    if max_distance < 0:
        return False
    if abs(len(a) - len(b)) > max_distance:
        return False
    return Levenshtein.distance(a, b, score_cutoff=max_distance) <= max_distance
