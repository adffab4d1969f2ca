# src/haystack_fuzzy/matching/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing edit distance, leaf matching, and rank/dedupe.
Returns: Public API for distance checks, match collection, and final ranking.
Used by: engine.Haystack and callers composing their own pipeline.
"""

from __future__ import annotations

# ── Distance ─────────────────────────────────────────────────────────────────
from .levenshtein import (
    distance,
    within_distance,
)

# ── Matching ─────────────────────────────────────────────────────────────────
from .matcher import (
    is_token_match,
    match_all,
)

# ── Ranking ──────────────────────────────────────────────────────────────────
from .ranking import (
    dedupe,
    finalize,
    rank,
)

__all__ = [
    # Distance
    "distance",
    "within_distance",
    # Matching
    "is_token_match",
    "match_all",
    # Ranking
    "dedupe",
    "rank",
    "finalize",
]

__docformat__ = "google"
