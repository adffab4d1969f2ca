# haystack_fuzzy/matching/fuzzy/matcher.py
from __future__ import annotations

"""
matcher.py

Does: Decide, per leaf, whether it matches the normalized query: every token
      contained (exact hit) or edit distance within flexibility (fuzzy hit).
Returns: is_token_match(), match_all() -> list[str] (multiset, not yet ranked).
Used by: engine.Haystack between source flattening and fuzzy.ranking.finalize.
"""

import logging
from collections.abc import Iterable, Sequence

from haystack_fuzzy.matching.options import SearchOptions

from .levenshtein import within_distance

__all__ = ["is_token_match", "match_all"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


def is_token_match(leaf: str, tokens: Sequence[str]) -> bool:
    """
    Does: Order-independent containment: every token is a substring of `leaf`.
    Returns: Boolean.
    """
    return all(tok in leaf for tok in tokens)


def match_all(
    leaves: Iterable[str],
    canonical_query: str,
    tokens: Sequence[str],
    options: SearchOptions,
) -> list[str]:
    """
    Does: Collect the (case-folded unless case_sensitive) leaves that token-match
          or, with flexibility > 0, fall within `flexibility` edits of the query.
    Returns: list[str] in leaf order; duplicates kept for ranking to resolve.
    """
    matches: list[str] = []
    flexibility = options.flexibility

    for raw in leaves:
        leaf = raw if options.case_sensitive else raw.lower()

        if is_token_match(leaf, tokens):
            matches.append(leaf)
        elif flexibility > 0 and within_distance(canonical_query, leaf, flexibility):
            matches.append(leaf)

    log.debug("match_all: %d hit(s) for %r", len(matches), canonical_query)
    return matches
