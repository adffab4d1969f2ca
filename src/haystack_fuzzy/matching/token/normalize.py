# haystack_fuzzy/matching/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Query normalization: stop words, exclusions, case, stemming
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Turn a raw query into its canonical form and token list, in a fixed order:
      stop words → exclusions → trim/case-fold → split → stemming.
Returns: remove_stop_words(), remove_exclusions(), prepare_query(),
         stem_tokens(), normalize_query() -> NormalizedQuery.
Used by: engine.Haystack.search / asearch.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import NamedTuple

from haystack_fuzzy.matching.options import SearchOptions
from haystack_fuzzy.matching.token.stemming import DEFAULT_STEMMER
from haystack_fuzzy.matching.token.tokenize import DEFAULT_DELIMITER, tokenize

__all__ = [
    "STOP_WORDS",
    "NormalizedQuery",
    "remove_stop_words",
    "remove_exclusions",
    "prepare_query",
    "stem_tokens",
    "normalize_query",
]

STOP_WORDS: frozenset[str] = frozenset({"the", "a", "to", "on", "in", "is", "of", "and"})


class NormalizedQuery(NamedTuple):
    query: str
    tokens: list[str]


# ──────────────────────────────────────────────────────────────
# 1) Individual steps
# ──────────────────────────────────────────────────────────────


def remove_stop_words(query: str) -> str:
    """
    Does: Drop space-separated words found in STOP_WORDS (case-insensitive).
    Returns: Remaining words joined by single spaces.
    """
    return " ".join(w for w in tokenize(query) if w.lower() not in STOP_WORDS)


def remove_exclusions(query: str, exclusions: Iterable[str | re.Pattern[str]]) -> str:
    """
    Does: Remove every occurrence of each exclusion, in order.
          str → literal removal; compiled pattern → pattern.sub("").
    Returns: Query with exclusions stripped (not trimmed).
    """
    for item in exclusions:
        if isinstance(item, re.Pattern):
            query = item.sub("", query)
        elif item:
            query = query.replace(item, "")
    return query


def stem_tokens(tokens: Iterable[str], stemmer: Callable[[str], str]) -> list[str]:
    out = []
    for tok in tokens:
        stemmed = stemmer(tok)
        if not isinstance(stemmed, str):
            raise TypeError(
                f"stemmer must return str, got {type(stemmed).__name__} "
                "(use asearch() for asynchronous stemmers)"
            )
        out.append(stemmed)
    return out


# ──────────────────────────────────────────────────────────────
# 2) Full normalization
# ──────────────────────────────────────────────────────────────


def prepare_query(query: str, options: SearchOptions) -> NormalizedQuery:
    """
    Does: Steps 1–4 (stop words, exclusions, trim + case-fold, split). No stemming.
    Returns: NormalizedQuery(query, tokens).
    """
    if options.ignore_stop_words:
        query = remove_stop_words(query)

    if options.exclusions:
        query = remove_exclusions(query, options.exclusions)

    query = query.strip()
    if not options.case_sensitive:
        query = query.lower()

    return NormalizedQuery(query, tokenize(query, DEFAULT_DELIMITER))


def normalize_query(
    query: str,
    options: SearchOptions,
    stemmer: Callable[[str], str] | None = None,
) -> NormalizedQuery:
    """
    Does: Full normalization; with options.stemming, stems every token and
          rejoins them to refresh the canonical query.
    Returns: NormalizedQuery(query, tokens).
    """
    prepared = prepare_query(query, options)
    if not options.stemming or not prepared.query:
        return prepared

    tokens = stem_tokens(prepared.tokens, stemmer or DEFAULT_STEMMER)
    return NormalizedQuery(" ".join(tokens), tokens)
