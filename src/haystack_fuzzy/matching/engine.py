# engine.py
from __future__ import annotations

"""
engine.py
=========

Does: Orchestrate a fuzzy search: validate inputs, normalize the query,
      flatten the candidate pool, match, then dedupe/rank/cap.
Returns:
  - Haystack(options).search(query, source, limit) -> list[str]
  - Haystack(options).asearch(...)                 -> list[str] (awaitable stemmers)
  - search(), asearch(), tokenize() module-level helpers
Used by: Library callers and the demo CLI.
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Union

from haystack_fuzzy.matching.errors import HaystackError, InvalidQuery
from haystack_fuzzy.matching.fuzzy import finalize, match_all
from haystack_fuzzy.matching.options import SearchOptions, merge_options
from haystack_fuzzy.matching.source import SourceKind, classify, flatten_leaves
from haystack_fuzzy.matching.token import (
    DEFAULT_DELIMITER,
    NormalizedQuery,
    normalize_query,
    prepare_query,
)
from haystack_fuzzy.matching.token import tokenize as _tokenize
from haystack_fuzzy.matching.token.stemming import DEFAULT_STEMMER
from haystack_fuzzy.matching.types import AsyncStemmer, SearchPool, Stemmer
from haystack_fuzzy.matching.utils.log import trace_stage

__all__ = ["Haystack", "search", "asearch", "tokenize"]

logger = logging.getLogger(__name__)

StemmerLike = Union[Stemmer, AsyncStemmer]


def _validate(query: object, source: object, limit: int) -> SourceKind:
    """Raise InvalidQuery / InvalidSource (ValueError for a bad limit); return the pool kind."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be an int >= 1, got {limit!r}")
    if not isinstance(query, str) or not query.strip():
        raise InvalidQuery(f"Invalid search query: {query!r}")
    return classify(source)


class Haystack:
    """Fuzzy search over lists, nested mappings, or delimited strings.

    Options may be a mapping (camelCase or snake_case keys, merged over the
    defaults) or a ready SearchOptions; keyword overrides are applied last.
    """

    def __init__(
        self,
        options: SearchOptions | Mapping[str, Any] | None = None,
        *,
        stemmer: StemmerLike | None = None,
        **overrides: Any,
    ) -> None:
        if isinstance(options, SearchOptions):
            base = options
        else:
            base = merge_options(options)
        self.options: SearchOptions = base.with_overrides(overrides)
        self.stemmer: StemmerLike = stemmer or DEFAULT_STEMMER

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"

    # ── Public API ───────────────────────────────────────────────────────────
    def search(
        self,
        query: str,
        source: SearchPool,
        limit: int = 1,
        *,
        debug: bool = False,
    ) -> list[str]:
        """
        Does: Return up to `limit` matches of `query` in `source`, closest first.
        Returns: list[str]; [] on no match or on an invalid query/source
                 (the reason is logged at ERROR level).
        """
        try:
            kind = _validate(query, source, limit)
        except HaystackError as e:
            logger.error("%s", e)
            return []

        normalized = normalize_query(query, self.options, self._sync_stemmer)
        return self._run(normalized, source, kind, limit, debug)

    async def asearch(
        self,
        query: str,
        source: SearchPool,
        limit: int = 1,
        *,
        debug: bool = False,
    ) -> list[str]:
        """Does: Same contract as search(); awaits the stemmer when it returns an awaitable."""
        try:
            kind = _validate(query, source, limit)
        except HaystackError as e:
            logger.error("%s", e)
            return []

        normalized = prepare_query(query, self.options)
        if self.options.stemming and normalized.query:
            tokens = []
            for tok in normalized.tokens:
                stemmed = self.stemmer(tok)
                if inspect.isawaitable(stemmed):
                    stemmed = await stemmed
                tokens.append(stemmed)
            normalized = NormalizedQuery(" ".join(tokens), tokens)
        return self._run(normalized, source, kind, limit, debug)

    def tokenize(self, text: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
        """Does: Split `text` on `delimiter`. Returns: list[str]."""
        return _tokenize(text, delimiter)

    # ── Internals ────────────────────────────────────────────────────────────
    def _sync_stemmer(self, token: str) -> str:
        stemmed = self.stemmer(token)
        if inspect.isawaitable(stemmed):
            if inspect.iscoroutine(stemmed):
                stemmed.close()
            raise TypeError("stemmer returned an awaitable; use asearch() instead")
        return stemmed

    def _run(
        self,
        normalized: NormalizedQuery,
        source: SearchPool,
        kind: SourceKind,
        limit: int,
        debug: bool,
    ) -> list[str]:
        query, tokens = normalized
        if debug:
            trace_stage("normalize", query=query, tokens=tokens, stemming=self.options.stemming)
        if not query:
            logger.debug("Query is empty after normalization; nothing to search")
            return []

        leaves = flatten_leaves(source, kind)
        if debug:
            trace_stage("source", kind=kind.value, leaves=len(leaves))

        matches = match_all(leaves, query, tokens, self.options)
        if debug:
            trace_stage("match", flexibility=self.options.flexibility, hits=matches)

        results = finalize(matches, query, limit)
        if debug:
            trace_stage("rank", limit=limit, results=results)
        return results


# ── Module-level helpers ─────────────────────────────────────────────────────
def search(
    query: str,
    source: SearchPool,
    limit: int = 1,
    *,
    stemmer: StemmerLike | None = None,
    **options: Any,
) -> list[str]:
    """Does: One-shot Haystack(**options).search(...). Returns: list[str]."""
    return Haystack(options, stemmer=stemmer).search(query, source, limit)


async def asearch(
    query: str,
    source: SearchPool,
    limit: int = 1,
    *,
    stemmer: StemmerLike | None = None,
    **options: Any,
) -> list[str]:
    return await Haystack(options, stemmer=stemmer).asearch(query, source, limit)


def tokenize(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    return _tokenize(text, delimiter)
