# haystack_fuzzy/matching/token/__init__.py
"""
token.
=====

Does: Provide tokenization, query normalization, and pluggable stemmers.
Exports: tokenize, normalize_query, prepare_query, NormalizedQuery, STOP_WORDS,
         strip_plural, porter_stem, get_stemmer
Used by: engine.Haystack and the source adapter (scalar pools).
"""

from __future__ import annotations

from .normalize import (
    STOP_WORDS,
    NormalizedQuery,
    normalize_query,
    prepare_query,
    remove_exclusions,
    remove_stop_words,
    stem_tokens,
)
from .stemming import (
    DEFAULT_STEMMER,
    get_stemmer,
    porter_stem,
    strip_plural,
)
from .tokenize import DEFAULT_DELIMITER, tokenize

__all__ = [
    # tokenize
    "tokenize",
    "DEFAULT_DELIMITER",
    # normalize
    "STOP_WORDS",
    "NormalizedQuery",
    "normalize_query",
    "prepare_query",
    "remove_exclusions",
    "remove_stop_words",
    "stem_tokens",
    # stemming
    "DEFAULT_STEMMER",
    "get_stemmer",
    "porter_stem",
    "strip_plural",
]
