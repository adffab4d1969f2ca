"""
haystack_fuzzy
==============

Does: Root package for the in-process fuzzy-matching engine.
Returns: Re-exports Haystack, search, tokenize, SearchOptions and the error types.
Used by: All imports starting from `haystack_fuzzy.*`.
"""

from haystack_fuzzy.matching import (
    DEFAULT_OPTIONS,
    Haystack,
    HaystackError,
    InvalidQuery,
    InvalidSource,
    SearchOptions,
    asearch,
    merge_options,
    search,
    tokenize,
)

__all__: list[str] = [
    "Haystack",
    "search",
    "asearch",
    "tokenize",
    "SearchOptions",
    "DEFAULT_OPTIONS",
    "merge_options",
    "HaystackError",
    "InvalidQuery",
    "InvalidSource",
]
__version__ = "1.0.0"
__docformat__ = "google"
