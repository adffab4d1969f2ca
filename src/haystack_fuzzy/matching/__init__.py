# haystack_fuzzy/matching/__init__.py

"""
matching.
=========

Does: Expose the fuzzy search engine and its building blocks
      (options, errors, token/source/fuzzy subpackages) under one namespace.
Used by: haystack_fuzzy top-level exports and the demo CLI.
"""
from __future__ import annotations

from .engine import Haystack, asearch, search, tokenize
from .errors import HaystackError, InvalidQuery, InvalidSource
from .options import DEFAULT_OPTIONS, SearchOptions, merge_options

__all__ = [
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
__docformat__ = "google"
