# haystack_fuzzy/matching/source/__init__.py
"""
source.

Does: Facade over candidate-pool classification and leaf flattening.
Used by: engine.Haystack.
"""

from __future__ import annotations

from .adapter import SourceKind, classify, flatten_leaves, iter_leaves

__all__ = ["SourceKind", "classify", "flatten_leaves", "iter_leaves"]
