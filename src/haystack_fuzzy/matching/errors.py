# haystack_fuzzy/matching/errors.py
"""
errors.py.

Does: Error taxonomy for rejected search inputs.
Used by: engine.Haystack (raised internally, caught once per call, logged, turned into []).
"""

from __future__ import annotations

__all__ = ["HaystackError", "InvalidQuery", "InvalidSource"]


class HaystackError(Exception):
    """Base class for search input errors."""


class InvalidQuery(HaystackError, ValueError):
    """Raise when the query is not a string or is blank."""


class InvalidSource(HaystackError, TypeError):
    """Raise when the candidate pool is not a sequence, mapping, or string."""
