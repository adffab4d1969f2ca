# haystack_fuzzy/matching/types.py
from __future__ import annotations

from collections.abc import Awaitable, Mapping, Sequence
from typing import Protocol, Union

"""
types.py.

Does: Define lightweight structural Protocols and aliases used for type hints
across the normalizer, source adapter, and engine.
"""


class Stemmer(Protocol):
    def __call__(self, token: str) -> str: ...


class AsyncStemmer(Protocol):
    def __call__(self, token: str) -> Awaitable[str]: ...


SearchPool = Union[Sequence[object], Mapping[object, object], str]


__all__ = ["Stemmer", "AsyncStemmer", "SearchPool"]

__docformat__ = "google"
