# haystack_fuzzy/matching/token/tokenize.py
"""
tokenize.

Does: Split text on a literal delimiter (or an opt-in compiled regex).
Returns: tokenize() -> list[str], empty tokens preserved like str.split.
Used by: Query normalization, scalar source flattening, engine.Haystack.tokenize.
"""

from __future__ import annotations

import re

__all__ = ["DEFAULT_DELIMITER", "tokenize"]

DEFAULT_DELIMITER = " "


def tokenize(text: str, delimiter: str | re.Pattern[str] = DEFAULT_DELIMITER) -> list[str]:
    """
    Does: Split `text` on every occurrence of `delimiter`.
          Consecutive delimiters yield empty tokens ("a  b" → ["a", "", "b"]).
    Returns: Ordered list of tokens.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects a str, got {type(text).__name__}")
    if isinstance(delimiter, re.Pattern):
        return delimiter.split(text)
    if delimiter == "":
        raise ValueError("tokenize() delimiter must not be empty")
    return text.split(delimiter)
