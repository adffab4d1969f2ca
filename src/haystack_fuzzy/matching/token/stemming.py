# haystack_fuzzy/matching/token/stemming.py
"""
stemming.py

Does: Pluggable token stemmers: a one-letter plural stripper and NLTK's Porter stemmer.
Returns: strip_plural(), porter_stem(), get_stemmer(name).
Used by: token.normalize when SearchOptions.stemming is set.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from nltk.stem import PorterStemmer

__all__ = ["strip_plural", "porter_stem", "get_stemmer", "DEFAULT_STEMMER", "STEMMERS"]

_porter = PorterStemmer()


def strip_plural(token: str) -> str:
    """
    Does: Minimal stemmer, strip a single trailing "s" or "S" and nothing else
          ("ads" -> "ad", "glass" -> "glas").
    Returns: Token without its last "s"; non-str input gives "".
    """
    if not isinstance(token, str):
        return ""
    if token.endswith(("s", "S")):
        return token[:-1]
    return token


@lru_cache(maxsize=20_000)
def porter_stem(token: str) -> str:
    """
    Does: Porter-stem a token (case kept unless the token is all lower-case).
          Porter works on suffix rules, not a dictionary, so it over-stems some
          words: "july" -> "juli", "happy" -> "happi". Only the query is stemmed,
          so with flexibility=0 `search("july", ["July"], stemming=True)` finds
          nothing; keep flexibility >= 1 or pass stemmer=strip_plural.
    Returns: str.
    """
    if not token:
        return token
    return _porter.stem(token, to_lowercase=token.islower())


STEMMERS: dict[str, Callable[[str], str]] = {
    "porter": porter_stem,
    "plural": strip_plural,
}

DEFAULT_STEMMER = porter_stem


def get_stemmer(name: str) -> Callable[[str], str]:
    """
    Does: Resolve a stemmer by name ("porter" | "plural").
    Returns: Callable[[str], str]; raises KeyError for unknown names.
    """
    try:
        return STEMMERS[name.lower().strip()]
    except KeyError:
        raise KeyError(f"Unknown stemmer {name!r} (known: {', '.join(sorted(STEMMERS))})") from None
