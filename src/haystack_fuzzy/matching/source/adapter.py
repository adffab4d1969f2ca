# haystack_fuzzy/matching/source/adapter.py
"""
adapter.py

Does: Classify a candidate pool once (sequence / mapping / scalar string) and
      flatten it into the leaf strings the matcher works on.
Returns: SourceKind, classify(), iter_leaves(), flatten_leaves().
Used by: engine.Haystack before matching.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator, Mapping, Sequence

from haystack_fuzzy.matching.errors import InvalidSource
from haystack_fuzzy.matching.token.tokenize import DEFAULT_DELIMITER, tokenize

__all__ = ["SourceKind", "classify", "iter_leaves", "flatten_leaves"]

log = logging.getLogger(__name__)

KeyPath = tuple[object, ...]


class SourceKind(enum.Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


def classify(source: object) -> SourceKind:
    """
    Does: Resolve the pool's shape. str → SCALAR, Mapping → MAPPING,
          any other Sequence (bytes excluded) → SEQUENCE.
    Returns: SourceKind; raises InvalidSource for everything else.
    """
    if isinstance(source, str):
        return SourceKind.SCALAR
    if isinstance(source, Mapping):
        return SourceKind.MAPPING
    if isinstance(source, Sequence) and not isinstance(source, (bytes, bytearray)):
        return SourceKind.SEQUENCE
    raise InvalidSource(f"Invalid source type: {type(source).__name__}")


def _leaf_text(value: object, _seen: frozenset[int] = frozenset()) -> str:
    # sequences nested in a mapping read as comma-joined items; None and
    # a sequence that contains itself read as ""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if id(value) in _seen:
            return ""
        seen = _seen | {id(value)}
        return ",".join("" if v is None else _leaf_text(v, seen) for v in value)
    return str(value)


def _walk_mapping(root: Mapping) -> Iterator[tuple[KeyPath, str]]:
    # Explicit work-list; entries pushed in reverse so pops follow iteration order.
    # on_path holds ids of the mappings enclosing the current entry.
    stack: list[tuple[KeyPath, object, frozenset[int]]] = []
    on_path = frozenset({id(root)})
    for key, value in reversed(list(root.items())):
        stack.append(((key,), value, on_path))

    while stack:
        path, value, seen = stack.pop()
        if isinstance(value, Mapping):
            if id(value) in seen:
                log.debug("Skipping self-referential mapping at %r", path)
                continue
            child_seen = seen | {id(value)}
            for key, child in reversed(list(value.items())):
                stack.append(((*path, key), child, child_seen))
            continue
        yield path, _leaf_text(value)


def iter_leaves(
    source: object, kind: SourceKind | None = None
) -> Iterator[tuple[KeyPath, str]]:
    """
    Does: Yield (key_path, leaf) pairs in depth-first order.
          Sequence/scalar leaves are keyed by their index.
    Returns: Iterator over (tuple, str).
    """
    kind = kind or classify(source)
    if kind is SourceKind.SEQUENCE:
        for i, item in enumerate(source):  # type: ignore[arg-type]
            yield (i,), str(item)
    elif kind is SourceKind.MAPPING:
        yield from _walk_mapping(source)  # type: ignore[arg-type]
    else:
        for i, tok in enumerate(tokenize(source, DEFAULT_DELIMITER)):  # type: ignore[arg-type]
            yield (i,), tok


def flatten_leaves(source: object, kind: SourceKind | None = None) -> list[str]:
    """
    Does: Flatten any supported pool into a fresh list of leaf strings.
    Returns: list[str] (the caller's pool is never modified).
    """
    return [leaf for _, leaf in iter_leaves(source, kind)]
