"""
log.py.

Does: Stage tracer for debug searches. A search run with debug=True reports each
      pipeline stage (normalize, source, match, rank) as one `key=value` line on
      stderr; HAYSTACK_DEBUG_TOPICS (comma-separated stage names or 'all') narrows
      which stages print. Unset means every stage.
Returns: trace_stage(), stage_enabled(), reload_topics().
Used by: engine.Haystack and tests.
"""

import logging
import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["STAGES", "trace_stage", "stage_enabled", "reload_topics"]

ENV_VAR = "HAYSTACK_DEBUG_TOPICS"

# Pipeline order; trace lines for a search always appear in this order
STAGES: tuple[str, ...] = ("normalize", "source", "match", "rank")

# Long hit lists are cut to this many items in a trace line
MAX_ITEMS = 10

log = logging.getLogger(__name__)


def _load_topics() -> frozenset[str]:
    raw = os.getenv(ENV_VAR, "")
    topics = {t.strip().lower() for t in raw.split(",") if t.strip()}
    if not topics or "all" in topics:
        return frozenset(STAGES)
    unknown = topics.difference(STAGES)
    if unknown:
        log.warning(
            "%s: ignoring unknown stage(s) %s (known: %s)",
            ENV_VAR, ", ".join(sorted(unknown)), ", ".join(STAGES),
        )
    return frozenset(topics.intersection(STAGES))


_ACTIVE_STAGES = _load_topics()


def reload_topics() -> None:
    """Does: Re-read HAYSTACK_DEBUG_TOPICS (tests and long-lived processes)."""
    global _ACTIVE_STAGES
    _ACTIVE_STAGES = _load_topics()


def stage_enabled(stage: str) -> bool:
    """
    Does: Tell whether trace lines for `stage` are currently printed.
    Returns: bool; raises ValueError for a name outside STAGES.
    """
    if stage not in STAGES:
        raise ValueError(f"Unknown pipeline stage {stage!r} (known: {', '.join(STAGES)})")
    return stage in _ACTIVE_STAGES


def _fmt(value: object) -> str:
    if isinstance(value, (list, tuple)) and len(value) > MAX_ITEMS:
        head = ", ".join(repr(v) for v in value[:MAX_ITEMS])
        return f"[{head}, …(+{len(value) - MAX_ITEMS})]"
    return repr(value)


def trace_stage(stage: str, *, stream: TextIO | None = None, **fields: object) -> None:
    """
    Does: Print `[ts] [stage] key=value ...` for an enabled stage; fields keep call order.
    Returns: None.
    """
    if not stage_enabled(stage):
        return
    body = " ".join(f"{key}={_fmt(value)}" for key, value in fields.items())
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{stage}] {body}", file=stream or sys.stderr)
