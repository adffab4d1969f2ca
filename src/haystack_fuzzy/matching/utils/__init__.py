# haystack_fuzzy/matching/utils/__init__.py
"""

Does: Provide config loading and pipeline stage tracing for the search stack.
Returns: Public API via load_config/clear_config_cache and trace_stage/reload_topics.
Used by: SearchOptions, the engine, the demo CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigDirNotFound,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    ConfigValueError,
    clear_config_cache,
    load_config,
)
from .log import (
    STAGES,
    reload_topics,
    stage_enabled,
    trace_stage,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "ConfigDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "ConfigValueError",
    # Stage tracing
    "STAGES",
    "trace_stage",
    "stage_enabled",
    "reload_topics",
]
