# haystack_fuzzy/matching/options.py
"""
options.py.

Does: Immutable search configuration built once from defaults + user overrides.
Returns: SearchOptions (frozen), merge_options() pure merge, SearchOptions.from_file().
Used by: engine.Haystack, token.normalize, fuzzy.matcher, demo CLI.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from haystack_fuzzy.matching.utils.load_config import (
    ConfigTypeError,
    ConfigValueError,
    load_config,
)

__all__ = ["SearchOptions", "DEFAULT_OPTIONS", "merge_options", "OPTION_ALIASES"]

log = logging.getLogger(__name__)

# camelCase keys as accepted by the original option objects
OPTION_ALIASES: dict[str, str] = {
    "caseSensitive": "case_sensitive",
    "flexibility": "flexibility",
    "exclusions": "exclusions",
    "ignoreStopWords": "ignore_stop_words",
    "stemming": "stemming",
}


@dataclass(frozen=True)
class SearchOptions:
    case_sensitive: bool = False
    flexibility: int = 2
    exclusions: tuple[str | re.Pattern[str], ...] = ()
    ignore_stop_words: bool = False
    stemming: bool = False

    def __post_init__(self) -> None:
        for name in ("case_sensitive", "ignore_stop_words", "stemming"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigTypeError(
                    f"{name}: expected bool, got {type(getattr(self, name)).__name__}"
                )
        if isinstance(self.flexibility, bool) or not isinstance(self.flexibility, int):
            raise ConfigTypeError(
                f"flexibility: expected int, got {type(self.flexibility).__name__}"
            )
        if self.flexibility < 0:
            raise ConfigValueError(f"flexibility must be >= 0, got {self.flexibility}")
        # lists from JSON or callers become a tuple so the instance stays hashable
        object.__setattr__(self, "exclusions", _coerce_exclusions(self.exclusions))

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any] | None) -> SearchOptions:
        return merge_options(overrides)

    @classmethod
    def from_file(cls, name: str, *, base_dir: Path | None = None) -> SearchOptions:
        """
        Does: Load <config>/<name>.json (a JSON object) and merge it over defaults.
        Returns: SearchOptions.
        """
        return load_config(
            name, mode="validated_dict", base_dir=base_dir, validator=merge_options
        )

    def with_overrides(self, overrides: Mapping[str, Any] | None) -> SearchOptions:
        """Does: Merge overrides over this instance instead of the defaults."""
        return merge_options(overrides, base=self)


def _coerce_exclusions(value: Any) -> tuple[str | re.Pattern[str], ...]:
    if value is None:
        return ()
    if isinstance(value, (str, re.Pattern)):
        value = (value,)
    if not isinstance(value, Iterable):
        raise ConfigTypeError(f"exclusions: expected a list, got {type(value).__name__}")
    out = tuple(value)
    bad = [x for x in out if not isinstance(x, (str, re.Pattern))]
    if bad:
        raise ConfigTypeError(
            f"exclusions: items must be str or compiled patterns (got {type(bad[0]).__name__})"
        )
    return out


DEFAULT_OPTIONS = SearchOptions()


def merge_options(
    overrides: Mapping[str, Any] | None,
    *,
    base: SearchOptions = DEFAULT_OPTIONS,
) -> SearchOptions:
    """
    Does: Pure merge of user overrides over `base`. Accepts camelCase and
          snake_case keys; None values keep the base value; unknown keys are ignored.
    Returns: New SearchOptions (base is never modified).
    """
    if not overrides:
        return base
    if not isinstance(overrides, Mapping):
        raise ConfigTypeError(f"options: expected a mapping, got {type(overrides).__name__}")

    known = {f.name for f in fields(SearchOptions)}
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in known:
            log.debug("Ignoring unrecognized option %r", key)
            continue
        if value is None:
            continue
        changes[name] = value
    return replace(base, **changes) if changes else base
