# src/haystack_fuzzy/matching/utils/load_config.py

"""Load JSON configs from a <config/> directory with an mtime cache and shape checks.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by SearchOptions.from_file (option files) and the demo CLI (--source pools).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "ConfigDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "ConfigValueError",
]

ENV_VAR = "HAYSTACK_CONFIG_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigDirNotFound(FileNotFoundError):
    """Raise when no 'config' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when a config value doesn't match the expected structure or type."""


class ConfigValueError(ValueError):
    """Raise when a config value has the right type but is out of range."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_config_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'config' directories walking up from start."""
    start = (start or Path.cwd()).resolve()
    return [(p / "config").resolve() for p in [start, *start.parents]]


def _default_config_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_config_dirs(start):
        if cand.is_dir():
            return cand
    raise ConfigDirNotFound(
        "No 'config' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_config_dirs(start))
    )


def _env_config_dir() -> Path | None:
    v = os.environ.get(ENV_VAR)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
) -> Any:
    """Load <config>/<file>.json, parse, coerce by mode, and cache results."""
    # Resolve base directory: explicit > env override > discovery
    if base_dir is None:
        base_dir = _env_config_dir() or _default_config_dir()

    config_dir = Path(base_dir).resolve()

    # Normalize file path and enforce staying under config_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (config_dir / file_name).resolve()
    try:
        path.relative_to(config_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside config dir: {path} (base={config_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)

    # Cache holds the parsed/coerced data; validators always run on a hit too
    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(cache_key)
    if cached is not None:
        log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
        return _apply_validator(path, cached, validator) if mode == "validated_dict" else cached

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data

    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        result = data

    else:
        raise ValueError(f"Unknown mode '{mode}'")

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)

    if mode == "validated_dict":
        return _apply_validator(path, result, validator)
    return result


def _apply_validator(
    path: Path,
    data: dict[str, Any],
    validator: Callable[[dict[str, Any]], Any] | None,
) -> Any:
    if validator is None:
        return dict(data)
    try:
        return validator(dict(data))
    except (ConfigTypeError, ConfigValueError):
        raise
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
