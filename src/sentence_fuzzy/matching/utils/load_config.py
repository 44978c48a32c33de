# src/sentence_fuzzy/matching/utils/load_config.py

"""Load JSON object configs from a <data/> directory, validated and cached.

Files are parsed with json5 when `allow_comments` is set (comments, trailing
commas), plain json otherwise. Results, validated ones included, are cached
per (path, mtime, encoding, parser, validator) so an edited file reloads.

Used by penalty profile loading.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Validator = Callable[[dict[str, Any]], dict[str, Any]]
__all__ = [
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_DATA_DIR_VARS = ("SENTENCE_FUZZY_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float, str, bool, Optional[Validator]], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _resolve_data_dir() -> Path:
    """Env override first, then the nearest data/ above this module."""
    for var in _DATA_DIR_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    cands = _candidate_data_dirs()
    for cand in cands:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, cands)))


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Optional[Validator] = None,
    allow_comments: bool = False,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, run `validator` on it, and cache the result."""
    data_dir = (base_dir or _resolve_data_dir()).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    cache_key = (path, mtime, encoding, allow_comments, validator)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json5.load(f) if allow_comments else json.load(f)
    except ValueError as e:
        # json.JSONDecodeError and json5 parse errors are both ValueErrors
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)
    return data
