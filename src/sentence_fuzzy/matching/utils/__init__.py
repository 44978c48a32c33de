# sentence_fuzzy/matching/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the matching engine.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Penalty profiles, the orchestrator's tracing, the demo CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled",
    "reload_topics",
]
