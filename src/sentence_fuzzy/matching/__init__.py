# sentence_fuzzy/matching/__init__.py
"""
matching.

Does: Facade exposing the matching engine: penalty directives, tokenizer,
      per-token scoring and the top-level match/rank entry points.
Returns: Public API re-exported by the `sentence_fuzzy` root package.
"""

from __future__ import annotations

# ── Penalties ───────────────────────────────────────────────────────────────
from .penalty import (
    PenaltyConfig,
    PenaltyConfigError,
    PenaltyOverride,
    add_penalty,
    available_profiles,
    build_config,
    load_penalty_profile,
    move_penalty,
    penalties_from_env,
    remove_penalty,
)

# ── Tokens ───────────────────────────────────────────────────────────────────
from .token import InvalidSeparator, dissect

# ── Scoring ──────────────────────────────────────────────────────────────────
from .fuzzy import count_moves, distance, reduce_hays
from .orchestrator import match, rank
from .types import Match, Result

__all__ = [
    # Penalties
    "PenaltyConfig",
    "PenaltyConfigError",
    "PenaltyOverride",
    "add_penalty",
    "remove_penalty",
    "move_penalty",
    "build_config",
    "available_profiles",
    "load_penalty_profile",
    "penalties_from_env",
    # Tokens
    "InvalidSeparator",
    "dissect",
    # Scoring
    "count_moves",
    "distance",
    "reduce_hays",
    "match",
    "rank",
    "Match",
    "Result",
]

__docformat__ = "google"
