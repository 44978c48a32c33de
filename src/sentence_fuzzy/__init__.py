"""
sentence_fuzzy
==============

Does: Root package for the sentence-aware fuzzy matcher.
Returns: The stable public surface (match, rank, penalty directives, result types).
Used by: Embedding applications ranking candidates for interactive filtering.
"""

from .matching import (
    InvalidSeparator,
    Match,
    PenaltyConfig,
    PenaltyConfigError,
    PenaltyOverride,
    Result,
    add_penalty,
    load_penalty_profile,
    match,
    move_penalty,
    rank,
    remove_penalty,
)

__all__: list[str] = [
    "InvalidSeparator",
    "Match",
    "PenaltyConfig",
    "PenaltyConfigError",
    "PenaltyOverride",
    "Result",
    "add_penalty",
    "load_penalty_profile",
    "match",
    "move_penalty",
    "rank",
    "remove_penalty",
]
__docformat__ = "google"
