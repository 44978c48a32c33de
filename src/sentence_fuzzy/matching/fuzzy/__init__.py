# sentence_fuzzy/matching/fuzzy/__init__.py
"""
fuzzy.

Does: Facade over the per-token scoring pieces: greedy alignment (distance),
      the disorder metric (count_moves), and hay windowing (reduce_hays).
Used by: The orchestrator and tests.
"""

from __future__ import annotations

from .disorder import count_moves
from .distance import claim_positions, distance
from .window import reduce_hays

__all__ = [
    "claim_positions",
    "count_moves",
    "distance",
    "reduce_hays",
]

__docformat__ = "google"
