# sentence_fuzzy/matching/fuzzy/distance.py
"""
distance.py

Does: Align one needle token against one hay token by greedily claiming, for
      each needle character, its leftmost unclaimed occurrence in the hay,
      then price the alignment with add/remove/move penalties.
Returns: distance(config, needle, hay) -> Match with offset 0.
Used by: The orchestrator, once per (needle token, candidate hay token).
"""

from __future__ import annotations

from ..penalty import PenaltyConfig
from ..types import Match
from .disorder import count_moves

__all__ = ["claim_positions", "distance"]


def claim_positions(needle: str, hay: str) -> list[int]:
    """
    Does: For each needle char in order, claim the smallest free hay index holding it.
    Returns: Claimed indices in needle order; chars with no free occurrence are skipped.
    """
    occurrences: dict[str, list[int]] = {}
    for i, ch in enumerate(hay):
        occurrences.setdefault(ch, []).append(i)

    # Each char's occurrences are consumed left to right, so a per-char cursor
    # always points at its smallest unclaimed index.
    cursors: dict[str, int] = {}
    claimed: list[int] = []
    for ch in needle:
        slots = occurrences.get(ch)
        if not slots:
            continue
        cur = cursors.get(ch, 0)
        if cur >= len(slots):
            continue
        claimed.append(slots[cur])
        cursors[ch] = cur + 1
    return claimed


def distance(config: PenaltyConfig, needle: str, hay: str) -> Match:
    claimed = claim_positions(needle, hay)
    moves, ordered = count_moves(claimed)
    hits = len(claimed)

    score = (
        moves * config.move_penalty
        + (len(hay) - hits) * config.add_penalty
        + (len(needle) - hits) * config.remove_penalty
    )
    return Match(score=score, offset=0, length=len(hay), keys=tuple(ordered))
