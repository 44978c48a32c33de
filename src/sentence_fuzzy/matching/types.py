# sentence_fuzzy/matching/types.py
from __future__ import annotations

from dataclasses import dataclass, field, replace

"""
types.py.

Does: Value types returned by the matcher: Match (one needle token against its
best hay token) and Result (all needle tokens, summed score).
"""


@dataclass(frozen=True)
class Match:
    """
    Does: Best alignment of one needle token.
    Fields:
        score: Penalty total; lower is better.
        offset: Start of the matched hay token within the original hay.
        length: Length of the matched hay token.
        keys: Ascending positions claimed inside that token.
    """

    score: int
    offset: int
    length: int
    keys: tuple[int, ...] = ()

    def with_offset(self, offset: int) -> Match:
        return replace(self, offset=offset)

    def positions(self) -> tuple[int, ...]:
        """Does: Absolute hay indices of the claimed characters."""
        return tuple(self.offset + k for k in self.keys)


@dataclass(frozen=True)
class Result:
    """Sum of per-token scores plus one Match per needle token, in needle order."""

    score: int = 0
    matches: tuple[Match, ...] = field(default_factory=tuple)

    def highlights(self) -> tuple[int, ...]:
        """Does: Sorted, de-duplicated absolute hay indices across all matches."""
        return tuple(sorted({p for m in self.matches for p in m.positions()}))


__all__ = ["Match", "Result"]

__docformat__ = "google"
