# sentence_fuzzy/matching/fuzzy/disorder.py
"""
disorder.py

Does: Count how far a list of claimed positions is from ascending order, using
      a first-element-pivot quicksort: every partition step whose "less than
      pivot" side is non-empty costs one move.
Returns: count_moves(entries) -> (moves, ascending list).
Used by: distance() to price out-of-order alignments.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["count_moves"]


def count_moves(entries: Sequence[int]) -> tuple[int, list[int]]:
    """
    Does: Partition on the first element at every level (stable partitions),
          summing one move per step with a non-empty lower side.
    Returns: (moves, sorted entries). Ascending input -> 0 moves;
             fully descending input of length n -> n - 1 moves.
    """
    moves = 0
    ordered: list[int] = []
    # Work stack of ("sort", chunk) / ("emit", pivot); popped in LIFO order so
    # the output is built left to right: less, pivot, not_less.
    stack: list[tuple[str, object]] = [("sort", list(entries))]
    while stack:
        kind, item = stack.pop()
        if kind == "emit":
            ordered.append(item)  # type: ignore[arg-type]
            continue
        chunk: list[int] = item  # type: ignore[assignment]
        if not chunk:
            continue
        pivot, rest = chunk[0], chunk[1:]
        less = [x for x in rest if x < pivot]
        not_less = [x for x in rest if x >= pivot]
        if less:
            moves += 1
        stack.append(("sort", not_less))
        stack.append(("emit", pivot))
        stack.append(("sort", less))
    return moves, ordered
