# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Drive a full match: build the penalty config, dissect needle and hay on
      the separators, window the hay per needle token, align every candidate
      and keep the cheapest one per needle token.
Returns:
  - match(overrides, separators, needle, hay) -> Result
  - rank(overrides, separators, needle, candidates) -> [(candidate, Result), ...]
Used by: Fuzzy pickers (files, commands), the demo CLI, and tests.
"""

import logging
from collections.abc import Iterable, Sequence

from .fuzzy import distance, reduce_hays
from .penalty import PenaltyConfig, PenaltyOverride, build_config
from .token import dissect
from .types import Match, Result
from .utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "match",
    "match_token",
    "rank",
]


def _ceiling(config: PenaltyConfig, needle_token: str, hay: str) -> int:
    """Does: Baseline score for a needle token, priced against the whole hay length."""
    n = len(needle_token)
    return n * config.remove_penalty + n * config.move_penalty + len(hay) * config.add_penalty


def match_token(
    config: PenaltyConfig,
    needle_token: str,
    index: int,
    needle_count: int,
    hay_tokens: Sequence[str],
    hay: str,
) -> Match:
    """
    Does: Score one needle token against every hay token in its window.
    Returns: The lowest-score Match; on ties the earliest candidate stays.
    """
    left_offset, candidates = reduce_hays(needle_count, index, hay_tokens)
    best = Match(score=_ceiling(config, needle_token, hay), offset=left_offset, length=0)

    offset = left_offset
    for candidate in candidates:
        current = distance(config, needle_token, candidate).with_offset(offset)
        if current.score < best.score:
            best = current
        offset += len(candidate)

    logger.debug("token %d %r -> %s", index, needle_token, best)
    return best


def match(
    overrides: Iterable[PenaltyOverride],
    separators: Sequence[str],
    needle: str,
    hay: str,
) -> Result:
    """
    Does: Match `needle` against `hay`, token by token when separators are given.
    Returns: Result whose score is the sum of its per-token Match scores.
    Raises: InvalidSeparator if any separator is empty.
    """
    config = build_config(overrides)
    needles = dissect(separators, [needle])
    hays = dissect(separators, [hay])

    total = 0
    matches: list[Match] = []
    for i, token in enumerate(needles):
        best = match_token(config, token, i, len(needles), hays, hay)
        matches.append(best)
        total += best.score

    debug(f"{needle!r} ~ {hay!r} -> {total}", topic="match")
    return Result(score=total, matches=tuple(matches))


def rank(
    overrides: Iterable[PenaltyOverride],
    separators: Sequence[str],
    needle: str,
    candidates: Iterable[str],
) -> list[tuple[str, Result]]:
    """
    Does: Score every candidate and order best first.
    Returns: [(candidate, Result)] sorted by score; equal scores keep input order.
    """
    overrides = list(overrides)
    scored = [(c, match(overrides, separators, needle, c)) for c in candidates]
    scored.sort(key=lambda pair: pair[1].score)
    return scored
