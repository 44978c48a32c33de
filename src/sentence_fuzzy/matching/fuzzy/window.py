# sentence_fuzzy/matching/fuzzy/window.py
"""
window.py

Does: Pick the hay tokens a given needle token may match, reserving enough
      tokens on the left for earlier needle tokens and on the right for later
      ones.
Returns: reduce_hays(...) -> (left_offset, candidates).
Used by: The orchestrator before aligning each needle token.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..utils.log import debug, enabled

__all__ = ["reduce_hays"]

log = logging.getLogger(__name__)


def reduce_hays(
    needle_count: int, index: int, hays: Sequence[str]
) -> tuple[int, list[str]]:
    """
    Does: Pad `hays` with "" up to `needle_count`, keep the first
          len - (needle_count - index - 1) tokens, then drop the first `index`.
    Returns: (summed length of the dropped tokens, remaining tokens).
    """
    padded = list(hays)
    if len(padded) < needle_count:
        padded.extend([""] * (needle_count - len(padded)))

    right = len(padded) - (needle_count - index - 1)
    window = padded[:right]

    left_offset = sum(len(t) for t in window[:index])
    candidates = window[index:]
    if enabled("window"):
        debug(
            f"needle #{index}/{needle_count}: offset={left_offset} candidates={candidates!r}",
            topic="window",
        )
    return left_offset, candidates
