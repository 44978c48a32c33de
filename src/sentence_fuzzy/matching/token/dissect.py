# sentence_fuzzy/matching/token/dissect.py

"""
dissect.py.

Does: Split strings on an ordered list of separator substrings, keeping each
      separator occurrence as its own token so token lengths still add up to
      the source length.
Returns: dissect() -> list[str]; InvalidSeparator on an empty separator.
Used by: The orchestrator, for both needle and hay.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

__all__ = [
    "InvalidSeparator",
    "split_keep",
    "dissect",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


class InvalidSeparator(ValueError):
    """Raise when a separator is the empty string."""


def split_keep(text: str, separator: str) -> list[str]:
    """
    Does: Split `text` on every non-overlapping `separator`, left to right.
    Returns: Alternating [before, sep, before, sep, ..., tail]; empty `before`
             slices and an empty tail are omitted.
    """
    if not separator:
        raise InvalidSeparator("separator must be a non-empty string")

    parts: list[str] = []
    step = len(separator)
    start = 0
    idx = text.find(separator)
    while idx != -1:
        if idx > start:
            parts.append(text[start:idx])
        parts.append(separator)
        start = idx + step
        idx = text.find(separator, start)
    if start < len(text):
        parts.append(text[start:])
    return parts


def dissect(separators: Sequence[str], inputs: Sequence[str]) -> list[str]:
    """
    Does: Apply `split_keep` for each separator in order, feeding each pass the
          tokens produced by the previous one.
    Returns: Flat token list; `inputs` copied unchanged when there are no separators.
    """
    for sep in separators:
        if not sep:
            raise InvalidSeparator(f"empty separator in {list(separators)!r}")

    tokens = list(inputs)
    for sep in separators:
        tokens = [part for token in tokens for part in split_keep(token, sep)]
    log.debug("dissect(%r) -> %d tokens", list(separators), len(tokens))
    return tokens
