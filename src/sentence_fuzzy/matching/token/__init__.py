# sentence_fuzzy/matching/token/__init__.py
"""
token
=====

Does: Expose separator-aware tokenization for needle and hay strings.
Exports: dissect, split_keep, InvalidSeparator
"""

from .dissect import InvalidSeparator, dissect, split_keep

__all__ = [
    "InvalidSeparator",
    "dissect",
    "split_keep",
]
