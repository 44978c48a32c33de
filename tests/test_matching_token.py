# tests/test_matching_token.py
from __future__ import annotations

import pytest

from sentence_fuzzy.matching.token import InvalidSeparator, dissect, split_keep

# ─────────────────────────────────────────────────────────────────────────────
# split_keep: single separator
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,sep,expected",
    [
        ("/usr/local/bin/sh", "/", ["/", "usr", "/", "local", "/", "bin", "/", "sh"]),
        ("a//b/", "/", ["a", "/", "/", "b", "/"]),      # adjacent seps, no empty slices
        ("plain", "/", ["plain"]),                       # no occurrence
        ("", "/", []),                                   # empty input yields nothing
        ("aaa", "aa", ["aa", "a"]),                      # non-overlapping scan
        ("a:::b", "::", ["a", "::", ":b"]),
    ],
)
def test_split_keep(text, sep, expected):
    assert split_keep(text, sep) == expected


def test_split_keep_rejects_empty_separator():
    with pytest.raises(InvalidSeparator):
        split_keep("abc", "")


# ─────────────────────────────────────────────────────────────────────────────
# dissect: separator lists and multiple inputs
# ─────────────────────────────────────────────────────────────────────────────

def test_dissect_without_separators_returns_inputs():
    inputs = ["a/b", "c"]
    out = dissect([], inputs)
    assert out == ["a/b", "c"]
    assert out is not inputs


def test_dissect_applies_separators_in_order():
    assert dissect(["/", "."], ["a/b.c"]) == ["a", "/", "b", ".", "c"]


def test_dissect_later_separator_splits_earlier_separator_tokens():
    # "::" survives the first pass as a token, then ":" splits it
    assert dissect(["::", ":"], ["a::b"]) == ["a", ":", ":", "b"]


def test_dissect_concatenates_inputs_in_order():
    assert dissect(["-"], ["a-b", "c", "-"]) == ["a", "-", "b", "c", "-"]


def test_dissect_empty_string_with_separators():
    assert dissect(["/"], [""]) == []


@pytest.mark.parametrize("separators", [[""], ["/", ""], ["", "/"]])
def test_dissect_rejects_empty_separator(separators):
    with pytest.raises(InvalidSeparator):
        dissect(separators, ["a/b"])


def test_invalid_separator_is_value_error():
    assert issubclass(InvalidSeparator, ValueError)


# ─────────────────────────────────────────────────────────────────────────────
# Properties: lengths add up, re-dissecting is stable
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "separators,text",
    [
        (["/"], "/usr/local/bin/sh"),
        (["/", "."], "/usr/lib/libc.so.6"),
        ([" ", "-"], "hello  big-wide  world-"),
        (["::", ":"], "pkg::mod:fn"),
    ],
)
def test_dissect_is_lossless_and_idempotent(separators, text):
    tokens = dissect(separators, [text])
    assert "".join(tokens) == text
    assert dissect(separators, ["".join(tokens)]) == tokens
    assert all(tokens)


def test_dissect_logs_token_count(caplog):
    with caplog.at_level("DEBUG", logger="sentence_fuzzy.matching.token.dissect"):
        dissect(["/"], ["a/b"])
    assert "3 tokens" in caplog.text
