# tests/test_matching_penalty.py
"""Penalty model: directive folding, JSON profiles, env overrides."""

from __future__ import annotations

import json
from importlib import import_module

import pytest

from sentence_fuzzy.matching import penalty as P
from sentence_fuzzy.matching.penalty import (
    PenaltyConfig,
    PenaltyConfigError,
    PenaltyOverride,
    add_penalty,
    available_profiles,
    build_config,
    load_penalty_profile,
    move_penalty,
    penalties_from_env,
    remove_penalty,
)
from sentence_fuzzy.matching.utils import ConfigParseError, clear_config_cache


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Use the packaged data dir unless a test points elsewhere."""
    monkeypatch.delenv("SENTENCE_FUZZY_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("SENTENCE_FUZZY_DATA_DIR", str(data))
    return data


# ─────────────────────────────────────────────────────────────────────────────
# build_config
# ─────────────────────────────────────────────────────────────────────────────

def test_defaults():
    cfg = build_config([])
    assert cfg == PenaltyConfig(add_penalty=1, remove_penalty=1000, move_penalty=100)


def test_each_directive_sets_one_field():
    assert add_penalty(3) == PenaltyOverride(add=3)
    assert remove_penalty(4) == PenaltyOverride(remove=4)
    assert move_penalty(5) == PenaltyOverride(move=5)


def test_directives_fold_left_to_right():
    cfg = build_config([add_penalty(5), move_penalty(2), add_penalty(7)])
    assert cfg == PenaltyConfig(add_penalty=7, remove_penalty=1000, move_penalty=2)


def test_multi_field_override_and_zero_or_negative_weights():
    cfg = build_config([PenaltyOverride(add=0, remove=-3)])
    assert cfg.add_penalty == 0
    assert cfg.remove_penalty == -3
    assert cfg.move_penalty == 100


def test_config_is_frozen():
    cfg = build_config()
    with pytest.raises(AttributeError):
        cfg.add_penalty = 9  # type: ignore[misc]


# ─────────────────────────────────────────────────────────────────────────────
# Profiles
# ─────────────────────────────────────────────────────────────────────────────

def test_packaged_profiles():
    assert available_profiles() == ["default", "prefix", "scrambled", "strict"]
    assert build_config(load_penalty_profile("default")) == PenaltyConfig()
    assert load_penalty_profile("scrambled") == [PenaltyOverride(add=1, remove=1000, move=1)]


def test_profile_from_custom_data_dir(tmp_data_dir):
    (tmp_data_dir / "penalty_profiles.json").write_text(
        json.dumps({"paths": {"add": 2, "move": "50"}, "empty": {}}), encoding="utf-8"
    )
    assert load_penalty_profile("paths") == [PenaltyOverride(add=2, move=50)]
    assert load_penalty_profile("empty") == []


def test_profiles_are_read_once_and_cached(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "penalty_profiles.json").write_text(
        json.dumps({"paths": {"add": 2}}), encoding="utf-8"
    )
    loader = import_module("sentence_fuzzy.matching.utils.load_config")
    reads = {"n": 0}
    real_load = loader.json5.load

    def counting_load(f):
        reads["n"] += 1
        return real_load(f)

    monkeypatch.setattr(loader.json5, "load", counting_load)

    assert load_penalty_profile("paths") == [PenaltyOverride(add=2)]
    assert load_penalty_profile("paths") == [PenaltyOverride(add=2)]
    assert available_profiles() == ["paths"]
    assert reads["n"] == 1


def test_packaged_profiles_allow_comments():
    # the shipped file carries a comment line, so it only parses leniently
    assert "default" in available_profiles()


def test_unknown_profile_lists_known_names():
    with pytest.raises(PenaltyConfigError, match="known: default, prefix"):
        load_penalty_profile("nope")


@pytest.mark.parametrize(
    "payload",
    [
        {"bad": {"speed": 1}},         # unknown field
        {"bad": {"add": "many"}},      # not an int
        {"bad": {"add": True}},        # bool rejected
        {"bad": [1, 2]},               # not an object
    ],
)
def test_malformed_profiles_fail_validation(tmp_data_dir, payload):
    (tmp_data_dir / "penalty_profiles.json").write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ConfigParseError, match="validator failed"):
        load_penalty_profile("bad")


# ─────────────────────────────────────────────────────────────────────────────
# Environment
# ─────────────────────────────────────────────────────────────────────────────

def test_penalties_from_env_mapping():
    env = {
        "SENTENCE_FUZZY_MOVE_PENALTY": " 7 ",
        "SENTENCE_FUZZY_ADD_PENALTY": "5",
        "SENTENCE_FUZZY_REMOVE_PENALTY": "",
    }
    assert penalties_from_env(env) == [PenaltyOverride(add=5), PenaltyOverride(move=7)]


def test_penalties_from_process_env(monkeypatch):
    monkeypatch.setenv("SENTENCE_FUZZY_REMOVE_PENALTY", "-20")
    monkeypatch.delenv("SENTENCE_FUZZY_ADD_PENALTY", raising=False)
    monkeypatch.delenv("SENTENCE_FUZZY_MOVE_PENALTY", raising=False)
    assert penalties_from_env() == [PenaltyOverride(remove=-20)]


def test_penalties_from_env_rejects_garbage():
    with pytest.raises(PenaltyConfigError, match="SENTENCE_FUZZY_ADD_PENALTY"):
        penalties_from_env({"SENTENCE_FUZZY_ADD_PENALTY": "1.5"})


def test_penalty_config_error_is_value_error():
    assert issubclass(P.PenaltyConfigError, ValueError)
