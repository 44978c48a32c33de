# src/sentence_fuzzy/matching/penalty.py
from __future__ import annotations

"""
penalty.py

Does: Penalty weights for the matcher: immutable PenaltyConfig, single-field
      override directives folded left to right, plus loaders for named JSON
      profiles and SENTENCE_FUZZY_*_PENALTY env vars.
Returns: PenaltyConfig, PenaltyOverride, add/remove/move_penalty, build_config,
         load_penalty_profile, available_profiles, penalties_from_env.
Used by: Orchestrator (build_config), demo CLI (profiles/env), embedding apps.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Optional

from .utils.load_config import load_config
from .utils.log import debug

__all__ = [
    "DEFAULT_ADD_PENALTY",
    "DEFAULT_REMOVE_PENALTY",
    "DEFAULT_MOVE_PENALTY",
    "PenaltyConfig",
    "PenaltyOverride",
    "PenaltyConfigError",
    "add_penalty",
    "remove_penalty",
    "move_penalty",
    "build_config",
    "available_profiles",
    "load_penalty_profile",
    "penalties_from_env",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Defaults ─────────────────────────────────────────────────────────────────
DEFAULT_ADD_PENALTY = 1       # per hay char left unclaimed
DEFAULT_REMOVE_PENALTY = 1000 # per needle char not found in hay
DEFAULT_MOVE_PENALTY = 100    # per unit of disorder among claimed positions

PROFILES_FILE = "penalty_profiles"
ENV_PREFIX = "SENTENCE_FUZZY_"
_FIELDS = ("add", "remove", "move")


class PenaltyConfigError(ValueError):
    """Raise when a penalty value, field, or profile name is invalid."""


# ─────────────────────────────────────────────────────────────────────────────
# Model
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PenaltyConfig:
    """Weights applied by the aligner. Any int is accepted, negatives included."""

    add_penalty: int = DEFAULT_ADD_PENALTY
    remove_penalty: int = DEFAULT_REMOVE_PENALTY
    move_penalty: int = DEFAULT_MOVE_PENALTY


@dataclass(frozen=True)
class PenaltyOverride:
    """
    Does: One override directive; every field left as None keeps the current weight.
    """

    add: Optional[int] = None
    remove: Optional[int] = None
    move: Optional[int] = None

    def apply(self, config: PenaltyConfig) -> PenaltyConfig:
        changes: dict[str, int] = {}
        if self.add is not None:
            changes["add_penalty"] = self.add
        if self.remove is not None:
            changes["remove_penalty"] = self.remove
        if self.move is not None:
            changes["move_penalty"] = self.move
        return replace(config, **changes) if changes else config


def add_penalty(weight: int) -> PenaltyOverride:
    """Does: Override the cost of each hay character the needle leaves unclaimed."""
    return PenaltyOverride(add=weight)


def remove_penalty(weight: int) -> PenaltyOverride:
    """Does: Override the cost of each needle character missing from the hay."""
    return PenaltyOverride(remove=weight)


def move_penalty(weight: int) -> PenaltyOverride:
    """Does: Override the cost of each unit of disorder among aligned positions."""
    return PenaltyOverride(move=weight)


def build_config(overrides: Iterable[PenaltyOverride] = ()) -> PenaltyConfig:
    """
    Does: Fold overrides over the defaults in order; later directives win.
    Returns: PenaltyConfig.
    """
    config = PenaltyConfig()
    for override in overrides:
        config = override.apply(config)
    return config


# ─────────────────────────────────────────────────────────────────────────────
# Profiles (data/penalty_profiles.json)
# ─────────────────────────────────────────────────────────────────────────────

def _coerce_weight(value: Any, where: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise PenaltyConfigError(f"{where}: expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise PenaltyConfigError(f"{where}: expected integer, got {value!r}") from e
    raise PenaltyConfigError(f"{where}: expected integer, got {type(value).__name__}")


def _override_from_mapping(entry: Mapping[str, Any], where: str) -> PenaltyOverride:
    unknown = set(entry) - set(_FIELDS)
    if unknown:
        raise PenaltyConfigError(f"{where}: unknown penalty field(s) {sorted(unknown)}")
    return PenaltyOverride(
        **{k: _coerce_weight(v, f"{where}.{k}") for k, v in entry.items()}
    )


def _validate_profiles(data: dict[str, Any]) -> dict[str, Any]:
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise PenaltyConfigError(f"profile {name!r}: expected object, got {type(entry).__name__}")
        _override_from_mapping(entry, f"profile {name!r}")
    return data


def _load_profiles() -> dict[str, Any]:
    return load_config(PROFILES_FILE, validator=_validate_profiles, allow_comments=True)


def available_profiles() -> list[str]:
    """Does: List profile names declared in penalty_profiles.json, sorted."""
    return sorted(_load_profiles())


def load_penalty_profile(name: str) -> list[PenaltyOverride]:
    """
    Does: Look up a named profile and turn it into override directives.
    Returns: [PenaltyOverride] (empty list for an empty profile).
    Raises: PenaltyConfigError for unknown names.
    """
    profiles = _load_profiles()
    if name not in profiles:
        raise PenaltyConfigError(
            f"unknown penalty profile {name!r} (known: {', '.join(sorted(profiles))})"
        )
    override = _override_from_mapping(profiles[name], f"profile {name!r}")
    debug(f"profile {name!r} -> {override}", topic="config")
    log.debug("Loaded penalty profile %s: %s", name, override)
    return [override] if override != PenaltyOverride() else []


# ─────────────────────────────────────────────────────────────────────────────
# Environment overrides
# ─────────────────────────────────────────────────────────────────────────────

def penalties_from_env(environ: Optional[Mapping[str, str]] = None) -> list[PenaltyOverride]:
    """
    Does: Read SENTENCE_FUZZY_{ADD,REMOVE,MOVE}_PENALTY; unset or blank vars are skipped.
    Returns: One override per variable set, in add/remove/move order.
    """
    env = os.environ if environ is None else environ
    overrides: list[PenaltyOverride] = []
    for field in _FIELDS:
        var = f"{ENV_PREFIX}{field.upper()}_PENALTY"
        raw = env.get(var)
        if raw is None or not raw.strip():
            continue
        overrides.append(PenaltyOverride(**{field: _coerce_weight(raw, var)}))
    if overrides:
        debug(f"env overrides: {overrides}", topic="config")
    return overrides
