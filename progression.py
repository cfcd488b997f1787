"""
Level / XP progression.

Each level has an XP threshold. Thresholds grow by a deterministic 10-25% per
level and are computed lazily, then cached in the state so a stored threshold
never changes once a learner has seen it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional

logger = logging.getLogger("vector-tutor.progression")

BASE_THRESHOLD = 100
BASE_XP_PER_CORRECT = 25

# Upper bounds for stored progression values; anything past them is corrupt.
MAX_LEVEL = 1000
MAX_THRESHOLD = 10**100


def growth_rate(level: int) -> float:
    # 10% .. 25%, same value every time for a given level
    return 0.10 + ((level * 0.03) % 0.15)


@dataclass
class LevelUp:
    previous_level: int
    new_level: int


@dataclass
class ProgressionState:
    level: int = 1
    xp: float = 0.0
    thresholds: Dict[int, int] = field(default_factory=lambda: {1: BASE_THRESHOLD})

    def threshold(self, level: Optional[int] = None) -> int:
        """XP required to finish ``level`` (defaults to the current level)."""
        level = self.level if level is None else level
        if level < 1:
            raise ValueError("levels start at 1")
        if level > MAX_LEVEL:
            raise ValueError(f"levels stop at {MAX_LEVEL}")
        if 1 not in self.thresholds:
            self.thresholds[1] = BASE_THRESHOLD
        known = level
        while known not in self.thresholds:
            known -= 1
        for lv in range(known + 1, level + 1):
            self.thresholds[lv] = _grow(self.thresholds[lv - 1], lv)
        return self.thresholds[level]


def _grow(previous: int, level: int) -> int:
    try:
        nxt = math.floor(previous * (1 + growth_rate(level)))
    except OverflowError:
        return MAX_THRESHOLD
    return min(nxt, MAX_THRESHOLD)


def apply_xp(state: ProgressionState, amount: float) -> Optional[LevelUp]:
    """
    Add XP and settle the state.

    A single threshold check: crossing it moves exactly one level up and resets
    XP to 0. Any XP beyond the threshold is discarded, so one very large grant
    still only advances one level. At ``MAX_LEVEL`` a grant that would reach the
    threshold is dropped.
    """
    required = state.threshold()
    if state.level >= MAX_LEVEL and state.xp + amount >= required:
        return None
    state.xp += amount
    if state.xp < required:
        return None

    previous = state.level
    state.level += 1
    state.xp = 0
    state.threshold()  # cache the new level's requirement
    logger.info("level up: %d -> %d (threshold was %d)", previous, state.level, required)
    return LevelUp(previous_level=previous, new_level=state.level)


@dataclass
class AttemptStats:
    streak: int = 0
    total: int = 0
    correct: int = 0

    def record(self, ok: bool) -> None:
        self.total += 1
        if ok:
            self.correct += 1
            self.streak += 1
        else:
            self.streak = 0
