import math

import pytest

from progression import (
    MAX_LEVEL,
    MAX_THRESHOLD,
    AttemptStats,
    LevelUp,
    ProgressionState,
    apply_xp,
    growth_rate,
)


def test_initial_state():
    s = ProgressionState()
    assert s.level == 1 and s.xp == 0
    assert s.threshold() == 100


def test_growth_rate_is_between_10_and_25_percent():
    for level in range(2, 200):
        assert 0.10 <= growth_rate(level) < 0.25 + 1e-9


def test_threshold_schedule():
    s = ProgressionState()
    t2 = s.threshold(2)
    assert t2 == math.floor(100 * (1 + growth_rate(2)))
    t5 = s.threshold(5)
    expected = 100
    for lv in range(2, 6):
        expected = math.floor(expected * (1 + growth_rate(lv)))
    assert t5 == expected
    assert sorted(s.thresholds) == [1, 2, 3, 4, 5]


def test_threshold_is_cached_not_recomputed():
    s = ProgressionState(thresholds={1: 100, 2: 500})
    assert s.threshold(2) == 500
    assert s.threshold(3) == math.floor(500 * (1 + growth_rate(3)))
    assert s.threshold(3) == s.threshold(3)


def test_missing_level_one_is_restored():
    s = ProgressionState(thresholds={})
    assert s.threshold() == 100


def test_below_threshold_keeps_level():
    s = ProgressionState()
    assert apply_xp(s, 99) is None
    assert s.level == 1 and s.xp == 99


def test_exact_threshold_levels_up():
    s = ProgressionState()
    event = apply_xp(s, 100)
    assert event == LevelUp(previous_level=1, new_level=2)
    assert s.level == 2 and s.xp == 0
    assert 2 in s.thresholds


def test_excess_xp_is_discarded():
    # One grant of 150 XP only moves one level and drops the 50 extra.
    s = ProgressionState()
    event = apply_xp(s, 150)
    assert event is not None
    assert s.level == 2 and s.xp == 0


def test_huge_grant_is_single_level():
    s = ProgressionState()
    apply_xp(s, 10_000)
    assert s.level == 2


def test_accumulates_across_grants():
    s = ProgressionState()
    for _ in range(3):
        assert apply_xp(s, 25) is None
    assert apply_xp(s, 25) == LevelUp(1, 2)


def test_attempt_stats():
    st = AttemptStats()
    st.record(True)
    st.record(True)
    assert (st.streak, st.total, st.correct) == (2, 2, 2)
    st.record(False)
    assert (st.streak, st.total, st.correct) == (0, 3, 2)


def test_threshold_saturates_instead_of_overflowing():
    s = ProgressionState(level=3, thresholds={1: 100, 2: 10**400})
    assert s.threshold() == MAX_THRESHOLD
    s = ProgressionState(level=5, thresholds={1: 100, 4: MAX_THRESHOLD})
    assert s.threshold() == MAX_THRESHOLD


def test_threshold_above_max_level_is_rejected():
    with pytest.raises(ValueError):
        ProgressionState().threshold(MAX_LEVEL + 1)


def test_no_level_up_past_max_level():
    s = ProgressionState(level=MAX_LEVEL)
    required = s.threshold()
    assert apply_xp(s, required * 2) is None
    assert s.level == MAX_LEVEL
    assert s.xp < required
