from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pytest

from voicefit.models import WorkoutSet
from voicefit.services.progression import analyze_progress, is_progressing, one_rep_max, round_half


def make_sets(entries: Sequence[Tuple[Optional[float], int]]) -> List[WorkoutSet]:
    return [
        WorkoutSet(id=i, workout_id=1, exercise_id=1, set_number=i, weight=w, reps=r)
        for i, (w, r) in enumerate(entries, start=1)
    ]


def test_too_few_sets_is_maintain() -> None:
    for entries in ([], [(50.0, 8)], [(50.0, 8), (52.5, 8)]):
        s = analyze_progress(make_sets(entries))
        assert s.type == "maintain"
        assert s.message.startswith("Keep building consistency")
        assert s.new_weight is None and s.new_reps is None


def test_same_weight_six_sets_deloads() -> None:
    s = analyze_progress(make_sets([(50.0, 8)] * 6))
    assert s.type == "deload"
    assert s.new_weight == 45.0


def test_two_distinct_weights_still_stall() -> None:
    s = analyze_progress(make_sets([(60.0, 8), (62.5, 8)] * 3))
    assert s.type == "deload"
    # avg 61.25 * 0.9 = 55.125
    assert s.new_weight == 55.0


def test_consistent_reps_increase_weight() -> None:
    sets = make_sets([(40.0, 8), (42.5, 9), (45.0, 8), (47.5, 9), (50.0, 8), (52.5, 9)])
    s = analyze_progress(sets)
    assert s.type == "increase_weight"
    # avg 46.25 + 2.5 = 48.75 -> 49.0
    assert s.new_weight == 49.0


def test_short_history_cannot_stall() -> None:
    s = analyze_progress(make_sets([(60.0, 10)] * 3))
    assert s.type == "increase_weight"
    assert s.new_weight == 62.5


def test_low_reps_increase_reps() -> None:
    sets = make_sets([(40.0, 5), (42.5, 3), (45.0, 5), (47.5, 4), (50.0, 2), (52.5, 5)])
    s = analyze_progress(sets)
    assert s.type == "increase_reps"
    assert s.new_reps == 5


def test_inconsistent_reps_maintain() -> None:
    sets = make_sets([(40.0, 10), (42.5, 6), (45.0, 10), (47.5, 6), (50.0, 10), (52.5, 6)])
    s = analyze_progress(sets)
    assert s.type == "maintain"
    assert "form" in s.message


def test_only_last_six_sets_count() -> None:
    older = [(20.0, 2), (20.0, 2)]
    recent = [(40.0, 8), (42.5, 9), (45.0, 8), (47.5, 9), (50.0, 8), (52.5, 9)]
    assert analyze_progress(make_sets(older + recent)).type == "increase_weight"


def test_missing_weight_counts_as_zero() -> None:
    s = analyze_progress(make_sets([(None, 12)] * 6))
    assert s.type == "deload"
    assert s.new_weight == 0.0


def test_analyze_progress_is_deterministic() -> None:
    sets = make_sets([(40.0, 5), (42.5, 3), (45.0, 5), (47.5, 4), (50.0, 2), (52.5, 5)])
    assert analyze_progress(sets) == analyze_progress(list(sets))


def test_one_rep_max_epley() -> None:
    assert one_rep_max(100, 10) == pytest.approx(133.333, abs=1e-3)
    assert one_rep_max(60, 0) == 60
    assert one_rep_max(None, 10) == 0


def test_round_half() -> None:
    assert round_half(2.25) == 2.5
    assert round_half(2.2) == 2.0
    assert round_half(44.1) == 44.0
    assert round_half(55.125) == 55.0


def test_is_progressing() -> None:
    assert is_progressing(make_sets([(40.0, 8)] * 3 + [(45.0, 8)] * 3))
    assert not is_progressing(make_sets([(45.0, 8)] * 6))
    assert not is_progressing(make_sets([(40.0, 8), (50.0, 8)]))


def test_exactly_eighty_percent_consistent_increases_weight() -> None:
    # 4 of 5 within one rep of the first set
    sets = make_sets([(40.0, 10), (42.5, 10), (45.0, 10), (47.5, 10), (50.0, 6)])
    s = analyze_progress(sets)
    assert s.type == "increase_weight"
    assert s.new_weight == 47.5


def test_below_eighty_percent_consistent_maintains() -> None:
    # 4 of 6 is under the threshold even though avg reps is above 8
    sets = make_sets([(40.0, 10), (42.5, 10), (45.0, 10), (47.5, 10), (50.0, 6), (52.5, 6)])
    s = analyze_progress(sets)
    assert s.type == "maintain"
    assert "form" in s.message
