from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence

from voicefit.models.results import ProgressionSuggestion

WINDOW = 6
MIN_SETS = 3
WEIGHT_STEP = 2.5
DELOAD_FACTOR = 0.9
CONSISTENCY_RATIO = 0.8


class SetLike(Protocol):
    reps: int
    weight: Optional[float]


def round_half(value: float) -> float:
    """Round to the nearest 0.5, ties upward."""
    return math.floor(value * 2 + 0.5) / 2


def one_rep_max(weight: Optional[float], reps: int) -> float:
    """Estimated one-rep max (Epley)."""
    return (weight or 0.0) * (1 + reps / 30)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def is_stalling(sets: Sequence[SetLike]) -> bool:
    if len(sets) < WINDOW:
        return False
    weights = {s.weight or 0.0 for s in sets[-WINDOW:]}
    return len(weights) <= 2


def is_consistent(window: Sequence[SetLike]) -> bool:
    if not window:
        return False
    target = window[0].reps
    consistent = [s for s in window if abs(s.reps - target) <= 1]
    return len(consistent) >= len(window) * CONSISTENCY_RATIO


def is_progressing(sets: Sequence[SetLike]) -> bool:
    """True when the last three sets average a heavier load than the three before."""
    if len(sets) < WINDOW:
        return False
    recent = [s.weight or 0.0 for s in sets[-3:]]
    older = [s.weight or 0.0 for s in sets[-WINDOW:-3]]
    return _mean(recent) > _mean(older)


def analyze_progress(sets: Sequence[SetLike]) -> ProgressionSuggestion:
    """Classify recent sets (oldest first) into a progression suggestion."""
    if len(sets) < MIN_SETS:
        return ProgressionSuggestion(
            type="maintain",
            message="Keep building consistency! Complete a few more sets to get personalized suggestions.",
        )

    window = list(sets[-WINDOW:])
    avg_reps = _mean([s.reps for s in window])
    avg_weight = _mean([s.weight or 0.0 for s in window])

    if is_stalling(sets):
        return ProgressionSuggestion(
            type="deload",
            message="You've been at the same weight for 3+ sessions. Try reducing weight by 10% and building back up.",
            new_weight=round_half(avg_weight * DELOAD_FACTOR),
        )

    if is_consistent(window) and avg_reps >= 8:
        return ProgressionSuggestion(
            type="increase_weight",
            message=f"Great consistency! Time to increase the weight by {WEIGHT_STEP}kg.",
            new_weight=round_half(avg_weight + WEIGHT_STEP),
        )

    if avg_reps < 6:
        return ProgressionSuggestion(
            type="increase_reps",
            message="Focus on hitting your target reps before increasing weight.",
            new_reps=math.ceil(avg_reps) + 1,
        )

    return ProgressionSuggestion(
        type="maintain",
        message="Keep up the good work! Maintain current weight and focus on form.",
    )
