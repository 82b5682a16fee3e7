from __future__ import annotations

import math
from typing import Dict, List, Sequence

from voicefit.models.exercise import Exercise
from voicefit.models.plan import Difficulty, ExerciseRecommendation, WorkoutRecommendation
from voicefit.models.user import UserProfile
from .catalog import filter_by_equipment

SET_SECONDS = 45
WARMUP_COOLDOWN_SECONDS = 600

FOCUS_LABELS: Dict[str, str] = {
    "muscle": "Hypertrophy & Muscle Building",
    "fat-loss": "Fat Loss & Conditioning",
    "strength": "Strength & Power",
    "mobility": "Mobility & Movement",
    "general-fitness": "General Fitness",
}
DEFAULT_FOCUS = "General Fitness"


def _prescribe(exercises: Sequence[Exercise], sets: int, reps: int, rest: int, notes: str) -> List[ExerciseRecommendation]:
    return [
        ExerciseRecommendation(
            exercise_id=ex.id,
            name=ex.name,
            sets=sets,
            reps=reps,
            rest_time=rest,
            notes=notes,
        )
        for ex in exercises
    ]


def _muscle_block(exercises: Sequence[Exercise]) -> List[ExerciseRecommendation]:
    compounds = [ex for ex in exercises if ex.is_compound]
    accessories = [ex for ex in exercises if not ex.is_compound]
    return (
        _prescribe(compounds[:3], 3, 8, 180, "Focus on progressive overload")
        + _prescribe(accessories[:2], 3, 12, 120, "Focus on muscle contraction")
    )


def _fat_loss_block(exercises: Sequence[Exercise]) -> List[ExerciseRecommendation]:
    bodyweight = [ex for ex in exercises if "bodyweight" in ex.equipment]
    return _prescribe(bodyweight[:5], 3, 15, 60, "Keep rest periods short")


def _strength_block(exercises: Sequence[Exercise]) -> List[ExerciseRecommendation]:
    compounds = [ex for ex in exercises if ex.is_compound]
    return _prescribe(compounds[:4], 5, 5, 300, "Focus on heavy weights and form")


def _general_block(exercises: Sequence[Exercise]) -> List[ExerciseRecommendation]:
    return _prescribe(list(exercises)[:5], 3, 10, 120, "Balanced approach")


_BUILDERS = {
    "muscle": _muscle_block,
    "fat-loss": _fat_loss_block,
    "strength": _strength_block,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_duration(exercises: Sequence[ExerciseRecommendation]) -> int:
    """Minutes for working sets, average rest after each set, plus warm-up/cool-down.

    An empty plan takes no time.
    """
    if not exercises:
        return 0
    total_sets = sum(ex.sets for ex in exercises)
    avg_rest = sum(ex.rest_time for ex in exercises) / len(exercises)
    seconds = total_sets * SET_SECONDS + total_sets * avg_rest + WARMUP_COOLDOWN_SECONDS
    return round_half_up(seconds / 60)


def determine_difficulty(exercises: Sequence[ExerciseRecommendation]) -> Difficulty:
    if not exercises:
        return "beginner"
    total_sets = sum(ex.sets for ex in exercises)
    avg_reps = sum(ex.reps for ex in exercises) / len(exercises)
    if total_sets <= 12 and avg_reps >= 10:
        return "beginner"
    if total_sets <= 18 and avg_reps >= 8:
        return "intermediate"
    return "advanced"


def focus_for_goal(goal: str) -> str:
    return FOCUS_LABELS.get(goal, DEFAULT_FOCUS)


def generate_plan(profile: UserProfile, catalog: Sequence[Exercise]) -> WorkoutRecommendation:
    """Build a single-session recommendation for the profile's goal.

    Exercises are taken as a prefix of the equipment-filtered catalog, so the
    result depends only on the inputs and their order.
    """
    available = filter_by_equipment(catalog, profile.equipment)
    builder = _BUILDERS.get(profile.goals, _general_block)
    selected = builder(available)
    return WorkoutRecommendation(
        exercises=selected,
        estimated_duration=estimate_duration(selected),
        difficulty=determine_difficulty(selected),
        focus=focus_for_goal(profile.goals),
    )
