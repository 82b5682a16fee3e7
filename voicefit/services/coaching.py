from __future__ import annotations

import random
from typing import Optional, Sequence

from voicefit.models.workout import ProgressRecord, Workout

TIPS = [
    "You've been consistent with your reps. Try increasing the weight by 2.5kg next session!",
    "Your form is looking solid. Consider adding an extra set to increase volume.",
    "You've hit your target reps for 2 weeks straight. Time to progress!",
    "Your last sets have been dropping off. Consider backing off 10% or resting another day.",
    "Great progress! You're ahead of schedule. Keep up the momentum.",
]


def coaching_tip(
    progress: Optional[ProgressRecord],
    recent_workouts: Sequence[Workout],
    seed: int = 0,
) -> str:
    """Pick a coaching tip; the same seed always yields the same tip."""
    if progress is None:
        return "Start with a comfortable weight and focus on form. We'll track your progress from here!"
    if len(recent_workouts) < 2:
        return "Keep building consistency! Complete a few more workouts so I can give you better suggestions."
    return random.Random(seed).choice(TIPS)
