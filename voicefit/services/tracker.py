from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from voicefit.config import get_settings
from voicefit.errors import ActiveWorkoutError, NotFoundError, WorkoutClosedError
from voicefit.models import (
    BestSet,
    ProgressRecord,
    ProgressionSuggestion,
    User,
    VoiceCommandResult,
    Workout,
    WorkoutRecommendation,
    WorkoutSet,
    WorkoutTemplate,
)
from voicefit.models.user import as_utc, utcnow
from .coaching import coaching_tip
from .planner import generate_plan
from .progression import analyze_progress, one_rep_max
from .storage import MemStorage
from .voice import parse_command

logger = logging.getLogger(__name__)


class WorkoutTracker:
    """Onboarding, workout sessions, set logging and progress on top of a store."""

    def __init__(self, storage: MemStorage | None = None) -> None:
        self.storage = storage if storage is not None else MemStorage()
        self.settings = get_settings()

    # Lookups that must succeed
    def _user(self, user_id: int) -> User:
        user = self.storage.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found.")
        return user

    def _workout(self, workout_id: int) -> Workout:
        workout = self.storage.get_workout(workout_id)
        if workout is None:
            raise NotFoundError(f"Workout {workout_id} not found.")
        return workout

    # Onboarding and plans
    def onboard(
        self,
        username: str,
        name: str,
        equipment: Sequence[str],
        goals: str,
        training_days: int | None = None,
        preferred_rest_time: int | None = None,
    ) -> Tuple[User, WorkoutTemplate]:
        user = self.storage.create_user(
            username=username,
            name=name,
            equipment=list(equipment),
            goals=goals,
            training_days=(
                self.settings.DEFAULT_TRAINING_DAYS if training_days is None else training_days
            ),
            preferred_rest_time=(
                self.settings.DEFAULT_REST_SECONDS if preferred_rest_time is None else preferred_rest_time
            ),
        )
        template = self.save_plan(user, self.recommend(user.id))
        return user, template

    def recommend(self, user_id: int) -> WorkoutRecommendation:
        user = self._user(user_id)
        return generate_plan(user.profile, self.storage.get_exercises())

    def save_plan(self, user: User, plan: WorkoutRecommendation) -> WorkoutTemplate:
        return self.storage.create_workout_template(
            user_id=user.id,
            name=f"{plan.focus} Session",
            description=f"{len(plan.exercises)} exercises, {plan.difficulty}",
            exercises=plan.exercises,
            estimated_duration=plan.estimated_duration,
            difficulty=plan.difficulty,
        )

    # Sessions
    def start_workout(
        self,
        user_id: int,
        name: str | None = None,
        template_id: int | None = None,
        started_at: datetime | None = None,
    ) -> Workout:
        self._user(user_id)
        active = self.storage.get_active_workout(user_id)
        if active is not None:
            raise ActiveWorkoutError(f"Workout {active.id} is still in progress.")
        if name is None:
            template = self.storage.get_workout_template(template_id) if template_id is not None else None
            name = template.name if template is not None else "Workout"
        workout = self.storage.create_workout(
            user_id=user_id,
            template_id=template_id,
            name=name,
            started_at=started_at or utcnow(),
        )
        logger.info("User %s started workout %s", user_id, workout.id)
        return workout

    def finish_workout(self, workout_id: int, completed_at: datetime | None = None) -> Workout:
        workout = self._workout(workout_id)
        if not workout.is_active:
            raise WorkoutClosedError(f"Workout {workout_id} is already completed.")
        end = as_utc(completed_at) if completed_at is not None else utcnow()
        sets = self.storage.get_workout_sets(workout_id)
        finished = self.storage.update_workout(
            workout_id,
            completed_at=end,
            duration=max(0, int((end - workout.started_at).total_seconds() // 60)),
            total_volume=sum(s.volume for s in sets),
        )
        if finished is None:
            raise NotFoundError(f"Workout {workout_id} not found.")
        logger.info("Workout %s finished: %d sets, %.1fkg", workout_id, len(sets), finished.total_volume)
        return finished

    # Logging
    def log_set(
        self,
        workout_id: int,
        exercise_id: int,
        reps: int,
        weight: float | None = None,
        rpe: int | None = None,
        rest_time: int | None = None,
        completed_at: datetime | None = None,
    ) -> WorkoutSet:
        workout = self._workout(workout_id)
        if not workout.is_active:
            raise WorkoutClosedError(f"Workout {workout_id} is already completed.")
        if self.storage.get_exercise(exercise_id) is None:
            raise NotFoundError(f"Exercise {exercise_id} not found.")

        previous = [s for s in self.storage.get_workout_sets(workout_id) if s.exercise_id == exercise_id]
        fields: Dict[str, Any] = dict(
            workout_id=workout_id,
            exercise_id=exercise_id,
            set_number=len(previous) + 1,
            weight=weight,
            reps=reps,
            rpe=rpe,
            rest_time=rest_time,
        )
        if completed_at is not None:
            fields["completed_at"] = completed_at
        workout_set = self.storage.create_workout_set(**fields)
        self._update_progress(workout, workout_set)
        logger.info(
            "Logged set %d of exercise %s in workout %s: %s x %d",
            workout_set.set_number, exercise_id, workout_id, weight, reps,
        )
        return workout_set

    def _update_progress(self, workout: Workout, workout_set: WorkoutSet) -> ProgressRecord:
        existing = self.storage.get_progress_record(workout.user_id, workout_set.exercise_id)
        estimate = one_rep_max(workout_set.weight, workout_set.reps)

        best_set = existing.best_set if existing is not None else None
        best_estimate = one_rep_max(best_set.weight, best_set.reps) if best_set is not None else None
        if best_estimate is None or estimate > best_estimate:
            best_set = BestSet(weight=workout_set.weight, reps=workout_set.reps, date=workout_set.completed_at)

        previous_max = existing.one_rep_max if existing is not None else None
        return self.storage.update_progress_record(
            user_id=workout.user_id,
            exercise_id=workout_set.exercise_id,
            one_rep_max=max(estimate, previous_max or 0.0),
            best_set=best_set,
            total_volume=(existing.total_volume if existing is not None else 0.0) + workout_set.volume,
        )

    def log_voice_command(self, workout_id: int, transcript: str) -> Tuple[VoiceCommandResult, Optional[WorkoutSet]]:
        """Parse a transcript and log it; a failed parse logs nothing."""
        self._workout(workout_id)
        result = parse_command(transcript, self.storage.get_exercises())
        if not result.success:
            logger.debug("Voice command not understood: %r", transcript)
            return result, None
        if result.exercise_id is None or result.reps is None:
            return result, None
        workout_set = self.log_set(workout_id, result.exercise_id, reps=result.reps, weight=result.weight)
        return result, workout_set

    # Progress
    def exercise_history(self, user_id: int, exercise_id: int) -> List[WorkoutSet]:
        """All of a user's sets for one exercise, oldest first."""
        sets: List[WorkoutSet] = []
        for workout in self.storage.get_workouts(user_id):
            sets.extend(s for s in self.storage.get_workout_sets(workout.id) if s.exercise_id == exercise_id)
        return sorted(sets, key=lambda s: (s.completed_at, s.id))

    def suggest_progression(self, user_id: int, exercise_id: int) -> ProgressionSuggestion:
        self._user(user_id)
        return analyze_progress(self.exercise_history(user_id, exercise_id))

    def progress_series(self, user_id: int, exercise_id: int) -> List[Dict[str, Any]]:
        """Per-workout best estimated 1RM and volume for charting."""
        series: List[Dict[str, Any]] = []
        workouts = sorted(self.storage.get_workouts(user_id), key=lambda w: (w.started_at, w.id))
        for workout in workouts:
            sets = [s for s in self.storage.get_workout_sets(workout.id) if s.exercise_id == exercise_id]
            if not sets:
                continue
            series.append({
                "workout_id": workout.id,
                "date": workout.started_at,
                "one_rep_max": round(max(one_rep_max(s.weight, s.reps) for s in sets), 2),
                "volume": sum(s.volume for s in sets),
            })
        return series

    def weekly_stats(self, user_id: int, now: datetime | None = None) -> Dict[str, float]:
        end = as_utc(now) if now is not None else utcnow()
        start = end - timedelta(days=7)
        recent = [w for w in self.storage.get_workouts(user_id) if start <= w.started_at <= end]
        sets = [s for w in recent for s in self.storage.get_workout_sets(w.id)]
        return {
            "workouts": len(recent),
            "sets": len(sets),
            "volume": sum(s.volume for s in sets),
        }

    def coaching(self, user_id: int, exercise_id: int) -> str:
        self._user(user_id)
        progress = self.storage.get_progress_record(user_id, exercise_id)
        window = self.settings.RECENT_WORKOUTS_WINDOW
        recent = self.storage.get_workouts(user_id)[-window:]
        seed = self.settings.COACHING_SEED
        if seed is None:
            seed = user_id * 1000 + exercise_id
        return coaching_tip(progress, recent, seed=seed)
