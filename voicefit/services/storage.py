from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel

from voicefit.errors import DuplicateError
from voicefit.models import (
    Exercise,
    ProgressRecord,
    User,
    Workout,
    WorkoutSet,
    WorkoutTemplate,
)
from .catalog import filter_by_equipment, load_catalog

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _merge(model: M, updates: Dict[str, Any]) -> M:
    # Re-validate so partial updates obey the same field constraints as creation
    data = {**model.model_dump(), **updates}
    data["id"] = getattr(model, "id")
    return type(model).model_validate(data)


class MemStorage:
    """In-process store for users, plans, workouts, sets and progress.

    All record kinds share one id counter. Lookups return None when a
    record is missing; updates on a missing id also return None.
    """

    def __init__(self, exercises: Sequence[Exercise] | None = None) -> None:
        seed = list(load_catalog() if exercises is None else exercises)
        self._exercises: Dict[int, Exercise] = {ex.id: ex for ex in seed}
        self._users: Dict[int, User] = {}
        self._templates: Dict[int, WorkoutTemplate] = {}
        self._workouts: Dict[int, Workout] = {}
        self._sets: Dict[int, WorkoutSet] = {}
        self._progress: Dict[Tuple[int, int], ProgressRecord] = {}
        self._current_id = max(self._exercises, default=0) + 1

    def _next_id(self) -> int:
        nid = self._current_id
        self._current_id += 1
        return nid

    def _create(self, model: Type[M], fields: Dict[str, Any]) -> M:
        return model.model_validate({**fields, "id": self._next_id()})

    # Users
    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, **fields: Any) -> User:
        username = fields.get("username")
        if username is not None and self.get_user_by_username(username) is not None:
            raise DuplicateError(f"Username '{username}' is already taken.")
        user = self._create(User, fields)
        self._users[user.id] = user
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def update_user(self, user_id: int, **updates: Any) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = _merge(user, updates)
        self._users[user_id] = updated
        return updated

    # Workout templates
    def get_workout_templates(self, user_id: int) -> List[WorkoutTemplate]:
        return [t for t in self._templates.values() if t.user_id == user_id]

    def get_workout_template(self, template_id: int) -> Optional[WorkoutTemplate]:
        return self._templates.get(template_id)

    def create_workout_template(self, **fields: Any) -> WorkoutTemplate:
        template = self._create(WorkoutTemplate, fields)
        self._templates[template.id] = template
        return template

    # Workouts
    def get_workouts(self, user_id: int) -> List[Workout]:
        return [w for w in self._workouts.values() if w.user_id == user_id]

    def get_workout(self, workout_id: int) -> Optional[Workout]:
        return self._workouts.get(workout_id)

    def get_active_workout(self, user_id: int) -> Optional[Workout]:
        return next((w for w in self._workouts.values() if w.user_id == user_id and w.is_active), None)

    def create_workout(self, **fields: Any) -> Workout:
        workout = self._create(Workout, fields)
        self._workouts[workout.id] = workout
        return workout

    def update_workout(self, workout_id: int, **updates: Any) -> Optional[Workout]:
        workout = self._workouts.get(workout_id)
        if workout is None:
            return None
        updated = _merge(workout, updates)
        self._workouts[workout_id] = updated
        return updated

    # Exercises
    def get_exercises(self) -> List[Exercise]:
        return list(self._exercises.values())

    def get_exercises_by_equipment(self, equipment: Iterable[str]) -> List[Exercise]:
        return filter_by_equipment(self.get_exercises(), equipment)

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        return self._exercises.get(exercise_id)

    def create_exercise(self, **fields: Any) -> Exercise:
        exercise = self._create(Exercise, fields)
        self._exercises[exercise.id] = exercise
        return exercise

    # Workout sets
    def get_workout_sets(self, workout_id: int) -> List[WorkoutSet]:
        return [s for s in self._sets.values() if s.workout_id == workout_id]

    def create_workout_set(self, **fields: Any) -> WorkoutSet:
        workout_set = self._create(WorkoutSet, fields)
        self._sets[workout_set.id] = workout_set
        return workout_set

    def update_workout_set(self, set_id: int, **updates: Any) -> Optional[WorkoutSet]:
        workout_set = self._sets.get(set_id)
        if workout_set is None:
            return None
        updated = _merge(workout_set, updates)
        self._sets[set_id] = updated
        return updated

    # Progress records
    def get_progress_record(self, user_id: int, exercise_id: int) -> Optional[ProgressRecord]:
        return self._progress.get((user_id, exercise_id))

    def update_progress_record(self, **fields: Any) -> ProgressRecord:
        """Insert or replace the record for (user_id, exercise_id), keeping its id."""
        key = (fields["user_id"], fields["exercise_id"])
        existing = self._progress.get(key)
        record_id = existing.id if existing is not None else self._next_id()
        fields.pop("last_updated", None)
        record = ProgressRecord.model_validate({**fields, "id": record_id})
        self._progress[key] = record
        return record

    def get_user_progress(self, user_id: int) -> List[ProgressRecord]:
        return [r for r in self._progress.values() if r.user_id == user_id]
