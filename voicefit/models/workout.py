from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .user import as_utc, utcnow


class Workout(BaseModel):
    id: int = Field(..., ge=1)
    user_id: int
    template_id: Optional[int] = None
    name: str
    started_at: datetime = Field(default_factory=utcnow)
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None
    total_volume: float = Field(0.0, ge=0, description="kg")
    duration: Optional[int] = Field(None, ge=0, description="minutes")

    @field_validator("started_at", "completed_at")
    @classmethod
    def _aware(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else None

    @property
    def is_active(self) -> bool:
        return self.completed_at is None


class WorkoutSet(BaseModel):
    id: int = Field(..., ge=1)
    workout_id: int
    exercise_id: int
    set_number: int = Field(..., ge=1)
    weight: Optional[float] = Field(None, ge=0)
    reps: int = Field(..., ge=0)
    rpe: Optional[int] = Field(None, ge=1, le=10, description="Rate of Perceived Exertion")
    rest_time: Optional[int] = Field(None, ge=0)
    completed_at: datetime = Field(default_factory=utcnow)

    model_config = {"frozen": True}

    @field_validator("completed_at")
    @classmethod
    def _aware(cls, v: datetime) -> datetime:
        return as_utc(v)

    @property
    def volume(self) -> float:
        return (self.weight or 0.0) * self.reps


class BestSet(BaseModel):
    weight: Optional[float] = None
    reps: int
    date: datetime


class ProgressRecord(BaseModel):
    id: int = Field(..., ge=1)
    user_id: int
    exercise_id: int
    one_rep_max: Optional[float] = None
    best_set: Optional[BestSet] = None
    total_volume: float = 0.0
    last_updated: datetime = Field(default_factory=utcnow)
