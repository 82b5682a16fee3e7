from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .user import utcnow


Difficulty = Literal["beginner", "intermediate", "advanced"]


class ExerciseRecommendation(BaseModel):
    exercise_id: int
    name: str
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: Optional[float] = Field(None, ge=0, description="None means bodyweight")
    rest_time: int = Field(..., ge=0, description="seconds")
    notes: Optional[str] = None


class WorkoutRecommendation(BaseModel):
    exercises: List[ExerciseRecommendation] = Field(default_factory=list)
    estimated_duration: int = Field(0, ge=0, description="minutes")
    difficulty: Difficulty = "beginner"
    focus: str = "General Fitness"


class WorkoutTemplate(BaseModel):
    id: int = Field(..., ge=1)
    user_id: int
    name: str
    description: Optional[str] = None
    exercises: List[ExerciseRecommendation] = Field(default_factory=list)
    estimated_duration: int = Field(..., ge=0)
    difficulty: Difficulty = "beginner"
    created_at: datetime = Field(default_factory=utcnow)
