from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, Field

from .exercise import Equipment


Goal = Literal["muscle", "fat-loss", "strength", "mobility", "general-fitness"]

GOAL_TYPES: tuple[str, ...] = Goal.__args__  # type: ignore[attr-defined]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class UserProfile(BaseModel):
    """What the plan generator needs to know about a user.

    `goals` is a free string so unrecognised tags fall back to a general plan.
    """

    equipment: List[Equipment] = Field(default_factory=list)
    goals: str = "general-fitness"


class User(BaseModel):
    id: int = Field(..., ge=1)
    username: str = Field(..., min_length=1)
    name: str
    equipment: List[Equipment] = Field(default_factory=list)
    goals: Goal
    training_days: int = Field(3, ge=1, le=7)
    preferred_rest_time: int = Field(120, ge=0)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def profile(self) -> UserProfile:
        return UserProfile(equipment=list(self.equipment), goals=self.goals)
