from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel


SuggestionType = Literal["increase_weight", "increase_reps", "increase_sets", "deload", "maintain"]


class ProgressionSuggestion(BaseModel):
    type: SuggestionType
    message: str
    new_weight: Optional[float] = None
    new_reps: Optional[int] = None
    new_sets: Optional[int] = None


class VoiceCommandResult(BaseModel):
    success: bool
    message: str
    exercise_id: Optional[int] = None
    weight: Optional[float] = None
    reps: Optional[int] = None
