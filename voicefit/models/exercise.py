from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


Equipment = Literal[
    "dumbbells",
    "barbell",
    "bands",
    "bodyweight",
    "kettlebells",
    "cable_machine",
    "pull_up_bar",
]

Category = Literal[
    "chest",
    "back",
    "legs",
    "shoulders",
    "arms",
    "core",
    "full_body",
    "cardio",
]

EQUIPMENT_TYPES: tuple[str, ...] = Equipment.__args__  # type: ignore[attr-defined]


class Exercise(BaseModel):
    id: int = Field(..., ge=1)
    name: str
    category: Category
    muscle_groups: List[str]
    equipment: List[Equipment]
    instructions: Optional[str] = None
    is_compound: bool = False

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "name": "Bench Press",
                    "category": "chest",
                    "muscle_groups": ["chest", "triceps", "shoulders"],
                    "equipment": ["barbell", "dumbbells"],
                    "instructions": "Lie on bench, press weight up from chest",
                    "is_compound": True,
                }
            ]
        },
    }
