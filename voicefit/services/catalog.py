from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from voicefit.config import get_settings
from voicefit.models.exercise import Exercise

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "exercises.json"


def _catalog_path() -> Path:
    override = get_settings().CATALOG_PATH
    return Path(override) if override else CATALOG_PATH


@lru_cache(maxsize=1)
def load_catalog() -> List[Exercise]:
    path = _catalog_path()
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    exercises = [Exercise.model_validate(item) for item in raw]
    logger.debug("Loaded %d exercises from %s", len(exercises), path)
    return exercises


def filter_by_equipment(exercises: Sequence[Exercise], owned: Iterable[str]) -> List[Exercise]:
    """Keep exercises that can be done with at least one piece of owned equipment."""
    owned_set = set(owned)
    return [ex for ex in exercises if not owned_set.isdisjoint(ex.equipment)]


def get_by_id(exercises: Sequence[Exercise], exercise_id: int) -> Optional[Exercise]:
    return next((ex for ex in exercises if ex.id == exercise_id), None)


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Optional[Exercise]:
    """Resolve a spoken exercise name against the catalog.

    Tiers, first hit wins: exact name, substring in either direction,
    then any overlapping word. Matching is case-insensitive and follows
    catalog order within a tier.
    """
    needle = name.strip().lower()
    if not needle:
        return None

    for ex in exercises:
        if ex.name.lower() == needle:
            return ex

    for ex in exercises:
        candidate = ex.name.lower()
        if needle in candidate or candidate in needle:
            return ex

    keywords = needle.split()
    for ex in exercises:
        words = ex.name.lower().split()
        if any(kw in w or w in kw for kw in keywords for w in words):
            return ex

    return None
