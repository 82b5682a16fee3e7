from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from voicefit.models.exercise import Exercise
from voicefit.models.results import VoiceCommandResult
from .catalog import find_exercise

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
DIGIT_RE = re.compile(r"\d")

EXAMPLE_COMMAND = "Bench press, 60 kilos for 8 reps"


def extract_numbers(text: str) -> List[str]:
    return NUMBER_RE.findall(text)


def extract_exercise_name(text: str) -> Optional[str]:
    """Text before the first digit, minus surrounding whitespace and a trailing comma."""
    match = DIGIT_RE.search(text)
    if not match:
        return None
    name = text[: match.start()].strip().rstrip(",").strip()
    return name or None


def format_weight(weight: float) -> str:
    return f"{weight:g}"


def parse_command(text: str, catalog: Sequence[Exercise]) -> VoiceCommandResult:
    """Turn a transcript like "Bench press, 60 kilos for 8 reps" into a set entry.

    The first number is the weight in kg and the second the rep count.
    Anything that cannot be understood comes back as an unsuccessful result.
    """
    command = (text or "").lower().strip()

    numbers = extract_numbers(command)
    if len(numbers) < 2:
        return VoiceCommandResult(
            success=False,
            message=f"I couldn't understand the weight and reps. Try saying '{EXAMPLE_COMMAND}'",
        )

    weight = float(numbers[0])
    reps = int(numbers[1].split(".")[0])

    name = extract_exercise_name(command)
    if name is None:
        return VoiceCommandResult(
            success=False,
            message="I couldn't identify the exercise. Try starting with the exercise name.",
        )

    exercise = find_exercise(name, catalog)
    if exercise is None:
        logger.debug("No catalog match for %r", name)
        return VoiceCommandResult(
            success=False,
            message=f'I couldn\'t find an exercise matching "{name}". Try being more specific.',
        )

    logger.debug("Parsed %r as %s %skg x %d", command, exercise.name, weight, reps)
    return VoiceCommandResult(
        success=True,
        exercise_id=exercise.id,
        weight=weight,
        reps=reps,
        message=f"Logging {reps} reps at {format_weight(weight)}kg for {exercise.name}",
    )
