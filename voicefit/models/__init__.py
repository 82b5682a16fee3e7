from .exercise import Exercise, Equipment, Category, EQUIPMENT_TYPES
from .user import User, UserProfile, Goal, GOAL_TYPES
from .plan import ExerciseRecommendation, WorkoutRecommendation, WorkoutTemplate, Difficulty
from .workout import Workout, WorkoutSet, BestSet, ProgressRecord
from .results import ProgressionSuggestion, SuggestionType, VoiceCommandResult

__all__ = [
    "Exercise",
    "Equipment",
    "Category",
    "EQUIPMENT_TYPES",
    "User",
    "UserProfile",
    "Goal",
    "GOAL_TYPES",
    "ExerciseRecommendation",
    "WorkoutRecommendation",
    "WorkoutTemplate",
    "Difficulty",
    "Workout",
    "WorkoutSet",
    "BestSet",
    "ProgressRecord",
    "ProgressionSuggestion",
    "SuggestionType",
    "VoiceCommandResult",
]
