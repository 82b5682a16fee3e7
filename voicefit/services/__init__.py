from .catalog import load_catalog, filter_by_equipment, get_by_id, find_exercise
from .planner import generate_plan, estimate_duration, determine_difficulty, focus_for_goal
from .progression import analyze_progress, one_rep_max, round_half, is_progressing
from .voice import parse_command
from .coaching import coaching_tip
from .export import plan_to_csv, plan_to_markdown, plan_to_pdf, sets_to_csv
from .storage import MemStorage
from .tracker import WorkoutTracker

__all__ = [
    "load_catalog",
    "filter_by_equipment",
    "get_by_id",
    "find_exercise",
    "generate_plan",
    "estimate_duration",
    "determine_difficulty",
    "focus_for_goal",
    "analyze_progress",
    "one_rep_max",
    "round_half",
    "is_progressing",
    "parse_command",
    "coaching_tip",
    "plan_to_csv",
    "plan_to_markdown",
    "plan_to_pdf",
    "sets_to_csv",
    "MemStorage",
    "WorkoutTracker",
]
