from __future__ import annotations

from voicefit.models import UserProfile, WorkoutRecommendation, WorkoutSet
from voicefit.services.catalog import load_catalog
from voicefit.services.export import plan_to_csv, plan_to_markdown, plan_to_pdf, sets_to_csv
from voicefit.services.planner import generate_plan


def build_plan() -> WorkoutRecommendation:
    profile = UserProfile(goals="muscle", equipment=["barbell", "dumbbells"])
    return generate_plan(profile, load_catalog())


def test_plan_csv_and_markdown() -> None:
    plan = build_plan()
    rows = plan_to_csv(plan).decode("utf-8").strip().splitlines()
    assert rows[0].startswith("order,exercise_id,exercise_name")
    assert len(rows) == len(plan.exercises) + 1
    assert rows[1].startswith("1,1,Bench Press,3,8,,180")

    md = plan_to_markdown(plan)
    assert md.startswith("# Hypertrophy & Muscle Building")
    assert "- **Squat**: 3 x 8 @ bodyweight, rest 180s" in md


def test_empty_plan_markdown() -> None:
    md = plan_to_markdown(WorkoutRecommendation())
    assert "No exercises" in md


def test_plan_pdf() -> None:
    pdf_bytes = plan_to_pdf(build_plan())
    assert pdf_bytes.startswith(b"%PDF")
    assert len(pdf_bytes) > 500, "PDF export seems too small or empty"


def test_sets_csv() -> None:
    sets = [
        WorkoutSet(id=1, workout_id=7, exercise_id=1, set_number=1, weight=60.0, reps=8, rpe=8),
        WorkoutSet(id=2, workout_id=7, exercise_id=4, set_number=1, reps=10),
    ]
    rows = sets_to_csv(sets, {1: "Bench Press"}).decode("utf-8").strip().splitlines()
    assert len(rows) == 3
    assert rows[1].startswith("7,1,Bench Press,1,60.0,8,8,")
    assert rows[2].startswith("7,4,,1,,10,,")
