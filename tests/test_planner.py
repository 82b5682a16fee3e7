from __future__ import annotations

from itertools import combinations

from voicefit.models import EQUIPMENT_TYPES, GOAL_TYPES, UserProfile
from voicefit.services.catalog import filter_by_equipment, load_catalog
from voicefit.services.planner import generate_plan


def build_profile(goal: str, equipment: list[str]) -> UserProfile:
    return UserProfile(goals=goal, equipment=equipment)  # type: ignore[arg-type]


def test_muscle_plan_compounds_then_accessories() -> None:
    plan = generate_plan(build_profile("muscle", ["barbell", "dumbbells"]), load_catalog())

    assert [ex.name for ex in plan.exercises] == [
        "Bench Press", "Squat", "Deadlift", "Bicep Curl", "Lateral Raise",
    ]
    assert [(ex.sets, ex.reps, ex.rest_time) for ex in plan.exercises[:3]] == [(3, 8, 180)] * 3
    assert [(ex.sets, ex.reps, ex.rest_time) for ex in plan.exercises[3:]] == [(3, 12, 120)] * 2
    assert plan.exercises[0].notes == "Focus on progressive overload"
    assert plan.exercises[-1].notes == "Focus on muscle contraction"
    # 15 sets, avg rest 156s: (675 + 2340 + 600) / 60 = 60.25
    assert plan.estimated_duration == 60
    assert plan.difficulty == "intermediate"
    assert plan.focus == "Hypertrophy & Muscle Building"


def test_fat_loss_uses_bodyweight_exercises() -> None:
    plan = generate_plan(build_profile("fat-loss", ["bodyweight"]), load_catalog())

    assert [ex.name for ex in plan.exercises] == ["Squat", "Pull-ups", "Push-ups", "Lunges", "Plank"]
    assert all((ex.sets, ex.reps, ex.rest_time) == (3, 15, 60) for ex in plan.exercises)
    assert plan.estimated_duration == 36
    assert plan.difficulty == "intermediate"
    assert plan.focus == "Fat Loss & Conditioning"


def test_fat_loss_needs_bodyweight_in_exercise_equipment() -> None:
    plan = generate_plan(build_profile("fat-loss", ["kettlebells"]), load_catalog())
    assert plan.exercises == []


def test_strength_plan_caps_at_four_compounds() -> None:
    plan = generate_plan(build_profile("strength", list(EQUIPMENT_TYPES)), load_catalog())

    assert len(plan.exercises) == 4
    assert all((ex.sets, ex.reps, ex.rest_time) == (5, 5, 300) for ex in plan.exercises)
    assert plan.difficulty == "advanced"
    assert plan.focus == "Strength & Power"


def test_single_exercise_strength_plan() -> None:
    plan = generate_plan(build_profile("strength", ["kettlebells"]), load_catalog())

    assert [ex.name for ex in plan.exercises] == ["Kettlebell Swing"]
    # (225 + 1500 + 600) / 60 = 38.75
    assert plan.estimated_duration == 39
    assert plan.difficulty == "advanced"


def test_mobility_and_unknown_goals_get_balanced_plan() -> None:
    mobility = generate_plan(build_profile("mobility", ["bands"]), load_catalog())
    assert [ex.name for ex in mobility.exercises] == ["Bicep Curl", "Tricep Pushdown", "Band Pull-Apart"]
    assert all((ex.sets, ex.reps, ex.rest_time) == (3, 10, 120) for ex in mobility.exercises)
    assert mobility.exercises[0].notes == "Balanced approach"
    assert mobility.difficulty == "beginner"
    assert mobility.focus == "Mobility & Movement"

    unknown = generate_plan(build_profile("yoga", ["bands"]), load_catalog())
    assert unknown.exercises == mobility.exercises
    assert unknown.focus == "General Fitness"


def test_no_matching_equipment_gives_empty_plan() -> None:
    plan = generate_plan(build_profile("muscle", []), load_catalog())

    assert plan.exercises == []
    assert plan.estimated_duration == 0
    assert plan.difficulty == "beginner"
    assert plan.focus == "Hypertrophy & Muscle Building"


def test_plans_are_ordered_subsets_of_filtered_catalog() -> None:
    catalog = load_catalog()
    caps = {"muscle": 5, "fat-loss": 5, "strength": 4, "mobility": 5, "general-fitness": 5}
    for goal in GOAL_TYPES:
        for equipment in combinations(EQUIPMENT_TYPES, 2):
            profile = build_profile(goal, list(equipment))
            plan = generate_plan(profile, catalog)
            allowed = [ex.id for ex in filter_by_equipment(catalog, equipment)]
            ids = [ex.exercise_id for ex in plan.exercises]

            assert set(ids) <= set(allowed), f"{goal}/{equipment}: {ids} not in {allowed}"
            assert len(ids) <= caps[goal]
            if goal != "muscle":
                positions = [allowed.index(i) for i in ids]
                assert positions == sorted(positions), f"{goal}/{equipment} out of catalog order"
            assert plan == generate_plan(profile, catalog), "plan generation is not deterministic"
