from __future__ import annotations

from voicefit.log import configure_logging
from voicefit.services.export import plan_to_csv, plan_to_markdown, sets_to_csv
from voicefit.services.tracker import WorkoutTracker


def main() -> None:
    configure_logging()
    tracker = WorkoutTracker()

    user, template = tracker.onboard(
        username="smoke",
        name="Smoke Test",
        equipment=["barbell", "dumbbells", "bodyweight"],
        goals="muscle",
    )
    assert template.exercises, "Generated plan is empty; check catalog/equipment."

    workout = tracker.start_workout(user.id, template_id=template.id)
    result, logged = tracker.log_voice_command(workout.id, "Bench press, 60 kilos for 8 reps")
    assert result.success and logged is not None, result.message
    tracker.log_set(workout.id, logged.exercise_id, reps=8, weight=62.5)
    finished = tracker.finish_workout(workout.id)

    plan = tracker.recommend(user.id)
    csv_bytes = plan_to_csv(plan)
    md_text = plan_to_markdown(plan)
    sets_csv = sets_to_csv(tracker.storage.get_workout_sets(workout.id))

    assert csv_bytes and md_text and sets_csv, "Export empty"

    suggestion = tracker.suggest_progression(user.id, logged.exercise_id)
    print(
        f"SMOKE OK: exercises={len(plan.exercises)} volume={finished.total_volume:g}kg "
        f"suggestion={suggestion.type}"
    )


if __name__ == "__main__":
    main()
