from __future__ import annotations

import csv
import io
from typing import List, Mapping, Sequence

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from voicefit.models.plan import ExerciseRecommendation, WorkoutRecommendation
from voicefit.models.workout import WorkoutSet


def _load(ex: ExerciseRecommendation) -> str:
    return f"{ex.weight:g}kg" if ex.weight is not None else "bodyweight"


def _title(plan: WorkoutRecommendation) -> str:
    return f"{plan.focus} ({plan.difficulty}, ~{plan.estimated_duration} min)"


def plan_to_csv(plan: WorkoutRecommendation) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["order", "exercise_id", "exercise_name", "sets", "reps", "weight", "rest_seconds", "notes"])
    for i, ex in enumerate(plan.exercises, start=1):
        writer.writerow([
            i,
            ex.exercise_id,
            ex.name,
            ex.sets,
            ex.reps,
            "" if ex.weight is None else ex.weight,
            ex.rest_time,
            ex.notes or "",
        ])
    return output.getvalue().encode("utf-8")


def plan_to_markdown(plan: WorkoutRecommendation) -> str:
    lines: List[str] = [f"# {_title(plan)}\n"]
    if not plan.exercises:
        lines.append("_No exercises match your equipment._")
    for ex in plan.exercises:
        line = f"- **{ex.name}**: {ex.sets} x {ex.reps} @ {_load(ex)}, rest {ex.rest_time}s"
        if ex.notes:
            line += f" ({ex.notes})"
        lines.append(line)
    return "\n".join(lines) + "\n"


def plan_to_pdf(plan: WorkoutRecommendation) -> bytes:
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    margin = 36
    x = margin
    y = height - margin

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, _title(plan))
    y -= 24

    c.setFont("Helvetica", 10)
    for i, ex in enumerate(plan.exercises, start=1):
        if y < margin + 36:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - margin
        c.drawString(x, y, f"{i}. {ex.name} - {ex.sets} x {ex.reps} @ {_load(ex)}, rest {ex.rest_time}s")
        y -= 14
        if ex.notes:
            c.drawString(x + 12, y, ex.notes)
            y -= 14
        y -= 4

    c.showPage()
    c.save()
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


def sets_to_csv(sets: Sequence[WorkoutSet], names: Mapping[int, str] | None = None) -> bytes:
    """Logged sets as CSV; `names` maps exercise ids to display names."""
    names = names or {}
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["workout_id", "exercise_id", "exercise_name", "set_number", "weight", "reps", "rpe", "completed_at"])
    for s in sets:
        writer.writerow([
            s.workout_id,
            s.exercise_id,
            names.get(s.exercise_id, ""),
            s.set_number,
            "" if s.weight is None else s.weight,
            s.reps,
            "" if s.rpe is None else s.rpe,
            s.completed_at.isoformat(),
        ])
    return output.getvalue().encode("utf-8")
