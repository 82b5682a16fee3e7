from __future__ import annotations

import streamlit as st

from voicefit.errors import VoiceFitError
from voicefit.services.export import sets_to_csv
from voicefit.services.voice import EXAMPLE_COMMAND
from voicefit.ui import current_user, exercise_names, get_tracker

st.set_page_config(page_title="Workout", page_icon="🎙️")

st.title("Workout")

tracker = get_tracker()
user = current_user()
if user is None:
    st.info("No profile in session. Set one up on the main page first.")
    st.stop()

names = exercise_names()
workout = tracker.storage.get_active_workout(user.id)

if workout is None:
    template_id = st.session_state.get("template_id")
    template = tracker.storage.get_workout_template(template_id) if template_id else None
    label = template.name if template else "Workout"
    if st.button(f"▶️ Start {label}", type="primary"):
        try:
            tracker.start_workout(user.id, template_id=template.id if template else None)
        except VoiceFitError as e:
            st.error(str(e))
        else:
            st.rerun()
    st.stop()

st.subheader(workout.name)
st.caption(f"Started {workout.started_at:%H:%M} UTC · rest {user.preferred_rest_time}s between sets")

# Voice: the browser transcript arrives as plain text
with st.form("voice-form", clear_on_submit=True):
    row = st.columns([8, 1])
    with row[0]:
        transcript = st.text_input(
            "Voice command",
            placeholder=f"e.g. {EXAMPLE_COMMAND}",
            label_visibility="collapsed",
        )
    with row[1]:
        said = st.form_submit_button("🎙️ Log", use_container_width=True)
if said and transcript:
    result, _ = tracker.log_voice_command(workout.id, transcript)
    if result.success:
        st.success(result.message)
    else:
        st.warning(result.message)

with st.expander("Log a set manually"):
    with st.form("manual-form", clear_on_submit=True):
        exercise_id = st.selectbox("Exercise", list(names), format_func=lambda i: names[i])
        c1, c2, c3 = st.columns(3)
        weight = c1.number_input("Weight (kg)", min_value=0.0, step=2.5, value=0.0)
        reps = c2.number_input("Reps", min_value=0, step=1, value=8)
        rpe = c3.number_input("RPE", min_value=0, max_value=10, step=1, value=0, help="0 = not recorded")
        logged = st.form_submit_button("Log set")
    if logged:
        try:
            s = tracker.log_set(
                workout.id,
                int(exercise_id),
                reps=int(reps),
                weight=float(weight) or None,
                rpe=int(rpe) or None,
            )
            st.success(f"Set {s.set_number} of {names[s.exercise_id]} logged.")
        except VoiceFitError as e:
            st.error(str(e))

sets = tracker.storage.get_workout_sets(workout.id)
if sets:
    st.markdown("**Logged sets**")
    st.dataframe(
        [
            {
                "Exercise": names.get(s.exercise_id, s.exercise_id),
                "Set": s.set_number,
                "Weight (kg)": s.weight,
                "Reps": s.reps,
                "RPE": s.rpe,
            }
            for s in sets
        ],
        use_container_width=True,
        hide_index=True,
    )

    st.markdown("**Next time**")
    for exercise_id in dict.fromkeys(s.exercise_id for s in sets):
        suggestion = tracker.suggest_progression(user.id, exercise_id)
        extra = ""
        if suggestion.new_weight is not None:
            extra = f" → {suggestion.new_weight:g}kg"
        elif suggestion.new_reps is not None:
            extra = f" → {suggestion.new_reps} reps"
        st.markdown(f"- {names.get(exercise_id)}: {suggestion.message}{extra}")

    st.download_button(
        "📄 Download sets (CSV)",
        data=sets_to_csv(sets, names),
        file_name=f"workout_{workout.id}.csv",
        mime="text/csv",
    )

if st.button("⏹️ Finish workout"):
    finished = tracker.finish_workout(workout.id)
    st.toast(f"Workout done: {finished.duration} min, {finished.total_volume:g}kg total volume.")
    st.rerun()
