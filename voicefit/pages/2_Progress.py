from __future__ import annotations

import streamlit as st

from voicefit.services.progression import is_progressing
from voicefit.ui import current_user, exercise_names, get_tracker

st.set_page_config(page_title="Progress", page_icon="📈")

st.title("Progress")

tracker = get_tracker()
user = current_user()
if user is None:
    st.info("No profile in session. Set one up on the main page first.")
    st.stop()

names = exercise_names()

stats = tracker.weekly_stats(user.id)
c1, c2, c3 = st.columns(3)
c1.metric("Workouts (7 days)", int(stats["workouts"]))
c2.metric("Sets (7 days)", int(stats["sets"]))
c3.metric("Volume (7 days)", f"{stats['volume']:g}kg")

records = tracker.storage.get_user_progress(user.id)
if not records:
    st.info("Log a few sets to see your progress here.")
    st.stop()

st.markdown("**Personal records**")
st.dataframe(
    [
        {
            "Exercise": names.get(r.exercise_id, r.exercise_id),
            "Est. 1RM (kg)": round(r.one_rep_max or 0),
            "Best set": f"{r.best_set.weight or 0:g}kg x {r.best_set.reps}" if r.best_set else "-",
            "Total volume (kg)": r.total_volume,
        }
        for r in records
    ],
    use_container_width=True,
    hide_index=True,
)

exercise_id = st.selectbox(
    "Exercise",
    [r.exercise_id for r in records],
    format_func=lambda i: names.get(i, str(i)),
)

series = tracker.progress_series(user.id, exercise_id)
tab_strength, tab_volume = st.tabs(["Strength", "Volume"])
with tab_strength:
    st.line_chart(series, x="date", y="one_rep_max")
    if is_progressing(tracker.exercise_history(user.id, exercise_id)):
        st.success("Trending up: your last three sets were heavier than the three before.")
    else:
        st.caption("No upward trend in your last six sets yet.")
with tab_volume:
    st.bar_chart(series, x="date", y="volume")

st.markdown("**Coach says**")
st.info(tracker.coaching(user.id, exercise_id))
