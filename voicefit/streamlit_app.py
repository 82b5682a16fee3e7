from __future__ import annotations

# Ensure the repository root is on sys.path so that absolute imports like `voicefit.*` work
# when Streamlit runs this file from within the voicefit/ directory.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from typing import List

import streamlit as st

from voicefit.config import get_settings
from voicefit.errors import DuplicateError
from voicefit.log import configure_logging
from voicefit.models import EQUIPMENT_TYPES, GOAL_TYPES
from voicefit.services.export import plan_to_csv, plan_to_markdown, plan_to_pdf
from voicefit.ui import current_user, get_tracker, pretty_text

st.set_page_config(page_title="VoiceFit", page_icon="🏋️", layout="wide")
settings = get_settings()
configure_logging()

tracker = get_tracker()

st.markdown("""
<style>
.chips{ display:flex; flex-wrap:wrap; gap:.24rem .38rem; margin:.15rem 0 .35rem 0; }
.chip{ padding:2px 8px; border-radius:999px; font-size:12px; background:#eef2f7; color:#334155; }
.chip.note{ background:#e7f5ff; color:#1e3a8a; }
</style>
""", unsafe_allow_html=True)

with st.sidebar:
    st.header("VoiceFit")
    user = current_user()
    if user is None:
        st.caption("Tell us about your training to get a workout.")
        with st.form("onboarding"):
            name = st.text_input("Name")
            username = st.text_input("Username")
            goal = st.selectbox("Goal", list(GOAL_TYPES), index=0, format_func=pretty_text)
            equipment: List[str] = st.multiselect(
                "Equipment",
                list(EQUIPMENT_TYPES),
                default=["bodyweight"],
                format_func=pretty_text,
            )
            training_days = st.slider("Training days per week", 1, 7, settings.DEFAULT_TRAINING_DAYS)
            rest = st.slider("Preferred rest (s)", 30, 300, settings.DEFAULT_REST_SECONDS, step=15)
            submitted = st.form_submit_button("Create my plan", use_container_width=True)
        if submitted:
            if not name.strip() or not username.strip():
                st.error("Name and username are required.")
            else:
                try:
                    new_user, template = tracker.onboard(
                        username=username.strip(),
                        name=name.strip(),
                        equipment=equipment,
                        goals=goal,
                        training_days=training_days,
                        preferred_rest_time=rest,
                    )
                except DuplicateError as e:
                    st.error(str(e))
                else:
                    st.session_state["user_id"] = new_user.id
                    st.session_state["template_id"] = template.id
                    st.toast("Plan generated.")
                    st.rerun()
    else:
        st.write(f"Signed in as **{user.name}** (@{user.username})")
        st.caption(f"Goal: {pretty_text(user.goals)} · {user.training_days} days/week")
        if st.button("🔁 Regenerate plan", use_container_width=True):
            template = tracker.save_plan(user, tracker.recommend(user.id))
            st.session_state["template_id"] = template.id
            st.toast("Plan regenerated.")
        if st.button("🚪 Sign out", use_container_width=True):
            st.session_state.pop("user_id", None)
            st.session_state.pop("template_id", None)
            st.rerun()

user = current_user()
if user is None:
    st.info("Use the sidebar to set up your profile and generate a workout.")
    st.stop()

plan = tracker.recommend(user.id)

head_col, export_col = st.columns([8, 1])
with head_col:
    st.subheader(plan.focus)
    m1, m2, m3 = st.columns(3)
    m1.metric("Exercises", len(plan.exercises))
    m2.metric("Estimated duration", f"{plan.estimated_duration} min")
    m3.metric("Difficulty", pretty_text(plan.difficulty))
with export_col:
    with st.popover("⬇️ Export"):
        st.download_button("📄 CSV", data=plan_to_csv(plan), file_name="workout_plan.csv", mime="text/csv", use_container_width=True)
        st.download_button("📝 Markdown", data=plan_to_markdown(plan), file_name="workout_plan.md", mime="text/markdown", use_container_width=True)
        st.download_button("📘 PDF", data=plan_to_pdf(plan), file_name="workout_plan.pdf", mime="application/pdf", use_container_width=True)

if not plan.exercises:
    st.warning("None of the exercises in the catalog match your equipment. Add equipment to get a plan.")

for ex in plan.exercises:
    with st.container(border=True):
        st.markdown(f"**{ex.name}**")
        chips = [f"{ex.sets} sets", f"{ex.reps} reps", f"rest {ex.rest_time}s"]
        html = "".join(f"<span class='chip'>{c}</span>" for c in chips)
        if ex.notes:
            html += f"<span class='chip note'>{ex.notes}</span>"
        st.markdown(f"<div class='chips'>{html}</div>", unsafe_allow_html=True)

st.caption("Head to the Workout page to start a session and log sets by voice or by hand.")
