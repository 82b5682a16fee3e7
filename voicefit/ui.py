from __future__ import annotations

from typing import Optional

import streamlit as st

from voicefit.models import User
from voicefit.services.tracker import WorkoutTracker


def pretty_text(s: str) -> str:
    """Prettify identifiers like 'pull_up_bar' or 'fat-loss' for UI display."""
    return s.replace("_", " ").replace("-", " ").title()


def get_tracker() -> WorkoutTracker:
    if "tracker" not in st.session_state:
        st.session_state["tracker"] = WorkoutTracker()
    return st.session_state["tracker"]


def current_user() -> Optional[User]:
    user_id = st.session_state.get("user_id")
    if user_id is None:
        return None
    return get_tracker().storage.get_user(user_id)


def exercise_names() -> dict[int, str]:
    return {ex.id: ex.name for ex in get_tracker().storage.get_exercises()}
