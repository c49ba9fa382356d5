"""
Habit Tracker - Today

Run with:
    streamlit run Habit_Tracker.py
"""

from __future__ import annotations

from datetime import datetime

import streamlit as st

from habit_tracker.completions import completed_today_count, is_completed, toggle_completion
from habit_tracker.metrics import current_streak
from habit_tracker.models import COLOR_OPTIONS
from habit_tracker.registry import add_habit, delete_habit, list_habits
from habit_tracker.state import TrackerState, get_theme, set_theme
from habit_tracker.ui_helpers import (
    apply_theme,
    app_header,
    color_dot,
    confirm_box,
    get_state,
    toast_error,
    toast_success,
)


st.set_page_config(
    page_title="Habit Tracker",
    page_icon="✅",
    layout="wide",
)


def render_add_form(state: TrackerState) -> None:
    with st.form("add_habit", clear_on_submit=True):
        name_col, color_col, btn_col = st.columns([0.55, 0.25, 0.2])
        with name_col:
            name = st.text_input("New habit", placeholder="Add a new habit...", label_visibility="collapsed")
        with color_col:
            color = st.selectbox("Color", options=COLOR_OPTIONS, label_visibility="collapsed")
        with btn_col:
            submitted = st.form_submit_button("Add Habit", type="primary")
    if submitted:
        if add_habit(state, name, color) is None:
            toast_error("Please enter a name.")
        else:
            toast_success("Habit created")
            st.rerun()


def render_today(state: TrackerState, now: datetime) -> None:
    habits = list_habits(state)
    left, right = st.columns([0.7, 0.3])
    with left:
        st.subheader("Today's Habits")
        st.caption(now.strftime("%A, %B %d"))
    with right:
        st.metric("Done", f"{completed_today_count(state, now)}/{len(habits)}")

    if not habits:
        st.info("No habits yet. Add one above to get started.")
        return

    for h in habits:
        done = is_completed(state, h.id, now)
        streak = current_streak(h, state.completions, now)
        with st.container(border=True):
            check_col, name_col, streak_col, del_col = st.columns([0.1, 0.55, 0.2, 0.15])
            with check_col:
                if st.button("✅" if done else "⬜", key=f"toggle_{h.id}"):
                    toggle_completion(state, h.id, now)
                    st.rerun()
            with name_col:
                st.markdown(f"{color_dot(h.color)} **{h.name}**", unsafe_allow_html=True)
            with streak_col:
                if streak > 0:
                    st.write(f"🔥 {streak} day{'s' if streak != 1 else ''}")
            with del_col:
                if st.button("Delete", key=f"delete_{h.id}", help="Deletes the habit and its history."):
                    st.session_state["confirm_delete"] = h.id

            if st.session_state.get("confirm_delete") == h.id:
                st.warning("This will remove the habit and its history.")
                sure = confirm_box(key=f"confirm_{h.id}")
                c1, c2 = st.columns(2)
                with c1:
                    if st.button("Cancel", key=f"cancel_{h.id}"):
                        st.session_state["confirm_delete"] = None
                        st.rerun()
                with c2:
                    if st.button("Delete permanently", key=f"purge_{h.id}", type="primary", disabled=not sure):
                        delete_habit(state, h.id)
                        st.session_state["confirm_delete"] = None
                        toast_success("Habit deleted")
                        st.rerun()


def main() -> None:
    state = get_state()
    theme = apply_theme(state)

    head, toggle = st.columns([0.85, 0.15])
    with head:
        app_header("Habit Tracker", "Build better habits, one day at a time.")
    with toggle:
        label = "☀️ Light" if theme == "dark" else "🌙 Dark"
        if st.button(label):
            set_theme(state.storage, "light" if get_theme(state.storage) == "dark" else "dark")
            st.rerun()

    render_add_form(state)
    st.divider()
    render_today(state, datetime.now())


if __name__ == "__main__":
    main()
