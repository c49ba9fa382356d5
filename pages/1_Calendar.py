"""
Calendar page

One week at a time, Monday first. Click a cell to toggle that day, which
also lets you backfill earlier days.
"""

from __future__ import annotations

from datetime import date, timedelta

import streamlit as st

from habit_tracker.completions import toggle_completion
from habit_tracker.dates import week_days
from habit_tracker.metrics import WEEKDAY_NAMES, week_frame
from habit_tracker.registry import list_habits
from habit_tracker.ui_helpers import apply_theme, app_header, color_dot, get_state

st.set_page_config(page_title="Calendar", page_icon="🗓️", layout="wide")


def main() -> None:
    state = get_state()
    apply_theme(state)
    app_header("Calendar", "Review and edit a week of check-ins.")

    if "week_anchor" not in st.session_state:
        st.session_state["week_anchor"] = date.today()
    anchor: date = st.session_state["week_anchor"]
    days = week_days(anchor)

    prev_col, label_col, next_col = st.columns([0.15, 0.7, 0.15])
    with prev_col:
        if st.button("←"):
            st.session_state["week_anchor"] = anchor - timedelta(days=7)
            st.rerun()
    with label_col:
        first, last = date.fromisoformat(days[0]), date.fromisoformat(days[-1])
        st.markdown(f"#### {first.strftime('%b %d')} - {last.strftime('%b %d')}")
    with next_col:
        if st.button("→"):
            st.session_state["week_anchor"] = anchor + timedelta(days=7)
            st.rerun()

    habits = list_habits(state)
    if not habits:
        st.info("No habits to display. Add some habits first!")
        return

    df = week_frame(habits, state.completions, anchor)

    header = st.columns([0.3] + [0.1] * 7)
    header[0].write("**Habit**")
    for i, d in enumerate(days):
        header[i + 1].write(f"**{WEEKDAY_NAMES[i]}** {date.fromisoformat(d).day}")

    for h in habits:
        row = st.columns([0.3] + [0.1] * 7)
        row[0].markdown(f"{color_dot(h.color)} {h.name}", unsafe_allow_html=True)
        cells = df[df["habit_id"] == h.id].sort_values("dow")
        for _, cell in cells.iterrows():
            with row[int(cell["dow"]) + 1]:
                if st.button("✅" if cell["done"] else "⬜", key=f"cal_{h.id}_{cell['day']}"):
                    toggle_completion(state, h.id, cell["day"])
                    st.rerun()


if __name__ == "__main__":
    main()
