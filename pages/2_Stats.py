"""
Stats page

Current streak, best streak, completion rate and totals for every habit.
"""

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from habit_tracker.metrics import stats_frame
from habit_tracker.registry import list_habits
from habit_tracker.ui_helpers import apply_theme, app_header, color_dot, get_state

st.set_page_config(page_title="Statistics", page_icon="📊", layout="wide")


def render_rate_chart(df: pd.DataFrame) -> None:
    chart = (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("completion_rate:Q", title="Completion rate (%)"),
            y=alt.Y("name:N", title=None, sort=None),
            color=alt.Color("color:N", scale=None, legend=None),
            tooltip=["name:N", "completion_rate:Q", "total_completions:Q", "streak:Q"],
        )
    )
    st.altair_chart(chart, use_container_width=True)


def main() -> None:
    state = get_state()
    apply_theme(state)
    app_header("Statistics", "How each habit is going so far.")

    habits = list_habits(state)
    if not habits:
        st.info("No statistics available. Add some habits first!")
        return

    df = stats_frame(habits, state.completions)

    for _, row in df.iterrows():
        with st.container(border=True):
            st.markdown(f"{color_dot(row['color'])} **{row['name']}**", unsafe_allow_html=True)
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("Current streak", f"{row['streak']}")
            c2.metric("Best streak", f"{row['best_streak']}")
            c3.metric("Completion rate", f"{row['completion_rate']}%")
            c4.metric("Total completions", f"{row['total_completions']}")
            st.progress(min(int(row["completion_rate"]), 100) / 100)

    st.divider()
    render_rate_chart(df)


if __name__ == "__main__":
    main()
