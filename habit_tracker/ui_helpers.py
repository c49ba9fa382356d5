"""
UI helpers shared across pages (Streamlit).

Keeping this separate avoids repeating small formatting bits, and gives
every page the same ``TrackerState`` for the session.
"""

from __future__ import annotations

import streamlit as st

from habit_tracker.config import load_settings, setup_logging
from habit_tracker.state import TrackerState, get_theme, load_state
from habit_tracker.storage import SqliteStorage

DARK_CSS = """
<style>
.stApp { background-color: #111827; color: #F9FAFB; }
</style>
"""


def app_header(title: str, subtitle: str | None = None) -> None:
    st.title(title)
    if subtitle:
        st.caption(subtitle)


def get_state() -> TrackerState:
    """
    Load the state once per session; later reruns reuse it.
    """
    if "tracker_state" not in st.session_state:
        settings = load_settings()
        setup_logging(settings)
        st.session_state["tracker_state"] = load_state(SqliteStorage(settings.db_path))
    return st.session_state["tracker_state"]


def apply_theme(state: TrackerState) -> str:
    theme = get_theme(state.storage)
    if theme == "dark":
        st.markdown(DARK_CSS, unsafe_allow_html=True)
    return theme


def color_dot(color: str) -> str:
    return f"<span style='color:{color}'>●</span>"


def toast_success(msg: str) -> None:
    try:
        st.toast(msg, icon="✅")
    except Exception:
        st.success(msg)


def toast_error(msg: str) -> None:
    try:
        st.toast(msg, icon="⚠️")
    except Exception:
        st.error(msg)


def confirm_box(key: str, label: str = "I understand") -> bool:
    return st.checkbox(label, key=key)
