from __future__ import annotations

import streamlit as st

_QUEUE_KEY = "notifications"

ICONS = {
    "success": "✅",
    "error": "❌",
}


def notify(message: str, kind: str = "success") -> None:
    """Queue a toast for the next render; survives st.rerun() and navigation."""
    st.session_state.setdefault(_QUEUE_KEY, []).append((kind, message))


def notify_success(message: str) -> None:
    notify(message, "success")


def notify_error(message: str) -> None:
    # Store errors are shown verbatim.
    notify(message, "error")


def render_notifications() -> None:
    for kind, message in st.session_state.pop(_QUEUE_KEY, []):
        st.toast(message, icon=ICONS.get(kind, ICONS["success"]))
