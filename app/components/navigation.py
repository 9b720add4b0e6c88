"""
Routing between the three views: list (default), create, edit (+ record id).

The route lives in session state and is mirrored to the URL
(`?view=edit&id=7`) so deep links work on first load.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import streamlit as st

LIST = "list"
CREATE = "create"
EDIT = "edit"
ROUTES = (LIST, CREATE, EDIT)

# Per-view transient state; dropped whenever the user navigates so the next view starts fresh.
VIEW_STATE_KEYS = (
    "list_state",
    "list_pending_delete",
    "create_errors",
    "create_pending",
    "edit_loaded_id",
    "edit_errors",
    "edit_pending",
)


@dataclass(frozen=True)
class Route:
    view: str
    record_id: Optional[str] = None


def _init_from_query_params() -> None:
    if "route" in st.session_state:
        return
    view = st.query_params.get("view", LIST)
    st.session_state["route"] = view if view in ROUTES else LIST
    st.session_state["route_id"] = st.query_params.get("id")


def current_route() -> Route:
    _init_from_query_params()
    return Route(view=st.session_state["route"], record_id=st.session_state.get("route_id"))


def _leave_view() -> None:
    state = st.session_state.get("list_state")
    if state is not None:
        # Any fetch still tagged with the old sequence is now stale.
        state.invalidate()
    for key in VIEW_STATE_KEYS:
        st.session_state.pop(key, None)


def navigate(view: str, record_id: Optional[Union[int, str]] = None) -> None:
    """Switch views. Safe inside widget callbacks; outside them, follow with st.rerun()."""
    if view not in ROUTES:
        view = LIST
    _leave_view()
    st.session_state["route"] = view
    st.session_state["route_id"] = None if record_id is None else str(record_id)

    st.query_params.clear()
    if view != LIST:
        st.query_params["view"] = view
    if record_id is not None:
        st.query_params["id"] = str(record_id)
