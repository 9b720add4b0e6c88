from __future__ import annotations

import streamlit as st

from components.navigation import LIST, navigate
from components.notifications import notify_error, notify_success
from components.record_form import fill_form, form_values, render_form_skeleton, render_record_form
from config import AppConfig
from data.records import RecordStore
from data.service import parse_record_id, submit_update
from utils.logging import get_logger

log = get_logger(__name__)

PREFIX = "edit"


def _mark_pending() -> None:
    st.session_state["edit_pending"] = True


def _load(store: RecordStore, record_id: int | None, raw_id: str | None) -> bool:
    """Fetch the record and prefill the form; on any failure notify and head back to the list."""
    loading = st.empty()
    with loading.container():
        render_form_skeleton()

    if record_id is None:
        log.warning("edit route with invalid id %r", raw_id)
        notify_error("Student not found")
        return False

    res = store.get_by_id(record_id)
    if not res.ok:
        notify_error(res.error)
        return False
    if res.value is None:
        log.info("record %s not found", record_id)
        notify_error("Student not found")
        return False

    fill_form(PREFIX, res.value.values())
    st.session_state["edit_loaded_id"] = record_id
    st.session_state["edit_errors"] = {}
    loading.empty()
    return True


def render(cfg: AppConfig, store: RecordStore, raw_id: str | None) -> None:
    record_id = parse_record_id(raw_id)

    if record_id is None or st.session_state.get("edit_loaded_id") != record_id:
        if not _load(store, record_id, raw_id):
            navigate(LIST)
            st.rerun()

    _, center, _ = st.columns([1, 2, 1])
    with center:
        b1, b2 = st.columns([1, 8], vertical_alignment="center")
        b1.button("⏮", key="edit-back", help="Back to list", on_click=navigate, args=(LIST,))
        b2.markdown("#### Update Entry")
        st.caption(f"Record ID: {record_id}")

        pending = bool(st.session_state.get("edit_pending"))
        with st.container(border=True):
            render_record_form(
                PREFIX,
                st.session_state.get("edit_errors", {}),
                desc_help="Update student description",
            )
            st.button(
                "Updating..." if pending else "Update",
                key="edit-submit",
                on_click=_mark_pending,
                disabled=pending,
                use_container_width=True,
            )

    if not pending:
        return

    outcome = submit_update(store, record_id, form_values(PREFIX))
    st.session_state["edit_pending"] = False
    st.session_state["edit_errors"] = outcome.errors
    if outcome.store_error:
        notify_error(outcome.store_error)
    elif outcome.ok:
        notify_success("Student updated successfully!")
        navigate(LIST)
    st.rerun()
