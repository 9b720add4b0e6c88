from __future__ import annotations

import streamlit as st

from components.navigation import LIST, navigate
from components.notifications import notify_error, notify_success
from components.record_form import form_values, render_record_form, reset_form
from config import AppConfig
from data.records import RecordStore
from data.schemas import DESC_MAX
from data.service import submit_create
from utils.logging import get_logger

log = get_logger(__name__)

PREFIX = "create"


def _mark_pending() -> None:
    st.session_state["create_pending"] = True


def render(cfg: AppConfig, store: RecordStore) -> None:
    if "create_errors" not in st.session_state:
        # Fresh visit: start from an empty form.
        reset_form(PREFIX)
        st.session_state["create_errors"] = {}

    _, center, _ = st.columns([1, 2, 1])
    with center:
        b1, b2 = st.columns([1, 8], vertical_alignment="center")
        b1.button("⏮", key="create-back", help="Back to list", on_click=navigate, args=(LIST,))
        b2.markdown("#### Create New Entry")

        pending = bool(st.session_state.get("create_pending"))
        with st.container(border=True):
            render_record_form(
                PREFIX,
                st.session_state["create_errors"],
                desc_help="Tell us how we can help you.",
                desc_max_chars=DESC_MAX,
            )
            st.button(
                "Submitting..." if pending else "Submit",
                key="create-submit",
                on_click=_mark_pending,
                disabled=pending,
                use_container_width=True,
            )

    if not pending:
        return

    outcome = submit_create(store, form_values(PREFIX))
    st.session_state["create_pending"] = False
    st.session_state["create_errors"] = outcome.errors
    if outcome.store_error:
        # Values stay in the form so the user can resubmit.
        notify_error(outcome.store_error)
    elif outcome.ok:
        log.info("created record id=%s", outcome.record.id if outcome.record else "?")
        notify_success("Form submitted successfully 🎉")
        navigate(LIST)
    st.rerun()
