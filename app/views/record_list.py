from __future__ import annotations

import streamlit as st

from components.navigation import CREATE, EDIT, navigate
from components.notifications import notify_error, notify_success, render_notifications
from components.record_table import render_record_rows, render_skeleton_rows, render_table_header
from config import AppConfig
from data.records import RecordStore
from data.service import ListState, delete_record, fetch_page, next_disabled, page_after_delete, prev_disabled
from utils.logging import get_logger

log = get_logger(__name__)


def _list_state(cfg: AppConfig) -> ListState:
    if "list_state" not in st.session_state:
        st.session_state["list_state"] = ListState(page_size=cfg.page_size)
    return st.session_state["list_state"]


def _go_prev() -> None:
    state: ListState = st.session_state["list_state"]
    if not prev_disabled(state.page):
        state.page -= 1


def _go_next() -> None:
    state: ListState = st.session_state["list_state"]
    if not next_disabled(state.page, state.pages):
        state.page += 1


def _edit(record_id: int) -> None:
    navigate(EDIT, record_id)


def _request_delete(record_id: int) -> None:
    st.session_state["list_pending_delete"] = record_id


def _apply_delete(store: RecordStore, state: ListState, record_id: int) -> None:
    res = delete_record(store, record_id)
    if not res.ok:
        notify_error(res.error)
        return
    notify_success("Deleted successfully")
    rows_left = sum(1 for r in state.records if r.id != record_id)
    state.page = page_after_delete(state.page, rows_left)


def render(cfg: AppConfig, store: RecordStore) -> None:
    state = _list_state(cfg)

    c1, c2 = st.columns([4, 1], vertical_alignment="center")
    c1.markdown("#### All records in one place Create, Update, and Delete.")
    c2.button("Create New Entry", key="create-new", on_click=navigate, args=(CREATE,), use_container_width=True)

    render_table_header()
    body = st.empty()
    with body.container():
        render_skeleton_rows(cfg.page_size)

    token = state.begin(state.page)
    res = fetch_page(store, state.page, cfg.page_size)
    if not res.ok:
        # Keep whatever was rendered last; the user can page again to retry.
        log.warning("page %d fetch failed: %s", state.page, res.error)
        notify_error(res.error)
        render_notifications()
    state.apply(token, res)

    pending_delete = st.session_state.get("list_pending_delete")
    with body.container():
        render_record_rows(state.records, on_edit=_edit, on_delete=_request_delete, busy_id=pending_delete)

    p1, p2, p3 = st.columns([1, 1, 1], vertical_alignment="center")
    p1.button("Prev", key="page-prev", on_click=_go_prev, disabled=prev_disabled(state.page), use_container_width=True)
    p2.markdown(f'<div style="text-align:center">{state.page} / {state.pages}</div>', unsafe_allow_html=True)
    p3.button(
        "Next",
        key="page-next",
        on_click=_go_next,
        disabled=next_disabled(state.page, state.pages),
        use_container_width=True,
    )

    if pending_delete is not None:
        # The row's delete button stays disabled while the request is in flight.
        st.session_state["list_pending_delete"] = None
        _apply_delete(store, state, pending_delete)
        st.rerun()
