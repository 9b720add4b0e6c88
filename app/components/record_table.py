from __future__ import annotations

from typing import Callable, Optional, Sequence

import streamlit as st

from data.records import Record
from data.service import truncate_description

COLUMN_WIDTHS = [0.6, 1.6, 2.2, 1.4, 3.2, 0.5, 0.5]
HEADERS = ["ID", "Name", "Email", "Phone", "Description", "Actions", ""]


def render_table_header() -> None:
    cols = st.columns(COLUMN_WIDTHS)
    for c, label in zip(cols, HEADERS):
        c.markdown(f'<div class="rec-th">{label}</div>', unsafe_allow_html=True)


def render_skeleton_rows(n_rows: int) -> None:
    """Placeholder rows while a page loads; same row count as a full page to avoid layout shift."""
    row = '<div class="skeleton-row">' + '<div class="skeleton-cell"></div>' * len(HEADERS) + "</div>"
    st.markdown("".join(row for _ in range(n_rows)), unsafe_allow_html=True)


def render_record_rows(
    records: Sequence[Record],
    on_edit: Callable[[int], None],
    on_delete: Callable[[int], None],
    busy_id: Optional[int] = None,
) -> None:
    if not records:
        st.info("No data found")
        return

    for r in records:
        cols = st.columns(COLUMN_WIDTHS, vertical_alignment="center")
        cols[0].write(r.id)
        cols[1].write(r.name)
        cols[2].write(r.email)
        cols[3].write(r.number)
        cols[4].write(truncate_description(r.desc))
        cols[5].button("✏️", key=f"edit-{r.id}", help="Edit", on_click=on_edit, args=(r.id,))
        cols[6].button(
            "🗑️",
            key=f"delete-{r.id}",
            help="Delete",
            on_click=on_delete,
            args=(r.id,),
            disabled=busy_id == r.id,
        )
