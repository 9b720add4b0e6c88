from __future__ import annotations

import html
from typing import Mapping, Optional

import streamlit as st

from data.records import WRITABLE_FIELDS
from data.schemas import DESC_MAX


def field_key(prefix: str, name: str) -> str:
    return f"{prefix}_{name}"


def form_values(prefix: str) -> dict[str, str]:
    return {f: st.session_state.get(field_key(prefix, f), "") for f in WRITABLE_FIELDS}


def fill_form(prefix: str, values: Mapping[str, str]) -> None:
    # Must run before the widgets are created in this script run.
    for f in WRITABLE_FIELDS:
        st.session_state[field_key(prefix, f)] = values.get(f, "") or ""


def reset_form(prefix: str) -> None:
    fill_form(prefix, {})


def _field_error(errors: Mapping[str, str], name: str) -> None:
    msg = errors.get(name)
    if msg:
        st.markdown(f'<div class="field-error">{html.escape(msg)}</div>', unsafe_allow_html=True)


def render_form_skeleton() -> None:
    st.markdown(
        """
<div class="form-skeleton">
  <div class="skeleton-bar" style="width:75%"></div>
  <div class="skeleton-bar" style="width:100%"></div>
  <div class="skeleton-bar" style="width:83%"></div>
  <div class="skeleton-bar tall" style="width:100%"></div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_record_form(
    prefix: str,
    errors: Mapping[str, str],
    desc_help: str,
    desc_max_chars: Optional[int] = None,
) -> None:
    st.text_input("Name", key=field_key(prefix, "name"), placeholder="John Doe")
    _field_error(errors, "name")

    st.text_input("Email", key=field_key(prefix, "email"))
    _field_error(errors, "email")

    st.text_input("Phone", key=field_key(prefix, "number"))
    _field_error(errors, "number")

    desc = st.text_area("Message", key=field_key(prefix, "desc"), height=140, max_chars=desc_max_chars)
    st.caption(f"{len(desc or '')}/{DESC_MAX} · {desc_help}")
    _field_error(errors, "desc")
