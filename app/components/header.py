from __future__ import annotations

import html

import streamlit as st


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="rec-header">
  <div>
    <div class="rec-title">{html.escape(app_name)}</div>
    <div class="rec-subtitle">{html.escape(subtitle)}</div>
  </div>
  <div class="pill"><span class="dot"></span>{html.escape(right_pill)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
