from __future__ import annotations

import streamlit as st

from components.navigation import CREATE, LIST, Route, navigate
from config import AppConfig


NAV_ITEMS = [
    ("📋 All records", LIST),
    ("➕ Create New Entry", CREATE),
]


def render_sidebar(cfg: AppConfig, route: Route) -> None:
    with st.sidebar:
        st.markdown("### 🎓 Student Records")
        st.caption("List, create, update and delete student entries")

        for label, view in NAV_ITEMS:
            st.button(
                label,
                key=f"nav-{view}",
                on_click=navigate,
                args=(view,),
                type="primary" if route.view == view else "secondary",
                use_container_width=True,
            )

        with st.expander("⚙️ Settings", expanded=False):
            st.markdown("**Data source**")
            st.write("Mock (in-memory)" if cfg.use_mock else "Supabase")
            st.markdown("**Table**")
            st.code(cfg.table_name, language="text")
            st.markdown("**Rows per page**")
            st.write(cfg.page_size)
