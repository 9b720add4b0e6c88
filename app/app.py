"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.header import render_header  # noqa: E402
from components.navigation import CREATE, EDIT, LIST, current_route  # noqa: E402
from components.notifications import render_notifications  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import apply_theme  # noqa: E402
from config import get_config  # noqa: E402
from data.connection import get_record_store  # noqa: E402
from utils.logging import configure_logging  # noqa: E402

from views import record_create, record_edit, record_list  # noqa: E402


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg.log_level, json_logs=cfg.log_json)
    route = current_route()
    render_sidebar(cfg, route)

    render_header(
        app_name="Student Records",
        subtitle="All records in one place: create, update, and delete",
        right_pill=f"Data: {'Mock' if cfg.use_mock else 'Supabase'} · {cfg.table_name}",
    )

    # Built once per process on first use; a missing URL/key raises StoreConfigError here.
    store = get_record_store(cfg)
    render_notifications()

    # Routing only
    if route.view == LIST:
        record_list.render(cfg, store)
    elif route.view == CREATE:
        record_create.render(cfg, store)
    elif route.view == EDIT:
        record_edit.render(cfg, store, route.record_id)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
