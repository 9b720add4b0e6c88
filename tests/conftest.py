"""
Pytest configuration for the records app.

Provides fixtures for:
- A fresh process-wide store cache per test
- Environment overrides that select the seeded in-memory store
- AppConfig construction without touching the environment
"""

from __future__ import annotations

from pathlib import Path

import pytest
import streamlit as st

from config import AppConfig

APP_PATH = Path(__file__).resolve().parents[1] / "app" / "app.py"


@pytest.fixture(autouse=True)
def clear_store_cache():
    """The record store is cached per process; reset it so tests don't share rows."""
    st.cache_resource.clear()
    yield
    st.cache_resource.clear()


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Select the in-memory store with 9 seeded rows (two pages of 8)."""
    monkeypatch.setenv("USE_MOCK_DATA", "true")
    monkeypatch.setenv("MOCK_RECORD_COUNT", "9")
    monkeypatch.setenv("PAGE_SIZE", "8")
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    return monkeypatch


def make_config(**overrides) -> AppConfig:
    values = dict(
        supabase_url=None,
        supabase_key=None,
        table_name="student_table",
        page_size=8,
        use_mock=True,
        mock_record_count=20,
        log_level="INFO",
        log_json=False,
    )
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture
def valid_values() -> dict[str, str]:
    return {"name": "Jo", "email": "jo@x.com", "number": "1234567890", "desc": "0123456789"}
