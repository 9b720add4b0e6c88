from __future__ import annotations

import streamlit as st
from supabase import Client, create_client

from config import AppConfig
from data.mock_data import MockRecordStore, student_rows_mock
from data.records import RecordStore, SupabaseRecordStore
from utils.logging import get_logger

log = get_logger(__name__)


class StoreConfigError(RuntimeError):
    pass


def create_store_client(cfg: AppConfig) -> Client:
    """
    Build the Supabase client from endpoint URL + anon key.
    Missing config is a deployment error, not something to retry.
    """
    if not cfg.supabase_url or not cfg.supabase_key:
        log.error("Supabase is not configured (SUPABASE_URL / SUPABASE_ANON_KEY missing)")
        raise StoreConfigError(
            "Supabase environment variables are not configured. "
            "Set SUPABASE_URL and SUPABASE_ANON_KEY, or USE_MOCK_DATA=true for local dev."
        )
    return create_client(cfg.supabase_url, cfg.supabase_key)


def build_record_store(cfg: AppConfig) -> RecordStore:
    if cfg.use_mock:
        log.info("using mock record store (%d seeded rows)", cfg.mock_record_count)
        return MockRecordStore(student_rows_mock(cfg.mock_record_count))
    client = create_store_client(cfg)
    log.info("connected record store to table %s", cfg.table_name)
    return SupabaseRecordStore(client, cfg.table_name)


@st.cache_resource(show_spinner=False)
def get_record_store(_cfg: AppConfig) -> RecordStore:
    # One store per process, created by the first caller. `_cfg` is excluded from the cache key.
    return build_record_store(_cfg)
