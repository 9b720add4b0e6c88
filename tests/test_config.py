from __future__ import annotations

import pytest

from config import DEFAULT_PAGE_SIZE, DEFAULT_TABLE, get_config

ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "STUDENT_TABLE",
    "PAGE_SIZE",
    "USE_MOCK_DATA",
    "MOCK_RECORD_COUNT",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    cfg = get_config()
    assert cfg.supabase_url is None
    assert cfg.supabase_key is None
    assert cfg.table_name == DEFAULT_TABLE
    assert cfg.page_size == DEFAULT_PAGE_SIZE == 8
    assert cfg.use_mock is False
    assert cfg.data_source == "supabase"
    assert cfg.log_level == "INFO"
    assert cfg.log_json is False


def test_reads_environment(clean_env):
    clean_env.setenv("SUPABASE_URL", " https://abc.supabase.co ")
    clean_env.setenv("SUPABASE_ANON_KEY", "anon-key")
    clean_env.setenv("STUDENT_TABLE", "students")
    clean_env.setenv("PAGE_SIZE", "5")
    clean_env.setenv("USE_MOCK_DATA", "TRUE")
    clean_env.setenv("MOCK_RECORD_COUNT", "0")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("LOG_JSON", "True")

    cfg = get_config()
    assert cfg.supabase_url == "https://abc.supabase.co"
    assert cfg.supabase_key == "anon-key"
    assert cfg.table_name == "students"
    assert cfg.page_size == 5
    assert cfg.use_mock is True
    assert cfg.data_source == "mock"
    assert cfg.mock_record_count == 0
    assert cfg.log_level == "DEBUG"
    assert cfg.log_json is True


def test_blank_and_invalid_values_fall_back(clean_env):
    clean_env.setenv("SUPABASE_URL", "   ")
    clean_env.setenv("PAGE_SIZE", "zero")
    clean_env.setenv("MOCK_RECORD_COUNT", "-4")
    cfg = get_config()
    assert cfg.supabase_url is None
    assert cfg.page_size == DEFAULT_PAGE_SIZE
    assert cfg.mock_record_count == 20


def test_log_json_only_on_for_true(clean_env):
    clean_env.setenv("LOG_JSON", "1")
    assert get_config().log_json is False
