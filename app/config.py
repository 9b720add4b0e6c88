from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (dark console styling)
# - Centralized here so components/styles.py only maps tokens -> CSS.
#
THEME = {
    # Backgrounds
    "bg_primary": "#030712",     # page background
    "bg_secondary": "#111827",   # sidebar / header surfaces
    "bg_card": "rgba(75, 85, 99, 0.20)",  # form card surface
    # Accents
    "accent_primary": "#111827",
    "accent_secondary": "#1F2937",  # hover
    "skeleton": "#374151",
    # Text + borders
    "text_primary": "#FFFFFF",
    "text_secondary": "rgba(209, 213, 219, 0.85)",
    "border_color": "#6B7280",
    "border_muted": "#374151",
    "shadow": "0 1px 3px rgba(0,0,0,0.35)",
    "radius_px": 6,
    # Status colors
    "success": "#22C55E",
    "danger": "#F87171",
}

DEFAULT_TABLE = "student_table"
DEFAULT_PAGE_SIZE = 8


@dataclass(frozen=True)
class AppConfig:
    # Required for the hosted store (Supabase). Absence is only fatal when the store is first used.
    supabase_url: Optional[str]
    supabase_key: Optional[str]

    table_name: str
    page_size: int

    # Local dev: in-memory table seeded with fake records instead of the hosted store.
    use_mock: bool
    mock_record_count: int

    log_level: str
    log_json: bool

    @property
    def data_source(self) -> str:
        return "mock" if self.use_mock else "supabase"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int, minimum: int = 1) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - SUPABASE_URL / SUPABASE_ANON_KEY are validated lazily by data.connection
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL"),
        supabase_key=_getenv("SUPABASE_ANON_KEY"),
        table_name=_getenv("STUDENT_TABLE", DEFAULT_TABLE) or DEFAULT_TABLE,
        page_size=_getint("PAGE_SIZE", DEFAULT_PAGE_SIZE),
        use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        mock_record_count=_getint("MOCK_RECORD_COUNT", 20, minimum=0),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
        log_json=(_getenv("LOG_JSON", "false") or "false").lower() == "true",
    )
