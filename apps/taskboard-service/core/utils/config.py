"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple


DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
)


@dataclass(frozen=True)
class Settings:
    log_level: str
    cors_origins: Tuple[str, ...]
    due_soon_days: int
    sample_data_enabled: bool
    skip_database_operations: bool
    sqlite_path: str
    api_url: str


def _normalize_bool(value: Optional[str], default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _parse_int(value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_origins(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return DEFAULT_CORS_ORIGINS
    origins: List[str] = [item.strip() for item in value.split(",") if item.strip()]
    return tuple(origins) or DEFAULT_CORS_ORIGINS


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings snapshot."""
    return Settings(
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        due_soon_days=max(0, _parse_int(os.getenv("DUE_SOON_DAYS"), 1)),
        sample_data_enabled=_normalize_bool(os.getenv("SAMPLE_DATA_ENABLED"), default=True),
        skip_database_operations=_normalize_bool(os.getenv("SKIP_DATABASE_OPERATIONS"), default=False),
        sqlite_path=os.getenv("TASKBOARD_SQLITE_PATH") or "taskboard.db",
        api_url=(os.getenv("TASKBOARD_API_URL") or "http://localhost:8000").rstrip("/"),
    )


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""
    get_settings.cache_clear()


__all__ = [
    "Settings",
    "DEFAULT_CORS_ORIGINS",
    "get_settings",
    "reset_settings_cache",
]
