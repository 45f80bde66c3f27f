"""
Environment-driven settings.

Every knob is an environment variable with a default, so the service runs
in dev with only `DATABASE_URL` set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str
    pool_min_size: int
    pool_max_size: int
    command_timeout: int
    init_schema: bool
    log_level: str
    cors_origins: tuple[str, ...]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Read settings once per process. Tests call `get_settings.cache_clear()`
    after changing the environment.
    """
    return Settings(
        database_url=env_str("DATABASE_URL"),
        pool_min_size=env_int("DB_POOL_MIN_SIZE", 1),
        pool_max_size=env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=env_int("DB_COMMAND_TIMEOUT", 30),
        init_schema=env_bool("DB_INIT_SCHEMA", False),
        log_level=env_str("LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
    )
