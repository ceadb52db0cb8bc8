# src/taskflow/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKFLOW"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_date(name: str) -> date | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None


def _env_choice(name: str, default: str, allowed: set[str]) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in allowed else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Board ----
    seed_demo: bool
    today: date | None
    recent_limit: int
    default_view: str
    default_filter: str

    @staticmethod
    def from_env() -> "Settings":
        recent_limit = _env_int(_k("RECENT_LIMIT"), 5)
        if recent_limit < 0:
            recent_limit = 5

        return Settings(
            app_name=_env(_k("APP_NAME"), "TaskFlow Pro"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskflow")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            seed_demo=_env_bool(_k("SEED_DEMO"), True),
            today=_env_date(_k("TODAY")),
            recent_limit=recent_limit,
            default_view=_env_choice(_k("DEFAULT_VIEW"), "board", {"board", "analytics"}),
            default_filter=_env_choice(
                _k("DEFAULT_FILTER"),
                "all",
                {"all", "pending", "completed", "high", "overdue"},
            ),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
