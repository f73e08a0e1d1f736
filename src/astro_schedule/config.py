# src/astro_schedule/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; nothing is required to start the console.
- Behavior switches (strict times, edit re-validation) default to off.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ASTRO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Schedule behavior ----
    strict_times: bool
    check_edit_conflicts: bool

    # ---- Console ----
    notify_prefix: str

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "astro-schedule").strip() or "astro-schedule"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/astro_schedule")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            strict_times=_env_bool(_k("STRICT_TIMES"), False),
            check_edit_conflicts=_env_bool(_k("CHECK_EDIT_CONFLICTS"), False),
            notify_prefix=_env(_k("NOTIFY_PREFIX"), "[NOTIFY]"),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings, loading .env on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
