# src/todo_calendar/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"

STORAGE_BACKENDS = ("sqlite", "json")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Storage ----
    storage_backend: str
    storage_db_path: Path
    storage_json_path: Path
    storage_key: str

    # ---- Task defaults ----
    default_frequency: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-calendar").strip() or "todo-calendar"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo_calendar"))

        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "sqlite")
        storage_db_path = _env_path(_k("STORAGE_DB_PATH"), data_dir / "storage.sqlite3")
        storage_json_path = _env_path(_k("STORAGE_JSON_PATH"), data_dir / "storage.json")
        storage_key = _env(_k("STORAGE_KEY"), "taskList").strip() or "taskList"

        default_frequency = _env_choice(
            _k("DEFAULT_FREQUENCY"), ("once", "daily", "weekly", "monthly"), "once"
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_db_path=storage_db_path,
            storage_json_path=storage_json_path,
            storage_key=storage_key,
            default_frequency=default_frequency,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
