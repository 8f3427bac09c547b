# src/todo_calendar/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- picks the key-value storage backend,
- wires TaskStore, the console confirm dialog and views into AppState.
"""

from __future__ import annotations

import logging
from datetime import date

from ..calendar.calendar_model import initial_calendar_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleConfirm, ConsoleViews
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.json_file import JsonFileStorage
from ..storage.sqlite_kv import SqliteKeyValueStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.storage_json_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> KeyValueStorage:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend == "json":
        return JsonFileStorage(settings.storage_json_path)
    if backend != "sqlite":
        logger.warning("Unknown storage backend %r, using sqlite.", backend)
    return SqliteKeyValueStorage(settings.storage_db_path)


def create_initial_state(*, settings=None, today: date | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(create_storage(settings), key=settings.storage_key),
        confirm=ConsoleConfirm(),
        views=ConsoleViews(),
        calendar=initial_calendar_state(today or date.today()),
    )
