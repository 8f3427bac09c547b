# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_calendar.calendar.calendar_model import initial_calendar_state
from todo_calendar.core.state import AppState
from todo_calendar.tasks.task_store import TaskStore

from .fakes import FakeConfirm, FakeViews, MemoryStorage

TODAY = date(2024, 1, 15)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="sqlite",
        storage_db_path=tmp_path / "storage.sqlite3",
        storage_json_path=tmp_path / "storage.json",
        storage_key="taskList",
        default_frequency="once",
    )


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: MemoryStorage) -> AppState:
    """
    AppState wired with deterministic fakes.

    The calendar starts on TODAY (2024-01-15, a Monday).
    """
    return AppState(
        settings=settings,
        task_store=TaskStore(storage, key=settings.storage_key),
        confirm=FakeConfirm(answer=True),
        views=FakeViews(),
        calendar=initial_calendar_state(TODAY),
    )
