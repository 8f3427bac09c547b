# tests/test_bootstrap.py

from __future__ import annotations

from datetime import date

from todo_calendar.cli.bootstrap import create_initial_state
from todo_calendar.connectors.console_connector import ConsoleConfirm, ConsoleViews
from todo_calendar.tasks.task_api import create_task


def test_initial_state_wires_real_storage(settings) -> None:
    state = create_initial_state(settings=settings, today=date(2024, 1, 15))

    assert isinstance(state.confirm, ConsoleConfirm)
    assert isinstance(state.views, ConsoleViews)
    assert state.calendar.displayed_month == date(2024, 1, 1)
    assert state.calendar.selected_date == date(2024, 1, 15)

    create_task(state, "persisted", date(2024, 1, 15), "daily")
    reopened = create_initial_state(settings=settings, today=date(2024, 1, 15))
    assert [t.text for t in reopened.task_store.load()] == ["persisted"]
    assert settings.storage_db_path.exists()
