# src/todo_calendar/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..calendar.calendar_model import CalendarState
from .ports import ConfirmDialog, TaskRepo, ViewRefresher


@dataclass
class AppState:
    # Settings live on the state so connectors/commands can read them.
    settings: Any

    task_store: TaskRepo
    confirm: ConfirmDialog
    views: ViewRefresher

    # Replaced (not mutated) by calendar navigation/selection.
    calendar: CalendarState
