# src/todo_calendar/tasks/task_api.py

"""
Task operations used by connectors.

Each operation loads the full list, changes one record (or appends/removes),
saves the full list and asks the UI to redraw the affected views.
Invalid input and unknown ids are silent no-ops.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from ..core.ports import View
from ..core.state import AppState
from .recurrence import is_due
from .task_models import Frequency, Task
from .task_store import now_ms, parse_day

logger = logging.getLogger(__name__)

DELETE_TITLE = "Delete Task"
DELETE_MESSAGE = "Are you sure you want to delete this task? This action cannot be undone."


def _find(tasks: list[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def _fresh_id(tasks: list[Task], candidate: int) -> int:
    ids = {t.id for t in tasks}
    if candidate not in ids:
        return candidate
    return max(ids) + 1


def create_task(
    state: AppState,
    text: str,
    due_date: date | datetime | str | None,
    frequency: Frequency | str = Frequency.ONCE,
) -> Task | None:
    text = (text or "").strip()
    day = parse_day(due_date)
    if not text or day is None:
        logger.debug("create_task ignored (text=%r due_date=%r)", text, due_date)
        return None

    try:
        freq = Frequency(str(frequency).strip().lower())
    except ValueError:
        logger.debug("create_task ignored: unknown frequency %r", frequency)
        return None

    tasks = state.task_store.load()
    ts = now_ms()
    task = Task(
        id=_fresh_id(tasks, ts),
        text=text,
        due_date=day,
        frequency=freq,
        created_at=ts,
    )
    tasks.append(task)
    state.task_store.save(tasks)
    logger.debug("Task created id=%s due=%s freq=%s", task.id, day, freq.value)

    state.views.request(View.TASK_LIST, View.CALENDAR)
    return task


async def delete_task(state: AppState, task_id: int) -> bool:
    """
    Ask for confirmation, then remove the task.

    Returns True only when a record was actually removed.
    """
    confirmed = await state.confirm.confirm(DELETE_TITLE, DELETE_MESSAGE)
    if not confirmed:
        logger.debug("delete_task cancelled id=%s", task_id)
        return False

    tasks = state.task_store.load()
    kept = [t for t in tasks if t.id != task_id]
    removed = len(kept) != len(tasks)
    if removed:
        state.task_store.save(kept)
        logger.debug("Task deleted id=%s", task_id)

    state.views.request(View.TASK_LIST, View.CALENDAR)
    return removed


def toggle_task(state: AppState, task_id: int) -> Task | None:
    tasks = state.task_store.load()
    task = _find(tasks, task_id)
    if task is None:
        return None

    task.completed = not task.completed
    state.task_store.save(tasks)
    logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)

    # Calendar marks depend on completion.
    state.views.request(View.TASK_LIST, View.CALENDAR)
    return task


def edit_task(state: AppState, task_id: int, new_text: str) -> Task | None:
    new_text = (new_text or "").strip()
    if not new_text:
        return None

    tasks = state.task_store.load()
    task = _find(tasks, task_id)
    if task is None:
        return None

    task.text = new_text
    state.task_store.save(tasks)
    logger.debug("Task edited id=%s", task.id)

    state.views.request(View.TASK_LIST)
    return task


def tasks_for_date(tasks: Iterable[Task], selected_date: date | datetime) -> list[Task]:
    """Tasks due on selected_date: incomplete first, then newest first."""
    due = [t for t in tasks if is_due(t, selected_date)]
    due.sort(key=lambda t: (t.completed, -t.created_at))
    return due
