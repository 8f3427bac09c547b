# src/todo_calendar/tasks/recurrence.py

"""
Recurrence rules.

A task is anchored on its due date and repeats according to its frequency:
- once:    only on the due date
- daily:   every day from the due date on
- weekly:  same weekday, from the due date on
- monthly: same day-of-month, from the due date on (short months are skipped)

Completion is global: a completed task only shows on its own due date.
"""

from __future__ import annotations

from datetime import date, datetime

from .task_models import Frequency, Task


def as_day(value: date | datetime) -> date:
    """Drop the time-of-day part, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_due(task: Task, query_date: date | datetime) -> bool:
    due = as_day(task.due_date)
    day = as_day(query_date)

    if task.completed:
        return day == due

    freq = task.frequency
    if freq == Frequency.ONCE:
        return day == due
    if freq == Frequency.DAILY:
        return day >= due
    if freq == Frequency.WEEKLY:
        return day >= due and day.weekday() == due.weekday()
    if freq == Frequency.MONTHLY:
        # No clamping: a task due on the 31st never matches a 30-day month.
        return day >= due and day.day == due.day
    return False
