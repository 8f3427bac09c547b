# src/todo_calendar/calendar/calendar_model.py

"""
Month-grid calendar model.

CalendarState is immutable: navigation and selection return a new state,
so the UI owns exactly one current value and tests need no globals.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from ..tasks.recurrence import as_day, is_due
from ..tasks.task_models import Task

WEEKDAY_NAMES: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(slots=True, frozen=True)
class CalendarState:
    displayed_month: date  # always the 1st of a month
    selected_date: date


@dataclass(slots=True, frozen=True)
class DayCell:
    day: date | None  # None for leading blanks
    is_today: bool = False
    is_selected: bool = False
    has_task: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day is None


@dataclass(slots=True, frozen=True)
class MonthGrid:
    title: str
    weekday_names: tuple[str, ...]
    cells: list[DayCell]

    def weeks(self) -> list[list[DayCell]]:
        """Cells split into rows of seven (the last row may be shorter)."""
        return [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]


def first_of_month(value: date | datetime) -> date:
    return as_day(value).replace(day=1)


def initial_calendar_state(today: date | datetime) -> CalendarState:
    day = as_day(today)
    return CalendarState(displayed_month=first_of_month(day), selected_date=day)


def prev_month(state: CalendarState) -> CalendarState:
    return replace(state, displayed_month=state.displayed_month + relativedelta(months=-1))


def next_month(state: CalendarState) -> CalendarState:
    return replace(state, displayed_month=state.displayed_month + relativedelta(months=+1))


def select_date(state: CalendarState, day: date | datetime) -> CalendarState:
    return replace(state, selected_date=as_day(day))


def leading_blanks(month: date) -> int:
    """Weekday index of the 1st, counting Sunday as 0."""
    return (month.replace(day=1).weekday() + 1) % 7


def days_in_month(month: date) -> int:
    return calendar.monthrange(month.year, month.month)[1]


def month_title(month: date) -> str:
    return f"{calendar.month_name[month.month]} {month.year}"


def has_outstanding_task(tasks: Iterable[Task], day: date) -> bool:
    return any(is_due(t, day) and not t.completed for t in tasks)


def build_month_grid(
    state: CalendarState,
    tasks: Iterable[Task],
    today: date | datetime,
) -> MonthGrid:
    month = first_of_month(state.displayed_month)
    today_d = as_day(today)
    task_list = list(tasks)

    cells = [DayCell(day=None) for _ in range(leading_blanks(month))]
    for n in range(1, days_in_month(month) + 1):
        day = month.replace(day=n)
        cells.append(
            DayCell(
                day=day,
                is_today=day == today_d,
                is_selected=day == state.selected_date,
                has_task=has_outstanding_task(task_list, day),
            )
        )

    return MonthGrid(title=month_title(month), weekday_names=WEEKDAY_NAMES, cells=cells)
