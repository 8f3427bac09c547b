# tests/test_calendar_model.py

from __future__ import annotations

from datetime import date

from todo_calendar.calendar.calendar_model import (
    WEEKDAY_NAMES,
    CalendarState,
    build_month_grid,
    days_in_month,
    initial_calendar_state,
    leading_blanks,
    next_month,
    prev_month,
    select_date,
)
from todo_calendar.tasks.task_models import Frequency, Task


def _task(due: date, freq: Frequency, *, completed: bool = False, task_id: int = 1) -> Task:
    return Task(
        id=task_id,
        text="t",
        due_date=due,
        frequency=freq,
        created_at=task_id,
        completed=completed,
    )


def test_thirty_day_month_starting_wednesday() -> None:
    # April 2026 has 30 days and starts on a Wednesday.
    state = initial_calendar_state(date(2026, 4, 10))
    grid = build_month_grid(state, [], today=date(2026, 4, 10))

    blanks = [c for c in grid.cells if c.is_blank]
    days = [c for c in grid.cells if not c.is_blank]
    assert len(blanks) == 3
    assert grid.cells[:3] == blanks
    assert len(days) == 30
    assert [c.day for c in days] == [date(2026, 4, n) for n in range(1, 31)]
    assert grid.title == "April 2026"
    assert grid.weekday_names == WEEKDAY_NAMES


def test_leap_year_february_and_sunday_start() -> None:
    assert days_in_month(date(2024, 2, 1)) == 29
    assert days_in_month(date(2023, 2, 1)) == 28
    assert leading_blanks(date(2024, 9, 1)) == 0  # Sunday
    assert leading_blanks(date(2024, 6, 1)) == 6  # Saturday


def test_today_and_selected_marks_are_independent() -> None:
    state = CalendarState(displayed_month=date(2024, 1, 1), selected_date=date(2024, 1, 20))
    grid = build_month_grid(state, [], today=date(2024, 1, 15))

    today_cells = [c.day for c in grid.cells if c.is_today]
    selected_cells = [c.day for c in grid.cells if c.is_selected]
    assert today_cells == [date(2024, 1, 15)]
    assert selected_cells == [date(2024, 1, 20)]

    same = build_month_grid(select_date(state, date(2024, 1, 15)), [], today=date(2024, 1, 15))
    (cell,) = [c for c in same.cells if c.is_selected]
    assert cell.is_today


def test_today_outside_displayed_month_marks_nothing() -> None:
    state = CalendarState(displayed_month=date(2024, 3, 1), selected_date=date(2024, 1, 15))
    grid = build_month_grid(state, [], today=date(2024, 1, 15))
    assert not any(c.is_today or c.is_selected for c in grid.cells)


def test_has_task_marks_follow_recurrence_and_completion() -> None:
    weekly = _task(date(2024, 1, 1), Frequency.WEEKLY, task_id=1)
    done_once = _task(date(2024, 1, 3), Frequency.ONCE, completed=True, task_id=2)
    state = initial_calendar_state(date(2024, 1, 1))

    grid = build_month_grid(state, [weekly, done_once], today=date(2024, 1, 1))
    marked = [c.day for c in grid.cells if c.has_task]
    assert marked == [date(2024, 1, d) for d in (1, 8, 15, 22, 29)]


def test_weeks_split_into_rows_of_seven() -> None:
    state = initial_calendar_state(date(2026, 4, 1))
    grid = build_month_grid(state, [], today=date(2026, 4, 1))
    rows = grid.weeks()
    assert all(len(r) == 7 for r in rows[:-1])
    assert sum(len(r) for r in rows) == 33


def test_navigation_rolls_over_years_and_keeps_selection() -> None:
    state = initial_calendar_state(date(2024, 1, 31))
    assert state.displayed_month == date(2024, 1, 1)

    back = prev_month(state)
    assert back.displayed_month == date(2023, 12, 1)
    assert back.selected_date == date(2024, 1, 31)

    state = CalendarState(displayed_month=date(2024, 12, 1), selected_date=date(2024, 12, 5))
    fwd = next_month(state)
    assert fwd.displayed_month == date(2025, 1, 1)
    assert fwd.selected_date == date(2024, 12, 5)
    assert prev_month(fwd) == state
