# tests/test_recurrence.py

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from todo_calendar.tasks.recurrence import is_due
from todo_calendar.tasks.task_models import Frequency, Task


def make_task(due: date, freq: Frequency, *, completed: bool = False) -> Task:
    return Task(
        id=1,
        text="water plants",
        due_date=due,
        frequency=freq,
        created_at=0,
        completed=completed,
    )


def days_around(anchor: date, span: int = 120) -> list[date]:
    return [anchor + timedelta(days=n) for n in range(-span, span + 1)]


def test_once_is_due_on_exactly_one_day() -> None:
    due = date(2024, 3, 10)
    task = make_task(due, Frequency.ONCE)
    hits = [d for d in days_around(due) if is_due(task, d)]
    assert hits == [due]


def test_daily_is_due_from_due_date_on() -> None:
    due = date(2024, 1, 1)
    task = make_task(due, Frequency.DAILY)
    for d in days_around(due):
        assert is_due(task, d) is (d >= due)


def test_weekly_same_weekday_after_due_date() -> None:
    task = make_task(date(2024, 1, 1), Frequency.WEEKLY)  # Monday

    assert is_due(task, date(2024, 1, 1))
    assert is_due(task, date(2024, 1, 8))
    assert is_due(task, date(2024, 1, 15))
    assert not is_due(task, date(2024, 1, 9))
    assert not is_due(task, date(2023, 12, 25))  # Monday, but before the due date


def test_weekly_matches_property_over_a_range() -> None:
    due = date(2024, 2, 14)
    task = make_task(due, Frequency.WEEKLY)
    for d in days_around(due):
        assert is_due(task, d) is (d >= due and d.weekday() == due.weekday())


def test_monthly_skips_months_without_that_day() -> None:
    task = make_task(date(2024, 1, 31), Frequency.MONTHLY)

    assert is_due(task, date(2024, 1, 31))
    assert not any(is_due(task, date(2024, 2, n)) for n in range(1, 30))
    assert is_due(task, date(2024, 3, 31))
    assert not any(is_due(task, date(2024, 4, n)) for n in range(1, 31))
    assert is_due(task, date(2024, 5, 31))
    assert not is_due(task, date(2023, 12, 31))


def test_monthly_on_leap_day_only_matches_29th() -> None:
    task = make_task(date(2024, 2, 29), Frequency.MONTHLY)
    assert is_due(task, date(2024, 3, 29))
    assert not is_due(task, date(2025, 2, 28))
    assert not is_due(task, date(2025, 3, 1))


@pytest.mark.parametrize("freq", list(Frequency))
def test_completed_task_only_shows_on_its_due_date(freq: Frequency) -> None:
    due = date(2024, 1, 1)
    task = make_task(due, freq, completed=True)

    assert is_due(task, due)
    assert not is_due(task, date(2024, 1, 5))
    assert not is_due(task, date(2024, 1, 8))
    assert not is_due(task, date(2024, 2, 1))


def test_time_of_day_is_ignored() -> None:
    task = make_task(date(2024, 6, 1), Frequency.ONCE)
    assert is_due(task, datetime(2024, 6, 1, 23, 59))
    assert not is_due(task, datetime(2024, 6, 2, 0, 0))


def test_unknown_frequency_is_never_due() -> None:
    task = make_task(date(2024, 6, 1), Frequency.ONCE)
    task.frequency = "yearly"  # type: ignore[assignment]
    assert not is_due(task, date(2024, 6, 1))
