# src/todo_calendar/connectors/console_render.py

"""Plain-text rendering of the month grid and the per-day task list."""

from __future__ import annotations

from datetime import date

from ..calendar.calendar_model import DayCell, MonthGrid
from ..tasks.task_models import Task

CELL_WIDTH = 5
LEGEND = "[ ] selected   ( ) today   * has tasks"


def _cell(c: DayCell) -> str:
    if c.day is None:
        return " " * CELL_WIDTH
    if c.is_selected:
        left, right = "[", "]"
    elif c.is_today:
        left, right = "(", ")"
    else:
        left, right = " ", " "
    mark = "*" if c.has_task else " "
    return f"{left}{c.day.day:>2}{right}{mark}"


def render_calendar(grid: MonthGrid) -> str:
    width = CELL_WIDTH * len(grid.weekday_names)
    lines = [grid.title.center(width).rstrip()]
    lines.append("".join(f"{name:^{CELL_WIDTH}}" for name in grid.weekday_names).rstrip())
    for week in grid.weeks():
        lines.append("".join(_cell(c) for c in week).rstrip())
    lines.append(LEGEND)
    return "\n".join(lines)


def render_task_line(task: Task) -> str:
    check = "x" if task.completed else " "
    return f"  [{check}] #{task.id}  {task.text}  (Frequency: {task.frequency.label})"


def render_task_list(tasks: list[Task], selected_date: date) -> str:
    header = f"Tasks for {selected_date.strftime('%A')}, {selected_date.isoformat()}:"
    if not tasks:
        return f"{header}\n  No tasks for this day."
    return "\n".join([header, *(render_task_line(t) for t in tasks)])
