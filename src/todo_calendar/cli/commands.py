# src/todo_calendar/cli/commands.py

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable
from datetime import date, timedelta

from ..calendar.calendar_model import days_in_month, next_month, prev_month, select_date
from ..core.ports import View
from ..core.state import AppState
from ..tasks.task_api import create_task, delete_task, edit_task, toggle_task
from ..tasks.task_models import Frequency
from ..tasks.task_store import parse_day

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


_DATE_WORDS = frozenset({"today", "tomorrow", "yesterday"})
_DATE_LIKE = re.compile(r"[\d/.:T-]+")


def looks_like_date(raw: str) -> bool:
    word = raw.strip().lower()
    return word in _DATE_WORDS or bool(_DATE_LIKE.fullmatch(raw.strip()))


def parse_date_arg(raw: str, state: AppState, *, today: date | None = None) -> date | None:
    """
    today / tomorrow / yesterday, an ISO date, or a bare day number
    of the displayed month.
    """
    today = today or date.today()
    word = raw.strip().lower()
    if word == "today":
        return today
    if word == "tomorrow":
        return today + timedelta(days=1)
    if word == "yesterday":
        return today - timedelta(days=1)
    if word.isdigit():
        month = state.calendar.displayed_month
        n = int(word)
        if 1 <= n <= days_in_month(month):
            return month.replace(day=n)
        return None
    return parse_day(word)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    backend = getattr(settings, "storage_backend", "?")
    key = getattr(settings, "storage_key", "?")
    total = len(state.task_store.load())
    cal = state.calendar
    return (
        "Status:\n"
        f"  Storage: {backend} (key={key})\n"
        f"  Tasks stored: {total}\n"
        f"  Displayed month: {cal.displayed_month.strftime('%Y-%m')}\n"
        f"  Selected date: {cal.selected_date.isoformat()}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <date> <frequency> <text...>
    /add <text...>            -> selected date, default frequency
    """
    if not args:
        return "Usage: /add <YYYY-MM-DD|today> <once|daily|weekly|monthly> <text...>"

    due: date | None = state.calendar.selected_date
    freq = str(getattr(state.settings, "default_frequency", Frequency.ONCE.value))
    words = list(args)

    if len(words) >= 2 and words[1].lower() in {f.value for f in Frequency}:
        parsed = parse_date_arg(words[0], state)
        if parsed is not None:
            due = parsed
            freq = words[1].lower()
            words = words[2:]
        elif looks_like_date(words[0]):
            logger.debug("/add: unrecognized date %r", args[0])
            return f"Unrecognized date: {args[0]}"

    task = create_task(state, " ".join(words), due, freq)
    if task is None:
        return "Nothing added (task text is empty)."
    return f"Added #{task.id} on {task.due_date.isoformat()} ({task.frequency.label})."


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    task = toggle_task(state, task_id)
    if task is None:
        return f"No task #{task_id}."
    return f"#{task.id} marked {'complete' if task.completed else 'incomplete'}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None or len(args) < 2:
        return "Usage: /edit <id> <text...>"
    task = edit_task(state, task_id, " ".join(args[1:]))
    if task is None:
        return f"No change to #{task_id}."
    return f"#{task.id} updated."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /del <id>"
    # A plain loop keeps the default SIGINT handler, so Ctrl-C at the prompt answers "no".
    loop = asyncio.new_event_loop()
    try:
        removed = loop.run_until_complete(delete_task(state, task_id))
    finally:
        loop.close()
    return f"#{task_id} deleted." if removed else f"#{task_id} not deleted."


def cmd_day(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /day <YYYY-MM-DD|today|N>"
    day = parse_date_arg(args[0], state)
    if day is None:
        return f"Unrecognized date: {args[0]}"
    state.calendar = select_date(state.calendar, day)
    state.views.request(View.CALENDAR, View.TASK_LIST)
    return f"Selected {day.isoformat()}."


def cmd_prev(state: AppState, args: list[str]) -> str:
    state.calendar = prev_month(state.calendar)
    state.views.request(View.CALENDAR, View.TASK_LIST)
    return ""


def cmd_next(state: AppState, args: list[str]) -> str:
    state.calendar = next_month(state.calendar)
    state.views.request(View.CALENDAR, View.TASK_LIST)
    return ""


def cmd_cal(state: AppState, args: list[str]) -> str:
    state.views.request(View.CALENDAR)
    return ""


def cmd_list(state: AppState, args: list[str]) -> str:
    state.views.request(View.TASK_LIST)
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage and calendar state.")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <date> <once|daily|weekly|monthly> <text> | /add <text>.",
)
registry.register("done", cmd_done, help_text="Toggle complete: /done <id>.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Edit task text: /edit <id> <text>.")
registry.register("del", cmd_delete, help_text="Delete a task (asks first): /del <id>.", aliases=["delete", "rm"])
registry.register("day", cmd_day, help_text="Select a date: /day <YYYY-MM-DD|today|N>.")
registry.register("prev", cmd_prev, help_text="Show the previous month.")
registry.register("next", cmd_next, help_text="Show the next month.")
registry.register("cal", cmd_cal, help_text="Show the calendar.")
registry.register("list", cmd_list, help_text="Show tasks for the selected date.", aliases=["ls"])
