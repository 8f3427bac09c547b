# src/todo_calendar/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import date

from ..calendar.calendar_model import build_month_grid
from ..cli.commands import registry as command_registry
from ..core.ports import View
from ..core.state import AppState
from ..tasks.task_api import tasks_for_date
from .console_render import render_calendar, render_task_list

logger = logging.getLogger(__name__)


class ConsoleConfirm:
    """ConfirmDialog that asks a y/N question on stdin."""

    async def confirm(self, title: str, message: str) -> bool:
        print(f"\n== {title} ==\n{message}")
        # Blocking read on the loop thread; Ctrl-C lands here as KeyboardInterrupt.
        try:
            answer = input("Confirm? [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in ("y", "yes")


class ConsoleViews:
    """
    ViewRefresher for the console.

    Requests are collected while a command runs and drawn afterwards,
    calendar first, so each view prints at most once per command.
    """

    def __init__(self) -> None:
        self._pending: set[View] = set()

    @property
    def pending(self) -> set[View]:
        return set(self._pending)

    def request(self, *views: View) -> None:
        self._pending.update(views)

    def flush(self, state: AppState, *, today: date | None = None) -> str:
        """Render pending views to text and clear them."""
        if not self._pending:
            return ""
        today = today or date.today()
        tasks = state.task_store.load()

        blocks: list[str] = []
        if View.CALENDAR in self._pending:
            blocks.append(render_calendar(build_month_grid(state.calendar, tasks, today)))
        if View.TASK_LIST in self._pending:
            selected = state.calendar.selected_date
            blocks.append(render_task_list(tasks_for_date(tasks, selected), selected))
        self._pending.clear()
        return "\n\n".join(blocks)


def _draw(state: AppState) -> None:
    views = state.views
    if not isinstance(views, ConsoleViews):
        return
    out = views.flush(state)
    if out:
        print(out + "\n")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    print("Type /help for commands. Use /exit to quit.\n")

    state.views.request(View.CALENDAR, View.TASK_LIST)
    _draw(state)

    while True:
        try:
            user_input = input("todo> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Plain text is a quick add on the selected date.
        line = user_input if user_input.startswith("/") else f"/add {user_input}"

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)
        _draw(state)

    logger.info("Console connector finished.")
