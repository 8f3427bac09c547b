# src/todo_calendar/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends and the UI (console today) swappable and
lets tests inject in-memory fakes.
"""

from enum import StrEnum
from typing import Any, Protocol


class View(StrEnum):
    TASK_LIST = "task_list"
    CALENDAR = "calendar"


class KeyValueStorage(Protocol):
    """String key -> string value store (localStorage-like)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...


class TaskRepo(Protocol):
    """
    Whole-list task persistence.

    load() never raises: absent or corrupt data reads as an empty list.
    save() never raises: failures are logged and swallowed.
    """

    def load(self) -> list[Any]: ...
    def save(self, tasks: list[Any]) -> None: ...


class ConfirmDialog(Protocol):
    """Modal yes/no question. Resolves exactly once per call."""

    async def confirm(self, title: str, message: str) -> bool: ...


class ViewRefresher(Protocol):
    """
    UI-side port: operations ask for views to be redrawn.

    The UI decides when and how to actually redraw them.
    """

    def request(self, *views: View) -> None: ...
