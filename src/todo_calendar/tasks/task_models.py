# src/todo_calendar/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any


class Frequency(StrEnum):
    """How a task repeats from its due date."""

    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def from_db(cls, raw: str | None) -> Frequency:
        if not raw:
            return cls.ONCE
        try:
            return cls(str(raw).strip().lower())
        except Exception:
            return cls.ONCE

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(slots=True)
class Task:
    id: int
    text: str
    due_date: date
    frequency: Frequency
    created_at: int
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        """Serialized form, field names compatible with the browser app's taskList."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "timestamp": self.created_at,
            "dueDate": self.due_date.isoformat(),
            "frequency": self.frequency.value,
        }
