# src/todo_calendar/tasks/task_store.py

from __future__ import annotations

import json
import logging
import time
from datetime import date, datetime
from typing import Any

from ..core.ports import KeyValueStorage
from .task_models import Frequency, Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "taskList"


def now_ms() -> int:
    return int(time.time() * 1000)


def parse_day(raw: Any) -> date | None:
    """Accept a date, a datetime or an ISO 'YYYY-MM-DD' string."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str) and raw.strip():
        try:
            # Only a time suffix ("YYYY-MM-DDTHH:MM...") is dropped.
            return date.fromisoformat(raw.strip().split("T", 1)[0])
        except ValueError:
            return None
    return None


class TaskStore:
    """
    Task list persisted as one JSON array under a single storage key.

    Every call reads or replaces the whole list; there is no cache.

    Older records may lack dueDate/frequency. They are migrated on load:
    - frequency -> once
    - dueDate   -> local date of the creation timestamp
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        logger.info("TaskStore ready key=%s storage=%s", key, type(storage).__name__)

    @property
    def key(self) -> str:
        return self._key

    # ---- migration ----

    @staticmethod
    def _normalize_record(raw: Any) -> Task | None:
        if not isinstance(raw, dict):
            return None

        try:
            task_id = int(raw["id"])
        except (KeyError, TypeError, ValueError, OverflowError):
            return None

        text = str(raw.get("text") or "").strip()
        if not text:
            return None

        created_raw = raw.get("timestamp", raw.get("createdAt"))
        try:
            created_at = int(created_raw)
        except (TypeError, ValueError, OverflowError):
            created_at = task_id

        due_date = parse_day(raw.get("dueDate"))
        if due_date is None:
            try:
                due_date = datetime.fromtimestamp(created_at / 1000).date()
            except (OverflowError, OSError, ValueError):
                return None

        return Task(
            id=task_id,
            text=text,
            due_date=due_date,
            frequency=Frequency.from_db(raw.get("frequency")),
            created_at=created_at,
            completed=bool(raw.get("completed", False)),
        )

    # ---- public API ----

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.exception("Could not load tasks key=%s", self._key)
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except Exception:
            logger.exception("Stored task list is not valid JSON key=%s", self._key)
            return []
        if not isinstance(data, list):
            logger.warning("Stored task list is not a list key=%s", self._key)
            return []

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in data:
            task = self._normalize_record(item)
            if task is None:
                logger.warning("Skipping malformed task record: %r", item)
                continue
            if task.id in seen:
                logger.warning("Skipping duplicate task id=%s", task.id)
                continue
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        try:
            payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False)
            self._storage.set_item(self._key, payload)
            logger.debug("Saved %d tasks key=%s", len(tasks), self._key)
        except Exception:
            logger.exception("Could not save tasks key=%s", self._key)
