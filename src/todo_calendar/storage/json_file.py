# src/todo_calendar/storage/json_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Key-value store kept in a single JSON object on disk.

    Reads are best-effort (missing or corrupt file -> empty).
    Writes go to a temp file that replaces the target.
    """

    def __init__(self, path: str | Path = "storage.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileStorage ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.exception("Failed to read %s; treating it as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Unexpected JSON root in %s; treating it as empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(Exception):
            # Task text is personal data; keep the file private on disk.
            os.chmod(self._path, 0o600)
        logger.debug("json set key=%s bytes=%d", key, len(value))

