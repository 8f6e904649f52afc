"""Persistence of the task collection in a single key-value slot."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Protocol

from student_tasks.adapters import json_adapter
from student_tasks.schema import Task

logger = logging.getLogger(__name__)

STORAGE_KEY = "stm_tasks"


class KeyValueBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryBackend:
    """Dict-backed slot store."""

    def __init__(self, items: Optional[dict[str, str]] = None) -> None:
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class FileBackend:
    """One file per key under a data directory.

    Writes land in a temporary sibling first and are moved over the old file,
    so readers never see a half-written value.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory).expanduser()

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.path_for(key)
        fd, temp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(temp_path, target)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise


class TaskStorage:
    """Reads and writes the full collection under one fixed key."""

    def __init__(self, backend: KeyValueBackend, key: str = STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key

    def load(self) -> list[Task]:
        """Return the stored tasks, or an empty list when nothing usable is stored."""

        try:
            raw = self.backend.get_item(self.key)
        except (OSError, ValueError):
            logger.warning("Could not read stored tasks key=%s; starting empty", self.key, exc_info=True)
            return []

        if raw is None or not raw.strip():
            return []

        try:
            tasks = json_adapter.loads(raw, skip_invalid=True)
        except (ValueError, RecursionError) as exc:
            logger.warning("Ignoring malformed stored tasks key=%s: %s", self.key, exc)
            return []

        logger.debug("Loaded %d tasks key=%s", len(tasks), self.key)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        self.backend.set_item(self.key, json_adapter.dumps(tasks))
        logger.debug("Saved %d tasks key=%s", len(tasks), self.key)
