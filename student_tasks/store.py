"""In-memory task collection, persisted after every change."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, Optional

from student_tasks.schema import Task, TaskDraft, TaskStatus
from student_tasks.storage import TaskStorage

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 16


def _uuid_text() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """Ordered task collection; the single source of truth during a session.

    Identifier generation and the current date are injected so callers (and
    tests) control them. Mutations that change the collection are written
    through ``storage`` before they return.
    """

    def __init__(
        self,
        storage: TaskStorage,
        *,
        id_factory: Optional[Callable[[], str]] = None,
        today: Optional[Callable[[], date]] = None,
        tasks: Optional[Iterable[Task]] = None,
    ) -> None:
        self._storage = storage
        self._new_id = id_factory or _uuid_text
        self._today = today or date.today
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def open(cls, storage: TaskStorage, **kwargs) -> TaskStore:
        """Build a store from whatever the storage currently holds."""

        return cls(storage, tasks=storage.load(), **kwargs)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return self._index_of(task_id) is not None

    def get(self, task_id: str) -> Optional[Task]:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def add(self, draft: TaskDraft) -> Optional[Task]:
        title = draft.title.strip()
        if not title:
            return None

        task = Task(
            id=self._fresh_id(),
            title=title,
            description=draft.description,
            deadline=draft.deadline,
            status=TaskStatus(draft.status),
            created_at=self._today(),
        )
        self._tasks.append(task)
        self._persist()
        logger.debug("Added task id=%s", task.id)
        return task

    def update(self, task_id: str, draft: TaskDraft) -> Optional[Task]:
        title = draft.title.strip()
        if not title:
            return None

        index = self._index_of(task_id)
        if index is None:
            logger.debug("Update skipped, unknown task id=%s", task_id)
            return None

        task = replace(
            self._tasks[index],
            title=title,
            description=draft.description,
            deadline=draft.deadline,
            status=TaskStatus(draft.status),
        )
        self._tasks[index] = task
        self._persist()
        logger.debug("Updated task id=%s", task_id)
        return task

    def set_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Status change skipped, unknown task id=%s", task_id)
            return None

        task = replace(self._tasks[index], status=TaskStatus(status))
        self._tasks[index] = task
        self._persist()
        logger.debug("Task id=%s status=%s", task_id, task.status.value)
        return task

    def remove(self, task_id: str) -> bool:
        index = self._index_of(task_id)
        if index is None:
            return False

        del self._tasks[index]
        self._persist()
        logger.debug("Removed task id=%s", task_id)
        return True

    def clear(self) -> None:
        count = len(self._tasks)
        self._tasks = []
        self._persist()
        logger.info("Cleared %d tasks", count)

    def _index_of(self, task_id: object) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _fresh_id(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            task_id = self._new_id()
            if task_id not in self:
                return task_id
        raise RuntimeError("id factory keeps returning identifiers already in use")

    def _persist(self) -> None:
        self._storage.save(self._tasks)
