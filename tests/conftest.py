from __future__ import annotations

import itertools
from datetime import date

import pytest

from student_tasks.storage import MemoryBackend, TaskStorage
from student_tasks.store import TaskStore

TODAY = date(2024, 4, 20)


class CountingStorage(TaskStorage):
    """TaskStorage that records how often it was asked to save."""

    def __init__(self, backend=None) -> None:
        super().__init__(backend or MemoryBackend())
        self.saves = 0

    def save(self, tasks) -> None:
        self.saves += 1
        super().save(tasks)


def sequential_ids(prefix: str = "t"):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture()
def storage() -> CountingStorage:
    return CountingStorage()


@pytest.fixture()
def store(storage: CountingStorage) -> TaskStore:
    return TaskStore(storage, id_factory=sequential_ids(), today=lambda: TODAY)
