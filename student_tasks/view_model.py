"""Filtering and ordering of tasks for display."""

from __future__ import annotations

import locale
from datetime import date
from typing import Iterable

from student_tasks.schema import DEFAULT_SORT, FILTER_ALL, STATUS_VALUES, SortKey, Task

_NO_DEADLINE = date.max.isoformat()


def _deadline_key(task: Task) -> str:
    return task.deadline.isoformat() if task.deadline else _NO_DEADLINE


def _created_key(task: Task) -> str:
    return task.created_at.isoformat()


def _title_key(task: Task) -> str:
    return locale.strxfrm(task.title)


_ORDERINGS = {
    SortKey.DEADLINE_ASC: (_deadline_key, False),
    SortKey.DEADLINE_DESC: (_deadline_key, True),
    SortKey.CREATED_DESC: (_created_key, True),
    SortKey.CREATED_ASC: (_created_key, False),
    SortKey.TITLE_ASC: (_title_key, False),
    SortKey.TITLE_DESC: (_title_key, True),
}


def filter_tasks(tasks: Iterable[Task], filter_key: str = FILTER_ALL) -> list[Task]:
    """Keep every task for ``"All"``, otherwise only tasks with that status."""

    key = getattr(filter_key, "value", filter_key)
    if key == FILTER_ALL:
        return list(tasks)
    if key not in STATUS_VALUES:
        raise ValueError(f"Unknown filter '{filter_key}'")
    return [task for task in tasks if task.status.value == key]


def sort_tasks(tasks: Iterable[Task], sort_key: str = DEFAULT_SORT) -> list[Task]:
    """Order tasks by one of the six sort keys; unknown keys keep the given order."""

    try:
        key_func, reverse = _ORDERINGS[SortKey(sort_key)]
    except ValueError:
        return list(tasks)
    return sorted(tasks, key=key_func, reverse=reverse)


def project(tasks: Iterable[Task], filter_key: str = FILTER_ALL, sort_key: str = DEFAULT_SORT) -> list[Task]:
    """Filtered and sorted view of the collection."""

    return sort_tasks(filter_tasks(tasks, filter_key), sort_key)
