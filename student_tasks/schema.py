"""Core data schema for task records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    """Task status; the values are also the persisted strings."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


STATUS_VALUES = tuple(status.value for status in TaskStatus)

FILTER_ALL = "All"


class SortKey(str, Enum):
    """Supported orderings for the task list."""

    DEADLINE_ASC = "deadline-asc"
    DEADLINE_DESC = "deadline-desc"
    CREATED_DESC = "created-desc"
    CREATED_ASC = "created-asc"
    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"


DEFAULT_SORT = SortKey.DEADLINE_ASC


@dataclass
class TaskDraft:
    """Mutable field values taken from the form before they reach the store."""

    title: str
    description: str = ""
    deadline: Optional[date] = None
    status: TaskStatus = TaskStatus.PENDING


@dataclass
class Task:
    """A single to-do record."""

    id: str
    title: str
    description: str
    deadline: Optional[date]
    status: TaskStatus
    created_at: date
