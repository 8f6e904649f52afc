"""JSON codec for the persisted task collection."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Iterable

from student_tasks.schema import Task, TaskStatus

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "title", "status", "createdAt")


def _parse_date(raw, index: int, field: str) -> date:
    try:
        return date.fromisoformat(str(raw).strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed {field}") from exc


def _parse_item(item: dict, index: int) -> Task:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        status = TaskStatus(item["status"])
    except ValueError as exc:
        raise ValueError(f"Item {index}: invalid status '{item['status']}'") from exc

    deadline_raw = item.get("deadline")
    deadline = None
    if deadline_raw not in (None, ""):
        deadline = _parse_date(deadline_raw, index, "deadline")

    description_raw = item.get("description")
    description = str(description_raw) if description_raw is not None else ""

    return Task(
        id=str(item["id"]),
        title=str(item["title"]),
        description=description,
        deadline=deadline,
        status=status,
        created_at=_parse_date(item["createdAt"], index, "createdAt"),
    )


def to_record(task: Task) -> dict:
    """Convert a task into its persisted object form."""

    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "deadline": task.deadline.isoformat() if task.deadline else "",
        "status": task.status.value,
        "createdAt": task.created_at.isoformat(),
    }


def dumps(tasks: Iterable[Task]) -> str:
    """Serialize the whole collection as a JSON array."""

    return json.dumps([to_record(task) for task in tasks], ensure_ascii=False)


def loads(text: str, skip_invalid: bool = False) -> list[Task]:
    """Parse a JSON array of task objects.

    With ``skip_invalid`` a record that does not decode is logged and dropped
    instead of failing the whole payload.
    """

    payload = json.loads(text)
    if payload is None:
        return []

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    tasks: list[Task] = []
    for i, item in enumerate(payload, start=1):
        try:
            tasks.append(_parse_item(item, i))
        except ValueError as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping stored task: %s", exc)
    return tasks
