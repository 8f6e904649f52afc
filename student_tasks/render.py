"""Builds the display payload for the task board.

The payload is plain data so any front end can draw it; the Streamlit app
redraws it from scratch on every run.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from student_tasks.metrics import compute_progress
from student_tasks.schema import DEFAULT_SORT, FILTER_ALL, STATUS_VALUES, Task
from student_tasks.view_model import project

PLACEHOLDER = "—"
EMPTY_MESSAGE = "No tasks yet."


def format_date(value) -> str:
    """Render a date as YYYY-MM-DD, or the placeholder when absent or unparseable."""

    if not value:
        return PLACEHOLDER
    if isinstance(value, date):
        return value.isoformat()
    try:
        return date.fromisoformat(str(value).strip()).isoformat()
    except ValueError:
        return PLACEHOLDER


def _description(text: Optional[str]) -> Optional[str]:
    if text is None or not text.strip():
        return None
    return text


def build_row(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "deadline": format_date(task.deadline),
        "created": format_date(task.created_at),
        "description": _description(task.description),
        "status": task.status.value,
        "status_options": list(STATUS_VALUES),
    }


def build_board(tasks: Sequence[Task], filter_key: str = FILTER_ALL, sort_key: str = DEFAULT_SORT) -> dict:
    """Rows for the projected tasks plus progress over the whole collection."""

    rows = [build_row(task) for task in project(tasks, filter_key, sort_key)]
    return {
        "rows": rows,
        "empty_message": None if rows else EMPTY_MESSAGE,
        "progress": compute_progress(tasks),
    }
