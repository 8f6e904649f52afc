"""Completion progress metrics."""

from __future__ import annotations

import math
from typing import Sequence

from student_tasks.schema import Task, TaskStatus


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_progress(tasks: Sequence[Task]) -> dict:
    """Completed count, total and whole-number percentage over the full collection."""

    total = len(tasks)
    completed = sum(1 for task in tasks if task.status == TaskStatus.COMPLETED)
    percent = _round_half_up(completed / total * 100.0) if total else 0

    return {
        "completed": completed,
        "total": total,
        "percent": percent,
        "label": f"{completed}/{total} tasks completed",
    }
