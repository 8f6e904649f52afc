"""Maps user actions onto store mutations and re-renders afterwards."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from student_tasks.forms import ADD_LABEL, UPDATE_LABEL, TaskForm
from student_tasks.render import build_board
from student_tasks.schema import DEFAULT_SORT, FILTER_ALL, Task, TaskStatus
from student_tasks.store import TaskStore

logger = logging.getLogger(__name__)

CLEAR_PROMPT = "Clear all tasks?"


class TaskController:
    """Owns the editing pointer and the active filter/sort for one session.

    Every action follows the same cycle: mutate the store (which persists),
    then rebuild the board and pass it to ``renderer`` if one is attached.
    """

    def __init__(
        self,
        store: TaskStore,
        form: TaskForm,
        *,
        renderer: Optional[Callable[[dict], None]] = None,
        filter_key: str = FILTER_ALL,
        sort_key: str = DEFAULT_SORT,
    ) -> None:
        self.store = store
        self.form = form
        self.renderer = renderer
        self.filter_key = filter_key
        self.sort_key = sort_key
        self.editing_id: Optional[str] = None

    def render(self) -> dict:
        board = build_board(self.store.tasks, self.filter_key, self.sort_key)
        if self.renderer is not None:
            self.renderer(board)
        return board

    def submit(self) -> Optional[Task]:
        draft = self.form.read()
        if not draft.title.strip():
            return None

        if self.editing_id is not None:
            task = self.store.update(self.editing_id, draft)
            if task is None:
                logger.info("Task id=%s disappeared while editing", self.editing_id)
            self.editing_id = None
            self.form.set_submit_label(ADD_LABEL)
        else:
            task = self.store.add(draft)

        self.form.reset()
        self.render()
        return task

    def change_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        task = self.store.set_status(task_id, status)
        self.render()
        return task

    def start_edit(self, task_id: str) -> bool:
        task = self.store.get(task_id)
        if task is None:
            return False

        self.editing_id = task.id
        self.form.fill(task)
        self.form.set_submit_label(UPDATE_LABEL)
        self.form.focus_title()
        return True

    def delete(self, task_id: str) -> bool:
        removed = self.store.remove(task_id)
        self.render()
        return removed

    def clear_all(self, confirm: Callable[[str], bool]) -> bool:
        """Empty the collection once ``confirm`` agrees; nothing happens if it is already empty."""

        if not len(self.store):
            return False
        if not confirm(CLEAR_PROMPT):
            return False

        self.store.clear()
        self.render()
        return True

    def set_filter(self, filter_key: str) -> dict:
        self.filter_key = filter_key
        return self.render()

    def set_sort(self, sort_key: str) -> dict:
        self.sort_key = sort_key
        return self.render()
