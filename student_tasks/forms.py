"""Form surface the controller reads drafts from and writes edits into."""

from __future__ import annotations

from datetime import date
from typing import Any, MutableMapping, Optional, Protocol

from student_tasks.schema import Task, TaskDraft, TaskStatus

TITLE_KEY = "form_title"
DESCRIPTION_KEY = "form_description"
DEADLINE_KEY = "form_deadline"
STATUS_KEY = "form_status"
SUBMIT_LABEL_KEY = "submit_label"
FOCUS_KEY = "focus"

ADD_LABEL = "Add Task"
UPDATE_LABEL = "Update Task"


class TaskForm(Protocol):
    def read(self) -> TaskDraft: ...

    def fill(self, task: Task) -> None: ...

    def reset(self) -> None: ...

    def focus_title(self) -> None: ...

    def set_submit_label(self, label: str) -> None: ...


def _read_deadline(raw: Any) -> Optional[date]:
    if isinstance(raw, date):
        return raw
    if raw is None or not str(raw).strip():
        return None
    try:
        return date.fromisoformat(str(raw).strip())
    except ValueError:
        return None


def _read_status(raw: Any) -> TaskStatus:
    try:
        return TaskStatus(raw)
    except ValueError:
        return TaskStatus.PENDING


class MappingForm:
    """Form fields kept in a mutable mapping.

    Works over a plain dict as well as ``st.session_state``, where the keys
    double as the widget keys.
    """

    def __init__(self, state: MutableMapping[str, Any]) -> None:
        self.state = state

    def ensure_defaults(self) -> None:
        """Seed missing keys without touching values the user already typed."""

        if TITLE_KEY not in self.state:
            self.state[TITLE_KEY] = ""
        if DESCRIPTION_KEY not in self.state:
            self.state[DESCRIPTION_KEY] = ""
        if STATUS_KEY not in self.state:
            self.state[STATUS_KEY] = TaskStatus.PENDING.value
        if SUBMIT_LABEL_KEY not in self.state:
            self.state[SUBMIT_LABEL_KEY] = ADD_LABEL

    def read(self) -> TaskDraft:
        return TaskDraft(
            title=str(self.state.get(TITLE_KEY) or ""),
            description=str(self.state.get(DESCRIPTION_KEY) or "").strip(),
            deadline=_read_deadline(self.state.get(DEADLINE_KEY)),
            status=_read_status(self.state.get(STATUS_KEY)),
        )

    def fill(self, task: Task) -> None:
        self.state[TITLE_KEY] = task.title
        self.state[DESCRIPTION_KEY] = task.description or ""
        self.state[DEADLINE_KEY] = task.deadline
        self.state[STATUS_KEY] = task.status.value

    def reset(self) -> None:
        self.state[TITLE_KEY] = ""
        self.state[DESCRIPTION_KEY] = ""
        self.state[DEADLINE_KEY] = None
        self.state[STATUS_KEY] = TaskStatus.PENDING.value
        self.state[FOCUS_KEY] = None

    def focus_title(self) -> None:
        self.state[FOCUS_KEY] = TITLE_KEY

    def set_submit_label(self, label: str) -> None:
        self.state[SUBMIT_LABEL_KEY] = label

    @property
    def submit_label(self) -> str:
        return self.state.get(SUBMIT_LABEL_KEY, ADD_LABEL)
