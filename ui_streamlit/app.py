"""Streamlit UI for the student task manager."""

from __future__ import annotations

import logging
import re
from typing import Any

from student_tasks.config import apply_collation_locale, load_settings
from student_tasks.controller import TaskController
from student_tasks.forms import (
    DEADLINE_KEY,
    DESCRIPTION_KEY,
    STATUS_KEY,
    TITLE_KEY,
    MappingForm,
)
from student_tasks.logging_setup import setup_logging
from student_tasks.schema import FILTER_ALL, STATUS_VALUES, SortKey
from student_tasks.storage import FileBackend, TaskStorage
from student_tasks.store import TaskStore

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "controller"
CONFIRM_CLEAR_KEY = "confirm_clear"
FILTER_KEY = "filter_key"
SORT_KEY = "sort_key"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")

FILTER_OPTIONS = [FILTER_ALL, *STATUS_VALUES]
SORT_LABELS = {
    SortKey.DEADLINE_ASC.value: "Deadline (soonest first)",
    SortKey.DEADLINE_DESC.value: "Deadline (latest first)",
    SortKey.CREATED_DESC.value: "Newest added",
    SortKey.CREATED_ASC.value: "Oldest added",
    SortKey.TITLE_ASC.value: "Title A-Z",
    SortKey.TITLE_DESC.value: "Title Z-A",
}


def build_controller(state: Any) -> TaskController:
    """Wire settings, storage, store and form for one browser session."""

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    apply_collation_locale(settings)

    storage = TaskStorage(FileBackend(settings.data_dir), key=settings.storage_key)
    store = TaskStore.open(storage)
    form = MappingForm(state)
    form.ensure_defaults()
    logger.info("Session started with %d stored tasks from %s", len(store), settings.data_dir)
    return TaskController(store, form)


def _status_key(row: dict) -> str:
    # Keyed by status too, so a status changed elsewhere shows up as a fresh widget.
    return f"status_{row['id']}_{row['status']}"


def _draw_form(st, controller: TaskController) -> None:
    st.subheader("Edit task" if controller.editing_id is not None else "Add a task")
    st.text_input("Title", key=TITLE_KEY, placeholder="What needs doing?")
    st.text_area("Description", key=DESCRIPTION_KEY, height=80)
    c1, c2 = st.columns(2)
    c1.date_input("Deadline", key=DEADLINE_KEY, value=None, format="YYYY-MM-DD")
    c2.selectbox("Status", options=list(STATUS_VALUES), key=STATUS_KEY)

    if controller.editing_id is not None:
        st.caption("Editing an existing task.")
    st.button(controller.form.submit_label, key="submit", type="primary", on_click=controller.submit)


def _draw_toolbar(st, controller: TaskController) -> None:
    def _on_filter() -> None:
        controller.set_filter(st.session_state[FILTER_KEY])

    def _on_sort() -> None:
        controller.set_sort(st.session_state[SORT_KEY])

    def _request_clear() -> None:
        if len(controller.store):
            st.session_state[CONFIRM_CLEAR_KEY] = True

    def _answer_clear(proceed: bool) -> None:
        st.session_state[CONFIRM_CLEAR_KEY] = False
        controller.clear_all(lambda _prompt: proceed)

    if FILTER_KEY not in st.session_state:
        st.session_state[FILTER_KEY] = controller.filter_key
    if SORT_KEY not in st.session_state:
        st.session_state[SORT_KEY] = getattr(controller.sort_key, "value", controller.sort_key)

    c1, c2, c3 = st.columns([2, 2, 1])
    c1.selectbox("Filter", options=FILTER_OPTIONS, key=FILTER_KEY, on_change=_on_filter)
    c2.selectbox(
        "Sort",
        options=list(SORT_LABELS),
        key=SORT_KEY,
        format_func=SORT_LABELS.get,
        on_change=_on_sort,
    )
    c3.button("Clear all", key="clear_all", on_click=_request_clear)

    if st.session_state.get(CONFIRM_CLEAR_KEY):
        st.warning("Clear all tasks?")
        y, n = st.columns(2)
        y.button("Yes, clear all", key="confirm_clear_yes", on_click=_answer_clear, args=(True,))
        n.button("Cancel", key="confirm_clear_no", on_click=_answer_clear, args=(False,))


def escape_markdown(text: str) -> str:
    """Backslash-escape Markdown syntax so user text shows literally."""

    return _MARKDOWN_SPECIAL.sub(r"\\\1", text).replace("\n", "  \n")


def _draw_row(st, controller: TaskController, row: dict) -> None:
    status_key = _status_key(row)

    def _on_status() -> None:
        controller.change_status(row["id"], st.session_state[status_key])
        # The widget comes back under a key for the new status.
        del st.session_state[status_key]

    with st.container(border=True):
        st.markdown(f"**{escape_markdown(row['title'])}**")
        st.caption(f"Deadline: **{row['deadline']}** | Added: **{row['created']}**")
        if row["description"] is not None:
            st.markdown(escape_markdown(row["description"]))

        c1, c2, c3 = st.columns([2, 1, 1])
        c1.selectbox(
            "Status",
            options=row["status_options"],
            index=row["status_options"].index(row["status"]),
            key=status_key,
            on_change=_on_status,
            label_visibility="collapsed",
        )
        c2.button("Edit", key=f"edit_{row['id']}", on_click=controller.start_edit, args=(row["id"],))
        c3.button("Delete", key=f"delete_{row['id']}", on_click=controller.delete, args=(row["id"],))


def draw_board(st, controller: TaskController, board: dict) -> None:
    """Draw the whole list and progress bar from a freshly built board."""

    if board["empty_message"]:
        st.caption(board["empty_message"])
    for row in board["rows"]:
        _draw_row(st, controller, row)

    progress = board["progress"]
    st.progress(progress["percent"], text=progress["label"])


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Student Task Manager", layout="centered")
    st.title("Student Task Manager")

    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = build_controller(st.session_state)
    controller: TaskController = st.session_state[CONTROLLER_KEY]

    _draw_form(st, controller)
    st.divider()
    _draw_toolbar(st, controller)
    draw_board(st, controller, controller.render())


if __name__ == "__main__":
    main()
