"""Demo script for the student task manager, run against in-memory storage."""

import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from student_tasks.controller import TaskController
from student_tasks.forms import MappingForm
from student_tasks.logging_setup import setup_logging
from student_tasks.schema import SortKey, TaskStatus
from student_tasks.storage import MemoryBackend, TaskStorage
from student_tasks.store import TaskStore

logger = logging.getLogger(__name__)


def _print_board(board: dict) -> None:
    for row in board["rows"]:
        print(f"  [{row['status']:<11}] {row['title']}  (due {row['deadline']}, added {row['created']})")
    if board["empty_message"]:
        print(f"  {board['empty_message']}")
    print(f"  {board['progress']['label']} ({board['progress']['percent']}%)")


def main() -> None:
    setup_logging("INFO")

    backend = MemoryBackend()
    store = TaskStore.open(TaskStorage(backend))
    fields: dict = {}
    controller = TaskController(store, MappingForm(fields), renderer=_print_board)

    fields.update(form_title="Submit essay", form_deadline=date(2024, 5, 1))
    essay = controller.submit()
    fields.update(form_title="Read chapter 4", form_status=TaskStatus.IN_PROGRESS.value)
    controller.submit()
    fields.update(form_title="Plan study group")
    controller.submit()

    print("Sorted by deadline, latest first:")
    controller.set_sort(SortKey.DEADLINE_DESC)

    print("Essay completed:")
    controller.change_status(essay.id, TaskStatus.COMPLETED)

    print("Completed only:")
    controller.set_filter(TaskStatus.COMPLETED.value)

    logger.info("Stored blob: %s", backend.get_item("stm_tasks"))


if __name__ == "__main__":
    main()
