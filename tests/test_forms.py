from datetime import date

from student_tasks.forms import ADD_LABEL, MappingForm
from student_tasks.schema import Task, TaskStatus


def test_ensure_defaults_keeps_existing_values():
    state = {"form_title": "typed"}
    MappingForm(state).ensure_defaults()
    assert state["form_title"] == "typed"
    assert state["form_status"] == "Pending"
    assert state["submit_label"] == ADD_LABEL


def test_read_normalizes_values():
    form = MappingForm(
        {
            "form_title": "  Essay ",
            "form_description": "  notes  ",
            "form_deadline": "2024-05-01",
            "form_status": "Completed",
        }
    )
    draft = form.read()
    assert draft.title == "  Essay "
    assert draft.description == "notes"
    assert draft.deadline == date(2024, 5, 1)
    assert draft.status is TaskStatus.COMPLETED


def test_read_tolerates_bad_deadline_and_status():
    draft = MappingForm({"form_title": "x", "form_deadline": "31/12", "form_status": "Done"}).read()
    assert draft.deadline is None
    assert draft.status is TaskStatus.PENDING


def test_fill_then_reset():
    state = {}
    form = MappingForm(state)
    form.fill(Task("a", "Essay", "", date(2024, 5, 1), TaskStatus.IN_PROGRESS, date(2024, 4, 1)))
    assert state["form_deadline"] == date(2024, 5, 1)
    assert state["form_status"] == "In Progress"

    form.reset()
    assert state["form_title"] == ""
    assert state["form_deadline"] is None
    assert state["form_status"] == "Pending"
