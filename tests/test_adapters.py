import json
from datetime import date

import pytest

from student_tasks.adapters.json_adapter import dumps, loads, to_record
from student_tasks.schema import Task, TaskStatus


def sample_task(**overrides):
    fields = {
        "id": "a1",
        "title": "Submit essay",
        "description": "",
        "deadline": None,
        "status": TaskStatus.PENDING,
        "created_at": date(2024, 4, 20),
    }
    fields.update(overrides)
    return Task(**fields)


def test_to_record_uses_empty_string_for_missing_deadline():
    record = to_record(sample_task())
    assert record == {
        "id": "a1",
        "title": "Submit essay",
        "description": "",
        "deadline": "",
        "status": "Pending",
        "createdAt": "2024-04-20",
    }


def test_dumps_keeps_order_and_literal_status():
    payload = json.loads(
        dumps([sample_task(), sample_task(id="b2", status=TaskStatus.IN_PROGRESS, deadline=date(2024, 5, 1))])
    )
    assert [item["id"] for item in payload] == ["a1", "b2"]
    assert payload[1]["status"] == "In Progress"
    assert payload[1]["deadline"] == "2024-05-01"


def test_loads_success():
    text = json.dumps(
        [
            {
                "id": "x",
                "title": "Read",
                "description": "ch. 4",
                "deadline": "2024-06-01",
                "status": "Completed",
                "createdAt": "2024-04-01",
            },
            {"id": "y", "title": "Plan", "deadline": "", "status": "Pending", "createdAt": "2024-04-02"},
        ]
    )
    tasks = loads(text)
    assert len(tasks) == 2
    assert tasks[0].deadline == date(2024, 6, 1)
    assert tasks[0].status is TaskStatus.COMPLETED
    assert tasks[1].deadline is None
    assert tasks[1].description == ""


def test_loads_null_is_empty():
    assert loads("null") == []


def test_loads_rejects_non_list():
    with pytest.raises(ValueError):
        loads('{"id": "x"}')


def test_loads_rejects_unknown_status():
    text = json.dumps([{"id": "x", "title": "T", "status": "Done", "createdAt": "2024-04-01"}])
    with pytest.raises(ValueError, match="Item 1"):
        loads(text)


def test_loads_rejects_malformed_date():
    text = json.dumps([{"id": "x", "title": "T", "status": "Pending", "createdAt": "yesterday"}])
    with pytest.raises(ValueError):
        loads(text)


def test_loads_rejects_missing_fields():
    with pytest.raises(ValueError, match="missing required fields"):
        loads(json.dumps([{"title": "T", "status": "Pending", "createdAt": "2024-04-01"}]))


def test_loads_can_skip_bad_records():
    text = json.dumps(
        [
            {"id": "x", "title": "Keep", "status": "Pending", "createdAt": "2024-04-01"},
            {"id": "y", "title": "Bad", "deadline": "2024-13-01", "status": "Pending", "createdAt": "2024-04-01"},
        ]
    )
    assert [task.id for task in loads(text, skip_invalid=True)] == ["x"]
    with pytest.raises(ValueError, match="Item 2: malformed deadline"):
        loads(text)
