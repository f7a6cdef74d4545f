# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from task_tracker.tasks.task_models import Task, TaskStatus, parse_timestamp


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("todo", TaskStatus.TODO),
        ("ToDo", TaskStatus.TODO),
        ("in-progress", TaskStatus.IN_PROGRESS),
        ("InProgress", TaskStatus.IN_PROGRESS),
        ("DONE", TaskStatus.DONE),
        ("finished", None),
    ],
)
def test_status_from_name(raw: str, expected: TaskStatus | None) -> None:
    assert TaskStatus.from_name(raw) is expected


def test_status_from_json_falls_back_to_todo() -> None:
    assert TaskStatus.from_json("Done") is TaskStatus.DONE
    assert TaskStatus.from_json("Archived") is TaskStatus.TODO
    assert TaskStatus.from_json(None) is TaskStatus.TODO


def test_parse_timestamp_truncates_extra_fraction_digits() -> None:
    ts = parse_timestamp("2024-05-01T10:20:30.1234567+02:00")
    assert ts == datetime(2024, 5, 1, 10, 20, 30, 123456, tzinfo=timezone(timedelta(hours=2)))


def test_to_dict_uses_persisted_field_names() -> None:
    now = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)
    task = Task(id=7, description="Write report", status=TaskStatus.IN_PROGRESS, created_at=now, updated_at=now)

    assert task.to_dict() == {
        "id": 7,
        "description": "Write report",
        "status": "InProgress",
        "createdAt": "2024-01-01T09:30:00+00:00",
        "updatedAt": "2024-01-01T09:30:00+00:00",
    }
    assert Task.from_dict(task.to_dict()) == task


def test_from_dict_accepts_pascal_case_keys() -> None:
    task = Task.from_dict(
        {
            "Id": 3,
            "Description": "legacy",
            "Status": "Done",
            "CreatedAt": "2024-05-01T10:20:30.1234567+02:00",
            "UpdatedAt": "2024-05-02T10:20:30.1234567+02:00",
        }
    )
    assert task.id == 3
    assert task.description == "legacy"
    assert task.status is TaskStatus.DONE
    assert task.updated_at > task.created_at


@pytest.mark.parametrize(
    "entry",
    [
        {"description": "no id", "createdAt": "2024-01-01T00:00:00", "updatedAt": "2024-01-01T00:00:00"},
        {"id": True, "createdAt": "2024-01-01T00:00:00", "updatedAt": "2024-01-01T00:00:00"},
        {"id": 1, "createdAt": "yesterday", "updatedAt": "2024-01-01T00:00:00"},
        {"id": 1},
    ],
)
def test_from_dict_rejects_malformed_entries(entry: dict) -> None:
    with pytest.raises(ValueError):
        Task.from_dict(entry)
