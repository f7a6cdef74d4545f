# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

# Python's fromisoformat() stops at microseconds; older data files carry 7 digits.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are persisted verbatim ("ToDo", "InProgress", "Done").
    """

    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @classmethod
    def from_name(cls, raw: str) -> TaskStatus | None:
        """Match user input like "todo", "in-progress" or "InProgress"."""
        key = raw.replace("-", "").lower()
        for status in cls:
            if status.value.lower() == key:
                return status
        return None

    @classmethod
    def from_json(cls, raw: Any) -> TaskStatus:
        if raw is None:
            return cls.TODO
        return cls.from_name(str(raw)) or cls.TODO


def parse_timestamp(raw: str) -> datetime:
    return datetime.fromisoformat(_FRACTION_RE.sub(r"\1", raw.strip()))


def _pick(data: dict[str, Any], key: str) -> Any:
    # camelCase is what we write; PascalCase is accepted from older files.
    if key in data:
        return data[key]
    return data.get(key[:1].upper() + key[1:])


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """
        Build a Task from one entry of the JSON array.

        Raises ValueError (or TypeError) when a required field is missing or
        has the wrong shape; the store decides what to do with such entries.
        """
        raw_id = _pick(data, "id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"task id must be an integer, got {raw_id!r}")

        created_raw = _pick(data, "createdAt")
        updated_raw = _pick(data, "updatedAt")
        if not isinstance(created_raw, str) or not isinstance(updated_raw, str):
            raise ValueError("task timestamps must be ISO-8601 strings")

        description = _pick(data, "description")
        return cls(
            id=raw_id,
            description="" if description is None else str(description),
            status=TaskStatus.from_json(_pick(data, "status")),
            created_at=parse_timestamp(created_raw),
            updated_at=parse_timestamp(updated_raw),
        )
