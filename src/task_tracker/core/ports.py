# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the command handlers.

Handlers depend on this Protocol instead of the concrete JSON store,
so tests and alternative backends can plug in their own repository.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRepo(Protocol):
    """Whole-collection task repository (see tasks.task_store.TaskStore)."""

    def add_task(self, description: str) -> Task: ...

    def update_task(self, task_id: int, description: str) -> Task | None: ...

    def delete_tasks(self, ids: Iterable[int]) -> list[int]: ...

    def set_status(self, ids: Iterable[int], status: TaskStatus) -> list[Task]: ...

    def list_tasks(self, statuses: Iterable[TaskStatus]) -> list[Task]: ...
