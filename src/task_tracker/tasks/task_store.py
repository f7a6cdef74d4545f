# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


class TaskStore:
    """
    JSON-file task store.

    The file holds a single top-level array of task objects and is the only
    source of truth:
    - every operation loads the whole array
    - mutating operations rewrite the whole array (pretty-printed)
    - there is no locking; concurrent writers are last-writer-wins

    A missing file is created as "[]" on first load. An empty or malformed
    file reads as an empty collection, so the next mutation overwrites it.
    """

    def __init__(
        self,
        path: str | Path = "data.json",
        *,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self._path = Path(path)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _ensure_file(self) -> None:
        if self._path.exists():
            logger.debug("Data file %s exists.", self._path)
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text("[]", "utf-8")
        logger.info("Data file %s created.", self._path)

    def _entries_to_tasks(self, entries: list[Any]) -> list[Task]:
        tasks: list[Task] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning("Skipping non-object entry #%d in %s", index, self._path)
                continue
            try:
                tasks.append(Task.from_dict(entry))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping malformed task entry #%d in %s: %s", index, self._path, e)
        return tasks

    # ---- primitives ----

    def load(self) -> list[Task]:
        self._ensure_file()
        try:
            # utf-8-sig drops a leading byte-order mark; bad bytes raise UnicodeDecodeError.
            raw = self._path.read_bytes().decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning(
                "Data file %s is not valid UTF-8 (%s), using an empty task list.", self._path, e
            )
            return []

        if not raw.strip():
            logger.warning("Data file %s is empty, using an empty task list.", self._path)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(
                "Data file %s is not valid JSON (%s), using an empty task list.", self._path, e
            )
            return []

        if not isinstance(data, list):
            logger.warning(
                "Data file %s does not hold a JSON array, using an empty task list.", self._path
            )
            return []

        return self._entries_to_tasks(data)

    def save(self, tasks: list[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Unique temp name per writer, so concurrent saves stay last-writer-wins.
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f"{self._path.name}.", suffix=".tmp"
        )
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload + "\n")
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    @staticmethod
    def allocate_id(tasks: Iterable[Task]) -> int:
        return max((t.id for t in tasks), default=0) + 1

    # ---- public API ----

    def get_task(self, task_id: int) -> Task | None:
        for task in self.load():
            if task.id == task_id:
                return task
        return None

    def add_task(self, description: str) -> Task:
        tasks = self.load()
        now = self._clock()
        task = Task(
            id=self.allocate_id(tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self.save(tasks)
        logger.debug("Task added id=%s", task.id)
        return task

    def update_task(self, task_id: int, description: str) -> Task | None:
        """Replace the description; returns None (and writes nothing) if the id is unknown."""
        tasks = self.load()
        for task in tasks:
            if task.id == task_id:
                task.description = description
                task.updated_at = self._clock()
                self.save(tasks)
                logger.debug("Task updated id=%s", task_id)
                return task
        logger.debug("Task update skipped, id=%s not found", task_id)
        return None

    def delete_tasks(self, ids: Iterable[int]) -> list[int]:
        """
        Remove every task whose id is in `ids`.

        Unknown ids are ignored. The file is rewritten even when nothing
        matched. Returns the removed ids in store order.
        """
        wanted = set(ids)
        tasks = self.load()
        kept = [t for t in tasks if t.id not in wanted]
        removed = [t.id for t in tasks if t.id in wanted]
        self.save(kept)
        logger.debug("Tasks deleted ids=%s (requested=%s)", removed, sorted(wanted))
        return removed

    def set_status(self, ids: Iterable[int], status: TaskStatus) -> list[Task]:
        """
        Move every task whose id is in `ids` to `status`.

        Unknown ids are ignored and the file is always rewritten. Returns the
        changed tasks in store order.
        """
        wanted = set(ids)
        tasks = self.load()
        now = self._clock()
        changed: list[Task] = []
        for task in tasks:
            if task.id in wanted:
                task.status = status
                task.updated_at = now
                changed.append(task)
        self.save(tasks)
        logger.debug("Tasks marked %s ids=%s", status.value, [t.id for t in changed])
        return changed

    def list_tasks(self, statuses: Iterable[TaskStatus]) -> list[Task]:
        wanted = set(statuses)
        return [t for t in self.load() if t.status in wanted]
