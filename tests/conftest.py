# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import StepClock


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a per-test temporary directory.

    Built directly rather than via get_settings(), to keep unit tests
    isolated from the developer's environment and .env file.
    """
    data_dir = tmp_path / "data"
    return Settings(
        app_name="task-tracker",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "data.json",
    )


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def store(settings: Settings, clock: StepClock) -> TaskStore:
    return TaskStore(settings.tasks_path, clock=clock)


@pytest.fixture()
def state(settings: Settings, store: TaskStore) -> AppState:
    """AppState wired with the real JSON store on a temporary path."""
    return AppState(settings=settings, task_store=store)
