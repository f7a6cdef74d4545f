# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for suffix in ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "DATA_DIR", "TASKS_PATH"):
        monkeypatch.delenv(f"TASK_TRACKER_{suffix}", raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.app_name == "task-tracker"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/task-tracker")
    assert s.tasks_path == Path(".local/task-tracker/data.json")
    assert s.log_dir == s.data_dir


def test_tasks_path_follows_data_dir(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path))
    assert Settings.from_env().tasks_path == tmp_path / "data.json"


def test_explicit_values(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASK_TRACKER_TASKS_PATH", str(tmp_path / "mine.json"))
    clean_env.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    clean_env.setenv("TASK_TRACKER_LOG_FILE", "off")
    clean_env.setenv("TASK_TRACKER_APP_NAME", "   ")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.app_name == "task-tracker"
