# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app, built once by get_settings().
- Nothing here touches the task file; paths are only resolved.
- Tests build their own Settings (from_env() or the constructor) instead of
  relying on process-wide state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    @property
    def log_dir(self) -> Path:
        return self.data_dir

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "task-tracker")
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        log_to_file = _env_bool(_k("LOG_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-tracker"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "data.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        # Real environment variables win over .env entries.
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
