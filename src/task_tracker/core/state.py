# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from .ports import TaskRepo


@dataclass(slots=True)
class AppState:
    # Settings are kept on the state so handlers can read them without globals.
    settings: Settings
    task_store: TaskRepo
