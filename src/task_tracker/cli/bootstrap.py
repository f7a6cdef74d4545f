# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings loaded once at
start-up and wires the concrete TaskStore into AppState. Nothing below this
layer reads configuration or knows where the task file lives.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable lets tests point the store at a temporary
    file. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    logger.debug("Using task file %s", settings.tasks_path)
    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
    )
