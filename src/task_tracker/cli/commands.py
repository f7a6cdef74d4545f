# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from ..core.state import AppState
from ..tasks.task_models import Task
from .parser import (
    AddCommand,
    Command,
    CommandType,
    DeleteCommand,
    ListCommand,
    MarkCommand,
    UpdateCommand,
)

CommandHandler = Callable[[AppState, Any], str]

logger = logging.getLogger(__name__)

SEPARATOR = "-----------------------------"

HELP_EXAMPLES = (
    'add "Buy groceries"',
    'update 3 "Buy milk and bread"',
    "delete 1 4 5",
    "mark-done 2 7",
    "list todo",
    "list",
)


class CommandRegistry:
    """Maps each command type to exactly one handler plus its help line."""

    def __init__(self) -> None:
        self._handlers: dict[CommandType, CommandHandler] = {}
        self._usage: dict[CommandType, tuple[str, str]] = {}

    def register(
        self,
        command_type: CommandType,
        handler: CommandHandler,
        usage: str,
        help_text: str,
    ) -> None:
        self._handlers[command_type] = handler
        self._usage[command_type] = (usage, help_text)

    def handle(self, state: AppState, command: Command) -> str:
        """
        Run the handler for a parsed command and return the text to show.

        Invalid commands never reach a handler; their message is returned as is.
        """
        if not command.is_valid:
            return command.error_message  # type: ignore[union-attr]

        handler = self._handlers.get(command.type)  # type: ignore[arg-type]
        if handler is None:
            raise LookupError(f"No handler registered for {command.type}")

        logger.debug("Dispatching %s", command)
        return handler(state, command)

    def build_help(self, app_name: str = "task-tracker") -> str:
        width = max((len(usage) for usage, _ in self._usage.values()), default=0)
        lines = [SEPARATOR, app_name, SEPARATOR, "Usage:"]
        for usage, help_text in self._usage.values():
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        lines.append("")
        lines.append("Examples:")
        lines.extend(f"  {example}" for example in HELP_EXAMPLES)
        return "\n".join(lines)


registry = CommandRegistry()


def _ts_local(ts: datetime) -> str:
    return ts.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _summary(task: Task) -> str:
    return f"Id: {task.id}, status: {task.status}, description: {task.description}"


def _id_list(ids: Sequence[int]) -> str:
    return ", ".join(str(i) for i in ids)


def format_task(task: Task) -> str:
    return "\n".join(
        [
            SEPARATOR,
            f"Task id: {task.id}",
            f"Task description: {task.description}",
            f"Task status: {task.status}",
            f"Created at: {_ts_local(task.created_at)}",
            f"Updated at: {_ts_local(task.updated_at)}",
        ]
    )


def cmd_add(state: AppState, command: AddCommand) -> str:
    task = state.task_store.add_task(command.description)
    return f"Task added. {_summary(task)}"


def cmd_update(state: AppState, command: UpdateCommand) -> str:
    task = state.task_store.update_task(command.task_id, command.description)
    if task is None:
        return f"Task with id {command.task_id} not found!"
    return f"Task updated. {_summary(task)}"


def cmd_delete(state: AppState, command: DeleteCommand) -> str:
    removed = state.task_store.delete_tasks(command.ids)
    if not removed:
        return "No matching tasks to delete."
    return f"Deleted {len(removed)} task(s): {_id_list(removed)}"


def cmd_mark(state: AppState, command: MarkCommand) -> str:
    changed = state.task_store.set_status(command.ids, command.status)
    if not changed:
        return "No matching tasks to update."
    return f"Marked {len(changed)} task(s) as {command.status}: {_id_list([t.id for t in changed])}"


def cmd_list(state: AppState, command: ListCommand) -> str:
    tasks = state.task_store.list_tasks(command.statuses)
    if not tasks:
        return "No tasks found."
    return "\n".join([*(format_task(t) for t in tasks), SEPARATOR])


def cmd_help(state: AppState, command: Any) -> str:
    return registry.build_help(state.settings.app_name)


registry.register(CommandType.ADD, cmd_add, "add <description>", "Add a new task with a description")
registry.register(
    CommandType.UPDATE,
    cmd_update,
    "update <id> <description>",
    "Update the description of an existing task",
)
registry.register(
    CommandType.DELETE, cmd_delete, "delete <id1> [id2] ...", "Delete one or more tasks by id"
)
registry.register(
    CommandType.MARK_TODO, cmd_mark, "mark-todo <id1> [id2] ...", "Mark one or more tasks as 'todo'"
)
registry.register(
    CommandType.MARK_IN_PROGRESS,
    cmd_mark,
    "mark-in-progress <id1> [id2] ...",
    "Mark one or more tasks as 'in-progress'",
)
registry.register(
    CommandType.MARK_DONE, cmd_mark, "mark-done <id1> [id2] ...", "Mark one or more tasks as 'done'"
)
registry.register(
    CommandType.LIST,
    cmd_list,
    "list [status ...]",
    "List tasks; status is todo, in-progress or done (all when omitted)",
)
registry.register(CommandType.HELP, cmd_help, "help", "Show this help")
