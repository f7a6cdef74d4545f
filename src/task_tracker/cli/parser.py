# src/task_tracker/cli/parser.py

"""
Argument parser: raw tokens -> typed Command.

parse() is pure and total. It never touches the task file and never raises
for bad input; every rejection is an InvalidCommand carrying a message.

Id and status lists are lenient: tokens that are not integers (or not a
known status) are dropped instead of failing the whole command.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ..tasks.task_models import TaskStatus


class CommandType(Enum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"
    MARK_TODO = "mark-todo"
    MARK_IN_PROGRESS = "mark-in-progress"
    MARK_DONE = "mark-done"
    HELP = "help"


MARK_STATUSES: dict[CommandType, TaskStatus] = {
    CommandType.MARK_TODO: TaskStatus.TODO,
    CommandType.MARK_IN_PROGRESS: TaskStatus.IN_PROGRESS,
    CommandType.MARK_DONE: TaskStatus.DONE,
}

USAGE_UPDATE = "update <id> <description>"


@dataclass(frozen=True, slots=True)
class AddCommand:
    description: str

    type: ClassVar[CommandType] = CommandType.ADD
    is_valid: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class UpdateCommand:
    task_id: int
    description: str

    type: ClassVar[CommandType] = CommandType.UPDATE
    is_valid: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    ids: tuple[int, ...]

    type: ClassVar[CommandType] = CommandType.DELETE
    is_valid: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ListCommand:
    statuses: tuple[TaskStatus, ...]

    type: ClassVar[CommandType] = CommandType.LIST
    is_valid: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class MarkCommand:
    status: TaskStatus
    ids: tuple[int, ...]

    is_valid: ClassVar[bool] = True

    @property
    def type(self) -> CommandType:
        for command_type, status in MARK_STATUSES.items():
            if status is self.status:
                return command_type
        raise ValueError(f"no mark command for status {self.status!r}")


@dataclass(frozen=True, slots=True)
class HelpCommand:
    type: ClassVar[CommandType] = CommandType.HELP
    is_valid: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    error_message: str

    type: ClassVar[None] = None
    is_valid: ClassVar[bool] = False


Command = (
    AddCommand
    | UpdateCommand
    | DeleteCommand
    | ListCommand
    | MarkCommand
    | HelpCommand
    | InvalidCommand
)


def _parse_int(raw: str) -> int | None:
    # int() also takes "1_0" and non-ASCII digits; ids are plain ASCII integers.
    if not raw.isascii() or "_" in raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_ids(args: Sequence[str]) -> tuple[int, ...]:
    ids = (_parse_int(a) for a in args)
    return tuple(i for i in ids if i is not None)


def _parse_statuses(args: Sequence[str]) -> tuple[TaskStatus, ...]:
    if not args:
        return tuple(TaskStatus)
    out: list[TaskStatus] = []
    for a in args:
        status = TaskStatus.from_name(a)
        if status is not None and status not in out:
            out.append(status)
    return tuple(out)


def _parse_add(args: Sequence[str]) -> Command:
    description = " ".join(args)
    if not description.strip():
        return InvalidCommand("Missing task description")
    return AddCommand(description=description)


def _parse_update(args: Sequence[str]) -> Command:
    if len(args) != 2:
        return InvalidCommand(f"Invalid syntax! Usage: {USAGE_UPDATE}")
    task_id = _parse_int(args[0])
    if task_id is None or task_id <= 0:
        return InvalidCommand("Id must be a positive integer")
    if not args[1].strip():
        return InvalidCommand("Missing task description")
    return UpdateCommand(task_id=task_id, description=args[1])


def _missing_ids(keyword: str) -> InvalidCommand:
    return InvalidCommand(f"Missing task id. Usage: {keyword} <id1> [id2] ...")


def parse(tokens: Sequence[str]) -> Command:
    if not tokens:
        return InvalidCommand("Empty input")

    keyword = tokens[0].lower()
    args = tokens[1:]

    if keyword == CommandType.ADD.value:
        return _parse_add(args)

    if keyword == CommandType.UPDATE.value:
        return _parse_update(args)

    if keyword == CommandType.DELETE.value:
        if not args:
            return _missing_ids(keyword)
        return DeleteCommand(ids=_parse_ids(args))

    if keyword == CommandType.LIST.value:
        return ListCommand(statuses=_parse_statuses(args))

    if keyword == CommandType.HELP.value:
        return HelpCommand()

    for command_type, status in MARK_STATUSES.items():
        if keyword == command_type.value:
            if not args:
                return _missing_ids(keyword)
            return MarkCommand(status=status, ids=_parse_ids(args))

    return InvalidCommand(f"Unknown command: {tokens[0]}")
