# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, parses the arguments of a single invocation, then
dispatches the command against the task file and prints the result.

Exit codes: 0 for every handled outcome (validation errors included),
1 when the task file cannot be read or written.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..cli.parser import parse
from ..config import Settings, get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    try:
        setup_logging(
            log_dir=settings.log_dir,
            console_level=console_level,
            log_to_file=settings.log_to_file,
        )
    except OSError as e:
        # The log file is optional; commands still run with console logging only.
        setup_logging(console_level=console_level, log_to_file=False)
        logger.warning("Log file disabled, cannot write to %s: %s", settings.log_dir, e)

    args = list(sys.argv[1:] if argv is None else argv)
    command = parse(args)
    if not command.is_valid:
        logger.debug("Rejected input %r: %s", args, command.error_message)  # type: ignore[union-attr]
        print(command.error_message)  # type: ignore[union-attr]
        return 0

    try:
        state = create_initial_state(settings=settings)
        reply = registry.handle(state, command)
    except OSError as e:
        logger.exception("Task file access failed (%s).", settings.tasks_path)
        print(f"Could not access task file {settings.tasks_path}: {e}")
        return 1

    print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())
