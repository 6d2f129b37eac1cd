# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

One invocation = one command: load the task file, run the command, save, exit.

Exit codes:
- 0 on success (including "already completed" and the no-command hint)
- 1 when the command fails (bad index, nothing to delete, unreadable file)
- 2 on usage errors (reported by argparse)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..config import Settings, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_models import TaskStoreError
from .bootstrap import create_task_store
from .commands import registry

logger = logging.getLogger(__name__)

NO_COMMAND_HINT = "No subcommand was used, use -h, --help to see available subcommands"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="A command-line interface for managing a todo list",
    )
    registry.add_subparsers(parser)
    return parser


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    try:
        setup_logging(
            console_level=level_from_name(settings.log_level),
            log_dir=settings.log_dir,
        )
    except OSError as e:
        print(f"Error: Cannot open log directory {settings.log_dir}: {e}", file=sys.stderr)
        return 1

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print(NO_COMMAND_HINT)
        return 0

    logger.debug("todo %s command=%s store=%s", __version__, args.command, settings.store_path)

    try:
        store = create_task_store(settings=settings)
    except TaskStoreError as e:
        logger.debug("Store startup failed kind=%s", e.kind)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        output = registry.handle(store, args)
    except TaskStoreError as e:
        logger.debug("Command %s failed kind=%s", args.command, e.kind)
        print(registry.error_message(args.command, e), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
