# src/todo_tracker/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import TaskErrorKind, TaskStoreError
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, argparse.Namespace], str]
ArgsConfigurer = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    error_prefix: str
    configure: ArgsConfigurer | None = None


class CommandRegistry:
    """Subcommand registry: builds the argparse subparsers and routes to handlers."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        error_prefix: str = "Error",
        configure: ArgsConfigurer | None = None,
    ) -> None:
        self._commands[name] = Command(
            name=name,
            handler=handler,
            help_text=help_text,
            error_prefix=error_prefix,
            configure=configure,
        )

    def names(self) -> list[str]:
        return list(self._commands)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="command", metavar="<command>")
        for cmd in self._commands.values():
            p = sub.add_parser(cmd.name, help=cmd.help_text, description=cmd.help_text)
            if cmd.configure is not None:
                cmd.configure(p)

    def handle(self, store: TaskStore, args: argparse.Namespace) -> str:
        """
        Run the handler chosen by `args.command`.

        Store failures propagate as TaskStoreError; the caller prefixes them with
        `error_message()`.
        """
        cmd = self._commands.get(args.command)
        if cmd is None:
            raise KeyError(args.command)
        logger.debug("Dispatching command=%s", cmd.name)
        return cmd.handler(store, args)

    def error_message(self, name: str, err: TaskStoreError) -> str:
        cmd = self._commands.get(name)
        prefix = cmd.error_prefix if cmd is not None else "Error"
        return f"{prefix}: {err}"


registry = CommandRegistry()


def parse_index(raw: str) -> int:
    """Parse a user-supplied 1-based index. Bounds are checked by the store."""
    text = raw.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise TaskStoreError(TaskErrorKind.PARSE_FAILURE, "Index must be a positive integer")
    return int(text)


def render_listing(store: TaskStore) -> str:
    if store.count_tasks() == 0:
        return "No tasks in the todo list"

    done, pending = store.grouped()
    lines = ["Completed tasks:"]
    for index, task in done:
        lines.append(f"{index}. [x] {task.description}")
    lines.append("Uncompleted tasks:")
    for index, task in pending:
        lines.append(f"{index}. [ ] {task.description}")
    return "\n".join(lines)


def cmd_add(store: TaskStore, args: argparse.Namespace) -> str:
    task = store.add(args.task)
    return f"Added task: {task.description}"


def cmd_complete(store: TaskStore, args: argparse.Namespace) -> str:
    index = parse_index(args.index)
    task, changed = store.complete(index)
    if not changed:
        return f"Task already completed: {task.description}"
    return f"Completed task: {task.description}"


def cmd_delete_completed(store: TaskStore, args: argparse.Namespace) -> str:
    removed = store.delete_completed()
    return f"Deleted {removed} completed tasks"


def cmd_list(store: TaskStore, args: argparse.Namespace) -> str:
    return render_listing(store)


def _add_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("task", metavar="TASK", help="The task to add to the todo list")


def _complete_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "index", metavar="INDEX", help="The index of the task to mark as complete"
    )


registry.register(
    "add",
    cmd_add,
    help_text="Add a new task to the todo list",
    error_prefix="Error adding task",
    configure=_add_args,
)
registry.register(
    "complete",
    cmd_complete,
    help_text="Mark a task as complete",
    error_prefix="Error completing task",
    configure=_complete_args,
)
registry.register(
    "delete_completed",
    cmd_delete_completed,
    help_text="Delete all completed tasks from the todo list",
    error_prefix="Error deleting completed tasks",
)
registry.register(
    "list",
    cmd_list,
    help_text="List all of the tasks in the todo list",
    error_prefix="Error listing tasks",
)
