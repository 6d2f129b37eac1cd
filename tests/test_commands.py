# tests/test_commands.py

from __future__ import annotations

import argparse

import pytest

from todo_tracker.cli.commands import CommandRegistry, parse_index, registry, render_listing
from todo_tracker.tasks.task_models import TaskErrorKind, TaskStoreError
from todo_tracker.tasks.task_store import TaskStore

from .conftest import dump_tasks
from .fakes import InMemoryBacking


def test_registry_builds_subparsers_and_routes(memory_store: TaskStore) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(store, args):
        called["a"] += 1
        return f"got {args.value}"

    reg.register(
        "a",
        handler,
        "a",
        error_prefix="Error in a",
        configure=lambda p: p.add_argument("value"),
    )
    parser = argparse.ArgumentParser()
    reg.add_subparsers(parser)

    args = parser.parse_args(["a", "x"])
    assert reg.handle(memory_store, args) == "got x"
    assert called["a"] == 1
    assert reg.names() == ["a"]

    err = TaskStoreError(TaskErrorKind.OUT_OF_BOUNDS, "boom")
    assert reg.error_message("a", err) == "Error in a: boom"
    assert reg.error_message("nope", err) == "Error: boom"


def test_default_registry_has_all_commands() -> None:
    assert registry.names() == ["add", "complete", "delete_completed", "list"]


@pytest.mark.parametrize("raw,expected", [("1", 1), (" 3 ", 3), ("0", 0), ("-2", -2)])
def test_parse_index_accepts_integers(raw: str, expected: int) -> None:
    assert parse_index(raw) == expected


@pytest.mark.parametrize("raw", ["one", "", "1.5", "2x", "1_000", "+3", "\u0663", "-", "--1"])
def test_parse_index_rejects_non_integers(raw: str) -> None:
    with pytest.raises(TaskStoreError) as exc:
        parse_index(raw)
    assert exc.value.kind is TaskErrorKind.PARSE_FAILURE
    assert str(exc.value) == "Index must be a positive integer"


def test_render_listing_empty(memory_store: TaskStore) -> None:
    assert render_listing(memory_store) == "No tasks in the todo list"


def test_render_listing_groups_completed_first() -> None:
    store = TaskStore(backing=InMemoryBacking(text=dump_tasks([("A", True), ("B", False), ("C", True)])))
    assert render_listing(store) == (
        "Completed tasks:\n"
        "1. [x] A\n"
        "3. [x] C\n"
        "Uncompleted tasks:\n"
        "2. [ ] B"
    )


def test_render_listing_keeps_empty_group_headers() -> None:
    store = TaskStore(backing=InMemoryBacking(text=dump_tasks([("A", False)])))
    assert render_listing(store) == "Completed tasks:\nUncompleted tasks:\n1. [ ] A"
