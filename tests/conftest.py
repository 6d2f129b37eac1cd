# tests/conftest.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from todo_tracker.config import Settings
from todo_tracker.tasks.task_store import TaskStore

from .fakes import InMemoryBacking


def dump_tasks(tasks: list[tuple[str, bool]]) -> str:
    return json.dumps([{"description": d, "completed": c} for d, c in tasks], indent=2)


def read_pairs(path: Path) -> list[tuple[str, bool]]:
    data: list[dict[str, Any]] = json.loads(path.read_text("utf-8"))
    return [(item["description"], item["completed"]) for item in data]


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todo.json"


@pytest.fixture()
def settings(store_path: Path) -> Settings:
    """
    Settings pointing at a per-test task file.

    Built directly instead of from_env() so the developer's environment and
    .env never leak into tests.
    """
    return Settings(store_path=store_path, log_level="WARNING", log_dir=None)


@pytest.fixture()
def backing() -> InMemoryBacking:
    return InMemoryBacking()


@pytest.fixture()
def memory_store(backing: InMemoryBacking) -> TaskStore:
    return TaskStore(backing=backing)


@pytest.fixture()
def seeded_store(store_path: Path) -> TaskStore:
    """File-backed store starting as [("Task 1", False), ("Task 2", True)]."""
    store_path.write_text(dump_tasks([("Task 1", False), ("Task 2", True)]), "utf-8")
    return TaskStore(store_path)
