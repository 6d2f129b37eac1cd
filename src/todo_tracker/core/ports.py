# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store.

The store reads and writes its document through a backing object, so it can be
exercised against an in-memory fake in tests and against a file in the CLI.
"""

from typing import Protocol


class TaskBacking(Protocol):
    """Whole-document storage for the task list."""

    def read_text(self) -> str | None:
        """Return the stored document, or None if nothing has been stored yet."""
        ...

    def write_text(self, text: str) -> None:
        """Replace the stored document with `text`."""
        ...
