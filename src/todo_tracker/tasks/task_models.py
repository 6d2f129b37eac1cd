# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskErrorKind(StrEnum):
    """
    Failure kinds a store operation can report.

    Callers branch on the kind, never on the message text.
    """

    OUT_OF_BOUNDS = "out_of_bounds"
    NOTHING_TO_DELETE = "nothing_to_delete"
    PARSE_FAILURE = "parse_failure"
    STARTUP_IO = "startup_io"


class TaskStoreError(Exception):
    def __init__(self, kind: TaskErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Strict decode: both fields must be present with the right JSON types."""
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")
        description = raw.get("description")
        completed = raw.get("completed")
        if not isinstance(description, str):
            raise ValueError("task entry is missing a string 'description'")
        if not isinstance(completed, bool):
            raise ValueError("task entry is missing a boolean 'completed'")
        return cls(description=description, completed=completed)
