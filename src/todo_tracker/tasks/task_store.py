# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.ports import TaskBacking
from .task_models import Task, TaskErrorKind, TaskStoreError

logger = logging.getLogger(__name__)


class JsonFileBacking:
    """
    File backing for the task document.

    - a missing file reads as None
    - any other read failure is a startup I/O error
    - writes go to a sibling .tmp file and are moved into place with os.replace
    """

    def __init__(self, path: str | Path = "todo.json") -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileBacking({str(self.path)!r})"

    def read_text(self) -> str | None:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise TaskStoreError(
                TaskErrorKind.STARTUP_IO, f"Cannot read task file {self.path}: {e}"
            ) from e
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Task file %s is not valid UTF-8.", self.path)
            return ""

    def write_text(self, text: str) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self.path)
        except (OSError, UnicodeError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreError(
                TaskErrorKind.STARTUP_IO, f"Cannot write task file {self.path}: {e}"
            ) from e


class TaskStore:
    """
    Ordered task list mirrored into a JSON document.

    Every mutating call rewrites the whole document; nothing is patched in place.
    Task identity is positional: index N is the N-th task (1-based) right now.

    Not safe for concurrent writers: a second process can overwrite our save.
    """

    def __init__(
        self,
        path: str | Path = "todo.json",
        *,
        backing: TaskBacking | None = None,
    ) -> None:
        self._backing: TaskBacking = backing if backing is not None else JsonFileBacking(path)
        self._tasks: list[Task] = self.load()
        logger.debug("TaskStore ready backing=%r total=%s", self._backing, len(self._tasks))

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Read the whole document.

        Missing, empty or malformed content yields an empty list; the only error
        that escapes is an unreadable file (TaskErrorKind.STARTUP_IO).
        """
        raw = self._backing.read_text()
        if raw is None:
            logger.debug("No task document yet; starting empty.")
            self._tasks = []
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            tasks = [Task.from_dict(item) for item in data]
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError too; deep nesting hits the recursion limit.
            logger.warning("Discarding malformed task document: %s", e)
            tasks = []

        self._tasks = tasks
        return list(tasks)

    def save(self) -> None:
        """Serialize the full list, replacing any previous content."""
        text = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2)
        self._backing.write_text(text)
        logger.debug("Saved %d tasks to %r", len(self._tasks), self._backing)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def grouped(self) -> tuple[list[tuple[int, Task]], list[tuple[int, Task]]]:
        """
        Split into (completed, uncompleted), each as (1-based index, task) pairs.

        Indices are positions in the full list, not within the group.
        """
        done: list[tuple[int, Task]] = []
        pending: list[tuple[int, Task]] = []
        for index, task in enumerate(self._tasks, start=1):
            (done if task.completed else pending).append((index, task))
        return done, pending

    def add(self, description: str) -> Task:
        task = Task(description=description, completed=False)
        self._tasks.append(task)
        self.save()
        logger.debug("Task added index=%d", len(self._tasks))
        return task

    def complete(self, index: int) -> tuple[Task, bool]:
        """
        Mark the task at 1-based `index` as completed.

        Returns (task, changed). `changed` is False when the task was already
        completed; in that case nothing is written.
        """
        pos = index - 1
        if pos < 0 or pos >= len(self._tasks):
            raise TaskStoreError(TaskErrorKind.OUT_OF_BOUNDS, "Index out of bounds")

        task = self._tasks[pos]
        if task.completed:
            logger.debug("Task %d already completed; not saving.", index)
            return task, False

        task.completed = True
        self.save()
        return task, True

    def delete_completed(self) -> int:
        """Drop every completed task, keeping the order of the rest. Returns the count removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        if removed == 0:
            raise TaskStoreError(TaskErrorKind.NOTHING_TO_DELETE, "No completed tasks to delete")

        self.save()
        logger.debug("Deleted %d completed tasks, %d left", removed, len(self._tasks))
        return removed
