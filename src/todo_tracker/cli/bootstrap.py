# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

Composition root: picks the store path from settings and builds the TaskStore.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings: Settings | None = None) -> TaskStore:
    """
    Build the TaskStore for this run.

    Loading happens here; an unreadable file raises TaskStoreError(STARTUP_IO).
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.store_path)
    logger.debug("Loaded %d tasks from %s", store.count_tasks(), settings.store_path)
    return store
