# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_passes_own_logs_and_mutes_others() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_tracker.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_without_dir_has_console_only(restore_root_logging) -> None:
    setup_logging(console_level=logging.WARNING)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    log_dir = tmp_path / "logs"
    setup_logging(console_level=logging.ERROR, log_dir=log_dir)

    logging.getLogger("todo_tracker.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    text = (log_dir / "todo.log").read_text("utf-8")
    assert "DEBUG todo_tracker.test: hello file" in text
