# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from clitask.manager import TaskManager, open_task_manager


@pytest.fixture()
def tasks_dir(tmp_path: Path) -> Path:
    return tmp_path / "todo"


@pytest.fixture()
def manager(tasks_dir: Path) -> Iterator[TaskManager]:
    """
    TaskManager over real JSON stores in a temp directory.

    The stores are real on purpose: durability is part of what we test.
    """
    with open_task_manager(tasks_dir) as m:
        yield m


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLITASK_DIR", "CLITASK_OPEN_FILE", "CLITASK_DONE_FILE", "CLITASK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
