# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.commands import Dispatcher
from todo_cli.task_list import TaskList


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def dispatcher(task_list: TaskList, task_file: Path) -> Dispatcher:
    """Dispatcher over an empty list with the plain (uncolored) theme."""
    return Dispatcher(task_list, task_file)
