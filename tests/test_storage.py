# tests/test_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_cli.errors import ParseError, StorageError
from todo_cli.models import Status, Task
from todo_cli.storage import Storage
from todo_cli.task_list import TaskList


def test_save_then_load_reproduces_list(task_file: Path) -> None:
    original = TaskList([
        Task("Buy groceries", Status.IN_PROGRESS),
        Task("Write report"),
        Task("File taxes", Status.DONE),
    ])
    original.save(task_file)

    loaded = TaskList.load(task_file)
    assert loaded.tasks == original.tasks


def test_saved_file_format(task_file: Path) -> None:
    Storage.save_tasks([Task("a", Status.IN_PROGRESS)], task_file)
    assert json.loads(task_file.read_text()) == [
        {"description": "a", "status": "in-progress"}
    ]


def test_missing_file_is_empty_list(tmp_path: Path) -> None:
    assert TaskList.load(tmp_path / "nope.json").tasks == []


def test_blank_file_is_empty_list(task_file: Path) -> None:
    task_file.write_text("  \n")
    assert Storage.load_tasks(task_file) == []


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "tasks.json"
    Storage.save_tasks([Task("a")], target)
    assert target.exists()


def test_legacy_status_names_are_migrated(task_file: Path) -> None:
    task_file.write_text(json.dumps({"tasks": [
        {"description": "a", "status": "Todo"},
        {"description": "b", "status": "InProgress"},
        {"description": "c", "status": "Completed"},
        {"description": "d", "status": "doing"},
    ]}))
    statuses = [t.status for t in Storage.load_tasks(task_file)]
    assert statuses == [Status.TODO, Status.IN_PROGRESS, Status.DONE, Status.IN_PROGRESS]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"description": "a"}',
        '["just a string"]',
        '[{"status": "todo"}]',
        '[{"description": "a"}]',
        '[{"description": "a", "status": "someday"}]',
        '[{"description": "a", "status": ["todo"]}]',
    ],
)
def test_corrupt_file_raises_parse_error(task_file: Path, content: str) -> None:
    task_file.write_text(content)
    with pytest.raises(ParseError):
        Storage.load_tasks(task_file)


def test_unreadable_path_raises_storage_error(tmp_path: Path) -> None:
    # a directory exists at the path, so open() fails
    target = tmp_path / "tasks.json"
    target.mkdir()
    with pytest.raises(StorageError):
        Storage.load_tasks(target)
    with pytest.raises(StorageError):
        Storage.save_tasks([Task("a")], target)


def test_non_utf8_file_raises_parse_error(task_file: Path) -> None:
    task_file.write_bytes(b'[{"description": "\xff\xfe", "status": "todo"}]')
    with pytest.raises(ParseError):
        Storage.load_tasks(task_file)


def test_failed_save_keeps_previous_file(task_file: Path) -> None:
    Storage.save_tasks([Task("keep me")], task_file)
    before = task_file.read_text()

    # a lone surrogate cannot be encoded as UTF-8
    with pytest.raises(StorageError):
        Storage.save_tasks([Task("bad \ud800 text")], task_file)

    assert task_file.read_text() == before
    assert [p.name for p in task_file.parent.iterdir()] == [task_file.name]
