# tests/test_models.py

from __future__ import annotations

import pytest

from todo_cli.errors import InvalidCommandError
from todo_cli.models import Status, Task, parse_status


@pytest.mark.parametrize(
    "token, expected",
    [
        ("todo", Status.TODO),
        ("To-Do", Status.TODO),
        ("t", Status.TODO),
        ("in-progress", Status.IN_PROGRESS),
        ("InProgress", Status.IN_PROGRESS),
        ("ip", Status.IN_PROGRESS),
        ("DONE", Status.DONE),
        ("completed", Status.DONE),
    ],
)
def test_parse_status_accepts_aliases(token: str, expected: Status) -> None:
    assert parse_status(token) is expected


def test_parse_status_rejects_unknown_name() -> None:
    with pytest.raises(InvalidCommandError, match="finished not recognized"):
        parse_status("finished")


def test_task_create_trims_and_starts_todo() -> None:
    task = Task.create("  Buy groceries  ")
    assert task.description == "Buy groceries"
    assert task.status is Status.TODO
    assert str(task) == "Buy groceries [TODO]"


def test_task_create_rejects_blank_description() -> None:
    with pytest.raises(InvalidCommandError):
        Task.create("   ")


def test_status_labels() -> None:
    assert [s.label for s in Status] == ["TODO", "IN-PROGRESS", "DONE"]
    assert str(Task("x", Status.IN_PROGRESS)) == "x [IN-PROGRESS]"
