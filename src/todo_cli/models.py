"""Data models for the todo tracker.

Persisted status keys are "todo", "in-progress" and "done". The
user-facing label is the upper-cased key ("TODO", "IN-PROGRESS", "DONE").
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from todo_cli.errors import InvalidCommandError


class Status(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return self.value.upper()

    def __str__(self) -> str:
        return self.label


STATUS_ALIASES: Dict[str, Status] = {
    't': Status.TODO,
    'todo': Status.TODO,
    'to-do': Status.TODO,
    'ip': Status.IN_PROGRESS,
    'in-progress': Status.IN_PROGRESS,
    'inprogress': Status.IN_PROGRESS,
    'doing': Status.IN_PROGRESS,
    'd': Status.DONE,
    'done': Status.DONE,
    'completed': Status.DONE,
}


def parse_status(token: str) -> Status:
    """Resolve a user-typed status name (case-insensitive) to a Status."""
    status = STATUS_ALIASES.get(token.strip().lower())
    if status is None:
        raise InvalidCommandError(
            f"Status {token} not recognized. Use: todo, in-progress, done"
        )
    return status


@dataclass
class Task:
    """A single tracked item.

    Fields:
        description: Free text, trimmed, never empty.
        status: Current Status; new tasks start as TODO.

    Tasks carry no id. Their number is their 1-based position in the list.
    """
    description: str
    status: Status = Status.TODO

    @classmethod
    def create(cls, description: str) -> "Task":
        text = description.strip()
        if not text:
            raise InvalidCommandError("Task description cannot be empty")
        return cls(description=text)

    @property
    def is_done(self) -> bool:
        return self.status is Status.DONE

    def __str__(self) -> str:
        return f"{self.description} [{self.status.label}]"
