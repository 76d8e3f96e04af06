"""Task store: the ordered task list and its mutations.

Task numbers are 1-based list positions and are never stored. Removing
a task renumbers every task after it.
"""
import logging
from typing import Iterator, List, Optional, Tuple

from todo_cli.errors import NotFoundError
from todo_cli.models import Status, Task
from todo_cli.storage import PathLike, Storage, TASKS_FILE

logger = logging.getLogger(__name__)

NumberedTask = Tuple[int, Task]


class TaskListing:
    """Numbered view over a TaskList, optionally filtered by status.

    Iterating walks the live list each time, so the same listing can be
    iterated again after the list changes.
    """

    def __init__(self, tasks: List[Task], status: Optional[Status] = None):
        self._tasks = tasks
        self.status = status

    def __iter__(self) -> Iterator[NumberedTask]:
        for number, task in enumerate(self._tasks, start=1):
            if self.status is None or task.status is self.status:
                yield number, task


class TaskList:
    def __init__(self, tasks: Optional[List[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- persistence --------------------
    @classmethod
    def load(cls, path: PathLike = TASKS_FILE) -> "TaskList":
        return cls(Storage.load_tasks(path))

    def save(self, path: PathLike = TASKS_FILE) -> None:
        Storage.save_tasks(self.tasks, path)

    # -------------------- queries --------------------
    def list(self, status: Optional[Status] = None) -> TaskListing:
        return TaskListing(self.tasks, status)

    def get(self, number: int) -> Task:
        return self.tasks[self._validate_number(number)]

    def _validate_number(self, number: int) -> int:
        if number < 1:
            raise NotFoundError("Index must start from 1")
        if number > len(self.tasks):
            raise NotFoundError(f"No task exists at that index {number}")
        return number - 1

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        task = Task.create(description)
        self.tasks.append(task)
        logger.debug("Added task %d: %s", len(self.tasks), task.description)
        return task

    def update(self, number: int, status: Status) -> Task:
        task = self.get(number)
        task.status = status
        logger.debug("Task %d set to %s", number, status.value)
        return task

    def remove(self, number: int) -> Task:
        task = self.tasks.pop(self._validate_number(number))
        logger.debug("Removed task %d: %s", number, task.description)
        return task

    def clear_completed(self) -> int:
        """Drop every done task; returns how many were removed."""
        before = len(self.tasks)
        self.tasks[:] = [t for t in self.tasks if not t.is_done]
        removed = before - len(self.tasks)
        logger.debug("Cleared %d completed task(s)", removed)
        return removed

    def __len__(self) -> int:
        return len(self.tasks)

    def __str__(self) -> str:
        counts = {s: 0 for s in Status}
        for task in self.tasks:
            counts[task.status] += 1
        return (f'Todo: {counts[Status.TODO]} tasks, '
                f'In-Progress: {counts[Status.IN_PROGRESS]} tasks, '
                f'Done: {counts[Status.DONE]} tasks')
