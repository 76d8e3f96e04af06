"""Persistence helpers (load/save) for the task list.

The file is a JSON array of {"description", "status"} records in list
order. Older files written with CamelCase status names ("Todo",
"InProgress", "Completed") or the "doing" key are migrated on load.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Union

from todo_cli.errors import ParseError, StorageError
from todo_cli.models import Status, Task

logger = logging.getLogger(__name__)

TASKS_FILE = Path('tasks.json')

TaskRecord = Dict[str, Any]
PathLike = Union[str, Path]

LEGACY_STATUS = {
    'Todo': Status.TODO,
    'InProgress': Status.IN_PROGRESS,
    'Completed': Status.DONE,
    'doing': Status.IN_PROGRESS,
}


class Storage:
    @staticmethod
    def load_tasks(path: PathLike = TASKS_FILE) -> List[Task]:
        """Load tasks from disk in stored order.

        Missing file -> empty list.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("No task file at %s; starting empty", path)
            return []
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = f.read()
        except UnicodeDecodeError as exc:
            raise ParseError(f"Failed to parse {path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to access file: {exc}") from exc
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Failed to parse {path}: {exc}") from exc
        # tolerate a {"tasks": [...]} wrapper
        if isinstance(data, dict) and 'tasks' in data:
            data = data['tasks']
        if not isinstance(data, list):
            raise ParseError(f"Failed to parse {path}: expected a list of tasks")
        tasks = [_task_from_record(rec, pos) for pos, rec in enumerate(data, start=1)]
        logger.debug("Loaded %d task(s) from %s", len(tasks), path)
        return tasks

    @staticmethod
    def save_tasks(tasks: List[Task], path: PathLike = TASKS_FILE) -> None:
        """Persist tasks to disk (pretty-printed).

        Writes a sibling temp file and swaps it in, so a failed write leaves
        the previous file untouched.
        """
        path = Path(path)
        records = [_task_to_record(t) for t in tasks]
        tmp = path.with_name(path.name + '.tmp')
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=4, ensure_ascii=False)
            os.replace(tmp, path)
        except (OSError, UnicodeEncodeError) as exc:
            if tmp.exists():
                tmp.unlink()
            raise StorageError(f"Failed to write {path}: {exc}") from exc
        logger.debug("Saved %d task(s) to %s", len(records), path)


def _task_to_record(task: Task) -> TaskRecord:
    return {'description': task.description, 'status': task.status.value}


def _task_from_record(rec: Any, pos: int) -> Task:
    if not isinstance(rec, dict):
        raise ParseError(f"Task record {pos} is not an object")
    description = rec.get('description')
    if not isinstance(description, str):
        raise ParseError(f"Task record {pos} has no description")
    if 'status' not in rec:
        raise ParseError(f"Task record {pos} has no status")
    raw_status = rec['status']
    if isinstance(raw_status, str) and raw_status in LEGACY_STATUS:
        status = LEGACY_STATUS[raw_status]
    else:
        try:
            status = Status(raw_status)
        except ValueError:
            raise ParseError(f"Task record {pos} has unknown status {raw_status!r}") from None
    return Task(description=description, status=status)
