"""Command parsing and dispatch.

parse_command() turns a line into a typed command, validating argument
count, task numbers and status names up front. Dispatcher.dispatch()
runs a command against the TaskList and returns an Outcome holding the
message to show. Every TodoError is turned into an "Error: ..." message
here; nothing below this boundary prints.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from todo_cli.errors import InvalidCommandError, TodoError
from todo_cli.models import Status, parse_status
from todo_cli.storage import PathLike, TASKS_FILE
from todo_cli.task_list import TaskList
from todo_cli.theme import PLAIN, STATUS_ICONS, Theme

logger = logging.getLogger(__name__)

RULE = '─' * 37


@dataclass(frozen=True)
class Add:
    description: str


@dataclass(frozen=True)
class ListTasks:
    status: Optional[Status] = None


@dataclass(frozen=True)
class Update:
    number: int
    status: Status


@dataclass(frozen=True)
class Remove:
    number: int


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class Unrecognized:
    text: str


Command = Union[Add, ListTasks, Update, Remove, Clear, Save, Help, Exit, Unrecognized]

HELP_TEXT = """Commands:
  add <description>        Add a new task
  list [status]            List all tasks (or filter by status)
  update <num> <status>    Update task status (todo/in-progress/done)
  remove <num>             Remove a task
  clear                    Remove all completed tasks
  save                     Save tasks to file
  help                     Show this help message
  exit                     Save and exit

Aliases: ls, status/mv, delete/rm, quit; statuses t/ip/d

Examples:
  add Buy groceries
  list done
  update 1 in-progress
  remove 2"""


# -------------------- parsing --------------------
def _parse_number(raw: str) -> int:
    raw = raw.rstrip('.')
    # isdigit() alone also accepts superscripts and other non-ASCII digits
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidCommandError("Invalid task number.")
    return int(raw)


def parse_command(line: str) -> Command:
    tokens = line.split()
    if not tokens:
        return Unrecognized('')
    cmd, args = tokens[0].lower(), tokens[1:]
    if cmd in ('exit', 'quit'):
        return Exit()
    if cmd == 'help':
        return Help()
    if cmd in ('list', 'ls'):
        if len(args) > 1:
            raise InvalidCommandError("Usage: list [status]")
        return ListTasks(parse_status(args[0]) if args else None)
    if cmd == 'add':
        if not args:
            raise InvalidCommandError("Usage: add <task_description>")
        return Add(' '.join(args))
    if cmd in ('update', 'status', 'mv'):
        if len(args) != 2:
            raise InvalidCommandError("Usage: update <task_number> <new_status>")
        return Update(_parse_number(args[0]), parse_status(args[1]))
    if cmd in ('remove', 'delete', 'rm'):
        if len(args) != 1:
            raise InvalidCommandError("Usage: remove <task_number>")
        return Remove(_parse_number(args[0]))
    if cmd == 'clear':
        return Clear()
    if cmd == 'save':
        return Save()
    return Unrecognized(line.strip())


# -------------------- dispatch --------------------
@dataclass
class Outcome:
    message: str
    exit: bool = False
    ok: bool = True
    changed: bool = False


class Dispatcher:
    def __init__(self, task_list: TaskList, path: PathLike = TASKS_FILE,
                 theme: Theme = PLAIN):
        self.task_list = task_list
        self.path = Path(path)
        self.theme = theme

    def execute(self, line: str) -> Outcome:
        """Parse and dispatch one line of input."""
        try:
            command = parse_command(line)
        except TodoError as exc:
            logger.debug("Rejected %r: %s", line, exc)
            return Outcome(f"Error: {exc}", ok=False)
        return self.dispatch(command)

    def dispatch(self, command: Command) -> Outcome:
        try:
            return self._run(command)
        except TodoError as exc:
            logger.debug("%s failed: %s", type(command).__name__, exc)
            return Outcome(f"Error: {exc}", ok=False)

    def _run(self, command: Command) -> Outcome:
        if isinstance(command, Add):
            self.task_list.add(command.description)
            return Outcome("Task added successfully!", changed=True)
        if isinstance(command, ListTasks):
            return Outcome(self.render_list(command.status))
        if isinstance(command, Update):
            self.task_list.update(command.number, command.status)
            return Outcome("Task status updated successfully!", changed=True)
        if isinstance(command, Remove):
            task = self.task_list.remove(command.number)
            return Outcome(f"Removed: {task.description}", changed=True)
        if isinstance(command, Clear):
            count = self.task_list.clear_completed()
            if count:
                return Outcome(f"Cleared {count} completed task(s)", changed=True)
            return Outcome("No completed tasks to clear")
        if isinstance(command, Save):
            self.task_list.save(self.path)
            return Outcome(f"Tasks saved to {self.path}")
        if isinstance(command, Help):
            return Outcome(HELP_TEXT)
        if isinstance(command, Exit):
            return self._exit()
        return Outcome(
            f"Unknown command: '{command.text}'\nType 'help' to see available commands",
            ok=False,
        )

    def _exit(self) -> Outcome:
        try:
            self.task_list.save(self.path)
        except TodoError as exc:
            logger.warning("Save on exit failed: %s", exc)
            return Outcome(f"Failed to save tasks: {exc}\nGoodbye!", exit=True, ok=False)
        return Outcome("Tasks saved successfully!\nGoodbye!", exit=True)

    # -------------------- display --------------------
    def render_list(self, status: Optional[Status] = None) -> str:
        listing = self.task_list.list(status)
        lines: List[str] = []
        for number, task in listing:
            icon = STATUS_ICONS[task.status]
            lines.append(f"{icon} {self.theme.number(number)} "
                         f"{self.theme.status(str(task), task.status)}")
        if not lines:
            if status is not None:
                return self.theme.muted("No tasks with that status")
            return self.theme.muted("No tasks yet. Add one with: add <description>")
        rule = self.theme.header(RULE)
        return '\n'.join([self.theme.header("Your Tasks:"), rule, *lines, rule])
