"""Interactive read loop around the Dispatcher.

Reads one line at a time, dispatches it and prints the outcome. The
task list is saved on `exit`, on `save`, and when the loop is
interrupted (Ctrl-C / end of input).
"""
import logging
from typing import Callable, Optional

from todo_cli.commands import Dispatcher
from todo_cli.errors import TodoError

logger = logging.getLogger(__name__)

BANNER = """Welcome to the Todo CLI!
Type 'exit' to quit the application.
Type 'help' to see available commands
-----------------------------------"""


class CLI:
    def __init__(self, dispatcher: Dispatcher,
                 read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        self.dispatcher = dispatcher
        self._read = read
        self._write = write

    def run(self) -> None:
        """Main REPL loop; returns after `exit` or an interrupt."""
        self._write(BANNER)
        exit_message: Optional[str] = None
        try:
            while True:
                line = self._read("\n> ").strip()
                if not line:
                    continue
                outcome = self.dispatcher.execute(line)
                self._write(outcome.message)
                if outcome.exit:
                    break
        except (KeyboardInterrupt, EOFError):
            exit_message = self._save_on_interrupt()
        if exit_message:
            self._write(exit_message)

    def _save_on_interrupt(self) -> str:
        try:
            self.dispatcher.task_list.save(self.dispatcher.path)
        except TodoError as exc:
            logger.warning("Save on interrupt failed: %s", exc)
            return f"\nFailed to save tasks: {exc}\nInterrupted. Goodbye."
        return "\nInterrupted. Tasks saved. Goodbye."
