"""Main entry point for the todo tracker.

`todo` with no arguments starts the interactive loop. `todo <command ...>`
runs a single command, saves if it changed the list, and exits.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from todo_cli.cli import CLI
from todo_cli.commands import Dispatcher
from todo_cli.config import Settings, load_settings
from todo_cli.errors import TodoError
from todo_cli.task_list import TaskList
from todo_cli.theme import PLAIN, Theme

logger = logging.getLogger(__name__)


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool = False, level: str = 'WARNING') -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Force debug level logging
        level: Level name used when not verbose
    """
    log_level = logging.DEBUG if verbose else _level_from_name(level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def load_task_list(path: Path) -> Tuple[TaskList, Optional[str]]:
    """Load the list, degrading to an empty one if the file is unusable."""
    try:
        return TaskList.load(path), None
    except TodoError as exc:
        logger.warning("Could not load tasks from %s: %s", path, exc)
        return TaskList(), f"Could not load tasks: {exc}"


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--file', '-f', 'tasks_file', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Task file (default: $TODO_FILE or tasks.json).')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--no-color', is_flag=True, help='Disable colored output.')
@click.argument('command', nargs=-1, type=click.UNPROCESSED)
def main(tasks_file: Optional[Path], verbose: bool, no_color: bool, command: Tuple[str, ...]) -> None:
    """Track tasks from the terminal.

    Run without COMMAND for the interactive prompt, or pass one command,
    e.g. `todo add Buy groceries` or `todo list done`.
    """
    settings: Settings = load_settings()
    setup_logging(verbose, settings.log_level)
    path = tasks_file or settings.tasks_file
    theme = PLAIN if no_color else Theme.detect(settings.colors)

    task_list, load_warning = load_task_list(path)
    if load_warning:
        click.echo(load_warning, err=True)
    dispatcher = Dispatcher(task_list, path, theme)

    if not command:
        if len(task_list):
            click.echo(f"Loaded {len(task_list)} existing task(s)")
        CLI(dispatcher, read=input, write=click.echo).run()
        return

    outcome = dispatcher.execute(' '.join(command))
    if outcome.changed:
        try:
            task_list.save(path)
        except TodoError as exc:
            raise click.ClickException(str(exc))
    click.echo(outcome.message)
    if not outcome.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
