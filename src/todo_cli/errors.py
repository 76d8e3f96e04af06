"""Error types raised by the task store and the command dispatcher."""


class TodoError(Exception):
    """Base class for every error the tracker reports to the user."""


class NotFoundError(TodoError):
    """No task exists at the requested position."""


class InvalidCommandError(TodoError):
    """Malformed input: missing arguments, bad number, unknown status."""


class StorageError(TodoError):
    """The task file could not be read or written."""


class ParseError(TodoError):
    """The task file exists but its contents are not a valid task list."""
