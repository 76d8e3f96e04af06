"""Settings read from the environment and an optional .env file.

Priority: real env var > .env in the working directory > default.
Recognised keys:
    TODO_FILE              path of the JSON task file
    TODO_LOG_LEVEL         logging level name (default WARNING)
    TODO_COLOR_PRIMARY     hex colors (#RRGGBB) for headers and numbers
    TODO_COLOR_TODO
    TODO_COLOR_INPROGRESS
    TODO_COLOR_DONE
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from todo_cli.storage import TASKS_FILE

ENV_KEYS = {
    'TODO_FILE', 'TODO_LOG_LEVEL',
    'TODO_COLOR_PRIMARY', 'TODO_COLOR_TODO', 'TODO_COLOR_INPROGRESS', 'TODO_COLOR_DONE',
}
COLOR_KEYS = ('TODO_COLOR_PRIMARY', 'TODO_COLOR_TODO', 'TODO_COLOR_INPROGRESS', 'TODO_COLOR_DONE')
DEFAULT_LOG_LEVEL = 'WARNING'


def valid_hex(value: str) -> Optional[str]:
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h
    return None


def read_dotenv(path: Path) -> Dict[str, str]:
    """Parse KEY=VALUE lines we care about; anything else is skipped."""
    values: Dict[str, str] = {}
    if not path.is_file():
        return values
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError):
        return values
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if k in ENV_KEYS:
            values[k] = v
    return values


@dataclass
class Settings:
    tasks_file: Path = TASKS_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    colors: Dict[str, str] = field(default_factory=dict)


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  dotenv_path: Optional[Path] = None) -> Settings:
    env = os.environ if environ is None else environ
    dotenv = read_dotenv(dotenv_path or Path.cwd() / '.env')

    def lookup(key: str) -> Optional[str]:
        return env.get(key) or dotenv.get(key)

    settings = Settings()
    tasks_file = lookup('TODO_FILE')
    if tasks_file:
        settings.tasks_file = Path(tasks_file).expanduser()
    log_level = lookup('TODO_LOG_LEVEL')
    if log_level:
        settings.log_level = log_level.strip().upper()
    for key in COLOR_KEYS:
        raw = lookup(key)
        hex_code = valid_hex(raw) if raw else None
        if hex_code:
            settings.colors[key] = hex_code
    return settings
