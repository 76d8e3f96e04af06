"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from Settings (env or .env).
"""
from __future__ import annotations
import os, sys
from typing import Dict, Mapping, Optional

from todo_cli.models import Status

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_TODO_DEFAULT = '#48B3AF'
HEX_INPROGRESS_DEFAULT = '#F6FF99'
HEX_DONE_DEFAULT = '#A7E399'

STATUS_ICONS: Dict[Status, str] = {
    Status.TODO: '⚪',
    Status.IN_PROGRESS: '\U0001f535',
    Status.DONE: '✅',
}


def color_enabled(environ: Optional[Mapping[str, str]] = None, stream=None) -> bool:
    env = os.environ if environ is None else environ
    stream = sys.stdout if stream is None else stream
    force = env.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    if env.get("NO_COLOR") is not None:
        return False
    return force or (hasattr(stream, 'isatty') and stream.isatty())


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"


class Theme:
    """ANSI styling for list output. A disabled theme returns text unchanged."""

    def __init__(self, enabled: bool = False, truecolor: bool = False,
                 colors: Optional[Mapping[str, str]] = None):
        self.enabled = enabled
        self.truecolor = truecolor
        colors = colors or {}
        self.reset = self._code('0')
        self.bold = self._code('1')
        self.dim = self._code('2')
        self.primary = self._from_hex(colors.get('TODO_COLOR_PRIMARY', HEX_PRIMARY_DEFAULT))
        self.status_colors: Dict[Status, str] = {
            Status.TODO: self._from_hex(colors.get('TODO_COLOR_TODO', HEX_TODO_DEFAULT)),
            Status.IN_PROGRESS: self._from_hex(colors.get('TODO_COLOR_INPROGRESS', HEX_INPROGRESS_DEFAULT)),
            Status.DONE: self._from_hex(colors.get('TODO_COLOR_DONE', HEX_DONE_DEFAULT)),
        }

    @classmethod
    def detect(cls, colors: Optional[Mapping[str, str]] = None,
               environ: Optional[Mapping[str, str]] = None) -> "Theme":
        env = os.environ if environ is None else environ
        enabled = color_enabled(env)
        colorterm = env.get("COLORTERM", "").lower()
        truecolor = enabled and any(tok in colorterm for tok in ("truecolor", "24bit"))
        return cls(enabled=enabled, truecolor=truecolor, colors=colors)

    def _code(self, part: str) -> str:
        return f"\033[{part}m" if self.enabled else ''

    def _from_hex(self, hex_code: str) -> str:
        if not self.enabled:
            return ''
        r, g, b = _hex_to_rgb(hex_code)
        if self.truecolor:
            return _fg_truecolor(r, g, b)
        return _fg_256(r, g, b)

    def color(self, text: str, *styles: str) -> str:
        if not self.enabled:
            return text
        return ''.join(styles) + text + self.reset

    def header(self, text: str) -> str:
        return self.color(text, self.primary, self.bold)

    def number(self, n: int) -> str:
        return self.color(f"{n}.", self.primary, self.bold)

    def status(self, text: str, status: Status) -> str:
        return self.color(text, self.status_colors[status])

    def muted(self, text: str) -> str:
        return self.color(text, self.dim, self.primary)


PLAIN = Theme(enabled=False)
