"""Console screen and windows on top of curses, with chainable output."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

try:
    import curses as _curses
except ImportError:  # pragma: no cover - depends on the platform
    _curses = None

_LINE_LENGTH = 255
_SPECIAL_KEY_NAMES = ("KEY_UP", "KEY_DOWN", "KEY_RIGHT", "KEY_LEFT", "KEY_RESIZE")


class Action(Enum):
    """What a formatter does to the output surface."""

    MOVE = "move"
    COLOR = "color"
    NOCOLOR = "nocolor"


@dataclass(frozen=True)
class Formatter:
    """An instruction written to a surface instead of text."""

    action: Action
    x: int = -1
    y: int = -1
    color: int = -1


def move_to(x: int, y: int) -> Formatter:
    """Move the cursor to column ``x`` and row ``y``."""
    return Formatter(Action.MOVE, x=x, y=y)


def set_color(i: int) -> Formatter:
    """Switch to colour pair ``i``."""
    return Formatter(Action.COLOR, color=i)


def no_color() -> Formatter:
    """Switch the current colour pair off."""
    return Formatter(Action.NOCOLOR)


def _backend_or_default(backend: Any) -> Any:
    if backend is not None:
        return backend
    if _curses is None:
        raise RuntimeError("curses is not available on this system")
    return _curses


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


class _Surface:
    """Output and input shared by the whole screen and its windows."""

    def __init__(self, backend: Any) -> None:
        self._backend = backend
        self._last_color_pair = -1

    def _screen(self) -> Any:
        raise NotImplementedError

    def _write(self, value: Any) -> None:
        win = self._screen()
        if isinstance(value, Formatter):
            self._format(win, value)
            return
        with suppress(self._backend.error):
            win.addstr(_render(value))
        win.refresh()

    def _format(self, win: Any, formatter: Formatter) -> None:
        backend = self._backend
        if formatter.action is Action.MOVE:
            with suppress(backend.error):
                win.move(formatter.y, formatter.x)
        elif formatter.action is Action.COLOR:
            if self._last_color_pair != -1:
                win.attroff(backend.color_pair(self._last_color_pair))
            win.attron(backend.color_pair(formatter.color))
            self._last_color_pair = formatter.color
        else:
            if self._last_color_pair != -1:
                win.attroff(backend.color_pair(self._last_color_pair))
            self._last_color_pair = -1

    def _special_keys(self) -> dict[int, str]:
        return {
            getattr(self._backend, name): name
            for name in _SPECIAL_KEY_NAMES
            if hasattr(self._backend, name)
        }

    def _read_line(self) -> str:
        backend = self._backend
        win = self._screen()
        backend.noecho()
        backend.cbreak()
        win.keypad(True)
        code = win.getch()
        name = self._special_keys().get(code)
        win.keypad(False)
        backend.echo()
        if name is not None:
            return name
        backend.nocbreak()
        with suppress(backend.error):
            backend.ungetch(code)
        raw = win.getstr(_LINE_LENGTH)
        backend.cbreak()
        if isinstance(raw, bytes):
            return raw.decode("utf-8", errors="replace")
        return raw

    def _getchar(self) -> int:
        return self._screen().getch()

    def _clear(self) -> None:
        win = self._screen()
        win.clear()
        win.refresh()


class Window(_Surface):
    """A rectangular window, optionally framed by a border."""

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        with_border: bool = True,
        px: int = 0,
        py: int = 0,
        *,
        backend: Any = None,
    ) -> None:
        super().__init__(_backend_or_default(backend))
        self.px = px
        self.py = py
        self._border: Any = None
        if with_border:
            self._border = self._backend.newwin(h, w, y, x)
            self._window: Any = self._backend.newwin(h - 2, w - 2, y + 1, x + 1)
            self._border.box()
            self._border.refresh()
        else:
            self._window = self._backend.newwin(h, w, y, x)
        self._window.refresh()

    def _screen(self) -> Any:
        if self._window is None:
            raise ValueError("window is closed")
        return self._window

    def write(self, value: Any) -> Window:
        """Write text, a number or a formatter; return self for chaining."""
        self._write(value)
        return self

    def read_line(self) -> str:
        """Read an arrow or resize key by name, or else a line of text."""
        return self._read_line()

    def getchar(self) -> int:
        """Read one key code."""
        return self._getchar()

    def clear(self) -> None:
        """Blank the window."""
        self._clear()

    def close(self) -> None:
        """Erase the border and release the window; safe to call twice."""
        if self._border is not None:
            self._border.border(*(" " * 8))
            self._border.refresh()
            self._border = None
        self._window = None

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class Terminal(_Surface):
    """The whole console screen."""

    _instance: ClassVar[Terminal | None] = None

    def __init__(self, *, backend: Any = None) -> None:
        super().__init__(_backend_or_default(backend))
        self._stdscr = self._backend.initscr()
        with suppress(self._backend.error):
            self._backend.start_color()
        self._open = True

    @classmethod
    def instance(cls) -> Terminal:
        """Return the shared terminal, starting it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _screen(self) -> Any:
        if not self._open:
            raise ValueError("terminal is closed")
        return self._stdscr

    @property
    def num_cols(self) -> int:
        """Width of the screen in columns."""
        return self._backend.COLS

    @property
    def num_rows(self) -> int:
        """Height of the screen in rows."""
        return self._backend.LINES

    def write(self, value: Any) -> Terminal:
        """Write text, a number or a formatter; return self for chaining."""
        self._write(value)
        return self

    def read_line(self) -> str:
        """Read an arrow or resize key by name, or else a line of text."""
        return self._read_line()

    def getchar(self) -> int:
        """Read one key code."""
        return self._getchar()

    def clear(self) -> None:
        """Blank the screen."""
        self._clear()

    def init_color(self, pair: int, color: int, bg_color: int) -> Terminal:
        """Define colour pair ``pair``; unsupported pairs are ignored."""
        with suppress(self._backend.error):
            self._backend.init_pair(pair, color, bg_color)
        return self

    def create_window(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        with_border: bool = True,
        px: int = 0,
        py: int = 0,
    ) -> Window:
        """Open a window on this terminal."""
        return Window(x, y, w, h, with_border, px, py, backend=self._backend)

    def close(self) -> None:
        """Restore the console; safe to call twice."""
        if self._open:
            self._backend.endwin()
            self._open = False
        if Terminal._instance is self:
            Terminal._instance = None

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()