import pytest

from domotica.terminal import (
    Action,
    Formatter,
    Terminal,
    Window,
    move_to,
    no_color,
    set_color,
)


class FakeError(Exception):
    pass


class FakeWin:
    def __init__(self, backend, geometry):
        self.backend = backend
        self.geometry = geometry
        self.text = []
        self.attrs = set()
        self.cursor = None
        self.cleared = 0
        self.refreshed = 0
        self.keypad_calls = []
        self.boxed = False
        self.bordered = None

    def addstr(self, s):
        self.text.append(s)

    def move(self, y, x):
        self.cursor = (y, x)

    def attron(self, a):
        self.attrs.add(a)

    def attroff(self, a):
        self.attrs.discard(a)

    def refresh(self):
        self.refreshed += 1

    def clear(self):
        self.cleared += 1
        self.text.clear()

    def getch(self):
        return self.backend.keys.pop(0)

    def getstr(self, n):
        self.backend.getstr_limits.append(n)
        return self.backend.lines.pop(0)

    def keypad(self, flag):
        self.keypad_calls.append(flag)

    def box(self):
        self.boxed = True

    def border(self, *chars):
        self.bordered = chars


class FakeBackend:
    error = FakeError
    KEY_DOWN = 258
    KEY_UP = 259
    KEY_LEFT = 260
    KEY_RIGHT = 261
    KEY_RESIZE = 410
    COLS = 80
    LINES = 24

    def __init__(self):
        self.keys = []
        self.lines = []
        self.windows = []
        self.log = []
        self.pairs = {}
        self.getstr_limits = []
        self.fail_pairs = False
        self.stdscr = None

    def initscr(self):
        self.log.append("initscr")
        self.stdscr = FakeWin(self, None)
        return self.stdscr

    def start_color(self):
        self.log.append("start_color")

    def endwin(self):
        self.log.append("endwin")

    def noecho(self):
        self.log.append("noecho")

    def echo(self):
        self.log.append("echo")

    def cbreak(self):
        self.log.append("cbreak")

    def nocbreak(self):
        self.log.append("nocbreak")

    def ungetch(self, c):
        self.log.append(("ungetch", c))

    def newwin(self, h, w, y, x):
        win = FakeWin(self, (h, w, y, x))
        self.windows.append(win)
        return win

    def color_pair(self, n):
        return n << 8

    def init_pair(self, i, fg, bg):
        if self.fail_pairs:
            raise FakeError("no such pair")
        self.pairs[i] = (fg, bg)


@pytest.fixture
def backend():
    return FakeBackend()


def test_formatter_factories():
    assert move_to(3, 4) == Formatter(Action.MOVE, x=3, y=4)
    assert set_color(5).action is Action.COLOR
    assert set_color(5).color == 5
    assert no_color() == Formatter(Action.NOCOLOR)


def test_window_with_border_creates_frame_and_inner(backend):
    Window(10, 20, 13, 7, backend=backend)
    border, inner = backend.windows
    assert border.geometry == (7, 13, 20, 10)
    assert inner.geometry == (5, 11, 21, 11)
    assert border.boxed


def test_window_without_border(backend):
    window = Window(1, 2, 30, 5, with_border=False, backend=backend)
    assert [w.geometry for w in backend.windows] == [(5, 30, 2, 1)]
    assert (window.px, window.py) == (0, 0)


def test_window_keeps_grid_position(backend):
    window = Window(0, 0, 13, 7, True, 2, 3, backend=backend)
    assert (window.px, window.py) == (2, 3)


def test_write_text_and_numbers(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    result = window.write("abc").write(42).write(1.5).write("z")
    inner = backend.windows[1]
    assert result is window
    assert inner.text == ["abc", "42", "1.500000", "z"]
    assert inner.refreshed >= 4


def test_move_uses_row_then_column(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    window.write(move_to(7, 2))
    assert backend.windows[1].cursor == (2, 7)


def test_colors_switch_and_reset(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    inner = backend.windows[1]
    window.write(set_color(2)).write(set_color(3))
    assert inner.attrs == {backend.color_pair(3)}
    window.write(no_color())
    assert inner.attrs == set()


def test_read_line_arrow_key(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    backend.keys = [backend.KEY_UP]
    backend.lines = [b"unused"]
    assert window.read_line() == "KEY_UP"
    assert backend.lines == [b"unused"]
    assert backend.windows[1].keypad_calls == [True, False]


@pytest.mark.parametrize("name", ["KEY_DOWN", "KEY_LEFT", "KEY_RIGHT", "KEY_RESIZE"])
def test_read_line_other_special_keys(backend, name):
    terminal = Terminal(backend=backend)
    backend.keys = [getattr(backend, name)]
    assert terminal.read_line() == name


def test_read_line_text(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    backend.keys = [ord("h")]
    backend.lines = [b"hello there"]
    assert window.read_line() == "hello there"
    assert ("ungetch", ord("h")) in backend.log
    assert backend.log[-1] == "cbreak"
    assert backend.getstr_limits == [255]


def test_getchar_and_clear(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    backend.keys = [65]
    assert window.getchar() == 65
    window.write("x")
    window.clear()
    inner = backend.windows[1]
    assert inner.cleared == 1
    assert inner.text == []


def test_close_blanks_border_and_blocks_use(backend):
    window = Window(0, 0, 20, 5, backend=backend)
    window.close()
    assert backend.windows[0].bordered == tuple(" " * 8)
    with pytest.raises(ValueError):
        window.write("x")
    window.close()


def test_window_as_context_manager(backend):
    with Window(0, 0, 20, 5, backend=backend) as window:
        window.write("in")
    with pytest.raises(ValueError):
        window.clear()


def test_terminal_starts_and_closes(backend):
    terminal = Terminal(backend=backend)
    assert backend.log[:2] == ["initscr", "start_color"]
    terminal.close()
    terminal.close()
    assert backend.log.count("endwin") == 1
    with pytest.raises(ValueError):
        terminal.write("x")


def test_terminal_writes_to_stdscr(backend):
    terminal = Terminal(backend=backend)
    terminal.write(move_to(1, 2)).write("Habitacao")
    assert backend.stdscr.cursor == (2, 1)
    assert backend.stdscr.text == ["Habitacao"]


def test_terminal_size(backend):
    terminal = Terminal(backend=backend)
    assert terminal.num_cols == backend.COLS
    assert terminal.num_rows == backend.LINES


def test_init_color_defines_pairs(backend):
    terminal = Terminal(backend=backend)
    assert terminal.init_color(1, 1, 0) is terminal
    terminal.init_color(4, 4, 0)
    assert backend.pairs == {1: (1, 0), 4: (4, 0)}


def test_init_color_ignores_errors(backend):
    terminal = Terminal(backend=backend)
    backend.fail_pairs = True
    assert terminal.init_color(99, 99, 0) is terminal
    assert backend.pairs == {}


def test_write_ignores_curses_errors(backend):
    terminal = Terminal(backend=backend)

    def failing(_text):
        raise FakeError("last cell")

    backend.stdscr.addstr = failing
    assert terminal.write("corner") is terminal
    assert backend.stdscr.refreshed == 1


def test_create_window_uses_same_backend(backend):
    terminal = Terminal(backend=backend)
    window = terminal.create_window(2, 2, 13, 7, True, 1, 2)
    assert (window.px, window.py) == (1, 2)
    assert [w.geometry for w in backend.windows] == [(7, 13, 2, 2), (5, 11, 3, 3)]