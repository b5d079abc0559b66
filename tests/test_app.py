import pytest

from domotica.app import _session, instant_label, main
from domotica.commands import CommandProcessor
from domotica.terminal import Terminal


class FakeError(Exception):
    pass


class FakeWin:
    def __init__(self, backend, geometry):
        self.backend = backend
        self.geometry = geometry
        self.text = []
        self.cleared = 0

    def addstr(self, s):
        self.text.append(s)

    def move(self, y, x):
        pass

    def attron(self, a):
        pass

    def attroff(self, a):
        pass

    def refresh(self):
        pass

    def clear(self):
        self.cleared += 1
        self.text.clear()

    def getch(self):
        return ord(self.backend.lines[0][:1] or b" ")

    def getstr(self, n):
        return self.backend.lines.pop(0)

    def keypad(self, flag):
        pass

    def box(self):
        pass

    def border(self, *chars):
        pass


class FakeBackend:
    error = FakeError
    KEY_DOWN = 258
    KEY_UP = 259
    KEY_LEFT = 260
    KEY_RIGHT = 261
    KEY_RESIZE = 410
    COLS = 80
    LINES = 24

    def __init__(self, lines):
        self.lines = [line.encode() for line in lines]
        self.windows = []
        self.pairs = {}
        self.stdscr = None

    def initscr(self):
        self.stdscr = FakeWin(self, None)
        return self.stdscr

    def start_color(self):
        pass

    def endwin(self):
        pass

    def noecho(self):
        pass

    def echo(self):
        pass

    def cbreak(self):
        pass

    def nocbreak(self):
        pass

    def ungetch(self, c):
        pass

    def newwin(self, h, w, y, x):
        win = FakeWin(self, (h, w, y, x))
        self.windows.append(win)
        return win

    def color_pair(self, n):
        return n << 8

    def init_pair(self, i, fg, bg):
        self.pairs[i] = (fg, bg)


def run(lines):
    backend = FakeBackend(lines)
    terminal = Terminal(backend=backend)
    processor = CommandProcessor(window_factory=terminal.create_window)
    _session(terminal, processor)
    return backend, processor


def test_instant_label_start():
    assert instant_label(0) == "instante atual: 0"


@pytest.mark.parametrize("instant", [1, 12, 345])
def test_instant_label_shape(instant):
    label = instant_label(instant)
    assert label.startswith("instante atual: ")
    assert label.endswith(str(instant))


def test_quit_writes_notification():
    backend, _ = run(["sair"])
    assert any("Encerra programa" in win.text for win in backend.windows)
    assert instant_label(0) in backend.stdscr.text
    assert backend.lines == []


def test_color_pairs_defined():
    backend, _ = run(["sair"])
    assert backend.pairs == {i: (i, 0) for i in range(1, 20)}


def test_prox_updates_status_line():
    backend, processor = run(["prox", "sair"])
    assert processor.instant == 1
    assert instant_label(1) in backend.stdscr.text


def test_zone_shown_in_its_grid_window():
    backend, processor = run(["hnova 2 2", "znova 1 1", "sair"])
    assert len(processor.windows) == 4
    zone = processor.house.zones[0]
    assert any(win.text == [str(zone)] for win in backend.windows)


def test_command_window_cleared_every_five_commands():
    backend, processor = run(["prox"] * 5 + ["sair"])
    command_inner = backend.windows[1]
    assert processor.instant == 5
    assert command_inner.cleared == 1


def test_unknown_command_reported():
    backend, _ = run(["voa", "sair"])
    notes = " ".join(" ".join(win.text) for win in backend.windows)
    assert "Comando invalido - Nao conhecido" in notes


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0