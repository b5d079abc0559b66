"""Interactive console for the home automation simulator."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from domotica.commands import CommandProcessor
from domotica.terminal import Terminal, move_to, set_color

_COLOR_PAIRS = 20
_COMMANDS_PER_SCREEN = 5
_QUIT = "sair"


def instant_label(instant: int) -> str:
    """Return the status line that shows the current instant."""
    return f"instante atual: {instant}"


def _show_instant(terminal: Terminal, instant: int) -> None:
    label = instant_label(instant)
    terminal.write(set_color(0)).write(
        move_to(terminal.num_cols - len(label), terminal.num_rows - 1)
    ).write(label)


def _refresh_zones(processor: CommandProcessor) -> None:
    zones = processor.house.zones
    for window in processor.windows:
        for zone in zones:
            if window.px == zone.row and window.py == zone.column:
                window.clear()
                for device in zone.devices:
                    device.process(processor.instant)
                window.write(str(zone))


def _session(terminal: Terminal, processor: CommandProcessor | None = None) -> None:
    """Run the command loop on ``terminal`` until the quit command."""
    if processor is None:
        processor = CommandProcessor(window_factory=terminal.create_window)
    _show_instant(terminal, processor.instant)
    for pair in range(1, _COLOR_PAIRS):
        terminal.init_color(pair, pair, 0)

    cols, rows = terminal.num_cols, terminal.num_rows
    terminal.write(move_to(2, 1)).write(set_color(3)).write("Habitacao")
    terminal.write(move_to(cols // 2 + 1, 1)).write(set_color(3)).write("Comandos")
    terminal.write(move_to(cols // 2 + 1, 10)).write(set_color(3)).write("Notificacoes")

    with terminal.create_window(cols // 2 + 1, 2, cols // 2 - 1, 7) as commands, \
            terminal.create_window(cols // 2 + 1, 11, cols // 2 - 1, rows - 12) as notes:
        commands.write(set_color(0))
        notes.write(set_color(0))
        issued = 0
        while True:
            _refresh_zones(processor)
            commands.write("Comando: ")
            words = commands.read_line().split()
            if words == [_QUIT]:
                notes.write("Encerra programa")
                break
            processor.execute(words, notes)
            _show_instant(terminal, processor.instant)
            issued += 1
            if issued >= _COMMANDS_PER_SCREEN:
                issued = 0
                commands.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive simulator on the console."""
    parser = argparse.ArgumentParser(
        prog="domotica",
        description="Simulate a house of zones, sensors, devices and rule processors.",
    )
    parser.parse_args(argv)
    terminal = Terminal.instance()
    try:
        _session(terminal)
    finally:
        terminal.close()
    return 0