"""Interpreter for the commands that build and drive a simulated house."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from domotica.devices import make_device
from domotica.house import House
from domotica.rules import Processor, Rule
from domotica.sensor import Sensor
from domotica.zone import Zone

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_CELL_WIDTH = 13
_CELL_HEIGHT = 7
_GRID_ORIGIN = 2
_MIN_GRID = 2
_MAX_GRID = 4

_DEVICE_MESSAGES = {
    "a": "Adiciona um aquecedor na zona com id ",
    "s": "Adiciona um aspersor na zona com id ",
    "l": "Adiciona uma lampada na zona com id ",
    "r": "Adiciona um refrigerador na zona com id ",
}


class Output(Protocol):
    """Where command results are shown."""

    def write(self, value: Any) -> Any: ...

    def clear(self) -> Any: ...


class GridWindow(Protocol):
    """A window showing one cell of the house grid."""

    px: int
    py: int

    def clear(self) -> Any: ...

    def close(self) -> Any: ...


@dataclass
class _GridCell:
    """A grid cell with no screen behind it."""

    x: int
    y: int
    width: int
    height: int
    with_border: bool
    px: int
    py: int
    clears: int = 0
    closed: bool = False

    def clear(self) -> None:
        self.clears += 1

    def close(self) -> None:
        self.closed = True


def _to_int(text: str) -> int:
    """Read a leading integer as a 32-bit signed value; trailing text is ignored."""
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


class CommandProcessor:
    """Holds the house and simulation state and runs commands against it."""

    def __init__(
        self,
        house: House | None = None,
        window_factory: Callable[..., GridWindow] | None = None,
    ) -> None:
        self.house = house if house is not None else House(2, 2)
        self.window_factory: Callable[..., GridWindow] = window_factory or _GridCell
        self.windows: list[GridWindow] = []
        self.instant = 0
        self.component_count = 0
        self.rule_count = 0
        self._grid_built = False
        self._handlers: dict[int, dict[str, tuple[Callable[[list[str], Output], None], str]]] = {
            1: {
                "prox": (self._prox, ""),
                "hrem": (self._hrem, ""),
                "zlista": (self._zlista, ""),
                "plista": (self._plista, ""),
            },
            2: {
                "avanca": (self._avanca, "Sintaxe comando avanca"),
                "zrem": (self._zrem, "Sintaxe comando zrem"),
                "zcomp": (self._zcomp, "Sintaxe comando zcomp"),
                "zprops": (self._zprops, "Sintaxe comando zprops"),
                "prepoe": (self._prepoe, "Sintaxe comando prepoe"),
                "prem": (self._prem, "Sintaxe comando prem"),
                "exec": (self._exec, "Sintaxe comando exec"),
            },
            3: {
                "hnova": (self._hnova, "Sintaxe comando hnova"),
                "znova": (self._znova, "Sintaxe comando znova"),
                "rlista": (self._rlista, "Sintaxe comando rlista"),
            },
            4: {
                "pmod": (self._pmod, "Sintaxe comando pmod"),
                "cnovo": (self._cnovo, "IdZona invalido"),
                "crem": (self._crem, "Sintaxe comando crem"),
                "pmuda": (self._pmuda, "Sintaxe comando pmuda"),
                "rrem": (self._rrem, "Sintaxe comando rrem"),
                "asoc": (self._asoc, "Sintaxe comando asoc"),
                "ades": (self._ades, "Sintaxe comando ades"),
                "acom": (self._acom, "Sintaxe comando acom"),
                "psalva": (self._psalva, "Sintaxe comando psalva"),
            },
        }

    def execute(self, words: Iterable[str], out: Output) -> None:
        """Run one command given as its list of words."""
        words = list(words)
        if 5 <= len(words) <= 7:
            if words[0] == "rnova":
                self._run(self._rnova, "Sintaxe comando rnova", words, out)
            return
        entry = self._handlers.get(len(words), {}).get(words[0]) if words else None
        if entry is None:
            self._invalid(out, "Nao conhecido")
            return
        handler, error = entry
        self._run(handler, error, words, out)

    def execute_line(self, line: str, out: Output) -> None:
        """Split a line into words and run it as a command."""
        self.execute(line.split(), out)

    def _run(
        self,
        handler: Callable[[list[str], Output], None],
        error: str,
        words: list[str],
        out: Output,
    ) -> None:
        try:
            handler(words, out)
        except ValueError:
            self._invalid(out, error)

    @staticmethod
    def _invalid(out: Output, reason: str) -> None:
        out.write("\nComando invalido - " + reason)

    def _close_windows(self) -> None:
        for window in self.windows:
            window.close()
        self.windows.clear()

    # one-word commands

    def _prox(self, words: list[str], out: Output) -> None:
        out.clear()
        out.write("\navanca 1 instante")
        self.instant += 1

    def _hrem(self, words: list[str], out: Output) -> None:
        out.clear()
        self.house.clear_zones()
        self._close_windows()
        out.write("\nApaga todo o conteudo")

    def _zlista(self, words: list[str], out: Output) -> None:
        out.clear()
        for zone in self.house.zones:
            out.write(f"{zone}\n")

    def _plista(self, words: list[str], out: Output) -> None:
        out.clear()
        out.write("\nLista de copias de processadores de regras em memoria")

    # two-word commands

    def _avanca(self, words: list[str], out: Output) -> None:
        steps = _to_int(words[1])
        out.clear()
        out.write(f"\navanca {steps} instantes")
        self.instant += steps

    def _zrem(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write(f"\nZona com id {zone_id} nao encontrada")
            return
        for window in self.windows:
            if zone.row == window.px and zone.column == window.py:
                window.clear()
        out.clear()
        out.write(f"\napaga zona com id  {zone_id}")
        self.house.zones.remove(zone)

    def _zcomp(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        out.clear()
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write(f"\nZona com id {zone_id} nao encontrada")
            return
        out.write(f"Lista componentes na zona com ID: {zone_id}")
        out.write("\nAparelhos: " + "".join(str(d) for d in zone.devices))
        out.write("\nSensores: " + "".join(str(s) for s in zone.sensors))
        out.write("\nProcessadores: " + "".join(str(p) for p in zone.processors))

    def _zprops(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        out.clear()
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write("Zona nao encontrada")
            return
        out.write(f"\nLista propriedades da zona {zone_id}\n")
        for prop in zone.properties:
            out.write(prop.describe() + "\n")

    def _prepoe(self, words: list[str], out: Output) -> None:
        out.clear()
        out.write(f"\nRepoe o processador guardado em memoria com o nome {words[1]}")

    def _prem(self, words: list[str], out: Output) -> None:
        out.clear()
        out.write(
            f"\nApaga uma copia do processador guardado em memoria com o nome {words[1]}"
        )

    def _exec(self, words: list[str], out: Output) -> None:
        name = words[1]
        out.clear()
        out.write(f"\nCarrega o ficehiro de comandos com o nome {name}")
        try:
            with open(name, encoding="utf-8") as command_file:
                lines = command_file.read().splitlines()
        except OSError:
            out.write("\nFicheiro nao encontrado")
            return
        for line in lines:
            self.execute_line(line, out)

    # three-word commands

    def _hnova(self, words: list[str], out: Output) -> None:
        rows = _to_int(words[1])
        columns = _to_int(words[2])
        if not _MIN_GRID <= rows <= _MAX_GRID:
            self._invalid(out, "Dimensao de errada para linhas")
            return
        if not _MIN_GRID <= columns <= _MAX_GRID:
            self._invalid(out, "Dimensao de errada para colunas")
            return
        out.clear()
        self.house.reset_zone_count()
        self.instant = 0
        if self._grid_built:
            self.house.clear_zones()
            self._close_windows()
        out.write(f"\nhabitacao nova de {rows} * {columns}")
        for row in range(rows):
            for column in range(columns):
                self.windows.append(
                    self.window_factory(
                        _GRID_ORIGIN + column * _CELL_WIDTH,
                        _GRID_ORIGIN + row * _CELL_HEIGHT,
                        _CELL_WIDTH,
                        _CELL_HEIGHT,
                        True,
                        row + 1,
                        column + 1,
                    )
                )
        self._grid_built = True
        self.house.rows = rows
        self.house.columns = columns

    def _znova(self, words: list[str], out: Output) -> None:
        row = _to_int(words[1])
        column = _to_int(words[2])
        for zone in self.house.zones:
            out.clear()
            if zone.row == row and zone.column == column:
                self._invalid(out, "Espaco de habitacao ocupado")
                return
            if row > self.house.rows or column > self.house.columns:
                self._invalid(out, "Coordenadas para zona invalidas")
                return
        out.write(f"\nzona nova em {row}, {column}")
        self.house.add_zone(Zone(row, column, self.house.zone_count))

    def _rlista(self, words: list[str], out: Output) -> None:
        out.clear()
        zone_id = _to_int(words[1])
        processor_id = _to_int(words[2])
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write("Zona nao encontrada")
            return
        processor = _find(zone.processors, processor_id)
        if processor is None:
            out.write("Processador nao encontrado")
            return
        for rule in processor.rules:
            out.write(f"\nID: {rule.rule_id}, Regra: {rule.kind}")

    # four-word commands

    def _pmod(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        name = words[2]
        value = _to_int(words[3])
        out.clear()
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write("Zona nao encontrada")
            return
        for prop in zone.properties:
            if prop.name == name:
                out.write(f"Modifica o valor da propriedade {name}")
                prop.set_value(value)
                return
        out.write("Propriesdade nao encontrada")

    def _cnovo(self, words: list[str], out: Output) -> None:
        out.clear()
        category = words[2]
        if category == "s":
            self._new_sensor(words, out)
        elif category == "p":
            self._new_processor(words, out)
        elif category == "a":
            self._new_device(words, out)
        else:
            self._invalid(out, "Sintaxe comando cnovo")

    def _next_component_id(self) -> int:
        self.component_count += 1
        return self.component_count

    def _new_sensor(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        kind = words[3][0]
        for zone in self.house.zones:
            if zone.zone_id != zone_id:
                continue
            if any(prop.kind == kind for prop in zone.properties):
                zone.add_sensor(Sensor(zone, kind, self._next_component_id()))
                out.write(f"Adiciona um sensor na zona com id {zone_id}")
                return
            self._invalid(out, "Propriedade para sensor nao encontrada")

    def _new_processor(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        command = words[3]
        zone = self.house.find_zone(zone_id)
        if zone is None:
            return
        zone.add_processor(Processor(self._next_component_id(), command))
        out.write(f"Adiciona um processador na zona com id {zone_id}")

    def _new_device(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        letter = words[3][0]
        message = _DEVICE_MESSAGES.get(letter)
        if message is None:
            self._invalid(out, "Tipo de aparelho invalido")
            return
        for zone in self.house.zones:
            if zone.zone_id == zone_id:
                zone.add_device(make_device(letter, zone, self._next_component_id()))
        out.write(f"{message}{zone_id}")

    def _crem(self, words: list[str], out: Output) -> None:
        out.clear()
        zone_id = _to_int(words[1])
        category = words[2]
        component_id = _to_int(words[3])
        if category not in ("s", "p", "a"):
            out.write("Componente invalido")
            return
        # Only the first zone of the house is examined, and only its devices.
        first = next(iter(self.house.zones), None)
        if first is None:
            return
        if first.zone_id == zone_id and _find(first.devices, component_id) is not None:
            out.write(
                f"Remove o componete {category} com id{component_id} da zona {zone_id}"
            )
            first.remove_component(component_id)
            return
        out.write("Zona nao encontrada")

    def _pmuda(self, words: list[str], out: Output) -> None:
        out.clear()
        zone_id = _to_int(words[1])
        processor_id = _to_int(words[2])
        command = words[3]
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write("Zona nao encontrada")
            return
        for processor in zone.processors:
            if processor.component_id == processor_id:
                processor.set_command(command)
                out.write(
                    f"\nMuda o comando do processador {processor_id} da zona {zone_id}"
                    f" pelo novo comando {command}"
                )
        out.write("Processador nao encontrado")

    def _three_ids(self, words: list[str]) -> tuple[int, int, int]:
        return _to_int(words[1]), _to_int(words[2]), _to_int(words[3])

    def _rrem(self, words: list[str], out: Output) -> None:
        zone_id, processor_id, rule_id = self._three_ids(words)
        out.clear()
        out.write(
            f"\nRemove a regra {rule_id} do processador de regras {processor_id}"
            f" da zona {zone_id}"
        )

    def _asoc(self, words: list[str], out: Output) -> None:
        zone_id, processor_id, device_id = self._three_ids(words)
        out.clear()
        out.write(
            f"\nEstabelece a associacao entre o processador {processor_id}"
            f" da zona {zone_id} e o aparelho {device_id}"
        )

    def _ades(self, words: list[str], out: Output) -> None:
        zone_id, processor_id, device_id = self._three_ids(words)
        out.clear()
        out.write(
            f"\nRemove a associacao entre o processador {processor_id}"
            f" da zona {zone_id} e o aparelho {device_id}"
        )

    def _acom(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        device_id = _to_int(words[2])
        command = words[3]
        for zone in self.house.zones:
            if zone.zone_id != zone_id:
                continue
            for device in zone.devices:
                if device.component_id == device_id:
                    device.receive_command(command, self.instant)
        out.clear()
        out.write(f"\nenvia o comando  {command} ao aparelho {device_id} da zona {zone_id}")

    def _psalva(self, words: list[str], out: Output) -> None:
        zone_id = _to_int(words[1])
        processor_id = _to_int(words[2])
        name = words[3]
        out.clear()
        out.write(
            f"\nsalva o estado de um processador   {processor_id} associado ao nome"
            f" {name} da zona {zone_id}"
        )

    # five to seven words

    def _rnova(self, words: list[str], out: Output) -> None:
        out.clear()
        zone_id = _to_int(words[1])
        processor_id = _to_int(words[2])
        kind = words[3]
        sensor_id = _to_int(words[4])
        x = _to_int(words[5]) if len(words) >= 6 else 0
        y = _to_int(words[6]) if len(words) == 7 else 0
        zone = self.house.find_zone(zone_id)
        if zone is None:
            out.write("Zona nao encontrada")
            return
        processor = _find(zone.processors, processor_id)
        if processor is None:
            out.write("Processador nao encontrado")
            return
        if _find(zone.sensors, sensor_id) is None:
            out.write("Sensor nao encontrado")
            return
        self.rule_count += 1
        processor.add_rule(Rule(kind, self.rule_count, x, y))
        out.write(
            f"\nCria a nova regra de ID {self.rule_count} do tipo {kind}"
            f" adicionando ao processador com id{processor_id} associado ao sensor"
            f" {sensor_id} da zona {zone_id}"
        )


def _find(items: Iterable[Any], component_id: int) -> Any:
    return next((item for item in items if item.component_id == component_id), None)