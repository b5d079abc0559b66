"""Devices that act on the properties of the zone they sit in."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from domotica.zone import Zone

UNKNOWN_COMMAND = "Comando desconhecido"


def _third(instant: int) -> int:
    """Divide by three, truncating toward zero."""
    return int(instant / 3)


class Device:
    """A device in a zone; its kind letter is upper case while it is on."""

    label: ClassVar[str] = ""
    letter: ClassVar[str] = ""
    already_on: ClassVar[str] = ""
    already_off: ClassVar[str] = ""
    on_effects: ClassVar[dict[str, int]] = {}
    off_effects: ClassVar[dict[str, int]] = {}

    def __init__(self, zone: Zone, component_id: int) -> None:
        self.zone = zone
        self.component_id = component_id
        self.kind = self.letter
        self.on = False
        self.switched_on_at: int | None = None

    @property
    def state(self) -> str:
        """The state as shown to the user."""
        return "ligado" if self.on else "desligado"

    def toggle(self) -> None:
        """Switch the device on or off, changing the case of its letter."""
        self.on = not self.on
        self.kind = self.kind.upper() if self.on else self.kind.lower()

    def _apply(self, effects: dict[str, int]) -> None:
        for prop in self.zone.properties:
            delta = effects.get(prop.kind)
            if delta is not None:
                prop.set_value(delta)

    def receive_command(self, command: str, instant: int) -> str:
        """Handle ``liga`` or ``desliga`` and return the resulting message.

        A command that finds the device already in the wanted state returns
        a message saying so; every other path ends with the generic message.
        """
        if command == "liga":
            if self.on:
                return self.already_on
            self.toggle()
            self._apply(self.on_effects)
            self.switched_on_at = instant
        elif command == "desliga":
            if not self.on:
                return self.already_off
            self.toggle()
            self._apply(self.off_effects)
        return UNKNOWN_COMMAND

    def process(self, instant: int) -> None:
        """Act on the zone at the given instant; most devices do nothing."""

    def __str__(self) -> str:
        return f"ID: {self.component_id}, Tipo: {self.label}, Estado: {self.state}; "

    def __repr__(self) -> str:
        return f"{type(self).__name__}(component_id={self.component_id}, on={self.on})"


class Heater(Device):
    """Raises the temperature over time and makes some noise while on."""

    label = "Aquecedor"
    letter = "a"
    already_on = "Aquecedor ja se encontra ligado"
    already_off = "Aquecedor ja se encontra desligado"
    on_effects = {"o": 5}
    off_effects = {"o": -5}
    max_temperature: ClassVar[int] = 50

    def process(self, instant: int) -> None:
        """Set the temperature from the instant, capped at the maximum."""
        if not self.on:
            return
        target = min(_third(instant), self.max_temperature)
        for prop in self.zone.properties:
            if prop.kind == "t":
                prop.set_value(target)


class Sprinkler(Device):
    """Wets the zone and vibrates while on."""

    label = " Aspersor"
    letter = "s"
    already_on = "Lampada ja se encontra ligada"
    already_off = "Lampada ja se encontra desligado"
    on_effects = {"h": 50, "v": 100, "f": 0}
    off_effects = {"v": -100}


class Lamp(Device):
    """Lights the zone while on."""

    label = "Lampada"
    letter = "l"
    already_on = "Lampada ja se encontra ligada"
    already_off = "Lampada ja se encontra desligado"
    on_effects = {"m": 900}
    off_effects = {"m": -900}


class Cooler(Device):
    """Lowers the temperature over time and makes noise while on."""

    label = "Refrigerador"
    letter = "r"
    already_on = "Refrigerador ja se encontra ligado"
    already_off = "Refrigerador ja se encontra desligado"
    on_effects = {"o": 20}
    off_effects = {"o": -20}

    def process(self, instant: int) -> None:
        """Set the temperature to minus a third of the instant."""
        if not self.on:
            return
        for prop in self.zone.properties:
            if prop.kind == "t":
                prop.set_value(-_third(instant))


_DEVICE_TYPES: dict[str, type[Device]] = {
    cls.letter: cls for cls in (Heater, Sprinkler, Lamp, Cooler)
}


def make_device(kind: str, zone: Zone, device_id: int) -> Device:
    """Build a device from the first letter of ``kind``.

    Raises ValueError for an unknown device type.
    """
    try:
        cls = _DEVICE_TYPES[kind[:1]]
    except KeyError:
        raise ValueError(f"unknown device type: {kind!r}") from None
    return cls(zone, device_id)