"""Environmental properties measured and changed inside a zone."""

from __future__ import annotations

from typing import ClassVar


class Property:
    """A measurable quantity of a zone, kept within its own limits."""

    name: ClassVar[str] = ""
    kind: ClassVar[str] = ""
    unit: ClassVar[str] = ""
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int | None] = None

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def _clamp(self, value: int) -> int:
        if value < self.minimum:
            return self.minimum
        if self.maximum is not None and value > self.maximum:
            return self.maximum
        return value

    def set_value(self, val: int) -> None:
        """Change the value by ``val``, keeping it within the limits."""
        self.value = self._clamp(self.value + val)

    def describe(self) -> str:
        """Return the property as a line of text, name, value and unit."""
        return f"{self.name}, valor: {self.value}{self.unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value})"


class Temperature(Property):
    """Temperature in degrees Celsius; set directly, never below -273."""

    name = "Temperatura"
    kind = "t"
    unit = " Graus celcius"
    minimum = -273

    def set_value(self, val: int) -> None:
        """Set the temperature to ``val``, not below the minimum."""
        self.value = self._clamp(val)


class Light(Property):
    """Light in lumens."""

    name = "Luz"
    kind = "m"
    unit = " Lumens"


class Radiation(Property):
    """Radiation in becquerel."""

    name = "Radiacao"
    kind = "d"
    unit = " Becquerel"


class Vibration(Property):
    """Vibration in hertz."""

    name = "Vibracao"
    kind = "v"
    unit = " Hertz"


class Humidity(Property):
    """Relative humidity, from 0 to 100 percent."""

    name = "Humidade"
    kind = "h"
    unit = "%"
    maximum = 100


class Smoke(Property):
    """Smoke obscuration, from 0 to 100 percent."""

    name = "Fumo"
    kind = "f"
    unit = "% Obscuracao"
    maximum = 100


class Sound(Property):
    """Sound level in decibels."""

    name = "Som"
    kind = "o"
    unit = " Decibeis"


def default_properties() -> list[Property]:
    """Return a fresh set of the properties every zone starts with."""
    return [
        Temperature(),
        Light(),
        Radiation(),
        Vibration(),
        Humidity(),
        Smoke(),
        Sound(),
    ]