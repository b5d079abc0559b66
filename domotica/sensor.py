"""Sensors that read one property of a zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domotica.zone import Zone


class Sensor:
    """A sensor bound to one property kind of a zone."""

    def __init__(self, zone: Zone, kind: str, component_id: int) -> None:
        self.zone = zone
        self.kind = kind
        self.component_id = component_id

    def reading(self) -> str:
        """Describe the sensed property, or a single space if the zone lacks it."""
        wanted = self.kind.upper()
        for prop in self.zone.properties:
            if prop.kind.upper() == wanted:
                return prop.describe()
        return " "

    def __str__(self) -> str:
        return f"ID: {self.component_id}, Propriedade: {self.reading()}; "

    def __repr__(self) -> str:
        return f"Sensor(kind={self.kind!r}, component_id={self.component_id})"