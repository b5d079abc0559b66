"""Zones of a house and the components they hold."""

from __future__ import annotations

from typing import Any, Protocol

from domotica.properties import Property, default_properties


class Component(Protocol):
    """Anything placed in a zone: a device, sensor or processor."""

    component_id: int
    kind: Any


class Zone:
    """One cell of the house grid with its properties and components."""

    def __init__(self, row: int, column: int, zone_id: int) -> None:
        self.row = row
        self.column = column
        self.zone_id = zone_id
        self.properties: list[Property] = default_properties()
        self.sensors: list[Any] = []
        self.devices: list[Any] = []
        self.processors: list[Any] = []

    def add_property(self, prop: Property) -> None:
        """Add a property to the zone."""
        self.properties.append(prop)

    def add_sensor(self, sensor: Any) -> None:
        """Add a sensor to the zone."""
        self.sensors.append(sensor)

    def add_device(self, device: Any) -> None:
        """Add a device to the zone."""
        self.devices.append(device)

    def add_processor(self, processor: Any) -> None:
        """Add a rule processor to the zone."""
        self.processors.append(processor)

    def remove_component(self, component_id: int) -> bool:
        """Remove the first component with this id, looking at devices,
        then sensors, then processors. Return whether one was removed."""
        for group in (self.devices, self.sensors, self.processors):
            for item in group:
                if item.component_id == component_id:
                    group.remove(item)
                    return True
        return False

    def __str__(self) -> str:
        devices = "".join(str(d.kind) for d in self.devices)
        sensors = "".join(str(s.kind) for s in self.sensors)
        processors = "p" * len(self.processors)
        return f"ID: {self.zone_id}\nAs:{devices}\nSs:{sensors}\nPs:{processors}"

    def __repr__(self) -> str:
        return f"Zone(row={self.row}, column={self.column}, zone_id={self.zone_id})"