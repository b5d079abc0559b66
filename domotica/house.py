"""The house: a grid of zones."""

from __future__ import annotations

from domotica.zone import Zone


class House:
    """A house of ``rows`` by ``columns`` zone slots."""

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = rows
        self.columns = columns
        self.zones: list[Zone] = []
        self.zone_count = 0

    def add_zone(self, zone: Zone) -> None:
        """Add a zone and count it."""
        self.zones.append(zone)
        self.zone_count += 1

    def clear_zones(self) -> None:
        """Remove every zone; the zone count is left as it is."""
        self.zones.clear()

    def reset_zone_count(self) -> None:
        """Start counting zones from zero again."""
        self.zone_count = 0

    def find_zone(self, zone_id: int) -> Zone | None:
        """Return the zone with this id, or None."""
        return next((z for z in self.zones if z.zone_id == zone_id), None)

    def __repr__(self) -> str:
        return f"House(rows={self.rows}, columns={self.columns}, zones={len(self.zones)})"