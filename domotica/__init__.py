"""Terminal home-automation simulator: zones, properties, sensors, devices and rule processors."""

__version__ = "0.1.0"