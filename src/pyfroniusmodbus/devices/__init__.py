"""Device classes for Fronius inverters and smart meters."""

from __future__ import annotations

from .base import FroniusDevice
from .inverter import Inverter
from .meter import Meter

__all__ = [
    "FroniusDevice",
    "Inverter",
    "Meter",
]
