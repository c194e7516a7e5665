"""Device configuration.

The :class:`DeviceConfig` bag is accepted once when a device is created.
Connection parameters (host, serial port, reconnect policy) belong to
:class:`~pyfroniusmodbus.transports.config.TransportConfig` instead.

Example:
    config = DeviceConfig(unit_address=1, read_fronius_registers=True)
    config.validate()

    data = config.to_dict()
    restored = DeviceConfig.from_dict(data)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

#: Valid Modbus slave addresses (0 is broadcast, 248-255 are reserved).
MIN_UNIT_ADDRESS = 1
MAX_UNIT_ADDRESS = 247


@dataclass
class DeviceConfig:
    """Configuration of one SunSpec device behind a Modbus unit address.

    Attributes:
        unit_address: Modbus slave ID (1..247). Fronius inverters default
            to 1, Smart Meters behind a Datamanager to 240.
        word_swap: Reverse word order of multi-word values.
        byte_swap: Swap bytes within every word.
        read_fronius_registers: Also read the Fronius proprietary
            registers (status 212-217 and site totals 500-513). Only
            meaningful for inverters.
    """

    unit_address: int = 1
    word_swap: bool = False
    byte_swap: bool = False
    read_fronius_registers: bool = False

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If the unit address is out of range
        """
        if not MIN_UNIT_ADDRESS <= self.unit_address <= MAX_UNIT_ADDRESS:
            raise ValueError(
                f"unit_address must be {MIN_UNIT_ADDRESS}..{MAX_UNIT_ADDRESS}, "
                f"got {self.unit_address}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "unit_address": self.unit_address,
            "word_swap": self.word_swap,
            "byte_swap": self.byte_swap,
            "read_fronius_registers": self.read_fronius_registers,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceConfig:
        """Create configuration from dictionary."""
        return cls(
            unit_address=data.get("unit_address", 1),
            word_swap=data.get("word_swap", False),
            byte_swap=data.get("byte_swap", False),
            read_fronius_registers=data.get("read_fronius_registers", False),
        )


__all__ = [
    "MAX_UNIT_ADDRESS",
    "MIN_UNIT_ADDRESS",
    "DeviceConfig",
]
