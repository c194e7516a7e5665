"""Python client library for Fronius inverters and smart meters over SunSpec Modbus.

Usage:
    Inverter over Modbus TCP:
        from pyfroniusmodbus import DeviceConfig, Inverter
        from pyfroniusmodbus.transports import create_modbus_transport

        async with create_modbus_transport("192.168.1.50") as transport:
            inverter = Inverter(transport, DeviceConfig(unit_address=1))
            await inverter.validate()
            print(inverter.encoding(), inverter.ac_active_power())

    Smart Meter behind the Datamanager:
        meter = Meter(transport, DeviceConfig(unit_address=240))
        await meter.validate()
        print(meter.ac_energy_exported())
"""

from __future__ import annotations

from .exceptions import (
    EncodingError,
    FroniusError,
    FroniusValueError,
    InvalidEndBlockError,
    NonPrintableError,
    NotSunSpecError,
    NotValidatedError,
    ProtocolError,
    StateError,
    UnknownModelError,
)
from .config import DeviceConfig
from .devices import FroniusDevice, Inverter, Meter
from .models import (
    DeviceKind,
    DeviceSnapshot,
    Encoding,
    EnergyPeriod,
    Identity,
    Input,
    Phase,
    PhasePair,
    Quadrant,
    TemperatureKind,
)

__version__ = "0.1.0"
__all__ = [
    "DeviceConfig",
    # Devices
    "FroniusDevice",
    "Inverter",
    "Meter",
    # Models
    "DeviceKind",
    "DeviceSnapshot",
    "Encoding",
    "EnergyPeriod",
    "Identity",
    "Input",
    "Phase",
    "PhasePair",
    "Quadrant",
    "TemperatureKind",
    # Exceptions
    "FroniusError",
    "ProtocolError",
    "NotSunSpecError",
    "UnknownModelError",
    "InvalidEndBlockError",
    "EncodingError",
    "NonPrintableError",
    "FroniusValueError",
    "StateError",
    "NotValidatedError",
]
