"""Transport layer for pyfroniusmodbus.

The register decoder only needs :class:`RegisterTransport` (a contiguous
holding register read). This package provides pymodbus-backed Modbus TCP
and RTU implementations of it.

Usage:
    from pyfroniusmodbus.transports import create_modbus_transport

    transport = create_modbus_transport("192.168.1.50")
    async with transport:
        words = await transport.read_words(1, 40000, 2)
"""

from __future__ import annotations

from ._modbus_base import BaseModbusTransport
from .config import TransportConfig, TransportType
from .exceptions import (
    TransportConnectionError,
    TransportError,
    TransportReadError,
    TransportTimeoutError,
    is_transient,
)
from .factory import create_modbus_transport, create_serial_transport, create_transport
from .modbus import ModbusTcpTransport
from .modbus_serial import ModbusSerialTransport
from .protocol import BaseTransport, RegisterTransport

__all__ = [
    # Factory functions (recommended)
    "create_modbus_transport",
    "create_serial_transport",
    "create_transport",
    # Protocol
    "RegisterTransport",
    "BaseTransport",
    # Transport implementations
    "BaseModbusTransport",
    "ModbusTcpTransport",
    "ModbusSerialTransport",
    # Configuration
    "TransportConfig",
    "TransportType",
    # Exceptions
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "TransportReadError",
    "is_transient",
]
