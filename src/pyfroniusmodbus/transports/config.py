"""Transport configuration.

This module provides the TransportConfig dataclass for configuring
transport instances in a uniform way, supporting serialization to/from
dictionaries.

Example:
    config = TransportConfig(
        transport_type=TransportType.MODBUS_TCP,
        host="192.168.1.50",
    )
    config.validate()

    data = config.to_dict()
    restored = TransportConfig.from_dict(data)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

PARITIES = ("N", "E", "O")
BYTESIZES = (5, 6, 7, 8)
STOPBITS = (1, 2)


class TransportType(str, Enum):
    """Transport type enumeration.

    String enum for easy serialization and comparison.
    """

    # Modbus TCP (IPv4 or IPv6)
    MODBUS_TCP = "modbus_tcp"

    # Modbus RTU over a serial RS485 line
    MODBUS_RTU = "modbus_rtu"


@dataclass
class TransportConfig:
    """Configuration for a single transport connection.

    Attributes:
        transport_type: MODBUS_TCP or MODBUS_RTU
        host: IP address or hostname (TCP only)
        port: TCP port (default 502)
        serial_port: Serial device path (RTU only)
        baudrate: Serial baud rate (default 9600)
        parity: 'N', 'E' or 'O'
        bytesize: Data bits per byte
        stopbits: Number of stop bits
        timeout: Operation timeout in seconds
        retries: Application-level retries per read
        retry_delay: Initial delay between retries in seconds
        min_reconnect_delay: First delay between failing reconnects
        max_reconnect_delay: Upper bound of the reconnect delay
    """

    transport_type: TransportType = TransportType.MODBUS_TCP
    host: str = ""
    port: int = 502
    serial_port: str = ""
    baudrate: int = 9600
    parity: str = "N"
    bytesize: int = 8
    stopbits: int = 1
    timeout: float = 10.0
    retries: int = 2
    retry_delay: float = 0.5
    min_reconnect_delay: float = 5.0
    max_reconnect_delay: float = 320.0

    def validate(self) -> None:
        """Validate configuration completeness.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.transport_type == TransportType.MODBUS_TCP:
            if not self.host:
                raise ValueError("host required for MODBUS_TCP transport")
            if not 1 <= self.port <= 65535:
                raise ValueError(f"port must be 1..65535, got {self.port}")
        elif self.transport_type == TransportType.MODBUS_RTU:
            if not self.serial_port:
                raise ValueError("serial_port required for MODBUS_RTU transport")
            if self.baudrate <= 0:
                raise ValueError(f"baudrate must be positive, got {self.baudrate}")
            if self.parity not in PARITIES:
                raise ValueError(f"parity must be one of {PARITIES}, got {self.parity!r}")
            if self.bytesize not in BYTESIZES:
                raise ValueError(f"bytesize must be one of {BYTESIZES}, got {self.bytesize}")
            if self.stopbits not in STOPBITS:
                raise ValueError(f"stopbits must be one of {STOPBITS}, got {self.stopbits}")

        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.retries < 0:
            raise ValueError("retries must not be negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must not be negative")
        if self.min_reconnect_delay < 0 or self.max_reconnect_delay < 0:
            raise ValueError("reconnect delays must not be negative")
        if self.min_reconnect_delay >= self.max_reconnect_delay:
            raise ValueError("min_reconnect_delay must be lower than max_reconnect_delay")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "transport_type": self.transport_type.value,
            "host": self.host,
            "port": self.port,
            "serial_port": self.serial_port,
            "baudrate": self.baudrate,
            "parity": self.parity,
            "bytesize": self.bytesize,
            "stopbits": self.stopbits,
            "timeout": self.timeout,
            "retries": self.retries,
            "retry_delay": self.retry_delay,
            "min_reconnect_delay": self.min_reconnect_delay,
            "max_reconnect_delay": self.max_reconnect_delay,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransportConfig:
        """Create configuration from dictionary.

        Missing keys fall back to the dataclass defaults.
        """
        return cls(
            transport_type=TransportType(data.get("transport_type", "modbus_tcp")),
            host=data.get("host", ""),
            port=data.get("port", 502),
            serial_port=data.get("serial_port", ""),
            baudrate=data.get("baudrate", 9600),
            parity=data.get("parity", "N"),
            bytesize=data.get("bytesize", 8),
            stopbits=data.get("stopbits", 1),
            timeout=data.get("timeout", 10.0),
            retries=data.get("retries", 2),
            retry_delay=data.get("retry_delay", 0.5),
            min_reconnect_delay=data.get("min_reconnect_delay", 5.0),
            max_reconnect_delay=data.get("max_reconnect_delay", 320.0),
        )


__all__ = [
    "TransportConfig",
    "TransportType",
]
