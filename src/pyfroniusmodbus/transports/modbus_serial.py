"""Modbus RTU serial transport implementation.

This module provides the ModbusSerialTransport class for communication
with Fronius devices over an RS485 bus, e.g. a Fronius Smart Meter wired
to a USB-to-RS485 adapter.

Only one process may hold a serial port; share one transport between
devices on the same bus (inverter at unit 1, meter at unit 240, ...).

Example:
    transport = ModbusSerialTransport(port="/dev/ttyUSB0", baudrate=9600)
    async with transport:
        words = await transport.read_words(2, 40000, 2)
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ._modbus_base import BaseModbusTransport
from .exceptions import TransportConnectionError

if TYPE_CHECKING:
    from pymodbus.client import AsyncModbusSerialClient

_LOGGER = logging.getLogger(__name__)

__all__ = ["ModbusSerialTransport"]


class ModbusSerialTransport(BaseModbusTransport):
    """Modbus RTU serial transport for local Fronius communication.

    Note:
        Requires the `pymodbus` and `pyserial` packages.
    """

    transport_type: str = "modbus_serial"

    def __init__(
        self,
        port: str,
        baudrate: int = 9600,
        bytesize: int = 8,
        parity: str = "N",
        stopbits: int = 1,
        *,
        timeout: float = 10.0,
        retries: int = 2,
        retry_delay: float = 0.5,
        pymodbus_retries: int = 3,
        min_reconnect_delay: float = 5.0,
        max_reconnect_delay: float = 320.0,
    ) -> None:
        """Initialize Modbus serial transport.

        Args:
            port: Serial port path (e.g., /dev/ttyUSB0, COM3)
            baudrate: Serial baud rate (default 9600, the Fronius meter default)
            bytesize: Data bits per byte (default 8)
            parity: Parity setting - 'N' (none), 'E' (even), 'O' (odd)
            stopbits: Number of stop bits (default 1)
            timeout: Connection and operation timeout in seconds
            retries: Application-level retries per register read (default 2)
            retry_delay: Initial delay between retries in seconds
            pymodbus_retries: Number of retries passed to pymodbus client
            min_reconnect_delay: First delay between failing reconnects
            max_reconnect_delay: Upper bound of the reconnect delay
        """
        super().__init__(
            timeout=timeout,
            retries=retries,
            retry_delay=retry_delay,
            pymodbus_retries=pymodbus_retries,
            min_reconnect_delay=min_reconnect_delay,
            max_reconnect_delay=max_reconnect_delay,
        )
        self._port = port
        self._baudrate = baudrate
        self._bytesize = bytesize
        self._parity = parity
        self._stopbits = stopbits
        # Narrow type for serial client
        self._client: AsyncModbusSerialClient | None = None

    @property
    def port(self) -> str:
        """Get the serial port path."""
        return self._port

    @property
    def baudrate(self) -> int:
        """Get the serial baud rate."""
        return self._baudrate

    @property
    def line_settings(self) -> str:
        """Compact line settings, e.g. ``"9600 8N1"``."""
        return f"{self._baudrate} {self._bytesize}{self._parity}{self._stopbits}"

    def _describe(self) -> str:
        return f"{self._port} ({self.line_settings})"

    async def connect(self) -> None:
        """Open the serial port and attach a pymodbus RTU client.

        Raises:
            TransportConnectionError: If the port cannot be opened
        """
        from pymodbus.client import AsyncModbusSerialClient

        client = AsyncModbusSerialClient(
            port=self._port,
            baudrate=self._baudrate,
            bytesize=self._bytesize,
            parity=self._parity,
            stopbits=self._stopbits,
            timeout=self._timeout,
            retries=self._pymodbus_retries,
        )
        try:
            opened = await client.connect()
        except PermissionError as err:
            _LOGGER.error("No permission to open %s: %s", self._port, err)
            raise TransportConnectionError(
                f"Permission denied for {self._port}; the user needs access to "
                "the serial device (on Linux: membership of the 'dialout' group)"
            ) from err
        except (TimeoutError, OSError) as err:
            _LOGGER.error("Cannot open %s: %s", self._describe(), err)
            raise TransportConnectionError(
                f"Cannot open {self._port}: {err}. Check that the RS485 adapter is "
                "plugged in and no other program holds the port."
            ) from err

        if not opened:
            raise TransportConnectionError(
                f"Failed to open serial port {self._port} ({self.line_settings})"
            )

        self._client = client
        self._connected = True
        self._consecutive_errors = 0
        _LOGGER.info("Modbus RTU transport opened %s", self._describe())

        # The adapter needs a moment before the first frame.
        await asyncio.sleep(0.2)

    async def disconnect(self) -> None:
        """Close the serial port."""
        if self._client is not None:
            self._client.close()
        self._client = None
        self._connected = False
        _LOGGER.debug("Modbus RTU transport closed %s", self._port)
