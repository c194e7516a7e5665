"""Factory functions for creating transport instances.

Example:
    # Modbus TCP
    transport = create_modbus_transport("192.168.1.50")
    async with transport:
        words = await transport.read_words(1, 40000, 2)

    # Modbus RTU
    transport = create_serial_transport("/dev/ttyUSB0", baudrate=9600)

    # From a stored configuration
    transport = create_transport(TransportConfig.from_dict(data))
"""

from __future__ import annotations

from ._modbus_base import BaseModbusTransport
from .config import TransportConfig, TransportType
from .modbus import ModbusTcpTransport
from .modbus_serial import ModbusSerialTransport


def create_modbus_transport(
    host: str,
    *,
    port: int = 502,
    timeout: float = 10.0,
    retries: int = 2,
) -> ModbusTcpTransport:
    """Create a Modbus TCP transport for local network communication.

    Args:
        host: Device IPv4/IPv6 address or hostname
        port: Modbus TCP port (default: 502)
        timeout: Operation timeout in seconds (default: 10.0)
        retries: Application-level retries per read (default: 2)

    Note:
        Modbus TCP must be enabled in the Fronius web interface
        (Communication > Modbus, "Data export via Modbus: TCP").
        Set the SunSpec model type there to "float" or "int+SF"; both
        are detected automatically.
    """
    return ModbusTcpTransport(host=host, port=port, timeout=timeout, retries=retries)


def create_serial_transport(
    port: str,
    *,
    baudrate: int = 9600,
    parity: str = "N",
    bytesize: int = 8,
    stopbits: int = 1,
    timeout: float = 10.0,
    retries: int = 2,
) -> ModbusSerialTransport:
    """Create a Modbus RTU transport for an RS485 serial line."""
    return ModbusSerialTransport(
        port=port,
        baudrate=baudrate,
        bytesize=bytesize,
        parity=parity,
        stopbits=stopbits,
        timeout=timeout,
        retries=retries,
    )


def create_transport(config: TransportConfig) -> BaseModbusTransport:
    """Create the transport described by *config*.

    Raises:
        ValueError: If the configuration is invalid
    """
    config.validate()

    if config.transport_type == TransportType.MODBUS_RTU:
        return ModbusSerialTransport(
            port=config.serial_port,
            baudrate=config.baudrate,
            bytesize=config.bytesize,
            parity=config.parity,
            stopbits=config.stopbits,
            timeout=config.timeout,
            retries=config.retries,
            retry_delay=config.retry_delay,
            min_reconnect_delay=config.min_reconnect_delay,
            max_reconnect_delay=config.max_reconnect_delay,
        )

    return ModbusTcpTransport(
        host=config.host,
        port=config.port,
        timeout=config.timeout,
        retries=config.retries,
        retry_delay=config.retry_delay,
        min_reconnect_delay=config.min_reconnect_delay,
        max_reconnect_delay=config.max_reconnect_delay,
    )


__all__ = [
    "create_modbus_transport",
    "create_serial_transport",
    "create_transport",
]
