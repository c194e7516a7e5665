"""Modbus TCP transport implementation.

This module provides the ModbusTcpTransport class for local communication
with Fronius inverters and smart meters via Modbus TCP. The Fronius
Datamanager and the GEN24 inverters serve SunSpec registers on port 502.

Both IPv4 and IPv6 hosts are accepted. IPv6 literals may be given with or
without brackets (``"fe80::1"`` or ``"[fe80::1]"``).

IMPORTANT: Single-Client Limitation
------------------------------------
The Fronius Datamanager accepts a limited number of concurrent Modbus TCP
connections. Running multiple clients against the same device causes
transaction ID desynchronization and intermittent timeouts.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import TYPE_CHECKING

from ._modbus_base import BaseModbusTransport
from .exceptions import TransportConnectionError

if TYPE_CHECKING:
    from pymodbus.client import AsyncModbusTcpClient

_LOGGER = logging.getLogger(__name__)

__all__ = ["ModbusTcpTransport", "normalize_host"]


def normalize_host(host: str) -> str:
    """Strip IPv6 brackets and surrounding whitespace from *host*.

    Host names and IPv4 literals are returned unchanged.
    """
    host = host.strip()
    if host.startswith("[") and host.endswith("]"):
        return host[1:-1]
    return host


def _is_ipv6(host: str) -> bool:
    try:
        return isinstance(ipaddress.ip_address(host), ipaddress.IPv6Address)
    except ValueError:
        return False


class ModbusTcpTransport(BaseModbusTransport):
    """Modbus TCP transport for local Fronius communication.

    Example:
        transport = ModbusTcpTransport(host="192.168.1.50", port=502)
        async with transport:
            words = await transport.read_words(1, 40000, 2)

        # IPv6
        transport = ModbusTcpTransport(host="[2001:db8::50]")
    """

    transport_type: str = "modbus_tcp"

    def __init__(
        self,
        host: str,
        port: int = 502,
        *,
        timeout: float = 10.0,
        retries: int = 2,
        retry_delay: float = 0.5,
        pymodbus_retries: int = 3,
        min_reconnect_delay: float = 5.0,
        max_reconnect_delay: float = 320.0,
    ) -> None:
        """Initialize Modbus TCP transport.

        Args:
            host: IPv4/IPv6 address or hostname of the device
            port: TCP port (default 502 for Modbus)
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
        self._host = normalize_host(host)
        self._port = port
        # Narrow type for TCP client
        self._client: AsyncModbusTcpClient | None = None

    @property
    def host(self) -> str:
        """Get the device host without IPv6 brackets."""
        return self._host

    @property
    def port(self) -> int:
        """Get the device TCP port."""
        return self._port

    @property
    def is_ipv6(self) -> bool:
        """Whether the host is an IPv6 literal."""
        return _is_ipv6(self._host)

    @property
    def endpoint(self) -> str:
        """``host:port`` with IPv6 literals bracketed."""
        if self.is_ipv6:
            return f"[{self._host}]:{self._port}"
        return f"{self._host}:{self._port}"

    def _describe(self) -> str:
        return self.endpoint

    async def connect(self) -> None:
        """Establish Modbus TCP connection.

        Raises:
            TransportConnectionError: If connection fails
        """
        from pymodbus.client import AsyncModbusTcpClient

        try:
            self._client = AsyncModbusTcpClient(
                host=self._host,
                port=self._port,
                timeout=self._timeout,
                retries=self._pymodbus_retries,
            )

            connected = await self._client.connect()
            if not connected:
                raise TransportConnectionError(
                    f"Failed to connect to Modbus device at {self.endpoint}"
                )

            self._connected = True
            self._consecutive_errors = 0
            _LOGGER.info("Modbus transport connected to %s", self.endpoint)

        except (TimeoutError, OSError) as err:
            _LOGGER.error(
                "Failed to connect to Modbus device at %s: %s",
                self.endpoint,
                err,
            )
            raise TransportConnectionError(
                f"Failed to connect to {self.endpoint}: {err}. "
                "Verify: (1) IP address is correct, (2) port 502 is not blocked, "
                "(3) Modbus TCP (SunSpec) is enabled in the Fronius web interface."
            ) from err

    async def disconnect(self) -> None:
        """Close Modbus TCP connection."""
        if self._client:
            self._client.close()
            self._client = None

        self._connected = False
        _LOGGER.debug("Modbus transport disconnected from %s", self.endpoint)
