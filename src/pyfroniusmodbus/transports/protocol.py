"""Transport protocol definitions.

The recognizer and devices only need one primitive from a transport:
reading a contiguous range of holding registers (Modbus function 3) from
a given unit. Anything providing ``read_words`` satisfies
:class:`RegisterTransport`, including in-memory fakes used in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Protocol, runtime_checkable

from .exceptions import TransportConnectionError


@runtime_checkable
class RegisterTransport(Protocol):
    """Contiguous 16-bit register read primitive."""

    async def read_words(self, unit_address: int, first_word: int, count: int) -> list[int]:
        """Read *count* raw holding registers starting at *first_word*.

        Raises:
            TransportError: On any communication failure.
        """
        ...


class BaseTransport(ABC):
    """Base class for connection-oriented transports.

    Tracks connection state and provides async context manager support.

    Example:
        ```python
        async with ModbusTcpTransport("192.168.1.50") as transport:
            words = await transport.read_words(1, 40000, 2)
        ```
    """

    transport_type: str = "base"

    def __init__(self) -> None:
        self._connected = False

    @property
    def is_connected(self) -> bool:
        """Check if the transport is connected."""
        return self._connected

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise TransportConnectionError(f"{self.transport_type} transport is not connected")

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection."""

    @abstractmethod
    async def read_words(self, unit_address: int, first_word: int, count: int) -> list[int]:
        """Read holding registers (see :class:`RegisterTransport`)."""

    async def __aenter__(self) -> BaseTransport:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()


__all__ = ["BaseTransport", "RegisterTransport"]
