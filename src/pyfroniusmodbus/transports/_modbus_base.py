"""Shared Modbus transport logic for TCP and Serial transports.

This module provides the BaseModbusTransport class containing the
holding-register read with retry handling, error translation and
auto-reconnect after consecutive errors.

Subclasses must implement:
- connect() / disconnect(): protocol-specific connection management
- _describe(): human-readable endpoint for log messages
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pymodbus.exceptions import ModbusIOException

from .exceptions import (
    TransportConnectionError,
    TransportError,
    TransportReadError,
    TransportTimeoutError,
)
from .protocol import BaseTransport

_LOGGER = logging.getLogger(__name__)

__all__ = ["BaseModbusTransport"]


class BaseModbusTransport(BaseTransport):
    """Base class for Modbus-based transports (TCP and Serial).

    Provides Modbus wire-level holding register reads with retry handling
    and auto-reconnect on consecutive errors. Reconnect attempts that fail
    back off exponentially between ``min_reconnect_delay`` and
    ``max_reconnect_delay`` seconds.

    Subclasses must set ``self._client`` to a pymodbus async client
    and implement ``connect()`` and ``disconnect()``.
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        retries: int = 2,
        retry_delay: float = 0.5,
        pymodbus_retries: int = 3,
        min_reconnect_delay: float = 5.0,
        max_reconnect_delay: float = 320.0,
    ) -> None:
        """Initialize base Modbus transport.

        Args:
            timeout: Connection and operation timeout in seconds
            retries: Application-level retries per register read (default 2)
            retry_delay: Initial delay between retries in seconds, doubles each
                attempt (default 0.5)
            pymodbus_retries: Number of retries passed to pymodbus client
                (default 3)
            min_reconnect_delay: Delay before the first repeated reconnect
                attempt in seconds (default 5)
            max_reconnect_delay: Upper bound of the reconnect delay in seconds
                (default 320)
        """
        super().__init__()
        self._timeout = timeout
        self._retries = retries
        self._retry_delay = retry_delay
        self._pymodbus_retries = pymodbus_retries
        self._min_reconnect_delay = min_reconnect_delay
        self._max_reconnect_delay = max_reconnect_delay
        self._client: Any = None
        self._lock = asyncio.Lock()
        self._consecutive_errors: int = 0
        self._max_consecutive_errors: int = 3
        self._reconnect_failures: int = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def timeout(self) -> float:
        """Get the operation timeout in seconds."""
        return self._timeout

    @property
    def consecutive_errors(self) -> int:
        """Number of failed read attempts since the last success."""
        return self._consecutive_errors

    @property
    def reconnect_delay(self) -> float:
        """Delay applied before the next reconnect attempt."""
        if self._reconnect_failures == 0:
            return 0.0
        delay = self._min_reconnect_delay * (2 ** (self._reconnect_failures - 1))
        return float(min(delay, self._max_reconnect_delay))

    def _describe(self) -> str:
        return self.transport_type

    # ------------------------------------------------------------------
    # Register Read (with retry and error tracking)
    # ------------------------------------------------------------------

    async def read_words(self, unit_address: int, first_word: int, count: int) -> list[int]:
        """Read holding registers (function 3) with retry and error tracking.

        Args:
            unit_address: Modbus unit/slave ID of the target device
            first_word: Starting register address (0-based)
            count: Number of registers to read (max 125 per Modbus FC 03)

        Returns:
            List of raw register values

        Raises:
            TransportConnectionError: If not connected or reconnect fails
            TransportReadError: If read fails after all retries
            TransportTimeoutError: If the last attempt timed out
        """
        if self._consecutive_errors >= self._max_consecutive_errors:
            await self._reconnect()

        self._ensure_connected()

        if self._client is None:
            raise TransportConnectionError("Modbus client not initialized")

        last_err: TransportError | None = None

        for attempt in range(self._retries + 1):
            async with self._lock:
                try:
                    result = await self._client.read_holding_registers(
                        address=first_word,
                        count=count,
                        device_id=unit_address,
                    )

                    if result.isError():
                        code = getattr(result, "exception_code", None)
                        raise TransportReadError(
                            f"Modbus read error at address {first_word}: {result}",
                            exception_code=code,
                        )

                    if not hasattr(result, "registers") or result.registers is None:
                        raise TransportReadError(
                            f"Invalid Modbus response at address {first_word}: "
                            "no registers in response"
                        )

                    self._consecutive_errors = 0
                    return list(result.registers)

                except ModbusIOException as err:
                    self._consecutive_errors += 1
                    if "timeout" in str(err).lower():
                        last_err = TransportTimeoutError(
                            f"Timeout reading holding registers at {first_word}"
                        )
                    else:
                        last_err = TransportReadError(
                            f"Failed to read holding registers at {first_word}: {err}"
                        )
                    last_err.__cause__ = err
                except TimeoutError as err:
                    self._consecutive_errors += 1
                    last_err = TransportTimeoutError(
                        f"Timeout reading holding registers at {first_word}"
                    )
                    last_err.__cause__ = err
                except TransportReadError as err:
                    if err.exception_code is not None:
                        # The device answered; retrying will not change the answer.
                        _LOGGER.error(
                            "Modbus exception %d reading %d registers at %d (unit %d)",
                            err.exception_code,
                            count,
                            first_word,
                            unit_address,
                        )
                        raise
                    self._consecutive_errors += 1
                    last_err = err
                except OSError as err:
                    self._consecutive_errors += 1
                    last_err = TransportReadError(
                        f"Failed to read holding registers at {first_word}: {err}"
                    )
                    last_err.__cause__ = err

            # Retry with exponential backoff (skip on last attempt)
            if attempt < self._retries:
                delay = self._retry_delay * (2**attempt)
                _LOGGER.debug(
                    "Retry %d/%d reading holding registers at %d after %.1fs",
                    attempt + 1,
                    self._retries,
                    first_word,
                    delay,
                )
                await asyncio.sleep(delay)

        _LOGGER.error(
            "Failed to read holding registers at %d after %d attempts: %s",
            first_word,
            self._retries + 1,
            last_err,
        )
        assert last_err is not None
        raise last_err

    # ------------------------------------------------------------------
    # Reconnect
    # ------------------------------------------------------------------

    async def _reconnect(self) -> None:
        """Reconnect the Modbus client after consecutive errors.

        Uses lock with double-check to prevent concurrent reconnection.
        A failed attempt raises and doubles the delay applied before the
        next one.
        """
        async with self._lock:
            if self._consecutive_errors < self._max_consecutive_errors:
                return

            delay = self.reconnect_delay
            _LOGGER.warning(
                "Reconnecting Modbus client for %s after %d consecutive errors",
                self._describe(),
                self._consecutive_errors,
            )
            if delay:
                _LOGGER.debug("Waiting %.1fs before reconnect attempt", delay)
                await asyncio.sleep(delay)

            await self.disconnect()
            try:
                await self.connect()
            except TransportConnectionError:
                self._reconnect_failures += 1
                raise
            self._reconnect_failures = 0
            self._consecutive_errors = 0
