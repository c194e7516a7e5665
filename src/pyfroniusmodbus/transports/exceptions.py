"""Transport-specific exceptions.

This module provides exception classes for transport operations,
allowing clients to handle errors appropriately.

All transport exceptions inherit from :class:`~pyfroniusmodbus.exceptions.FroniusError`
so callers can use a single ``except FroniusError`` to catch both register
map and Modbus transport failures.
"""

from __future__ import annotations

from pyfroniusmodbus.exceptions import FroniusError


class TransportError(FroniusError):
    """Base exception for all transport errors."""

    pass


class TransportConnectionError(TransportError):
    """Failed to connect to the device."""

    pass


class TransportTimeoutError(TransportError):
    """Operation timed out."""

    pass


class TransportReadError(TransportError):
    """Failed to read data from device.

    Covers both I/O failures and Modbus exception responses. The latter
    set ``exception_code`` (e.g. 2 = illegal data address).
    """

    def __init__(self, message: str, exception_code: int | None = None) -> None:
        self.exception_code = exception_code
        super().__init__(message)


def is_transient(err: BaseException) -> bool:
    """Classify a transport failure.

    Connection losses and timeouts are transient: a later attempt may
    succeed. Modbus exception responses are fatal: the device understood
    the request and refused it. Plain read failures without an exception
    code are treated as transient I/O errors.
    """
    if isinstance(err, (TransportConnectionError, TransportTimeoutError)):
        return True
    if isinstance(err, TransportReadError):
        return err.exception_code is None
    return False


__all__ = [
    "TransportConnectionError",
    "TransportError",
    "TransportReadError",
    "TransportTimeoutError",
    "is_transient",
]
