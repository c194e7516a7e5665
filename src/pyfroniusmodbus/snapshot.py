"""Register map snapshot.

A :class:`RegisterSnapshot` is a sparse image of the device register
space (``dict[int, int]`` of address → raw word) filled by ranged
transport reads. It performs no interpretation; the recognizer and the
accessors decode words through the register catalog.

Reading an address that was never filled raises
:class:`~pyfroniusmodbus.exceptions.RegisterNotFilledError` instead of
returning stale or zero data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from .exceptions import RegisterNotFilledError

if TYPE_CHECKING:
    from .transports.protocol import RegisterTransport

_LOGGER = logging.getLogger(__name__)

#: Maximum registers per Modbus function 3 request.
MAX_READ_WORDS = 125

#: Highest addressable register.
MAX_ADDRESS = 0xFFFF


def words_at(image: Mapping[int, int], address: int, count: int) -> list[int]:
    """Return *count* words of *image* starting at *address*.

    Raises:
        RegisterNotFilledError: At the first address missing from *image*.
    """
    words: list[int] = []
    for addr in range(address, address + count):
        try:
            words.append(image[addr])
        except KeyError:
            raise RegisterNotFilledError(addr) from None
    return words


def read_groups(start: int, count: int) -> list[tuple[int, int]]:
    """Split a read into ``(start, count)`` chunks of at most MAX_READ_WORDS."""
    groups: list[tuple[int, int]] = []
    offset = 0
    while offset < count:
        size = min(MAX_READ_WORDS, count - offset)
        groups.append((start + offset, size))
        offset += size
    return groups


class RegisterSnapshot:
    """Mutable register image of one Modbus unit.

    Example:
        ```python
        snapshot = RegisterSnapshot(transport, unit_address=1)
        await snapshot.fill(40000, 3)
        sid = snapshot.slice(40000, 2)
        ```
    """

    def __init__(self, transport: RegisterTransport, unit_address: int) -> None:
        self._transport = transport
        self._unit_address = unit_address
        self._words: dict[int, int] = {}

    @property
    def unit_address(self) -> int:
        return self._unit_address

    async def fill(self, start: int, count: int) -> None:
        """Read *count* words from *start* into the image.

        Reads are split into chunks the device accepts. Transport errors
        propagate unchanged; chunks read before a failure stay in the image
        but the caller must treat the snapshot as invalid.

        Raises:
            ValueError: If the range leaves the 16-bit address space.
        """
        if count < 1 or start < 0 or start + count - 1 > MAX_ADDRESS:
            raise ValueError(f"Invalid register range: start={start} count={count}")

        for group_start, group_count in read_groups(start, count):
            _LOGGER.debug(
                "Reading %d registers at %d (unit %d)",
                group_count,
                group_start,
                self._unit_address,
            )
            values = await self._transport.read_words(
                self._unit_address, group_start, group_count
            )
            if len(values) < group_count:
                # Short responses leave the tail unfilled rather than zeroed.
                _LOGGER.debug(
                    "Short read at %d: expected %d words, got %d",
                    group_start,
                    group_count,
                    len(values),
                )
            for offset, value in enumerate(values[:group_count]):
                self._words[group_start + offset] = value & 0xFFFF

    def word(self, address: int) -> int:
        """Return the raw word at *address*."""
        return words_at(self._words, address, 1)[0]

    def slice(self, address: int, count: int) -> list[int]:
        """Return *count* raw words starting at *address*."""
        return words_at(self._words, address, count)

    def is_filled(self, address: int, count: int = 1) -> bool:
        """Check whether every word of the range has been read."""
        return all(addr in self._words for addr in range(address, address + count))

    def clear(self) -> None:
        """Forget every word read so far."""
        self._words.clear()

    def freeze(self) -> Mapping[int, int]:
        """Return a read-only copy of the current image."""
        return MappingProxyType(dict(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, address: object) -> bool:
        return address in self._words


__all__ = [
    "MAX_READ_WORDS",
    "RegisterSnapshot",
    "read_groups",
    "words_at",
]
