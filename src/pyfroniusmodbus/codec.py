"""Conversion of raw 16-bit Modbus register words into primitive values.

All functions are pure. Words are raw register values as returned by
Modbus function 3 (big-endian within each word). Multi-word values are
combined big-endian (first word is most significant) unless ``word_swap``
is set; ``byte_swap`` swaps the two bytes of every word before combining.

Fronius devices use neither swap; the flags exist for devices that deviate.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from .exceptions import NonPrintableError, UnsupportedWireTypeError
from .registers.base import WireType

__all__ = [
    "decode",
    "f32_at",
    "i16_at",
    "i32_at",
    "i64_at",
    "string_at",
    "swap_bytes16",
    "to_hex16",
    "u16_at",
    "u32_at",
    "u64_at",
]


def swap_bytes16(word: int) -> int:
    """Swap the high and low byte of a 16-bit word."""
    return ((word >> 8) & 0xFF) | ((word & 0xFF) << 8)


def u16_at(word: int) -> int:
    """Return *word* as an unsigned 16-bit value."""
    return word & 0xFFFF


def i16_at(word: int) -> int:
    """Reinterpret *word* as a two's-complement signed 16-bit value."""
    word &= 0xFFFF
    return word - 0x10000 if word & 0x8000 else word


def _combine(words: Sequence[int], count: int, word_swap: bool, byte_swap: bool) -> int:
    if len(words) < count:
        raise ValueError(f"Need {count} words, got {len(words)}")
    parts = [w & 0xFFFF for w in words[:count]]
    if byte_swap:
        parts = [swap_bytes16(w) for w in parts]
    if word_swap:
        parts.reverse()
    value = 0
    for word in parts:
        value = (value << 16) | word
    return value


def u32_at(words: Sequence[int], word_swap: bool = False, byte_swap: bool = False) -> int:
    """Combine two words into an unsigned 32-bit value."""
    return _combine(words, 2, word_swap, byte_swap)


def i32_at(words: Sequence[int], word_swap: bool = False, byte_swap: bool = False) -> int:
    """Combine two words into a signed 32-bit value."""
    value = u32_at(words, word_swap, byte_swap)
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def u64_at(words: Sequence[int], word_swap: bool = False, byte_swap: bool = False) -> int:
    """Combine four words into an unsigned 64-bit value.

    With ``word_swap`` the word order is fully reversed (w3 w2 w1 w0).
    """
    return _combine(words, 4, word_swap, byte_swap)


def i64_at(words: Sequence[int], word_swap: bool = False, byte_swap: bool = False) -> int:
    """Combine four words into a signed 64-bit value."""
    value = u64_at(words, word_swap, byte_swap)
    return value - (1 << 64) if value & (1 << 63) else value


def f32_at(words: Sequence[int], word_swap: bool = False, byte_swap: bool = False) -> float:
    """Decode an IEEE-754 single from two words (ABCD order by default).

    >>> round(f32_at([0x4248, 0xF5C3]), 4)
    50.24
    """
    raw = u32_at(words, word_swap, byte_swap)
    value: float = struct.unpack(">f", raw.to_bytes(4, "big"))[0]
    return value


def string_at(words: Sequence[int], count: int, address: int | None = None) -> str:
    """Decode *count* words of two ASCII characters each (high byte first).

    NUL bytes are skipped. Every remaining byte must be printable ASCII
    (space included).

    Raises:
        NonPrintableError: If a control or non-ASCII byte is present.
    """
    if len(words) < count:
        raise ValueError(f"Need {count} words, got {len(words)}")
    data = bytearray()
    for word in words[:count]:
        for byte in ((word >> 8) & 0xFF, word & 0xFF):
            if byte:
                data.append(byte)
    if any(not 0x20 <= byte <= 0x7E for byte in data):
        raise NonPrintableError(address)
    return data.decode("ascii")


def to_hex16(word: int) -> str:
    """Format a word as four uppercase hex digits."""
    return f"{word & 0xFFFF:04X}"


def decode(
    words: Sequence[int],
    wire_type: WireType,
    *,
    word_swap: bool = False,
    byte_swap: bool = False,
    address: int | None = None,
) -> int | float | str:
    """Decode *words* according to *wire_type*.

    Raises:
        UnsupportedWireTypeError: For ``WireType.UNKNOWN``.
        NonPrintableError: For strings with unprintable bytes.
    """
    if wire_type is WireType.U16:
        return u16_at(words[0])
    if wire_type is WireType.I16:
        return i16_at(words[0])
    if wire_type is WireType.U32:
        return u32_at(words, word_swap, byte_swap)
    if wire_type is WireType.I32:
        return i32_at(words, word_swap, byte_swap)
    if wire_type is WireType.U64:
        return u64_at(words, word_swap, byte_swap)
    if wire_type is WireType.I64:
        return i64_at(words, word_swap, byte_swap)
    if wire_type is WireType.F32:
        return f32_at(words, word_swap, byte_swap)
    if wire_type is WireType.STRING:
        return string_at(words, len(words), address)
    raise UnsupportedWireTypeError(wire_type)
