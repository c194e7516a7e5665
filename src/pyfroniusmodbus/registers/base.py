"""Building blocks of the SunSpec register catalog.

A :class:`RegisterDescriptor` is the atomic unit of the catalog: where a
field lives, how many words it spans, how it is encoded on the wire and
which sibling scale-factor register (if any) turns its raw value into a
physical quantity.

A :class:`ModelBlock` describes one SunSpec block (Common, Inverter,
Meter, Multi-MPPT, Storage, End): its model IDs, declared length and the
Fronius float offset applied to its addresses when the device runs the
float register model.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

#: SunSpec documents addresses 1-based starting at 40001.
SUNSPEC_DOC_BASE = 40001

#: 0-based address of the SunSpec ``SID`` magic.
SUNSPEC_BASE_ADDRESS = 40000


class WireType(str, Enum):
    """Encoding of a register field on the wire."""

    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    F32 = "f32"
    STRING = "string"
    UNKNOWN = "unknown"


#: Words occupied by each fixed-width wire type.
WIRE_TYPE_WORDS: dict[WireType, int] = {
    WireType.U16: 1,
    WireType.I16: 1,
    WireType.U32: 2,
    WireType.I32: 2,
    WireType.U64: 4,
    WireType.I64: 4,
    WireType.F32: 2,
}


def doc_address(sunspec_address: int) -> int:
    """Convert a 1-based SunSpec documentation address to a 0-based one."""
    return sunspec_address - 1


@dataclass(frozen=True)
class RegisterDescriptor:
    """Single register field of a SunSpec block.

    Attributes:
        name: Catalog name, unique within its block (e.g. ``"PHVPHA"``).
        address: 0-based word offset in the device register space.
        word_count: Number of consecutive 16-bit words.
        wire_type: Encoding of the raw value.
        scale_ref: Sibling ``*_SF`` descriptor holding the power-of-ten
            exponent, or None for naturally scaled fields.
        unit: Engineering unit after scaling ("A", "V", "W", "Hz", ...).
        description: Human-readable description from the Fronius register map.
    """

    name: str
    address: int
    word_count: int
    wire_type: WireType
    scale_ref: RegisterDescriptor | None = None
    unit: str = ""
    description: str = field(default="", compare=False)

    @property
    def end(self) -> int:
        """First address after this field."""
        return self.address + self.word_count

    def shifted(self, offset: int) -> RegisterDescriptor:
        """Return a copy moved by *offset* words, scale reference included."""
        if not offset:
            return self
        scale_ref = self.scale_ref.shifted(offset) if self.scale_ref is not None else None
        return replace(self, address=self.address + offset, scale_ref=scale_ref)


@dataclass(frozen=True)
class ModelBlock:
    """One SunSpec model block.

    Attributes:
        name: Short block name ("COMMON", "I10X", "M21X", "I160", ...).
        model_ids: SunSpec model IDs this block layout serves.
        address: 0-based address of the block's ID word (integer+SF layout
            for extension blocks).
        length: Declared length (words following the ID and L words).
        float_offset: Words added to every address when the device uses the
            float register model. Only extension blocks carry one; their
            values remain integer+SF encoded.
    """

    name: str
    model_ids: frozenset[int]
    address: int
    length: int
    float_offset: int = 0

    @property
    def body_address(self) -> int:
        """Address of the first word after ID and L."""
        return self.address + 2

    @property
    def end(self) -> int:
        """First address after the block."""
        return self.address + 2 + self.length

    def base_address(self, use_float: bool) -> int:
        """ID-word address for the given register model."""
        return self.address + (self.float_offset if use_float else 0)

    def offset(self, use_float: bool) -> int:
        """Address shift for the given register model."""
        return self.float_offset if use_float else 0


def build_index(
    descriptors: tuple[RegisterDescriptor, ...],
) -> dict[str, RegisterDescriptor]:
    """Build a name lookup for a descriptor tuple, rejecting duplicates."""
    index: dict[str, RegisterDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.name in index:
            raise ValueError(f"Duplicate register name: {descriptor.name}")
        index[descriptor.name] = descriptor
    return index


__all__ = [
    "SUNSPEC_BASE_ADDRESS",
    "SUNSPEC_DOC_BASE",
    "WIRE_TYPE_WORDS",
    "ModelBlock",
    "RegisterDescriptor",
    "WireType",
    "build_index",
    "doc_address",
]
