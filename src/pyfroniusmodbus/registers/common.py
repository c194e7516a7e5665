"""SunSpec header and Common model (model 1) register map.

Every SunSpec device starts with the ``SunS`` signature at 0-based
address 40000, followed by the Common block (ID 1, L 65) carrying the
identity strings and the Modbus device address. The layout is identical
for inverters and meters and does not depend on the float/int setting.
"""

from __future__ import annotations

from .base import ModelBlock, RegisterDescriptor, WireType, build_index, doc_address

#: ``SID`` value: ASCII "SunS".
SUNSPEC_ID = 0x53756E53

#: Common model ID and declared length.
COMMON_MODEL_ID = 1
COMMON_LENGTH = 65

COMMON_BLOCK = ModelBlock(
    name="COMMON",
    model_ids=frozenset({COMMON_MODEL_ID}),
    address=doc_address(40003),
    length=COMMON_LENGTH,
)

COMMON_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # SUNSPEC HEADER (doc 40001-40004)
    # =========================================================================
    RegisterDescriptor(
        name="SID",
        address=doc_address(40001),
        word_count=2,
        wire_type=WireType.U32,
        description="Well-known value 0x53756E53 uniquely identifying a SunSpec map ('SunS').",
    ),
    RegisterDescriptor(
        name="ID",
        address=doc_address(40003),
        word_count=1,
        wire_type=WireType.U16,
        description="Common model ID (1).",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40004),
        word_count=1,
        wire_type=WireType.U16,
        description="Common model length (65).",
    ),
    # =========================================================================
    # IDENTITY STRINGS (doc 40005-40068)
    # =========================================================================
    RegisterDescriptor(
        name="MN",
        address=doc_address(40005),
        word_count=16,
        wire_type=WireType.STRING,
        description="Manufacturer (e.g. 'Fronius').",
    ),
    RegisterDescriptor(
        name="MD",
        address=doc_address(40021),
        word_count=16,
        wire_type=WireType.STRING,
        description="Device model (e.g. 'IG+150V [3p]').",
    ),
    RegisterDescriptor(
        name="OPT",
        address=doc_address(40037),
        word_count=8,
        wire_type=WireType.STRING,
        description="SW version of installed option (e.g. Datamanager firmware).",
    ),
    RegisterDescriptor(
        name="VR",
        address=doc_address(40045),
        word_count=8,
        wire_type=WireType.STRING,
        description="SW version of main device (inverter, meter, battery firmware).",
    ),
    RegisterDescriptor(
        name="SN",
        address=doc_address(40053),
        word_count=16,
        wire_type=WireType.STRING,
        description="Serial number; falls back to PMC serial or controller UID.",
    ),
    # =========================================================================
    # MODBUS ADDRESS (doc 40069)
    # =========================================================================
    RegisterDescriptor(
        name="DA",
        address=doc_address(40069),
        word_count=1,
        wire_type=WireType.U16,
        description="Modbus device address (1-247).",
    ),
)

# name → RegisterDescriptor
COMMON: dict[str, RegisterDescriptor] = build_index(COMMON_REGISTERS)
