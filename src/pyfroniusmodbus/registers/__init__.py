"""SunSpec register catalog for Fronius inverters and meters.

This package is the single source of truth for register definitions.
Each module covers one SunSpec block or register family:

- base: WireType, RegisterDescriptor and ModelBlock primitives
- common: SunSpec header and Common model (1)
- inverter: inverter models I10X (int+SF) and I11X (float)
- meter: meter models M20X (int+SF) and M21X (float)
- mppt: Multi MPPT extension (160)
- nameplate: Nameplate ratings (120)
- storage: Basic Storage Control (124)
- fronius: Fronius proprietary registers (212-217, 500-513)
- blocks: block table and End-sentinel locations
"""

from pyfroniusmodbus.registers.base import (
    SUNSPEC_BASE_ADDRESS,
    SUNSPEC_DOC_BASE,
    WIRE_TYPE_WORDS,
    ModelBlock,
    RegisterDescriptor,
    WireType,
    build_index,
    doc_address,
)
from pyfroniusmodbus.registers.blocks import (
    END_LENGTH,
    END_MODEL_ID,
    INVERTER_END_BLOCK,
    INVERTER_EXTENSION_BLOCKS,
    METER_END_BLOCK,
    METER_FLOAT_OFFSET,
    PRIMARY_BLOCKS,
    end_block_candidates,
)
from pyfroniusmodbus.registers.common import (
    COMMON,
    COMMON_BLOCK,
    COMMON_LENGTH,
    COMMON_MODEL_ID,
    COMMON_REGISTERS,
    SUNSPEC_ID,
)
from pyfroniusmodbus.registers.fronius import (
    FRONIUS,
    FRONIUS_REGISTERS,
    ModelType,
    StorageRestrictionsViewMode,
)
from pyfroniusmodbus.registers.inverter import (
    I10X,
    I10X_BLOCK,
    I10X_REGISTERS,
    I11X,
    I11X_BLOCK,
    I11X_REGISTERS,
)
from pyfroniusmodbus.registers.meter import (
    M20X,
    M20X_BLOCK,
    M20X_REGISTERS,
    M21X,
    M21X_BLOCK,
    M21X_REGISTERS,
)
from pyfroniusmodbus.registers.mppt import (
    FLOAT_OFFSET,
    I160,
    I160_BLOCK,
    I160_REGISTERS,
    MPPT_MODULES,
)
from pyfroniusmodbus.registers.nameplate import (
    NAMEPLATE,
    NAMEPLATE_BLOCK,
    NAMEPLATE_REGISTERS,
)
from pyfroniusmodbus.registers.storage import (
    STORAGE,
    STORAGE_BLOCK,
    STORAGE_BLOCK_SIZE,
    STORAGE_REGISTERS,
)

__all__ = [
    # base
    "SUNSPEC_BASE_ADDRESS",
    "SUNSPEC_DOC_BASE",
    "WIRE_TYPE_WORDS",
    "ModelBlock",
    "RegisterDescriptor",
    "WireType",
    "build_index",
    "doc_address",
    # blocks
    "END_LENGTH",
    "END_MODEL_ID",
    "INVERTER_END_BLOCK",
    "INVERTER_EXTENSION_BLOCKS",
    "METER_END_BLOCK",
    "METER_FLOAT_OFFSET",
    "PRIMARY_BLOCKS",
    "end_block_candidates",
    # common
    "COMMON",
    "COMMON_BLOCK",
    "COMMON_LENGTH",
    "COMMON_MODEL_ID",
    "COMMON_REGISTERS",
    "SUNSPEC_ID",
    # fronius
    "FRONIUS",
    "FRONIUS_REGISTERS",
    "ModelType",
    "StorageRestrictionsViewMode",
    # inverter
    "I10X",
    "I10X_BLOCK",
    "I10X_REGISTERS",
    "I11X",
    "I11X_BLOCK",
    "I11X_REGISTERS",
    # meter
    "M20X",
    "M20X_BLOCK",
    "M20X_REGISTERS",
    "M21X",
    "M21X_BLOCK",
    "M21X_REGISTERS",
    # mppt
    "FLOAT_OFFSET",
    "I160",
    "I160_BLOCK",
    "I160_REGISTERS",
    "MPPT_MODULES",
    # nameplate
    "NAMEPLATE",
    "NAMEPLATE_BLOCK",
    "NAMEPLATE_REGISTERS",
    # storage
    "STORAGE",
    "STORAGE_BLOCK",
    "STORAGE_BLOCK_SIZE",
    "STORAGE_REGISTERS",
]
