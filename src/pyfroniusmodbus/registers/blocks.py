"""SunSpec block table and End-sentinel locations for Fronius devices.

Inverter layout (0-based model-ID addresses, int+SF / float)::

    Common (1)                 40002 / 40002   L=65
    Inverter (101-103/111-113) 40069 / 40069   L=50 / 60
    Nameplate (120)            40121 / 40131   L=26
    Basic settings (121)       40149 / 40159   L=30
    Extended measurements (122) 40181 / 40191  L=44
    Immediate controls (123)   40227 / 40237   L=24
    Multi MPPT (160)           40253 / 40263   L=48
    Storage (124, hybrid only) 40303 / 40313   L=24
    End                        40303 / 40313   (40329 / 40339 with storage)

Meter layout::

    Common (1)                 40002           L=65
    Meter (201-203/211-213)    40069           L=105 / 124
    End                        40176 / 40195
"""

from __future__ import annotations

from .base import ModelBlock, doc_address
from .common import COMMON_BLOCK
from .inverter import I10X_BLOCK, I11X_BLOCK
from .meter import M20X_BLOCK, M21X_BLOCK
from .mppt import FLOAT_OFFSET, I160_BLOCK
from .nameplate import NAMEPLATE_BLOCK
from .storage import STORAGE_BLOCK, STORAGE_BLOCK_SIZE

#: End sentinel model ID and length.
END_MODEL_ID = 0xFFFF
END_LENGTH = 0

#: Offset between M20X and M21X End blocks (105 vs 124 words).
METER_FLOAT_OFFSET = M21X_BLOCK.length - M20X_BLOCK.length

# Blocks 121-123 carry settings and controls; they are located but not decoded.
SETTINGS_BLOCK = ModelBlock(
    name="SETTINGS",
    model_ids=frozenset({121}),
    address=doc_address(40150),
    length=30,
    float_offset=FLOAT_OFFSET,
)
EXTENDED_MEASUREMENTS_BLOCK = ModelBlock(
    name="EXTENDED_MEASUREMENTS",
    model_ids=frozenset({122}),
    address=doc_address(40182),
    length=44,
    float_offset=FLOAT_OFFSET,
)
IMMEDIATE_CONTROLS_BLOCK = ModelBlock(
    name="IMMEDIATE_CONTROLS",
    model_ids=frozenset({123}),
    address=doc_address(40228),
    length=24,
    float_offset=FLOAT_OFFSET,
)

INVERTER_END_BLOCK = ModelBlock(
    name="END",
    model_ids=frozenset({END_MODEL_ID}),
    address=doc_address(40304),
    length=END_LENGTH,
    float_offset=FLOAT_OFFSET,
)
METER_END_BLOCK = ModelBlock(
    name="END",
    model_ids=frozenset({END_MODEL_ID}),
    address=doc_address(40177),
    length=END_LENGTH,
    float_offset=METER_FLOAT_OFFSET,
)

#: Inverter extension blocks in address order.
INVERTER_EXTENSION_BLOCKS: tuple[ModelBlock, ...] = (
    NAMEPLATE_BLOCK,
    SETTINGS_BLOCK,
    EXTENDED_MEASUREMENTS_BLOCK,
    IMMEDIATE_CONTROLS_BLOCK,
    I160_BLOCK,
    STORAGE_BLOCK,
)

#: Every primary block, keyed by model ID.
PRIMARY_BLOCKS: dict[int, ModelBlock] = {
    model_id: block
    for block in (I10X_BLOCK, I11X_BLOCK, M20X_BLOCK, M21X_BLOCK)
    for model_id in sorted(block.model_ids)
}


def end_block_candidates(end_block: ModelBlock, use_float: bool) -> tuple[int, ...]:
    """Return End-sentinel addresses in probe order.

    Inverters are probed at the no-storage address first and then one
    storage block further; meters have a single location.
    """
    address = end_block.base_address(use_float)
    if end_block is INVERTER_END_BLOCK:
        return (address, address + STORAGE_BLOCK_SIZE)
    return (address,)


def first_block_after_common() -> int:
    """0-based address of the primary model ID word."""
    return COMMON_BLOCK.end


__all__ = [
    "END_LENGTH",
    "END_MODEL_ID",
    "EXTENDED_MEASUREMENTS_BLOCK",
    "IMMEDIATE_CONTROLS_BLOCK",
    "INVERTER_END_BLOCK",
    "INVERTER_EXTENSION_BLOCKS",
    "METER_END_BLOCK",
    "METER_FLOAT_OFFSET",
    "PRIMARY_BLOCKS",
    "SETTINGS_BLOCK",
    "end_block_candidates",
    "first_block_after_common",
]
