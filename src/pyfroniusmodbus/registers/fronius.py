"""Fronius proprietary registers.

These live outside the SunSpec map at absolute 0-based addresses and are
served by the Fronius Datamanager for the addressed inverter. The
control registers (DELETE_DATA, STORE_DATA, RESET_ALL_EVENT_FLAGS,
MODEL_TYPE, STORAGE_RESTRICTIONS_VIEW_MODE) are write targets on the
device; the library catalogs them but only ever reads.

ACTIVE_STATE_CODE is not supported on Fronius hybrid inverters and may
report differently during night-time operation.
"""

from __future__ import annotations

from enum import IntEnum

from .base import RegisterDescriptor, WireType, build_index


class ModelType(IntEnum):
    """Values of the MODEL_TYPE register (SunSpec register model in use)."""

    FLOAT = 1
    INT_SF = 2


class StorageRestrictionsViewMode(IntEnum):
    """Scope of the restrictions reported by the storage block."""

    LOCAL = 0
    GLOBAL = 1


#: Value written to the trigger registers to execute them.
TRIGGER_VALUE = 0xFFFF

#: Value written to MODEL_TYPE to confirm a model change.
MODEL_TYPE_CONFIRM = 6

FRONIUS_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # DEVICE MANAGEMENT (212-217)
    # =========================================================================
    RegisterDescriptor(
        name="DELETE_DATA",
        address=212,
        word_count=1,
        wire_type=WireType.U16,
        description="Delete stored rating data of the current inverter (write 0xFFFF).",
    ),
    RegisterDescriptor(
        name="STORE_DATA",
        address=213,
        word_count=1,
        wire_type=WireType.U16,
        description="Rating data of all inverters is stored persistently (write 0xFFFF).",
    ),
    RegisterDescriptor(
        name="ACTIVE_STATE_CODE",
        address=214,
        word_count=1,
        wire_type=WireType.U16,
        description="Current active state code of the inverter (not on hybrid inverters).",
    ),
    RegisterDescriptor(
        name="RESET_ALL_EVENT_FLAGS",
        address=215,
        word_count=1,
        wire_type=WireType.U16,
        description="Reset all event flags and the active state code (write 0xFFFF).",
    ),
    RegisterDescriptor(
        name="MODEL_TYPE",
        address=216,
        word_count=1,
        wire_type=WireType.U16,
        description="SunSpec model type: 1 float, 2 integer & scale factor.",
    ),
    RegisterDescriptor(
        name="STORAGE_RESTRICTIONS_VIEW_MODE",
        address=217,
        word_count=1,
        wire_type=WireType.U16,
        description="Storage block restrictions: 0 local (default), 1 global.",
    ),
    # =========================================================================
    # SITE TOTALS (500-513)
    # =========================================================================
    RegisterDescriptor(
        name="SITE_POWER",
        address=500,
        word_count=2,
        wire_type=WireType.U32,
        unit="W",
        description="Total power of all connected inverters.",
    ),
    RegisterDescriptor(
        name="SITE_ENERGY_DAY",
        address=502,
        word_count=4,
        wire_type=WireType.U64,
        unit="Wh",
        description="Total energy of all connected inverters produced today.",
    ),
    RegisterDescriptor(
        name="SITE_ENERGY_YEAR",
        address=506,
        word_count=4,
        wire_type=WireType.U64,
        unit="Wh",
        description="Total energy of all connected inverters produced this year.",
    ),
    RegisterDescriptor(
        name="SITE_ENERGY_TOTAL",
        address=510,
        word_count=4,
        wire_type=WireType.U64,
        unit="Wh",
        description="Total energy of all connected inverters produced in lifetime.",
    ),
)

#: Readable span covering ACTIVE_STATE_CODE..STORAGE_RESTRICTIONS_VIEW_MODE.
STATUS_RANGE = (212, 6)

#: Readable span covering SITE_POWER..SITE_ENERGY_TOTAL.
SITE_RANGE = (500, 14)

# name → RegisterDescriptor
FRONIUS: dict[str, RegisterDescriptor] = build_index(FRONIUS_REGISTERS)

__all__ = [
    "FRONIUS",
    "FRONIUS_REGISTERS",
    "MODEL_TYPE_CONFIRM",
    "SITE_RANGE",
    "STATUS_RANGE",
    "TRIGGER_VALUE",
    "ModelType",
    "StorageRestrictionsViewMode",
]
