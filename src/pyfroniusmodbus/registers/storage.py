"""SunSpec Basic Storage Control model (model 124).

Only Fronius hybrid inverters (Symo Hybrid, Primo GEN24 Plus) with a
battery expose this block. It sits directly after the Multi MPPT block,
pushing the End sentinel back by ``STORAGE_BLOCK_SIZE`` words.
"""

from __future__ import annotations

from .base import ModelBlock, RegisterDescriptor, WireType, build_index, doc_address
from .mppt import FLOAT_OFFSET

STORAGE_BLOCK = ModelBlock(
    name="STORAGE",
    model_ids=frozenset({124}),
    address=doc_address(40304),
    length=24,
    float_offset=FLOAT_OFFSET,
)

#: Total words of the storage block, ID and L included.
STORAGE_BLOCK_SIZE = STORAGE_BLOCK.length + 2

STORAGE_WCHAMAX_SF = RegisterDescriptor(
    name="WCHAMAX_SF",
    address=doc_address(40322),
    word_count=1,
    wire_type=WireType.I16,
    description="Maximum charge scale factor.",
)
STORAGE_WCHADISCHAGRA_SF = RegisterDescriptor(
    name="WCHADISCHAGRA_SF",
    address=doc_address(40323),
    word_count=1,
    wire_type=WireType.I16,
    description="Charge/discharge rate scale factor.",
)
STORAGE_VACHAMAX_SF = RegisterDescriptor(
    name="VACHAMAX_SF",
    address=doc_address(40324),
    word_count=1,
    wire_type=WireType.I16,
    description="Maximum charging VA scale factor.",
)
STORAGE_MINRSVPCT_SF = RegisterDescriptor(
    name="MINRSVPCT_SF",
    address=doc_address(40325),
    word_count=1,
    wire_type=WireType.I16,
    description="Minimum reserve scale factor.",
)
STORAGE_CHASTATE_SF = RegisterDescriptor(
    name="CHASTATE_SF",
    address=doc_address(40326),
    word_count=1,
    wire_type=WireType.I16,
    description="Available energy scale factor.",
)
STORAGE_STORAVAL_SF = RegisterDescriptor(
    name="STORAVAL_SF",
    address=doc_address(40327),
    word_count=1,
    wire_type=WireType.I16,
    description="State of charge scale factor.",
)
STORAGE_INBATV_SF = RegisterDescriptor(
    name="INBATV_SF",
    address=doc_address(40328),
    word_count=1,
    wire_type=WireType.I16,
    description="Battery voltage scale factor.",
)
STORAGE_INOUTWRTE_SF = RegisterDescriptor(
    name="INOUTWRTE_SF",
    address=doc_address(40329),
    word_count=1,
    wire_type=WireType.I16,
    description="Charge/discharge percentage scale factor.",
)

STORAGE_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER (doc 40304-40305)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40304),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID (124).",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40305),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (24).",
    ),
    # =========================================================================
    # CHARGE CONTROL (doc 40306-40321)
    # =========================================================================
    RegisterDescriptor(
        name="WCHAMAX",
        address=doc_address(40306),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_WCHAMAX_SF,
        unit="W",
        description="Setpoint for maximum charge.",
    ),
    RegisterDescriptor(
        name="WCHAGRA",
        address=doc_address(40307),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_WCHADISCHAGRA_SF,
        unit="%",
        description="Setpoint for maximum charging rate (percent of WCHAMAX per second).",
    ),
    RegisterDescriptor(
        name="WDISCHAGRA",
        address=doc_address(40308),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_WCHADISCHAGRA_SF,
        unit="%",
        description="Setpoint for maximum discharge rate (percent of WCHAMAX per second).",
    ),
    RegisterDescriptor(
        name="STORCTL_MOD",
        address=doc_address(40309),
        word_count=1,
        wire_type=WireType.U16,
        description="Activate hold/discharge/charge storage control mode (bitfield).",
    ),
    RegisterDescriptor(
        name="VACHAMAX",
        address=doc_address(40310),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_VACHAMAX_SF,
        unit="VA",
        description="Setpoint for maximum charging VA.",
    ),
    RegisterDescriptor(
        name="MINRSVPCT",
        address=doc_address(40311),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_MINRSVPCT_SF,
        unit="%",
        description="Setpoint for minimum reserve for storage (percent of nominal capacity).",
    ),
    RegisterDescriptor(
        name="CHASTATE",
        address=doc_address(40312),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_CHASTATE_SF,
        unit="%",
        description="Currently available energy (percent of capacity).",
    ),
    RegisterDescriptor(
        name="STORAVAL",
        address=doc_address(40313),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_STORAVAL_SF,
        unit="AH",
        description="Energy available above the minimum reserve.",
    ),
    RegisterDescriptor(
        name="INBATV",
        address=doc_address(40314),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=STORAGE_INBATV_SF,
        unit="V",
        description="Internal battery voltage.",
    ),
    RegisterDescriptor(
        name="CHAST",
        address=doc_address(40315),
        word_count=1,
        wire_type=WireType.U16,
        description="Charge status of storage device.",
    ),
    RegisterDescriptor(
        name="OUTWRTE",
        address=doc_address(40316),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=STORAGE_INOUTWRTE_SF,
        unit="%",
        description="Percent of max discharge rate.",
    ),
    RegisterDescriptor(
        name="INWRTE",
        address=doc_address(40317),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=STORAGE_INOUTWRTE_SF,
        unit="%",
        description="Percent of max charging rate.",
    ),
    RegisterDescriptor(
        name="INOUTWRTE_WINTMS",
        address=doc_address(40318),
        word_count=1,
        wire_type=WireType.U16,
        unit="s",
        description="Time window for charge/discharge rate change.",
    ),
    RegisterDescriptor(
        name="INOUTWRTE_RVRTTMS",
        address=doc_address(40319),
        word_count=1,
        wire_type=WireType.U16,
        unit="s",
        description="Timeout period for charge/discharge rate.",
    ),
    RegisterDescriptor(
        name="INOUTWRTE_RMPTMS",
        address=doc_address(40320),
        word_count=1,
        wire_type=WireType.U16,
        unit="s",
        description="Ramp time for moving from current setpoint to new setpoint.",
    ),
    RegisterDescriptor(
        name="CHAGRISET",
        address=doc_address(40321),
        word_count=1,
        wire_type=WireType.U16,
        description="Grid charging allowed (0 = PV only, 1 = grid).",
    ),
    # =========================================================================
    # SCALE FACTORS (doc 40322-40329)
    # =========================================================================
    STORAGE_WCHAMAX_SF,
    STORAGE_WCHADISCHAGRA_SF,
    STORAGE_VACHAMAX_SF,
    STORAGE_MINRSVPCT_SF,
    STORAGE_CHASTATE_SF,
    STORAGE_STORAVAL_SF,
    STORAGE_INBATV_SF,
    STORAGE_INOUTWRTE_SF,
)

# name → RegisterDescriptor
STORAGE: dict[str, RegisterDescriptor] = build_index(STORAGE_REGISTERS)
