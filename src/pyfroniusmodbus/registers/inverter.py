"""SunSpec inverter model register map (models 101-103 and 111-113).

Fronius inverters expose exactly one of two layouts at the primary block
(ID word at 0-based address 40069):

  - I10X: integer values with sibling ``*_SF`` scale-factor registers
    (models 101 single phase, 102 split phase, 103 three phase; L = 50).
  - I11X: IEEE-754 float values in ABCD word order, no scale factors
    (models 111, 112, 113; L = 60).

The layout is chosen once per device from the Datamanager setting
"Sunspec Model Type" ("int + SF" or "float"). The last digit of the model
ID is the phase count.

Cross-validated against:
  - Fronius Datamanager Modbus TCP & RTU register map (Inverter sheet)
  - SunSpec Information Model Reference (models 101-103, 111-113)

Fronius does not populate PPVPHAB/BC/CA, TMPSNK/TRNS/OT or EVT2; the
fields are listed for completeness and read back as "not implemented"
sentinels (0xFFFF / 0x8000 / NaN).
"""

from __future__ import annotations

from .base import ModelBlock, RegisterDescriptor, WireType, build_index, doc_address

# ---------------------------------------------------------------------------
# Block layouts
# ---------------------------------------------------------------------------
I10X_BLOCK = ModelBlock(
    name="I10X",
    model_ids=frozenset({101, 102, 103}),
    address=doc_address(40070),
    length=50,
)
I11X_BLOCK = ModelBlock(
    name="I11X",
    model_ids=frozenset({111, 112, 113}),
    address=doc_address(40070),
    length=60,
)

# =============================================================================
# I10X SCALE FACTORS
# =============================================================================
I10X_A_SF = RegisterDescriptor(
    name="A_SF",
    address=doc_address(40076),
    word_count=1,
    wire_type=WireType.I16,
    description="AC current scale factor.",
)
I10X_V_SF = RegisterDescriptor(
    name="V_SF",
    address=doc_address(40083),
    word_count=1,
    wire_type=WireType.I16,
    description="AC voltage scale factor.",
)
I10X_W_SF = RegisterDescriptor(
    name="W_SF",
    address=doc_address(40085),
    word_count=1,
    wire_type=WireType.I16,
    description="AC active power scale factor.",
)
I10X_FREQ_SF = RegisterDescriptor(
    name="FREQ_SF",
    address=doc_address(40087),
    word_count=1,
    wire_type=WireType.I16,
    description="AC frequency scale factor.",
)
I10X_VA_SF = RegisterDescriptor(
    name="VA_SF",
    address=doc_address(40089),
    word_count=1,
    wire_type=WireType.I16,
    description="AC apparent power scale factor.",
)
I10X_VAR_SF = RegisterDescriptor(
    name="VAR_SF",
    address=doc_address(40091),
    word_count=1,
    wire_type=WireType.I16,
    description="AC reactive power scale factor.",
)
I10X_PF_SF = RegisterDescriptor(
    name="PF_SF",
    address=doc_address(40093),
    word_count=1,
    wire_type=WireType.I16,
    description="AC power factor scale factor.",
)
I10X_WH_SF = RegisterDescriptor(
    name="WH_SF",
    address=doc_address(40096),
    word_count=1,
    wire_type=WireType.I16,
    description="AC lifetime energy scale factor.",
)
I10X_DCA_SF = RegisterDescriptor(
    name="DCA_SF",
    address=doc_address(40098),
    word_count=1,
    wire_type=WireType.I16,
    description="DC current scale factor.",
)
I10X_DCV_SF = RegisterDescriptor(
    name="DCV_SF",
    address=doc_address(40100),
    word_count=1,
    wire_type=WireType.I16,
    description="DC voltage scale factor.",
)
I10X_DCW_SF = RegisterDescriptor(
    name="DCW_SF",
    address=doc_address(40102),
    word_count=1,
    wire_type=WireType.I16,
    description="DC power scale factor.",
)
I10X_TMP_SF = RegisterDescriptor(
    name="TMP_SF",
    address=doc_address(40107),
    word_count=1,
    wire_type=WireType.I16,
    description="Temperature scale factor.",
)

# =============================================================================
# I10X: INTEGER + SCALE FACTOR LAYOUT (models 101, 102, 103)
# =============================================================================
I10X_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER (doc 40070-40071)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40070),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID: 101 single phase, 102 split phase, 103 three phase.",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40071),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (50).",
    ),
    # =========================================================================
    # AC CURRENT (doc 40072-40076)
    # =========================================================================
    RegisterDescriptor(
        name="A",
        address=doc_address(40072),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_A_SF,
        unit="A",
        description="AC total current.",
    ),
    RegisterDescriptor(
        name="APHA",
        address=doc_address(40073),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_A_SF,
        unit="A",
        description="AC phase A current.",
    ),
    RegisterDescriptor(
        name="APHB",
        address=doc_address(40074),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_A_SF,
        unit="A",
        description="AC phase B current.",
    ),
    RegisterDescriptor(
        name="APHC",
        address=doc_address(40075),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_A_SF,
        unit="A",
        description="AC phase C current.",
    ),
    I10X_A_SF,
    # =========================================================================
    # AC VOLTAGE (doc 40077-40083)
    # =========================================================================
    RegisterDescriptor(
        name="PPVPHAB",
        address=doc_address(40077),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_V_SF,
        unit="V",
        description="AC voltage phase AB.",
    ),
    RegisterDescriptor(
        name="PPVPHBC",
        address=doc_address(40078),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_V_SF,
        unit="V",
        description="AC voltage phase BC.",
    ),
    RegisterDescriptor(
        name="PPVPHCA",
        address=doc_address(40079),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_V_SF,
        unit="V",
        description="AC voltage phase CA.",
    ),
    RegisterDescriptor(
        name="PHVPHA",
        address=doc_address(40080),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_V_SF,
        unit="V",
        description="AC voltage phase A to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHB",
        address=doc_address(40081),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_V_SF,
        unit="V",
        description="AC voltage phase B to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHC",
        address=doc_address(40082),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_V_SF,
        unit="V",
        description="AC voltage phase C to neutral.",
    ),
    I10X_V_SF,
    # =========================================================================
    # AC POWER AND FREQUENCY (doc 40084-40093)
    # =========================================================================
    RegisterDescriptor(
        name="W",
        address=doc_address(40084),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_W_SF,
        unit="W",
        description="AC active power.",
    ),
    I10X_W_SF,
    RegisterDescriptor(
        name="FREQ",
        address=doc_address(40086),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_FREQ_SF,
        unit="Hz",
        description="AC frequency.",
    ),
    I10X_FREQ_SF,
    RegisterDescriptor(
        name="VA",
        address=doc_address(40088),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_VA_SF,
        unit="VA",
        description="AC apparent power.",
    ),
    I10X_VA_SF,
    RegisterDescriptor(
        name="VAR",
        address=doc_address(40090),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_VAR_SF,
        unit="var",
        description="AC reactive power.",
    ),
    I10X_VAR_SF,
    RegisterDescriptor(
        name="PF",
        address=doc_address(40092),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_PF_SF,
        unit="%",
        description="AC power factor in percent.",
    ),
    I10X_PF_SF,
    # =========================================================================
    # AC ENERGY (doc 40094-40096)
    # =========================================================================
    RegisterDescriptor(
        name="WH",
        address=doc_address(40094),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=I10X_WH_SF,
        unit="Wh",
        description="AC lifetime energy production.",
    ),
    I10X_WH_SF,
    # =========================================================================
    # DC MEASUREMENTS (doc 40097-40102)
    # =========================================================================
    RegisterDescriptor(
        name="DCA",
        address=doc_address(40097),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_DCA_SF,
        unit="A",
        description="DC current (total of all inputs).",
    ),
    I10X_DCA_SF,
    RegisterDescriptor(
        name="DCV",
        address=doc_address(40099),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I10X_DCV_SF,
        unit="V",
        description="DC voltage.",
    ),
    I10X_DCV_SF,
    RegisterDescriptor(
        name="DCW",
        address=doc_address(40101),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_DCW_SF,
        unit="W",
        description="DC power (total of all inputs).",
    ),
    I10X_DCW_SF,
    # =========================================================================
    # TEMPERATURES (doc 40103-40107)
    # =========================================================================
    RegisterDescriptor(
        name="TMPCAB",
        address=doc_address(40103),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_TMP_SF,
        unit="C",
        description="Cabinet temperature.",
    ),
    RegisterDescriptor(
        name="TMPSNK",
        address=doc_address(40104),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_TMP_SF,
        unit="C",
        description="Heat sink temperature.",
    ),
    RegisterDescriptor(
        name="TMPTRNS",
        address=doc_address(40105),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_TMP_SF,
        unit="C",
        description="Transformer temperature.",
    ),
    RegisterDescriptor(
        name="TMPOT",
        address=doc_address(40106),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=I10X_TMP_SF,
        unit="C",
        description="Other temperature.",
    ),
    I10X_TMP_SF,
    # =========================================================================
    # STATE AND EVENTS (doc 40108-40121)
    # =========================================================================
    RegisterDescriptor(
        name="ST",
        address=doc_address(40108),
        word_count=1,
        wire_type=WireType.U16,
        description="Operating state (SunSpec enumeration).",
    ),
    RegisterDescriptor(
        name="STVND",
        address=doc_address(40109),
        word_count=1,
        wire_type=WireType.U16,
        description="Vendor defined operating state.",
    ),
    RegisterDescriptor(
        name="EVT1",
        address=doc_address(40110),
        word_count=2,
        wire_type=WireType.U32,
        description="Event flags (bits 0-31).",
    ),
    RegisterDescriptor(
        name="EVT2",
        address=doc_address(40112),
        word_count=2,
        wire_type=WireType.U32,
        description="Event flags (bits 32-63), reserved.",
    ),
    RegisterDescriptor(
        name="EVTVND1",
        address=doc_address(40114),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 0-31).",
    ),
    RegisterDescriptor(
        name="EVTVND2",
        address=doc_address(40116),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 32-63).",
    ),
    RegisterDescriptor(
        name="EVTVND3",
        address=doc_address(40118),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 64-95).",
    ),
    RegisterDescriptor(
        name="EVTVND4",
        address=doc_address(40120),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 96-127).",
    ),
)

# =============================================================================
# I11X: FLOAT LAYOUT (models 111, 112, 113)
# =============================================================================
I11X_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER (doc 40070-40071)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40070),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID: 111 single phase, 112 split phase, 113 three phase.",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40071),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (60).",
    ),
    # =========================================================================
    # AC CURRENT (doc 40072-40079)
    # =========================================================================
    RegisterDescriptor(
        name="A",
        address=doc_address(40072),
        word_count=2,
        wire_type=WireType.F32,
        unit="A",
        description="AC total current.",
    ),
    RegisterDescriptor(
        name="APHA",
        address=doc_address(40074),
        word_count=2,
        wire_type=WireType.F32,
        unit="A",
        description="AC phase A current.",
    ),
    RegisterDescriptor(
        name="APHB",
        address=doc_address(40076),
        word_count=2,
        wire_type=WireType.F32,
        unit="A",
        description="AC phase B current.",
    ),
    RegisterDescriptor(
        name="APHC",
        address=doc_address(40078),
        word_count=2,
        wire_type=WireType.F32,
        unit="A",
        description="AC phase C current.",
    ),
    # =========================================================================
    # AC VOLTAGE (doc 40080-40091)
    # =========================================================================
    RegisterDescriptor(
        name="PPVPHAB",
        address=doc_address(40080),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase AB.",
    ),
    RegisterDescriptor(
        name="PPVPHBC",
        address=doc_address(40082),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase BC.",
    ),
    RegisterDescriptor(
        name="PPVPHCA",
        address=doc_address(40084),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase CA.",
    ),
    RegisterDescriptor(
        name="PHVPHA",
        address=doc_address(40086),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase A to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHB",
        address=doc_address(40088),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase B to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHC",
        address=doc_address(40090),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase C to neutral.",
    ),
    # =========================================================================
    # AC POWER AND FREQUENCY (doc 40092-40101)
    # =========================================================================
    RegisterDescriptor(
        name="W",
        address=doc_address(40092),
        word_count=2,
        wire_type=WireType.F32,
        unit="W",
        description="AC active power.",
    ),
    RegisterDescriptor(
        name="FREQ",
        address=doc_address(40094),
        word_count=2,
        wire_type=WireType.F32,
        unit="Hz",
        description="AC frequency.",
    ),
    RegisterDescriptor(
        name="VA",
        address=doc_address(40096),
        word_count=2,
        wire_type=WireType.F32,
        unit="VA",
        description="AC apparent power.",
    ),
    RegisterDescriptor(
        name="VAR",
        address=doc_address(40098),
        word_count=2,
        wire_type=WireType.F32,
        unit="var",
        description="AC reactive power.",
    ),
    RegisterDescriptor(
        name="PF",
        address=doc_address(40100),
        word_count=2,
        wire_type=WireType.F32,
        unit="%",
        description="AC power factor in percent.",
    ),
    # =========================================================================
    # AC ENERGY (doc 40102-40103)
    # =========================================================================
    RegisterDescriptor(
        name="WH",
        address=doc_address(40102),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="AC lifetime energy production.",
    ),
    # =========================================================================
    # DC MEASUREMENTS (doc 40104-40109)
    # =========================================================================
    RegisterDescriptor(
        name="DCA",
        address=doc_address(40104),
        word_count=2,
        wire_type=WireType.F32,
        unit="A",
        description="DC current (total of all inputs).",
    ),
    RegisterDescriptor(
        name="DCV",
        address=doc_address(40106),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="DC voltage.",
    ),
    RegisterDescriptor(
        name="DCW",
        address=doc_address(40108),
        word_count=2,
        wire_type=WireType.F32,
        unit="W",
        description="DC power (total of all inputs).",
    ),
    # =========================================================================
    # TEMPERATURES (doc 40110-40117)
    # =========================================================================
    RegisterDescriptor(
        name="TMPCAB",
        address=doc_address(40110),
        word_count=2,
        wire_type=WireType.F32,
        unit="C",
        description="Cabinet temperature.",
    ),
    RegisterDescriptor(
        name="TMPSNK",
        address=doc_address(40112),
        word_count=2,
        wire_type=WireType.F32,
        unit="C",
        description="Heat sink temperature.",
    ),
    RegisterDescriptor(
        name="TMPTRNS",
        address=doc_address(40114),
        word_count=2,
        wire_type=WireType.F32,
        unit="C",
        description="Transformer temperature.",
    ),
    RegisterDescriptor(
        name="TMPOT",
        address=doc_address(40116),
        word_count=2,
        wire_type=WireType.F32,
        unit="C",
        description="Other temperature.",
    ),
    # =========================================================================
    # STATE AND EVENTS (doc 40118-40131)
    # =========================================================================
    RegisterDescriptor(
        name="ST",
        address=doc_address(40118),
        word_count=1,
        wire_type=WireType.U16,
        description="Operating state (SunSpec enumeration).",
    ),
    RegisterDescriptor(
        name="STVND",
        address=doc_address(40119),
        word_count=1,
        wire_type=WireType.U16,
        description="Vendor defined operating state.",
    ),
    RegisterDescriptor(
        name="EVT1",
        address=doc_address(40120),
        word_count=2,
        wire_type=WireType.U32,
        description="Event flags (bits 0-31).",
    ),
    RegisterDescriptor(
        name="EVT2",
        address=doc_address(40122),
        word_count=2,
        wire_type=WireType.U32,
        description="Event flags (bits 32-63), reserved.",
    ),
    RegisterDescriptor(
        name="EVTVND1",
        address=doc_address(40124),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 0-31).",
    ),
    RegisterDescriptor(
        name="EVTVND2",
        address=doc_address(40126),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 32-63).",
    ),
    RegisterDescriptor(
        name="EVTVND3",
        address=doc_address(40128),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 64-95).",
    ),
    RegisterDescriptor(
        name="EVTVND4",
        address=doc_address(40130),
        word_count=2,
        wire_type=WireType.U32,
        description="Vendor defined event flags (bits 96-127).",
    ),
)

# =============================================================================
# LOOKUP INDEXES (built once at import time)
# =============================================================================

# name → RegisterDescriptor
I10X: dict[str, RegisterDescriptor] = build_index(I10X_REGISTERS)
I11X: dict[str, RegisterDescriptor] = build_index(I11X_REGISTERS)
