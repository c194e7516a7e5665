"""SunSpec meter model register map (models 201-203 and 211-213).

Fronius Smart Meters are reached through the Datamanager at their own
Modbus unit address (default 240). The primary block starts at the same
0-based address 40069 as the inverter block:

  - M20X: integer values with sibling ``*_SF`` registers (L = 105).
  - M21X: IEEE-754 float values, ABCD word order (L = 124).

Energy counters report both directions per phase. Reactive energy is
split into the four power quadrants (imported Q1/Q2, exported Q3/Q4).
The End block follows immediately: 0-based 40176 for M20X and 40195 for
M21X (a float offset of 19 words).

Cross-validated against:
  - Fronius Datamanager Modbus TCP & RTU register map (Meter sheet)
  - SunSpec Information Model Reference (models 201-203, 211-213)
"""

from __future__ import annotations

from .base import ModelBlock, RegisterDescriptor, WireType, build_index, doc_address

# ---------------------------------------------------------------------------
# Block layouts
# ---------------------------------------------------------------------------
M20X_BLOCK = ModelBlock(
    name="M20X",
    model_ids=frozenset({201, 202, 203}),
    address=doc_address(40070),
    length=105,
)
M21X_BLOCK = ModelBlock(
    name="M21X",
    model_ids=frozenset({211, 212, 213}),
    address=doc_address(40070),
    length=124,
)

# =============================================================================
# M20X SCALE FACTORS
# =============================================================================
M20X_A_SF = RegisterDescriptor(
    name="A_SF",
    address=doc_address(40076),
    word_count=1,
    wire_type=WireType.I16,
    description="AC current scale factor.",
)
M20X_V_SF = RegisterDescriptor(
    name="V_SF",
    address=doc_address(40085),
    word_count=1,
    wire_type=WireType.I16,
    description="AC voltage scale factor.",
)
M20X_FREQ_SF = RegisterDescriptor(
    name="FREQ_SF",
    address=doc_address(40087),
    word_count=1,
    wire_type=WireType.I16,
    description="AC frequency scale factor.",
)
M20X_W_SF = RegisterDescriptor(
    name="W_SF",
    address=doc_address(40092),
    word_count=1,
    wire_type=WireType.I16,
    description="AC active power scale factor.",
)
M20X_VA_SF = RegisterDescriptor(
    name="VA_SF",
    address=doc_address(40097),
    word_count=1,
    wire_type=WireType.I16,
    description="AC apparent power scale factor.",
)
M20X_VAR_SF = RegisterDescriptor(
    name="VAR_SF",
    address=doc_address(40102),
    word_count=1,
    wire_type=WireType.I16,
    description="AC reactive power scale factor.",
)
M20X_PF_SF = RegisterDescriptor(
    name="PF_SF",
    address=doc_address(40107),
    word_count=1,
    wire_type=WireType.I16,
    description="AC power factor scale factor.",
)
M20X_TOTWH_SF = RegisterDescriptor(
    name="TOTWH_SF",
    address=doc_address(40124),
    word_count=1,
    wire_type=WireType.I16,
    description="Real energy scale factor.",
)
M20X_TOTVAH_SF = RegisterDescriptor(
    name="TOTVAH_SF",
    address=doc_address(40141),
    word_count=1,
    wire_type=WireType.I16,
    description="Apparent energy scale factor.",
)
M20X_TOTVARH_SF = RegisterDescriptor(
    name="TOTVARH_SF",
    address=doc_address(40174),
    word_count=1,
    wire_type=WireType.I16,
    description="Reactive energy scale factor.",
)

# =============================================================================
# M20X: INTEGER + SCALE FACTOR LAYOUT (models 201, 202, 203)
# =============================================================================
M20X_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER (doc 40070-40071)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40070),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID: 201 single phase, 202 split phase, 203 three phase.",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40071),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (105).",
    ),
    # =========================================================================
    # AC CURRENT (doc 40072-40076)
    # =========================================================================
    RegisterDescriptor(
        name="A",
        address=doc_address(40072),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_A_SF,
        unit="A",
        description="AC total current.",
    ),
    RegisterDescriptor(
        name="APHA",
        address=doc_address(40073),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_A_SF,
        unit="A",
        description="AC phase A current.",
    ),
    RegisterDescriptor(
        name="APHB",
        address=doc_address(40074),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_A_SF,
        unit="A",
        description="AC phase B current.",
    ),
    RegisterDescriptor(
        name="APHC",
        address=doc_address(40075),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_A_SF,
        unit="A",
        description="AC phase C current.",
    ),
    M20X_A_SF,
    # =========================================================================
    # AC VOLTAGE (doc 40077-40085)
    # =========================================================================
    RegisterDescriptor(
        name="PHV",
        address=doc_address(40077),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage average phase to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHA",
        address=doc_address(40078),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage phase A to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHB",
        address=doc_address(40079),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage phase B to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHC",
        address=doc_address(40080),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage phase C to neutral.",
    ),
    RegisterDescriptor(
        name="PPV",
        address=doc_address(40081),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage average phase to phase.",
    ),
    RegisterDescriptor(
        name="PPVPHAB",
        address=doc_address(40082),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage phase A to B.",
    ),
    RegisterDescriptor(
        name="PPVPHBC",
        address=doc_address(40083),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage phase B to C.",
    ),
    RegisterDescriptor(
        name="PPVPHCA",
        address=doc_address(40084),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_V_SF,
        unit="V",
        description="AC voltage phase C to A.",
    ),
    M20X_V_SF,
    # =========================================================================
    # AC FREQUENCY (doc 40086-40087)
    # =========================================================================
    RegisterDescriptor(
        name="FREQ",
        address=doc_address(40086),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_FREQ_SF,
        unit="Hz",
        description="AC frequency.",
    ),
    M20X_FREQ_SF,
    # =========================================================================
    # AC ACTIVE POWER (doc 40088-40092)
    # =========================================================================
    RegisterDescriptor(
        name="W",
        address=doc_address(40088),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_W_SF,
        unit="W",
        description="AC active power total.",
    ),
    RegisterDescriptor(
        name="WPHA",
        address=doc_address(40089),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_W_SF,
        unit="W",
        description="AC active power phase A.",
    ),
    RegisterDescriptor(
        name="WPHB",
        address=doc_address(40090),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_W_SF,
        unit="W",
        description="AC active power phase B.",
    ),
    RegisterDescriptor(
        name="WPHC",
        address=doc_address(40091),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_W_SF,
        unit="W",
        description="AC active power phase C.",
    ),
    M20X_W_SF,
    # =========================================================================
    # AC APPARENT POWER (doc 40093-40097)
    # =========================================================================
    RegisterDescriptor(
        name="VA",
        address=doc_address(40093),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VA_SF,
        unit="VA",
        description="AC apparent power total.",
    ),
    RegisterDescriptor(
        name="VAPHA",
        address=doc_address(40094),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VA_SF,
        unit="VA",
        description="AC apparent power phase A.",
    ),
    RegisterDescriptor(
        name="VAPHB",
        address=doc_address(40095),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VA_SF,
        unit="VA",
        description="AC apparent power phase B.",
    ),
    RegisterDescriptor(
        name="VAPHC",
        address=doc_address(40096),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VA_SF,
        unit="VA",
        description="AC apparent power phase C.",
    ),
    M20X_VA_SF,
    # =========================================================================
    # AC REACTIVE POWER (doc 40098-40102)
    # =========================================================================
    RegisterDescriptor(
        name="VAR",
        address=doc_address(40098),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VAR_SF,
        unit="var",
        description="AC reactive power total.",
    ),
    RegisterDescriptor(
        name="VARPHA",
        address=doc_address(40099),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VAR_SF,
        unit="var",
        description="AC reactive power phase A.",
    ),
    RegisterDescriptor(
        name="VARPHB",
        address=doc_address(40100),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VAR_SF,
        unit="var",
        description="AC reactive power phase B.",
    ),
    RegisterDescriptor(
        name="VARPHC",
        address=doc_address(40101),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_VAR_SF,
        unit="var",
        description="AC reactive power phase C.",
    ),
    M20X_VAR_SF,
    # =========================================================================
    # AC POWER FACTOR (doc 40103-40107)
    # =========================================================================
    RegisterDescriptor(
        name="PF",
        address=doc_address(40103),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_PF_SF,
        unit="%",
        description="AC power factor total.",
    ),
    RegisterDescriptor(
        name="PFPHA",
        address=doc_address(40104),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_PF_SF,
        unit="%",
        description="AC power factor phase A.",
    ),
    RegisterDescriptor(
        name="PFPHB",
        address=doc_address(40105),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_PF_SF,
        unit="%",
        description="AC power factor phase B.",
    ),
    RegisterDescriptor(
        name="PFPHC",
        address=doc_address(40106),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=M20X_PF_SF,
        unit="%",
        description="AC power factor phase C.",
    ),
    M20X_PF_SF,
    # =========================================================================
    # ACTIVE ENERGY (doc 40108-40124)
    # =========================================================================
    RegisterDescriptor(
        name="TOTWH_EXP",
        address=doc_address(40108),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy exported.",
    ),
    RegisterDescriptor(
        name="TOTWH_EXPPHA",
        address=doc_address(40110),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy exported phase A.",
    ),
    RegisterDescriptor(
        name="TOTWH_EXPPHB",
        address=doc_address(40112),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy exported phase B.",
    ),
    RegisterDescriptor(
        name="TOTWH_EXPPHC",
        address=doc_address(40114),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy exported phase C.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMP",
        address=doc_address(40116),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy imported.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMPPHA",
        address=doc_address(40118),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy imported phase A.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMPPHB",
        address=doc_address(40120),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy imported phase B.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMPPHC",
        address=doc_address(40122),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTWH_SF,
        unit="Wh",
        description="Total real energy imported phase C.",
    ),
    M20X_TOTWH_SF,
    # =========================================================================
    # APPARENT ENERGY (doc 40125-40141)
    # =========================================================================
    RegisterDescriptor(
        name="TOTVAH_EXP",
        address=doc_address(40125),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy exported.",
    ),
    RegisterDescriptor(
        name="TOTVAH_EXPPHA",
        address=doc_address(40127),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy exported phase A.",
    ),
    RegisterDescriptor(
        name="TOTVAH_EXPPHB",
        address=doc_address(40129),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy exported phase B.",
    ),
    RegisterDescriptor(
        name="TOTVAH_EXPPHC",
        address=doc_address(40131),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy exported phase C.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMP",
        address=doc_address(40133),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy imported.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMPPHA",
        address=doc_address(40135),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy imported phase A.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMPPHB",
        address=doc_address(40137),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy imported phase B.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMPPHC",
        address=doc_address(40139),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVAH_SF,
        unit="VAh",
        description="Total apparent energy imported phase C.",
    ),
    M20X_TOTVAH_SF,
    # =========================================================================
    # REACTIVE ENERGY (doc 40142-40174)
    # =========================================================================
    RegisterDescriptor(
        name="TOTVARH_IMPQ1",
        address=doc_address(40142),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 1.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ1PHA",
        address=doc_address(40144),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 1 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ1PHB",
        address=doc_address(40146),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 1 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ1PHC",
        address=doc_address(40148),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 1 phase C.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2",
        address=doc_address(40150),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 2.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2PHA",
        address=doc_address(40152),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 2 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2PHB",
        address=doc_address(40154),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 2 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2PHC",
        address=doc_address(40156),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy imported quadrant 2 phase C.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3",
        address=doc_address(40158),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 3.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3PHA",
        address=doc_address(40160),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 3 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3PHB",
        address=doc_address(40162),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 3 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3PHC",
        address=doc_address(40164),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 3 phase C.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4",
        address=doc_address(40166),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 4.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4PHA",
        address=doc_address(40168),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 4 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4PHB",
        address=doc_address(40170),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 4 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4PHC",
        address=doc_address(40172),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=M20X_TOTVARH_SF,
        unit="varh",
        description="Total reactive energy exported quadrant 4 phase C.",
    ),
    M20X_TOTVARH_SF,
    # =========================================================================
    # EVENTS (doc 40175-40176)
    # =========================================================================
    RegisterDescriptor(
        name="EVT",
        address=doc_address(40175),
        word_count=2,
        wire_type=WireType.U32,
        description="Meter event flags.",
    ),
)

# =============================================================================
# M21X: FLOAT LAYOUT (models 211, 212, 213)
# =============================================================================
M21X_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER (doc 40070-40071)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40070),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID: 211 single phase, 212 split phase, 213 three phase.",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40071),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (124).",
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
    # AC VOLTAGE (doc 40080-40095)
    # =========================================================================
    RegisterDescriptor(
        name="PHV",
        address=doc_address(40080),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage average phase to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHA",
        address=doc_address(40082),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase A to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHB",
        address=doc_address(40084),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase B to neutral.",
    ),
    RegisterDescriptor(
        name="PHVPHC",
        address=doc_address(40086),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase C to neutral.",
    ),
    RegisterDescriptor(
        name="PPV",
        address=doc_address(40088),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage average phase to phase.",
    ),
    RegisterDescriptor(
        name="PPVPHAB",
        address=doc_address(40090),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase A to B.",
    ),
    RegisterDescriptor(
        name="PPVPHBC",
        address=doc_address(40092),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase B to C.",
    ),
    RegisterDescriptor(
        name="PPVPHCA",
        address=doc_address(40094),
        word_count=2,
        wire_type=WireType.F32,
        unit="V",
        description="AC voltage phase C to A.",
    ),
    # =========================================================================
    # AC FREQUENCY (doc 40096-40097)
    # =========================================================================
    RegisterDescriptor(
        name="FREQ",
        address=doc_address(40096),
        word_count=2,
        wire_type=WireType.F32,
        unit="Hz",
        description="AC frequency.",
    ),
    # =========================================================================
    # AC ACTIVE POWER (doc 40098-40105)
    # =========================================================================
    RegisterDescriptor(
        name="W",
        address=doc_address(40098),
        word_count=2,
        wire_type=WireType.F32,
        unit="W",
        description="AC active power total.",
    ),
    RegisterDescriptor(
        name="WPHA",
        address=doc_address(40100),
        word_count=2,
        wire_type=WireType.F32,
        unit="W",
        description="AC active power phase A.",
    ),
    RegisterDescriptor(
        name="WPHB",
        address=doc_address(40102),
        word_count=2,
        wire_type=WireType.F32,
        unit="W",
        description="AC active power phase B.",
    ),
    RegisterDescriptor(
        name="WPHC",
        address=doc_address(40104),
        word_count=2,
        wire_type=WireType.F32,
        unit="W",
        description="AC active power phase C.",
    ),
    # =========================================================================
    # AC APPARENT POWER (doc 40106-40113)
    # =========================================================================
    RegisterDescriptor(
        name="VA",
        address=doc_address(40106),
        word_count=2,
        wire_type=WireType.F32,
        unit="VA",
        description="AC apparent power total.",
    ),
    RegisterDescriptor(
        name="VAPHA",
        address=doc_address(40108),
        word_count=2,
        wire_type=WireType.F32,
        unit="VA",
        description="AC apparent power phase A.",
    ),
    RegisterDescriptor(
        name="VAPHB",
        address=doc_address(40110),
        word_count=2,
        wire_type=WireType.F32,
        unit="VA",
        description="AC apparent power phase B.",
    ),
    RegisterDescriptor(
        name="VAPHC",
        address=doc_address(40112),
        word_count=2,
        wire_type=WireType.F32,
        unit="VA",
        description="AC apparent power phase C.",
    ),
    # =========================================================================
    # AC REACTIVE POWER (doc 40114-40121)
    # =========================================================================
    RegisterDescriptor(
        name="VAR",
        address=doc_address(40114),
        word_count=2,
        wire_type=WireType.F32,
        unit="var",
        description="AC reactive power total.",
    ),
    RegisterDescriptor(
        name="VARPHA",
        address=doc_address(40116),
        word_count=2,
        wire_type=WireType.F32,
        unit="var",
        description="AC reactive power phase A.",
    ),
    RegisterDescriptor(
        name="VARPHB",
        address=doc_address(40118),
        word_count=2,
        wire_type=WireType.F32,
        unit="var",
        description="AC reactive power phase B.",
    ),
    RegisterDescriptor(
        name="VARPHC",
        address=doc_address(40120),
        word_count=2,
        wire_type=WireType.F32,
        unit="var",
        description="AC reactive power phase C.",
    ),
    # =========================================================================
    # AC POWER FACTOR (doc 40122-40129)
    # =========================================================================
    RegisterDescriptor(
        name="PF",
        address=doc_address(40122),
        word_count=2,
        wire_type=WireType.F32,
        unit="%",
        description="AC power factor total.",
    ),
    RegisterDescriptor(
        name="PFPHA",
        address=doc_address(40124),
        word_count=2,
        wire_type=WireType.F32,
        unit="%",
        description="AC power factor phase A.",
    ),
    RegisterDescriptor(
        name="PFPHB",
        address=doc_address(40126),
        word_count=2,
        wire_type=WireType.F32,
        unit="%",
        description="AC power factor phase B.",
    ),
    RegisterDescriptor(
        name="PFPHC",
        address=doc_address(40128),
        word_count=2,
        wire_type=WireType.F32,
        unit="%",
        description="AC power factor phase C.",
    ),
    # =========================================================================
    # ACTIVE ENERGY (doc 40130-40145)
    # =========================================================================
    RegisterDescriptor(
        name="TOTWH_EXP",
        address=doc_address(40130),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy exported.",
    ),
    RegisterDescriptor(
        name="TOTWH_EXPPHA",
        address=doc_address(40132),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy exported phase A.",
    ),
    RegisterDescriptor(
        name="TOTWH_EXPPHB",
        address=doc_address(40134),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy exported phase B.",
    ),
    RegisterDescriptor(
        name="TOTWH_EXPPHC",
        address=doc_address(40136),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy exported phase C.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMP",
        address=doc_address(40138),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy imported.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMPPHA",
        address=doc_address(40140),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy imported phase A.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMPPHB",
        address=doc_address(40142),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy imported phase B.",
    ),
    RegisterDescriptor(
        name="TOTWH_IMPPHC",
        address=doc_address(40144),
        word_count=2,
        wire_type=WireType.F32,
        unit="Wh",
        description="Total real energy imported phase C.",
    ),
    # =========================================================================
    # APPARENT ENERGY (doc 40146-40161)
    # =========================================================================
    RegisterDescriptor(
        name="TOTVAH_EXP",
        address=doc_address(40146),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy exported.",
    ),
    RegisterDescriptor(
        name="TOTVAH_EXPPHA",
        address=doc_address(40148),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy exported phase A.",
    ),
    RegisterDescriptor(
        name="TOTVAH_EXPPHB",
        address=doc_address(40150),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy exported phase B.",
    ),
    RegisterDescriptor(
        name="TOTVAH_EXPPHC",
        address=doc_address(40152),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy exported phase C.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMP",
        address=doc_address(40154),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy imported.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMPPHA",
        address=doc_address(40156),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy imported phase A.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMPPHB",
        address=doc_address(40158),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy imported phase B.",
    ),
    RegisterDescriptor(
        name="TOTVAH_IMPPHC",
        address=doc_address(40160),
        word_count=2,
        wire_type=WireType.F32,
        unit="VAh",
        description="Total apparent energy imported phase C.",
    ),
    # =========================================================================
    # REACTIVE ENERGY (doc 40162-40193)
    # =========================================================================
    RegisterDescriptor(
        name="TOTVARH_IMPQ1",
        address=doc_address(40162),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 1.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ1PHA",
        address=doc_address(40164),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 1 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ1PHB",
        address=doc_address(40166),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 1 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ1PHC",
        address=doc_address(40168),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 1 phase C.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2",
        address=doc_address(40170),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 2.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2PHA",
        address=doc_address(40172),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 2 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2PHB",
        address=doc_address(40174),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 2 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_IMPQ2PHC",
        address=doc_address(40176),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy imported quadrant 2 phase C.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3",
        address=doc_address(40178),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 3.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3PHA",
        address=doc_address(40180),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 3 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3PHB",
        address=doc_address(40182),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 3 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ3PHC",
        address=doc_address(40184),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 3 phase C.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4",
        address=doc_address(40186),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 4.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4PHA",
        address=doc_address(40188),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 4 phase A.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4PHB",
        address=doc_address(40190),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 4 phase B.",
    ),
    RegisterDescriptor(
        name="TOTVARH_EXPQ4PHC",
        address=doc_address(40192),
        word_count=2,
        wire_type=WireType.F32,
        unit="varh",
        description="Total reactive energy exported quadrant 4 phase C.",
    ),
    # =========================================================================
    # EVENTS (doc 40194-40195)
    # =========================================================================
    RegisterDescriptor(
        name="EVT",
        address=doc_address(40194),
        word_count=2,
        wire_type=WireType.U32,
        description="Meter event flags.",
    ),
)

# =============================================================================
# LOOKUP INDEXES (built once at import time)
# =============================================================================

# name → RegisterDescriptor
M20X: dict[str, RegisterDescriptor] = build_index(M20X_REGISTERS)
M21X: dict[str, RegisterDescriptor] = build_index(M21X_REGISTERS)
