"""SunSpec Nameplate Ratings model (model 120).

Ratings of the inverter as declared by Fronius. The storage-related
fields (WHRTG, AHRRTG, MAXCHARTE, MAXDISCHARTE) are only meaningful on
hybrid inverters with a battery attached.
"""

from __future__ import annotations

from .base import ModelBlock, RegisterDescriptor, WireType, build_index, doc_address
from .mppt import FLOAT_OFFSET

NAMEPLATE_BLOCK = ModelBlock(
    name="NAMEPLATE",
    model_ids=frozenset({120}),
    address=doc_address(40122),
    length=26,
    float_offset=FLOAT_OFFSET,
)

NAMEPLATE_WRTG_SF = RegisterDescriptor(
    name="WRTG_SF",
    address=doc_address(40126),
    word_count=1,
    wire_type=WireType.I16,
    description="Power rating scale factor.",
)
NAMEPLATE_VARTG_SF = RegisterDescriptor(
    name="VARTG_SF",
    address=doc_address(40128),
    word_count=1,
    wire_type=WireType.I16,
    description="Apparent power rating scale factor.",
)
NAMEPLATE_VARRTG_SF = RegisterDescriptor(
    name="VARRTG_SF",
    address=doc_address(40133),
    word_count=1,
    wire_type=WireType.I16,
    description="Reactive power rating scale factor.",
)
NAMEPLATE_ARTG_SF = RegisterDescriptor(
    name="ARTG_SF",
    address=doc_address(40135),
    word_count=1,
    wire_type=WireType.I16,
    description="Current rating scale factor.",
)
NAMEPLATE_PFRTG_SF = RegisterDescriptor(
    name="PFRTG_SF",
    address=doc_address(40140),
    word_count=1,
    wire_type=WireType.I16,
    description="Power factor rating scale factor.",
)
NAMEPLATE_WHRTG_SF = RegisterDescriptor(
    name="WHRTG_SF",
    address=doc_address(40142),
    word_count=1,
    wire_type=WireType.I16,
    description="Energy rating scale factor.",
)
NAMEPLATE_AHRRTG_SF = RegisterDescriptor(
    name="AHRRTG_SF",
    address=doc_address(40144),
    word_count=1,
    wire_type=WireType.I16,
    description="Amp-hour rating scale factor.",
)
NAMEPLATE_MAXCHARTE_SF = RegisterDescriptor(
    name="MAXCHARTE_SF",
    address=doc_address(40146),
    word_count=1,
    wire_type=WireType.I16,
    description="Charge rate scale factor.",
)
NAMEPLATE_MAXDISCHARTE_SF = RegisterDescriptor(
    name="MAXDISCHARTE_SF",
    address=doc_address(40148),
    word_count=1,
    wire_type=WireType.I16,
    description="Discharge rate scale factor.",
)

NAMEPLATE_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER (doc 40122-40123)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40122),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID (120).",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40123),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (26).",
    ),
    # =========================================================================
    # RATINGS (doc 40124-40149)
    # =========================================================================
    RegisterDescriptor(
        name="DERTYP",
        address=doc_address(40124),
        word_count=1,
        wire_type=WireType.U16,
        description="Type of DER device (4 = PV, 82 = PV + storage).",
    ),
    RegisterDescriptor(
        name="WRTG",
        address=doc_address(40125),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_WRTG_SF,
        unit="W",
        description="Continuous power output capability.",
    ),
    NAMEPLATE_WRTG_SF,
    RegisterDescriptor(
        name="VARTG",
        address=doc_address(40127),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_VARTG_SF,
        unit="VA",
        description="Continuous volt-ampere capability.",
    ),
    NAMEPLATE_VARTG_SF,
    RegisterDescriptor(
        name="VARRTGQ1",
        address=doc_address(40129),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_VARRTG_SF,
        unit="var",
        description="Continuous VAR capability in quadrant 1.",
    ),
    RegisterDescriptor(
        name="VARRTGQ2",
        address=doc_address(40130),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_VARRTG_SF,
        unit="var",
        description="Continuous VAR capability in quadrant 2.",
    ),
    RegisterDescriptor(
        name="VARRTGQ3",
        address=doc_address(40131),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_VARRTG_SF,
        unit="var",
        description="Continuous VAR capability in quadrant 3.",
    ),
    RegisterDescriptor(
        name="VARRTGQ4",
        address=doc_address(40132),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_VARRTG_SF,
        unit="var",
        description="Continuous VAR capability in quadrant 4.",
    ),
    NAMEPLATE_VARRTG_SF,
    RegisterDescriptor(
        name="ARTG",
        address=doc_address(40134),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_ARTG_SF,
        unit="A",
        description="Maximum RMS AC current level capability.",
    ),
    NAMEPLATE_ARTG_SF,
    RegisterDescriptor(
        name="PFRTGQ1",
        address=doc_address(40136),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_PFRTG_SF,
        unit="cos()",
        description="Minimum power factor capability in quadrant 1.",
    ),
    RegisterDescriptor(
        name="PFRTGQ2",
        address=doc_address(40137),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_PFRTG_SF,
        unit="cos()",
        description="Minimum power factor capability in quadrant 2.",
    ),
    RegisterDescriptor(
        name="PFRTGQ3",
        address=doc_address(40138),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_PFRTG_SF,
        unit="cos()",
        description="Minimum power factor capability in quadrant 3.",
    ),
    RegisterDescriptor(
        name="PFRTGQ4",
        address=doc_address(40139),
        word_count=1,
        wire_type=WireType.I16,
        scale_ref=NAMEPLATE_PFRTG_SF,
        unit="cos()",
        description="Minimum power factor capability in quadrant 4.",
    ),
    NAMEPLATE_PFRTG_SF,
    RegisterDescriptor(
        name="WHRTG",
        address=doc_address(40141),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_WHRTG_SF,
        unit="Wh",
        description="Nominal energy rating of storage device.",
    ),
    NAMEPLATE_WHRTG_SF,
    RegisterDescriptor(
        name="AHRRTG",
        address=doc_address(40143),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_AHRRTG_SF,
        unit="AH",
        description="Usable capacity of the battery.",
    ),
    NAMEPLATE_AHRRTG_SF,
    RegisterDescriptor(
        name="MAXCHARTE",
        address=doc_address(40145),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_MAXCHARTE_SF,
        unit="W",
        description="Maximum rate of energy transfer into the storage device.",
    ),
    NAMEPLATE_MAXCHARTE_SF,
    RegisterDescriptor(
        name="MAXDISCHARTE",
        address=doc_address(40147),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=NAMEPLATE_MAXDISCHARTE_SF,
        unit="W",
        description="Maximum rate of energy transfer out of the storage device.",
    ),
    NAMEPLATE_MAXDISCHARTE_SF,
    RegisterDescriptor(
        name="PAD",
        address=doc_address(40149),
        word_count=1,
        wire_type=WireType.U16,
        description="Pad register.",
    ),
)

# name → RegisterDescriptor
NAMEPLATE: dict[str, RegisterDescriptor] = build_index(NAMEPLATE_REGISTERS)
