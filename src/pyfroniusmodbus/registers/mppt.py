"""SunSpec Multi MPPT Inverter Extension model (model 160).

Present on Fronius inverters with more than one MPP tracker. Fronius
always lays out two input modules; ``N`` tells how many are populated.
Values are integer+SF encoded in both register models; only the
addresses move by ``FLOAT_OFFSET`` words on float devices.

The per-input TMP field carries no scale factor and Fronius leaves it
unimplemented.
"""

from __future__ import annotations

from .base import ModelBlock, RegisterDescriptor, WireType, build_index, doc_address

#: Words added to extension-block addresses when the float model is active.
FLOAT_OFFSET = 10

#: Fronius always reports two input modules.
MPPT_MODULES = 2

I160_BLOCK = ModelBlock(
    name="I160",
    model_ids=frozenset({160}),
    address=doc_address(40254),
    length=48,
    float_offset=FLOAT_OFFSET,
)

# =============================================================================
# I160 SCALE FACTORS
# =============================================================================
I160_DCA_SF = RegisterDescriptor(
    name="DCA_SF",
    address=doc_address(40256),
    word_count=1,
    wire_type=WireType.I16,
    description="DC current scale factor.",
)
I160_DCV_SF = RegisterDescriptor(
    name="DCV_SF",
    address=doc_address(40257),
    word_count=1,
    wire_type=WireType.I16,
    description="DC voltage scale factor.",
)
I160_DCW_SF = RegisterDescriptor(
    name="DCW_SF",
    address=doc_address(40258),
    word_count=1,
    wire_type=WireType.I16,
    description="DC power scale factor.",
)
I160_DCWH_SF = RegisterDescriptor(
    name="DCWH_SF",
    address=doc_address(40259),
    word_count=1,
    wire_type=WireType.I16,
    description="DC energy scale factor.",
)

I160_REGISTERS: tuple[RegisterDescriptor, ...] = (
    # =========================================================================
    # HEADER AND SCALE FACTORS (doc 40254-40263)
    # =========================================================================
    RegisterDescriptor(
        name="ID",
        address=doc_address(40254),
        word_count=1,
        wire_type=WireType.U16,
        description="Model ID (160).",
    ),
    RegisterDescriptor(
        name="L",
        address=doc_address(40255),
        word_count=1,
        wire_type=WireType.U16,
        description="Model length (48).",
    ),
    I160_DCA_SF,
    I160_DCV_SF,
    I160_DCW_SF,
    I160_DCWH_SF,
    RegisterDescriptor(
        name="EVT",
        address=doc_address(40260),
        word_count=2,
        wire_type=WireType.U32,
        description="Global events.",
    ),
    RegisterDescriptor(
        name="N",
        address=doc_address(40262),
        word_count=1,
        wire_type=WireType.U16,
        description="Number of DC inputs (modules).",
    ),
    RegisterDescriptor(
        name="TMS_PER",
        address=doc_address(40263),
        word_count=1,
        wire_type=WireType.U16,
        description="Timestamp period.",
    ),
    # =========================================================================
    # INPUT 1 (doc 40264-40283)
    # =========================================================================
    RegisterDescriptor(
        name="INPUT1_ID",
        address=doc_address(40264),
        word_count=1,
        wire_type=WireType.U16,
        description="Input 1 ID.",
    ),
    RegisterDescriptor(
        name="INPUT1_IDSTR",
        address=doc_address(40265),
        word_count=8,
        wire_type=WireType.STRING,
        description="Input 1 ID string (e.g. 'String 1').",
    ),
    RegisterDescriptor(
        name="INPUT1_DCA",
        address=doc_address(40273),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I160_DCA_SF,
        unit="A",
        description="Input 1 DC current.",
    ),
    RegisterDescriptor(
        name="INPUT1_DCV",
        address=doc_address(40274),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I160_DCV_SF,
        unit="V",
        description="Input 1 DC voltage.",
    ),
    RegisterDescriptor(
        name="INPUT1_DCW",
        address=doc_address(40275),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I160_DCW_SF,
        unit="W",
        description="Input 1 DC power.",
    ),
    RegisterDescriptor(
        name="INPUT1_DCWH",
        address=doc_address(40276),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=I160_DCWH_SF,
        unit="Wh",
        description="Input 1 DC lifetime energy.",
    ),
    RegisterDescriptor(
        name="INPUT1_TMS",
        address=doc_address(40278),
        word_count=2,
        wire_type=WireType.U32,
        unit="s",
        description="Input 1 timestamp.",
    ),
    RegisterDescriptor(
        name="INPUT1_TMP",
        address=doc_address(40280),
        word_count=1,
        wire_type=WireType.I16,
        unit="C",
        description="Input 1 temperature.",
    ),
    RegisterDescriptor(
        name="INPUT1_DCST",
        address=doc_address(40281),
        word_count=1,
        wire_type=WireType.U16,
        description="Input 1 operating state.",
    ),
    RegisterDescriptor(
        name="INPUT1_DCEVT",
        address=doc_address(40282),
        word_count=2,
        wire_type=WireType.U32,
        description="Input 1 module events.",
    ),
    # =========================================================================
    # INPUT 2 (doc 40284-40303)
    # =========================================================================
    RegisterDescriptor(
        name="INPUT2_ID",
        address=doc_address(40284),
        word_count=1,
        wire_type=WireType.U16,
        description="Input 2 ID.",
    ),
    RegisterDescriptor(
        name="INPUT2_IDSTR",
        address=doc_address(40285),
        word_count=8,
        wire_type=WireType.STRING,
        description="Input 2 ID string (e.g. 'String 2').",
    ),
    RegisterDescriptor(
        name="INPUT2_DCA",
        address=doc_address(40293),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I160_DCA_SF,
        unit="A",
        description="Input 2 DC current.",
    ),
    RegisterDescriptor(
        name="INPUT2_DCV",
        address=doc_address(40294),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I160_DCV_SF,
        unit="V",
        description="Input 2 DC voltage.",
    ),
    RegisterDescriptor(
        name="INPUT2_DCW",
        address=doc_address(40295),
        word_count=1,
        wire_type=WireType.U16,
        scale_ref=I160_DCW_SF,
        unit="W",
        description="Input 2 DC power.",
    ),
    RegisterDescriptor(
        name="INPUT2_DCWH",
        address=doc_address(40296),
        word_count=2,
        wire_type=WireType.U32,
        scale_ref=I160_DCWH_SF,
        unit="Wh",
        description="Input 2 DC lifetime energy.",
    ),
    RegisterDescriptor(
        name="INPUT2_TMS",
        address=doc_address(40298),
        word_count=2,
        wire_type=WireType.U32,
        unit="s",
        description="Input 2 timestamp.",
    ),
    RegisterDescriptor(
        name="INPUT2_TMP",
        address=doc_address(40300),
        word_count=1,
        wire_type=WireType.I16,
        unit="C",
        description="Input 2 temperature.",
    ),
    RegisterDescriptor(
        name="INPUT2_DCST",
        address=doc_address(40301),
        word_count=1,
        wire_type=WireType.U16,
        description="Input 2 operating state.",
    ),
    RegisterDescriptor(
        name="INPUT2_DCEVT",
        address=doc_address(40302),
        word_count=2,
        wire_type=WireType.U32,
        description="Input 2 module events.",
    ),
)

# name → RegisterDescriptor (integer+SF addresses; shift by FLOAT_OFFSET on float devices)
I160: dict[str, RegisterDescriptor] = build_index(I160_REGISTERS)
