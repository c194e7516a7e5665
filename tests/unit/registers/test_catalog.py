"""Tests for the SunSpec register catalog."""

from __future__ import annotations

import pytest

from pyfroniusmodbus.registers import (
    COMMON,
    COMMON_BLOCK,
    FRONIUS,
    I10X,
    I10X_BLOCK,
    I10X_REGISTERS,
    I11X,
    I11X_BLOCK,
    I11X_REGISTERS,
    I160,
    I160_BLOCK,
    INVERTER_END_BLOCK,
    INVERTER_EXTENSION_BLOCKS,
    M20X,
    M20X_BLOCK,
    M20X_REGISTERS,
    M21X,
    M21X_BLOCK,
    M21X_REGISTERS,
    METER_END_BLOCK,
    NAMEPLATE,
    NAMEPLATE_BLOCK,
    PRIMARY_BLOCKS,
    STORAGE,
    STORAGE_BLOCK,
    STORAGE_BLOCK_SIZE,
    WIRE_TYPE_WORDS,
    ModelBlock,
    RegisterDescriptor,
    WireType,
    build_index,
    doc_address,
    end_block_candidates,
)


class TestAddressing:
    """Tests for 0-based addressing of the Common block."""

    def test_doc_address(self) -> None:
        assert doc_address(40001) == 40000

    def test_common_fields(self) -> None:
        assert COMMON["SID"].address == 40000
        assert COMMON["ID"].address == 40002
        assert COMMON["L"].address == 40003
        assert COMMON["MN"].address == 40004
        assert COMMON["MD"].address == 40020
        assert COMMON["OPT"].address == 40036
        assert COMMON["VR"].address == 40044
        assert COMMON["SN"].address == 40052
        assert COMMON["DA"].address == 40068

    def test_common_block_reaches_da(self) -> None:
        assert COMMON_BLOCK.end == COMMON["DA"].end

    def test_primary_block_follows_common(self) -> None:
        for block in (I10X_BLOCK, I11X_BLOCK, M20X_BLOCK, M21X_BLOCK):
            assert block.address == COMMON_BLOCK.end == 40069


class TestDescriptors:
    """Tests for descriptor consistency across every catalog table."""

    @pytest.mark.parametrize(
        "registers",
        [I10X_REGISTERS, I11X_REGISTERS, M20X_REGISTERS, M21X_REGISTERS],
        ids=["I10X", "I11X", "M20X", "M21X"],
    )
    def test_word_count_matches_wire_type(self, registers: tuple[RegisterDescriptor, ...]) -> None:
        for descriptor in registers:
            if descriptor.wire_type in WIRE_TYPE_WORDS:
                assert descriptor.word_count == WIRE_TYPE_WORDS[descriptor.wire_type], (
                    descriptor.name
                )

    @pytest.mark.parametrize(
        ("registers", "block"),
        [
            (I10X_REGISTERS, I10X_BLOCK),
            (I11X_REGISTERS, I11X_BLOCK),
            (M20X_REGISTERS, M20X_BLOCK),
            (M21X_REGISTERS, M21X_BLOCK),
        ],
        ids=["I10X", "I11X", "M20X", "M21X"],
    )
    def test_fields_inside_block(
        self, registers: tuple[RegisterDescriptor, ...], block: ModelBlock
    ) -> None:
        for descriptor in registers:
            assert block.address <= descriptor.address
            assert descriptor.end <= block.end, descriptor.name

    def test_float_models_have_no_scale_factors(self) -> None:
        for descriptor in (*I11X_REGISTERS, *M21X_REGISTERS):
            assert descriptor.scale_ref is None, descriptor.name

    def test_scale_factors_are_signed(self) -> None:
        for descriptor in (*I10X_REGISTERS, *M20X_REGISTERS):
            if descriptor.scale_ref is not None:
                assert descriptor.scale_ref.wire_type is WireType.I16

    def test_float_fields_are_f32(self) -> None:
        assert I11X["W"].wire_type is WireType.F32
        assert I11X["W"].address == 40091
        assert M21X["TOTWH_EXP"].wire_type is WireType.F32

    def test_integer_fields(self) -> None:
        assert I10X["PF"].address == 40091
        assert I10X["PF"].wire_type is WireType.I16
        assert I10X["PF"].scale_ref is not None
        assert I10X["PF"].scale_ref.address == 40092
        assert I10X["WH"].wire_type is WireType.U32
        assert M20X["TOTWH_EXP"].wire_type is WireType.U32
        assert M20X["TOTWH_EXP"].scale_ref is not None

    def test_duplicate_names_rejected(self) -> None:
        descriptor = RegisterDescriptor("X", 1, 1, WireType.U16)
        with pytest.raises(ValueError, match="Duplicate"):
            build_index((descriptor, descriptor))

    def test_shifted_moves_scale_factor(self) -> None:
        descriptor = I160["INPUT1_DCA"]
        moved = descriptor.shifted(10)
        assert moved.address == descriptor.address + 10
        assert moved.scale_ref is not None
        assert descriptor.scale_ref is not None
        assert moved.scale_ref.address == descriptor.scale_ref.address + 10

    def test_shifted_by_zero_is_identity(self) -> None:
        descriptor = I160["INPUT1_DCA"]
        assert descriptor.shifted(0) is descriptor


class TestExtensionBlocks:
    """Tests for extension block placement."""

    def test_nameplate_follows_int_inverter(self) -> None:
        assert NAMEPLATE_BLOCK.address == I10X_BLOCK.end == 40121

    def test_nameplate_float_address(self) -> None:
        assert NAMEPLATE_BLOCK.base_address(use_float=True) == I11X_BLOCK.end == 40131

    def test_extension_blocks_are_contiguous(self) -> None:
        for current, following in zip(
            INVERTER_EXTENSION_BLOCKS, INVERTER_EXTENSION_BLOCKS[1:], strict=False
        ):
            assert current.end == following.address, current.name

    def test_mppt_addresses(self) -> None:
        assert I160_BLOCK.address == 40253
        assert I160_BLOCK.base_address(use_float=True) == 40263
        assert I160["N"].address == 40261

    def test_extension_values_stay_integer(self) -> None:
        assert I160["INPUT1_DCW"].wire_type is WireType.U16
        assert NAMEPLATE["WRTG"].scale_ref is not None
        assert STORAGE["CHASTATE"].scale_ref is not None

    def test_storage_block(self) -> None:
        assert STORAGE_BLOCK.address == 40303
        assert STORAGE_BLOCK_SIZE == 26

    def test_primary_blocks_keyed_by_model(self) -> None:
        assert PRIMARY_BLOCKS[101] is I10X_BLOCK
        assert PRIMARY_BLOCKS[113] is I11X_BLOCK
        assert PRIMARY_BLOCKS[202] is M20X_BLOCK
        assert PRIMARY_BLOCKS[211] is M21X_BLOCK


class TestEndBlock:
    """Tests for End sentinel candidate addresses."""

    def test_inverter_candidates_int(self) -> None:
        assert end_block_candidates(INVERTER_END_BLOCK, use_float=False) == (40303, 40329)

    def test_inverter_candidates_float(self) -> None:
        assert end_block_candidates(INVERTER_END_BLOCK, use_float=True) == (40313, 40339)

    def test_meter_candidates(self) -> None:
        assert end_block_candidates(METER_END_BLOCK, use_float=False) == (M20X_BLOCK.end,)
        assert end_block_candidates(METER_END_BLOCK, use_float=True) == (M21X_BLOCK.end,)
        assert M20X_BLOCK.end == 40176
        assert M21X_BLOCK.end == 40195


class TestFroniusRegisters:
    """Tests for the proprietary register table."""

    def test_addresses(self) -> None:
        assert FRONIUS["ACTIVE_STATE_CODE"].address == 214
        assert FRONIUS["MODEL_TYPE"].address == 216
        assert FRONIUS["SITE_POWER"].address == 500
        assert FRONIUS["SITE_ENERGY_TOTAL"].address == 510

    def test_site_energy_is_u64(self) -> None:
        for name in ("SITE_ENERGY_DAY", "SITE_ENERGY_YEAR", "SITE_ENERGY_TOTAL"):
            assert FRONIUS[name].wire_type is WireType.U64
            assert FRONIUS[name].word_count == 4
