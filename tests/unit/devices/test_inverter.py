"""Tests for the Inverter device."""

from __future__ import annotations

import math

import pytest
from conftest import (
    FakeTransport,
    build_inverter_image,
    build_meter_image,
    put_f32,
    put_field,
    put_string,
    put_u32,
    put_words,
)

from pyfroniusmodbus import DeviceConfig, Encoding, Input, Inverter, Phase, PhasePair
from pyfroniusmodbus.accessors import apply_scale, read_scaled_optional
from pyfroniusmodbus.events import (
    ChargeStatus,
    DcInputState,
    InverterEvent,
    OperatingState,
    StateUnknown,
    StorageControlMode,
)
from pyfroniusmodbus.exceptions import (
    InvalidModbusAddressError,
    NotSunSpecError,
    NotValidatedError,
    RegisterNotFilledError,
    StorageNotPresentError,
    UnknownModelError,
    UnsupportedForInputCountError,
    UnsupportedForPhaseCountError,
    UnsupportedOnHybridInverterError,
    UnsupportedQuantityError,
    UnsupportedWireTypeError,
)
from pyfroniusmodbus.models import EnergyPeriod, TemperatureKind
from pyfroniusmodbus.registers import (
    COMMON,
    FRONIUS,
    I10X,
    I11X,
    I160,
    NAMEPLATE,
    STORAGE,
    ModelType,
)

FLOAT_OFFSET = 10


async def _validated(
    image: dict[int, int], config: DeviceConfig | None = None
) -> tuple[Inverter, FakeTransport]:
    transport = FakeTransport(image)
    inverter = Inverter(transport, config)
    await inverter.validate()
    return inverter, transport


class TestLifecycle:
    """Tests for validation state handling."""

    def test_accessor_before_validate(self) -> None:
        inverter = Inverter(FakeTransport(build_inverter_image(113)))

        assert inverter.is_valid is False
        with pytest.raises(NotValidatedError):
            inverter.ac_active_power()
        with pytest.raises(NotValidatedError):
            inverter.identity()

    def test_invalid_unit_address_rejected(self) -> None:
        with pytest.raises(ValueError):
            Inverter(FakeTransport(), DeviceConfig(unit_address=0))

    @pytest.mark.asyncio
    async def test_failed_validate_invalidates(self) -> None:
        inverter, transport = await _validated(build_inverter_image(113))
        assert inverter.is_valid is True

        put_words(transport.image, 40000, [0, 0])
        with pytest.raises(NotSunSpecError):
            await inverter.validate()

        assert inverter.is_valid is False
        with pytest.raises(NotValidatedError):
            inverter.ac_frequency()

    @pytest.mark.asyncio
    async def test_meter_model_rejected(self) -> None:
        inverter = Inverter(FakeTransport(build_meter_image(213)))

        with pytest.raises(UnknownModelError):
            await inverter.validate()
        assert inverter.is_valid is False

    @pytest.mark.asyncio
    async def test_refresh_requires_validate(self) -> None:
        inverter = Inverter(FakeTransport(build_inverter_image(113)))

        with pytest.raises(NotValidatedError):
            await inverter.refresh()

    @pytest.mark.asyncio
    async def test_refresh_updates_values(self) -> None:
        image = build_inverter_image(113)
        put_f32(image, I11X["W"].address, 1000.0)
        inverter, transport = await _validated(image)
        assert inverter.ac_active_power() == 1000.0

        put_f32(transport.image, I11X["W"].address, 2500.0)
        await inverter.refresh()

        assert inverter.ac_active_power() == 2500.0
        assert inverter.last_refresh is not None

    @pytest.mark.asyncio
    async def test_identity(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113))

        identity = inverter.identity()
        assert identity.manufacturer == "Fronius"
        assert identity.model == "Symo 10.0-3-M"
        assert identity.options == "3.28.1-3"
        assert identity.firmware_version == "0.3.30.2"
        assert identity.serial_number == "28136344"
        assert inverter.unit_address() == 1
        assert inverter.model_id() == 113
        assert inverter.to_dict()["identity"]["serial_number"] == "28136344"

    @pytest.mark.asyncio
    async def test_serial_number_may_change(self) -> None:
        inverter, transport = await _validated(build_inverter_image(113))
        put_string(transport.image, COMMON["SN"], "PMC12345")
        identity = await inverter.refresh_identity()

        assert identity.serial_number == "PMC12345"
        assert inverter.identity().serial_number == "PMC12345"

    @pytest.mark.asyncio
    async def test_invalid_modbus_address(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113, unit_address=0))

        with pytest.raises(InvalidModbusAddressError):
            inverter.unit_address()


class TestAcFloat:
    """Tests for the float register model (I11X)."""

    @pytest.mark.asyncio
    async def test_three_phase_clear_day(self) -> None:
        image = build_inverter_image(113)
        put_words(image, I11X["W"].address, [0x4780, 0x0000])
        inverter, _ = await _validated(image)

        assert inverter.encoding() is Encoding.FLOAT
        assert inverter.phase_count() == 3
        assert inverter.ac_active_power() == 65536.0

    @pytest.mark.asyncio
    async def test_phase_values(self) -> None:
        image = build_inverter_image(113)
        put_f32(image, I11X["APHA"].address, 4.5)
        put_f32(image, I11X["PHVPHC"].address, 231.5)
        put_f32(image, I11X["PPVPHCA"].address, 400.0)
        put_f32(image, I11X["FREQ"].address, 50.0)
        inverter, _ = await _validated(image)

        assert inverter.ac_current(Phase.A) == 4.5
        assert inverter.ac_voltage(Phase.C) == 231.5
        assert inverter.ac_voltage_phase_to_phase(PhasePair.CA) == 400.0
        assert inverter.ac_frequency() == 50.0

    @pytest.mark.asyncio
    async def test_unpopulated_temperature_is_nan(self) -> None:
        image = build_inverter_image(113)
        put_f32(image, I11X["TMPCAB"].address, 42.0)
        put_words(image, I11X["TMPSNK"].address, [0x7FC0, 0x0000])
        inverter, _ = await _validated(image)

        assert inverter.temperatures(TemperatureKind.CABINET) == 42.0
        assert math.isnan(inverter.temperatures(TemperatureKind.HEAT_SINK))


class TestAcInteger:
    """Tests for the integer + scale factor register model (I10X)."""

    @pytest.mark.asyncio
    async def test_power_factor(self) -> None:
        image = build_inverter_image(101)
        put_words(image, I10X["PF"].address, [0xFFF6])
        put_words(image, I10X["PF"].scale_ref.address, [0xFFFE])  # type: ignore[union-attr]
        inverter, _ = await _validated(image)

        assert inverter.ac_power_factor() == pytest.approx(-0.10)
        assert inverter.ac_power_factor() == -10 * 10**-2

    @pytest.mark.asyncio
    async def test_scaled_values(self) -> None:
        image = build_inverter_image(103)
        put_field(image, I10X["W"], 5123, scale=0)
        put_field(image, I10X["APHB"], 1234, scale=-2)
        put_field(image, I10X["WH"], 0x0001_0000, scale=1)
        put_field(image, I10X["DCV"], 6123, scale=-1)
        put_field(image, I10X["VAR"], -150, scale=0)
        inverter, _ = await _validated(image)

        assert inverter.ac_active_power() == 5123.0
        assert inverter.ac_current(Phase.B) == 12.34
        assert inverter.ac_lifetime_energy() == 655360.0
        assert inverter.dc_voltage() == pytest.approx(612.3)
        assert inverter.ac_reactive_power() == -150.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("raw", "expected"), [(5, math.inf), (-5, -math.inf), (0, 0.0)])
    async def test_huge_scale_factor_saturates(self, raw: int, expected: float) -> None:
        image = build_inverter_image(103)
        put_field(image, I10X["W"], raw, scale=0x7FFF)
        inverter, _ = await _validated(image)

        assert inverter.ac_active_power() == expected

    @pytest.mark.parametrize(
        ("raw", "exponent", "expected"),
        [
            (5, 400, math.inf),
            (-5, 400, -math.inf),
            (5, 3, 5000.0),
            (-10, -2, -0.1),
            (7, -0x8000, 0.0),
            (1.5, 2, 150.0),
        ],
    )
    def test_apply_scale(self, raw: int | float, exponent: int, expected: float) -> None:
        assert apply_scale(raw, exponent) == expected

    @pytest.mark.asyncio
    async def test_string_field_has_no_scaled_value(self) -> None:
        inverter, _ = await _validated(build_inverter_image(103))

        with pytest.raises(UnsupportedWireTypeError):
            read_scaled_optional(inverter.snapshot, COMMON["MN"])

    @pytest.mark.asyncio
    async def test_single_phase_tags(self) -> None:
        inverter, _ = await _validated(build_inverter_image(101))

        inverter.ac_current(Phase.TOTAL)
        inverter.ac_current(Phase.A)
        with pytest.raises(UnsupportedForPhaseCountError):
            inverter.ac_current(Phase.B)
        with pytest.raises(UnsupportedForPhaseCountError):
            inverter.ac_voltage(Phase.C)
        with pytest.raises(UnsupportedForPhaseCountError):
            inverter.ac_voltage_phase_to_phase(PhasePair.AB)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("model_id", [101, 102, 103, 111, 112, 113])
    async def test_phase_count_matches_currents(self, model_id: int) -> None:
        inverter, _ = await _validated(build_inverter_image(model_id))

        available = 0
        for phase in (Phase.A, Phase.B, Phase.C):
            try:
                inverter.ac_current(phase)
            except UnsupportedForPhaseCountError:
                continue
            available += 1

        assert available == inverter.phase_count() == model_id % 10

    @pytest.mark.asyncio
    async def test_average_voltage_not_on_inverters(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113))

        with pytest.raises(UnsupportedQuantityError):
            inverter.ac_voltage(Phase.AVERAGE)


class TestDcInputs:
    """Tests for the Multi MPPT block."""

    @pytest.mark.asyncio
    async def test_float_device_reads_offset_block(self) -> None:
        image = build_inverter_image(113)
        put_field(image, I160["INPUT1_DCW"], 1234, scale=-1, offset=FLOAT_OFFSET)
        put_field(image, I160["INPUT2_DCV"], 4500, scale=-1, offset=FLOAT_OFFSET)
        put_field(image, I160["INPUT1_DCWH"], 70000, scale=0, offset=FLOAT_OFFSET)
        inverter, _ = await _validated(image)

        assert inverter.input_count() == 2
        assert inverter.dc_power(Input.A) == 123.4
        assert inverter.dc_voltage(Input.B) == 450.0
        assert inverter.dc_energy(Input.A) == 70000.0

    @pytest.mark.asyncio
    async def test_int_device_reads_base_block(self) -> None:
        image = build_inverter_image(101)
        put_field(image, I160["INPUT2_DCA"], 815, scale=-2)
        inverter, _ = await _validated(image)

        assert inverter.dc_current(Input.B) == 8.15

    @pytest.mark.asyncio
    async def test_input_state_and_label(self) -> None:
        image = build_inverter_image(113)
        put_field(image, I160["INPUT1_DCST"], 4, offset=FLOAT_OFFSET)
        put_field(image, I160["INPUT2_DCST"], 42, offset=FLOAT_OFFSET)
        inverter, _ = await _validated(image)

        assert inverter.dc_input_state(Input.A) is DcInputState.MPPT
        assert inverter.dc_input_state(Input.B) == StateUnknown(42)
        assert inverter.dc_input_label(Input.A) == "String 1"
        assert inverter.dc_input_label(Input.B) == "String 2"

    @pytest.mark.asyncio
    async def test_input_count_limits_tags(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113, inputs=1))

        inverter.dc_power(Input.A)
        with pytest.raises(UnsupportedForInputCountError):
            inverter.dc_power(Input.B)

    @pytest.mark.asyncio
    async def test_no_mppt_block(self) -> None:
        image = build_inverter_image(113)
        put_words(image, I160["ID"].address + FLOAT_OFFSET, [0])
        inverter, _ = await _validated(image)

        assert inverter.input_count() == 0
        with pytest.raises(UnsupportedForInputCountError):
            inverter.dc_current(Input.A)
        inverter.dc_current()


class TestStatus:
    """Tests for operating state and events."""

    @pytest.mark.asyncio
    async def test_operating_state(self) -> None:
        image = build_inverter_image(113)
        put_words(image, I11X["ST"].address, [4])
        put_words(image, I11X["STVND"].address, [7])
        inverter, transport = await _validated(image)

        assert inverter.operating_state() is OperatingState.MPPT
        assert inverter.vendor_operating_state() == 7

        put_words(transport.image, I11X["ST"].address, [14])
        await inverter.refresh()
        assert inverter.operating_state() == StateUnknown(14)

    @pytest.mark.asyncio
    async def test_event_flags(self) -> None:
        image = build_inverter_image(101)
        put_u32(image, I10X["EVT1"].address, 0x0081)
        put_u32(image, I10X["EVTVND2"].address, 0x0000_0400)
        inverter, _ = await _validated(image)

        assert inverter.events() == 0x81
        assert inverter.event_flags() == [InverterEvent.GROUND_FAULT, InverterEvent.OVER_TEMP]
        assert inverter.vendor_events(2) == 0x400

    @pytest.mark.asyncio
    async def test_unknown_vendor_bank(self) -> None:
        inverter, _ = await _validated(build_inverter_image(101))

        with pytest.raises(UnsupportedQuantityError):
            inverter.vendor_events(4)


class TestExtensionBlocks:
    """Tests for Nameplate and Basic Storage Control."""

    @pytest.mark.asyncio
    async def test_nameplate(self) -> None:
        image = build_inverter_image(113)
        put_field(image, NAMEPLATE["WRTG"], 100, scale=2, offset=FLOAT_OFFSET)
        put_field(image, NAMEPLATE["VARTG"], 0xFFFF, scale=0, offset=FLOAT_OFFSET)
        put_field(image, NAMEPLATE["ARTG"], 1600, scale=-2, offset=FLOAT_OFFSET)
        put_words(image, NAMEPLATE["PFRTG_SF"].address + FLOAT_OFFSET, [-0x8000])
        inverter, _ = await _validated(image)

        nameplate = inverter.nameplate()

        assert nameplate.der_type == 4
        assert nameplate.power_rating == 10000.0
        assert nameplate.apparent_power_rating is None
        assert nameplate.current_rating == 16.0
        assert nameplate.power_factor_ratings == (None, None, None, None)
        assert len(nameplate.reactive_power_ratings) == 4

    @pytest.mark.asyncio
    async def test_nameplate_missing(self) -> None:
        image = build_inverter_image(101)
        put_words(image, NAMEPLATE["ID"].address, [0])
        inverter, _ = await _validated(image)

        with pytest.raises(UnknownModelError):
            inverter.nameplate()

    @pytest.mark.asyncio
    async def test_storage(self) -> None:
        image = build_inverter_image(113, storage=True, der_type=82)
        put_field(image, STORAGE["CHASTATE"], 655, scale=-1, offset=FLOAT_OFFSET)
        put_field(image, STORAGE["WCHAMAX"], 5120, scale=0, offset=FLOAT_OFFSET)
        put_field(image, STORAGE["CHAST"], 4, offset=FLOAT_OFFSET)
        put_field(image, STORAGE["CHAGRISET"], 1, offset=FLOAT_OFFSET)
        put_field(image, STORAGE["STORCTL_MOD"], 0b11, offset=FLOAT_OFFSET)
        put_field(image, STORAGE["INBATV"], 0xFFFF, offset=FLOAT_OFFSET)
        inverter, _ = await _validated(image)

        storage = inverter.storage()

        assert inverter.has_storage_block is True
        assert inverter.is_hybrid is True
        assert storage.state_of_charge == 65.5
        assert storage.max_charge_power == 5120.0
        assert storage.charge_status is ChargeStatus.CHARGING
        assert storage.grid_charging is True
        assert storage.battery_voltage is None
        assert storage.control_mode == StorageControlMode.CHARGE | StorageControlMode.DISCHARGE
        assert isinstance(storage.control_mode, StorageControlMode)

    @pytest.mark.asyncio
    async def test_storage_not_implemented_charge_status(self) -> None:
        image = build_inverter_image(103, storage=True)
        put_field(image, STORAGE["CHAST"], 0xFFFF)
        inverter, _ = await _validated(image)

        assert inverter.storage().charge_status is None
        assert inverter.storage().control_mode == StorageControlMode(0)

    @pytest.mark.asyncio
    async def test_storage_absent(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113))

        assert inverter.is_hybrid is False
        with pytest.raises(StorageNotPresentError):
            inverter.storage()

    @pytest.mark.asyncio
    async def test_hybrid_by_der_type(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113, der_type=82))

        assert inverter.has_storage_block is False
        assert inverter.is_hybrid is True


class TestFroniusRegisters:
    """Tests for site totals and status registers."""

    @pytest.mark.asyncio
    async def test_site_values(self) -> None:
        image = build_inverter_image(113)
        put_u32(image, FRONIUS["SITE_POWER"].address, 12345)
        put_words(image, FRONIUS["SITE_ENERGY_TOTAL"].address, [0, 0, 0x0001, 0x0000])
        put_words(image, FRONIUS["SITE_ENERGY_DAY"].address, [0, 0, 0, 5000])
        put_words(image, FRONIUS["ACTIVE_STATE_CODE"].address, [7])
        put_words(image, FRONIUS["MODEL_TYPE"].address, [1])
        inverter, _ = await _validated(image, DeviceConfig(read_fronius_registers=True))

        assert inverter.site_power() == 12345.0
        assert inverter.site_energy(EnergyPeriod.TOTAL) == 65536.0
        assert inverter.site_energy(EnergyPeriod.DAY) == 5000.0
        assert inverter.active_state_code() == 7
        assert inverter.model_type() is ModelType.FLOAT

    @pytest.mark.asyncio
    async def test_unknown_model_type(self) -> None:
        image = build_inverter_image(113)
        put_words(image, FRONIUS["MODEL_TYPE"].address, [9])
        inverter, _ = await _validated(image, DeviceConfig(read_fronius_registers=True))

        assert inverter.model_type() == 9

    @pytest.mark.asyncio
    async def test_not_read_without_config(self) -> None:
        inverter, _ = await _validated(build_inverter_image(113))

        with pytest.raises(RegisterNotFilledError):
            inverter.site_power()

    @pytest.mark.asyncio
    async def test_active_state_code_on_hybrid(self) -> None:
        image = build_inverter_image(113, storage=True)
        inverter, _ = await _validated(image, DeviceConfig(read_fronius_registers=True))

        with pytest.raises(UnsupportedOnHybridInverterError):
            inverter.active_state_code()
