"""Fronius inverter device.

Measurements come from the primary inverter block (I10X int+SF or I11X
float) and, per DC input, from the Multi MPPT extension (160). Ratings
and battery state come from the Nameplate (120) and Basic Storage
Control (124) blocks; those extension blocks are always integer + scale
factor and sit 10 words further on float-model devices.

Site totals and the active state code are Fronius proprietary registers,
available when ``DeviceConfig.read_fronius_registers`` is enabled.
"""

from __future__ import annotations

import logging
from typing import Any

from pyfroniusmodbus.accessors import Quantity, check_input, read_scaled_optional
from pyfroniusmodbus.events import (
    ChargeStatus,
    DcInputState,
    InverterEvent,
    OperatingState,
    StateUnknown,
    StorageControlMode,
    expand_flags,
    operating_state_from_raw,
    state_from_raw,
)
from pyfroniusmodbus.exceptions import (
    StorageNotPresentError,
    UnknownModelError,
    UnsupportedOnHybridInverterError,
)
from pyfroniusmodbus.models import (
    DeviceKind,
    EnergyPeriod,
    Input,
    Nameplate,
    StorageStatus,
    TemperatureKind,
)
from pyfroniusmodbus.registers.base import ModelBlock, RegisterDescriptor
from pyfroniusmodbus.registers.fronius import FRONIUS, ModelType
from pyfroniusmodbus.registers.nameplate import NAMEPLATE, NAMEPLATE_BLOCK
from pyfroniusmodbus.registers.storage import STORAGE, STORAGE_BLOCK

from .base import FroniusDevice

_LOGGER = logging.getLogger(__name__)

#: Nameplate DERTYP values.
DER_TYPE_PV = 4
DER_TYPE_PV_STORAGE = 82

#: CHAST value reported when the register is not implemented.
_CHAST_NOT_IMPLEMENTED = 0xFFFF

_SITE_ENERGY = {
    EnergyPeriod.DAY: "SITE_ENERGY_DAY",
    EnergyPeriod.YEAR: "SITE_ENERGY_YEAR",
    EnergyPeriod.TOTAL: "SITE_ENERGY_TOTAL",
}


class Inverter(FroniusDevice):
    """Fronius PV or hybrid inverter (SunSpec models 101-103, 111-113).

    Example:
        ```python
        inverter = Inverter(transport, DeviceConfig(unit_address=1))
        await inverter.validate()

        print(f"AC power: {inverter.ac_active_power()} W")
        print(f"String A: {inverter.dc_power(Input.A)} W")
        if inverter.has_storage_block:
            print(f"SoC: {inverter.storage().state_of_charge} %")
        ```
    """

    kind = DeviceKind.INVERTER

    # ------------------------------------------------------------------
    # AC
    # ------------------------------------------------------------------

    def ac_active_power(self) -> float:
        """AC active power in W."""
        return self._scaled(Quantity.AC_ACTIVE_POWER)

    def ac_apparent_power(self) -> float:
        """AC apparent power in VA."""
        return self._scaled(Quantity.AC_APPARENT_POWER)

    def ac_reactive_power(self) -> float:
        """AC reactive power in var."""
        return self._scaled(Quantity.AC_REACTIVE_POWER)

    def ac_power_factor(self) -> float:
        """Power factor as reported by the device, in percent.

        The value is scaled but otherwise unchanged; divide by 100 for a
        dimensionless ratio.
        """
        return self._scaled(Quantity.AC_POWER_FACTOR)

    def ac_lifetime_energy(self) -> float:
        """AC lifetime energy in Wh."""
        return self._scaled(Quantity.AC_LIFETIME_ENERGY)

    # ------------------------------------------------------------------
    # DC
    # ------------------------------------------------------------------

    def input_count(self) -> int:
        """Number of DC inputs reported by the Multi MPPT block (0 without one)."""
        return self.snapshot.input_count

    def _input_scaled(self, quantity: Quantity, tag: Input) -> float:
        check_input(tag, self.snapshot.input_count)
        return self._scaled(quantity, tag)

    def dc_current(self, tag: Input = Input.TOTAL) -> float:
        """DC current in A, inverter-wide or for one MPPT input."""
        return self._input_scaled(Quantity.DC_CURRENT, tag)

    def dc_voltage(self, tag: Input = Input.TOTAL) -> float:
        """DC voltage in V, inverter-wide or for one MPPT input."""
        return self._input_scaled(Quantity.DC_VOLTAGE, tag)

    def dc_power(self, tag: Input = Input.TOTAL) -> float:
        """DC power in W, inverter-wide or for one MPPT input."""
        return self._input_scaled(Quantity.DC_POWER, tag)

    def dc_energy(self, tag: Input) -> float:
        """Lifetime DC energy of one MPPT input in Wh."""
        return self._input_scaled(Quantity.DC_ENERGY, tag)

    def dc_input_state(self, tag: Input) -> DcInputState | StateUnknown:
        check_input(tag, self.snapshot.input_count)
        return state_from_raw(int(self._raw(Quantity.DC_INPUT_STATE, tag)), DcInputState)

    def dc_input_events(self, tag: Input) -> int:
        """Raw DC input event bitfield (DCEVT)."""
        check_input(tag, self.snapshot.input_count)
        return int(self._raw(Quantity.DC_INPUT_EVENTS, tag))

    def dc_input_label(self, tag: Input) -> str:
        """Input label string (IDSTR), e.g. "String 1"."""
        check_input(tag, self.snapshot.input_count)
        return str(self._raw(Quantity.DC_INPUT_LABEL, tag)).strip()

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def temperatures(self, kind: TemperatureKind) -> float:
        """Temperature in °C of the given sensor.

        Fronius populates only the cabinet sensor; the others read back as
        "not implemented" (-3276.8 °C with SF -1, NaN in the float model).
        """
        return self._scaled(Quantity.TEMPERATURE, kind)

    def operating_state(self) -> OperatingState | StateUnknown:
        return operating_state_from_raw(int(self._raw(Quantity.OPERATING_STATE)))

    def vendor_operating_state(self) -> int:
        """Fronius vendor operating state (STVND), raw."""
        return int(self._raw(Quantity.VENDOR_OPERATING_STATE))

    def event_flags(self) -> list[InverterEvent]:
        """Active SunSpec inverter events decoded from EVT1."""
        return expand_flags(self.events(), InverterEvent)

    def vendor_events(self, bank: int) -> int:
        """Raw vendor event bitfield EVTVND1..3 (see ``events.VENDOR_EVENT_BANKS``)."""
        return int(self._raw(Quantity.VENDOR_EVENTS, bank))

    # ------------------------------------------------------------------
    # Extension blocks
    # ------------------------------------------------------------------

    def _extension(self, block: ModelBlock, descriptor: RegisterDescriptor) -> RegisterDescriptor:
        return descriptor.shifted(block.offset(self.snapshot.use_float))

    def _optional(self, block: ModelBlock, descriptor: RegisterDescriptor) -> float | None:
        return read_scaled_optional(
            self.snapshot,
            self._extension(block, descriptor),
            word_swap=self._config.word_swap,
            byte_swap=self._config.byte_swap,
        )

    def _ext_raw(self, block: ModelBlock, descriptor: RegisterDescriptor) -> Any:
        return self._read(self._extension(block, descriptor))

    def nameplate(self) -> Nameplate:
        """Ratings from the Nameplate block (120).

        Raises:
            UnknownModelError: If no Nameplate block sits at its address
        """
        model_id = int(self._ext_raw(NAMEPLATE_BLOCK, NAMEPLATE["ID"]))
        if model_id not in NAMEPLATE_BLOCK.model_ids:
            raise UnknownModelError(model_id)

        def rating(name: str) -> float | None:
            return self._optional(NAMEPLATE_BLOCK, NAMEPLATE[name])

        return Nameplate(
            der_type=int(self._ext_raw(NAMEPLATE_BLOCK, NAMEPLATE["DERTYP"])),
            power_rating=rating("WRTG"),
            apparent_power_rating=rating("VARTG"),
            reactive_power_ratings=tuple(rating(f"VARRTGQ{q}") for q in range(1, 5)),
            current_rating=rating("ARTG"),
            power_factor_ratings=tuple(rating(f"PFRTGQ{q}") for q in range(1, 5)),
            energy_rating=rating("WHRTG"),
            capacity_rating=rating("AHRRTG"),
            max_charge_rate=rating("MAXCHARTE"),
            max_discharge_rate=rating("MAXDISCHARTE"),
        )

    @property
    def is_hybrid(self) -> bool:
        """Whether this is a hybrid (PV + storage) inverter."""
        if self.snapshot.has_storage_block:
            return True
        der_type = int(self._ext_raw(NAMEPLATE_BLOCK, NAMEPLATE["DERTYP"]))
        return der_type == DER_TYPE_PV_STORAGE

    def storage(self) -> StorageStatus:
        """Battery state from the Basic Storage Control block (124).

        Raises:
            StorageNotPresentError: If the device has no storage block
        """
        if not self.snapshot.has_storage_block:
            raise StorageNotPresentError()

        def value(name: str) -> float | None:
            return self._optional(STORAGE_BLOCK, STORAGE[name])

        def raw(name: str) -> int:
            return int(self._ext_raw(STORAGE_BLOCK, STORAGE[name]))

        chast = raw("CHAST")
        return StorageStatus(
            max_charge_power=value("WCHAMAX"),
            charge_ramp_rate=value("WCHAGRA"),
            discharge_ramp_rate=value("WDISCHAGRA"),
            control_mode=StorageControlMode(raw("STORCTL_MOD")),
            max_charge_apparent_power=value("VACHAMAX"),
            min_reserve=value("MINRSVPCT"),
            state_of_charge=value("CHASTATE"),
            available_capacity=value("STORAVAL"),
            battery_voltage=value("INBATV"),
            charge_status=(
                None if chast == _CHAST_NOT_IMPLEMENTED else state_from_raw(chast, ChargeStatus)
            ),
            discharge_rate=value("OUTWRTE"),
            charge_rate=value("INWRTE"),
            rate_window=raw("INOUTWRTE_WINTMS"),
            rate_revert_timeout=raw("INOUTWRTE_RVRTTMS"),
            rate_ramp_time=raw("INOUTWRTE_RMPTMS"),
            grid_charging=raw("CHAGRISET") == 1,
        )

    # ------------------------------------------------------------------
    # Fronius proprietary registers
    # ------------------------------------------------------------------

    def active_state_code(self) -> int:
        """Fronius active state code (register 214).

        Raises:
            UnsupportedOnHybridInverterError: On hybrid inverters
            RegisterNotFilledError: Without ``read_fronius_registers``
        """
        if self.is_hybrid:
            raise UnsupportedOnHybridInverterError("ACTIVE_STATE_CODE")
        return int(self._read(FRONIUS["ACTIVE_STATE_CODE"]))

    def model_type(self) -> ModelType | int:
        """SunSpec model type configured on the Datamanager (register 216)."""
        raw = int(self._read(FRONIUS["MODEL_TYPE"]))
        try:
            return ModelType(raw)
        except ValueError:
            _LOGGER.debug("Unknown MODEL_TYPE value %d", raw)
            return raw

    def site_power(self) -> float:
        """Total AC power of all inverters on the Datamanager in W."""
        return float(self._read(FRONIUS["SITE_POWER"]))

    def site_energy(self, period: EnergyPeriod) -> float:
        """Site energy of all inverters in Wh for the given period."""
        return float(self._read(FRONIUS[_SITE_ENERGY[period]]))


__all__ = ["DER_TYPE_PV", "DER_TYPE_PV_STORAGE", "Inverter"]
