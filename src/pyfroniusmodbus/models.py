"""Data models for recognized Fronius devices.

Enumerations select quantities (phases, phase pairs, DC inputs,
temperature sensors, reactive-energy quadrants) and the data classes
carry decoded results. All physical values are already scaled:

- Voltage: Volts (V)
- Current: Amperes (A)
- Power: Watts (W), volt-amperes (VA), volt-amperes reactive (var)
- Energy: Watt-hours (Wh, VAh, varh)
- Temperature: Celsius (°C)
- Frequency: Hertz (Hz)
- Power factor: percent, unchanged from the device (see ``ac_power_factor``)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .events import StorageControlMode
from .snapshot import words_at

if TYPE_CHECKING:
    from .events import ChargeStatus, StateUnknown


class Encoding(str, Enum):
    """SunSpec register model of the primary block."""

    INT_SF = "int+sf"
    FLOAT = "float"


class DeviceKind(str, Enum):
    """Kind of SunSpec device behind a unit address."""

    INVERTER = "inverter"
    METER = "meter"


class Phase(str, Enum):
    """AC phase tag. TOTAL sums phases, AVERAGE averages voltages."""

    TOTAL = "total"
    AVERAGE = "average"
    A = "a"
    B = "b"
    C = "c"


class PhasePair(str, Enum):
    """Phase-to-phase voltage tag."""

    AVERAGE = "average"
    AB = "ab"
    BC = "bc"
    CA = "ca"


class Input(str, Enum):
    """DC input tag. TOTAL is the inverter-wide DC value."""

    TOTAL = "total"
    A = "a"
    B = "b"


class TemperatureKind(str, Enum):
    """Inverter temperature sensor."""

    CABINET = "cabinet"
    HEAT_SINK = "heat_sink"
    TRANSFORMER = "transformer"
    OTHER = "other"


class Quadrant(str, Enum):
    """Reactive-energy power quadrant (Q1/Q2 imported, Q3/Q4 exported)."""

    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    Q4 = "q4"


class EnergyPeriod(str, Enum):
    """Period of the Fronius site energy counters."""

    DAY = "day"
    YEAR = "year"
    TOTAL = "total"


@dataclass(frozen=True)
class Identity:
    """Identity strings and unit address decoded from the Common block."""

    manufacturer: str = ""
    model: str = ""
    options: str = ""
    firmware_version: str = ""
    serial_number: str = ""
    unit_address: int = 0  # raw DA register, validated on access

    def to_dict(self) -> dict[str, Any]:
        return {
            "manufacturer": self.manufacturer,
            "model": self.model,
            "options": self.options,
            "firmware_version": self.firmware_version,
            "serial_number": self.serial_number,
            "unit_address": self.unit_address,
        }


@dataclass(frozen=True)
class DeviceSnapshot:
    """Immutable result of a successful recognition or refresh.

    Accessors only ever read from a DeviceSnapshot; a new instance replaces
    the old one on every ``validate()`` / ``refresh()``.
    """

    words: Mapping[int, int]
    kind: DeviceKind
    encoding: Encoding
    model_id: int
    phase_count: int
    identity: Identity
    has_storage_block: bool = False
    input_count: int = 0  # I160 N register, 0 without a Multi MPPT block

    @property
    def use_float(self) -> bool:
        return self.encoding is Encoding.FLOAT

    @property
    def manufacturer(self) -> str:
        return self.identity.manufacturer

    @property
    def model_name(self) -> str:
        return self.identity.model

    @property
    def option_version(self) -> str:
        return self.identity.options

    @property
    def firmware_version(self) -> str:
        return self.identity.firmware_version

    @property
    def serial_number(self) -> str:
        return self.identity.serial_number

    @property
    def modbus_unit_address(self) -> int:
        return self.identity.unit_address

    def word(self, address: int) -> int:
        """Return the raw word at *address*.

        Raises:
            RegisterNotFilledError: If the address was never read.
        """
        return words_at(self.words, address, 1)[0]

    def slice(self, address: int, count: int) -> list[int]:
        """Return *count* raw words starting at *address*."""
        return words_at(self.words, address, count)


@dataclass(frozen=True)
class Nameplate:
    """Nameplate ratings (model 120). None where the device reports no value."""

    der_type: int = 0  # 4 = PV, 82 = PV + storage
    power_rating: float | None = None  # W
    apparent_power_rating: float | None = None  # VA
    reactive_power_ratings: tuple[float | None, ...] = ()  # var, Q1..Q4
    current_rating: float | None = None  # A
    power_factor_ratings: tuple[float | None, ...] = ()  # cos(phi), Q1..Q4
    energy_rating: float | None = None  # Wh
    capacity_rating: float | None = None  # Ah
    max_charge_rate: float | None = None  # W
    max_discharge_rate: float | None = None  # W


@dataclass(frozen=True)
class StorageStatus:
    """Basic Storage Control readings (model 124)."""

    max_charge_power: float | None = None  # W
    charge_ramp_rate: float | None = None  # % WCHAMAX/s
    discharge_ramp_rate: float | None = None  # % WCHAMAX/s
    control_mode: StorageControlMode = StorageControlMode(0)
    max_charge_apparent_power: float | None = None  # VA
    min_reserve: float | None = None  # %
    state_of_charge: float | None = None  # %
    available_capacity: float | None = None  # Ah
    battery_voltage: float | None = None  # V
    charge_status: ChargeStatus | StateUnknown | None = None
    discharge_rate: float | None = None  # % of max discharge rate
    charge_rate: float | None = None  # % of max charge rate
    rate_window: int = 0  # s
    rate_revert_timeout: int = 0  # s
    rate_ramp_time: int = 0  # s
    grid_charging: bool = False


__all__ = [
    "DeviceKind",
    "DeviceSnapshot",
    "Encoding",
    "EnergyPeriod",
    "Identity",
    "Input",
    "Nameplate",
    "Phase",
    "PhasePair",
    "Quadrant",
    "StorageStatus",
    "TemperatureKind",
]
