"""Operating states and event flag catalogs for Fronius devices.

**Operating states** (inverter ST register, I160 DCST, storage CHAST) are
ENUMERATED values: the register holds one integer that maps to exactly one
state. Values outside the declared range decode to :class:`StateUnknown`
rather than raising, so a firmware adding states does not break callers.

**Event registers** (EVT1, EVTVND1-3, meter EVT) are BITFIELDS. Each bit
position represents an independent condition and several may be active
at once. The flag classes are ``IntFlag`` so raw register values can be
tested directly (``InverterEvent.OVER_TEMP in InverterEvent(raw)``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import TypeVar

_F = TypeVar("_F", bound=IntFlag)


@dataclass(frozen=True)
class StateUnknown:
    """Raw state value outside the known enumeration."""

    raw: int

    @property
    def description(self) -> str:
        return f"Unknown state {self.raw}"


# ---------------------------------------------------------------------------
# Inverter operating state: enumerated, I10X/I11X ST
# ---------------------------------------------------------------------------


class OperatingState(IntEnum):
    """Inverter operating state (SunSpec ST, Fronius semantics)."""

    POWER_OFF = 1
    SLEEPING = 2
    STARTING = 3
    MPPT = 4
    THROTTLED = 5
    SHUTTING_DOWN = 6
    FAULT = 7
    STANDBY = 8
    NO_BUSINIT = 9
    NO_COMM_INV = 10
    SN_OVERCURRENT = 11
    BOOTLOAD = 12
    AFCI = 13

    @property
    def description(self) -> str:
        return OPERATING_STATE_DESCRIPTIONS[self]


OPERATING_STATE_DESCRIPTIONS: dict[OperatingState, str] = {
    OperatingState.POWER_OFF: "Off",
    OperatingState.SLEEPING: "Sleeping (auto-shutdown)",
    OperatingState.STARTING: "Starting up",
    OperatingState.MPPT: "Tracking power point",
    OperatingState.THROTTLED: "Forced power reduction",
    OperatingState.SHUTTING_DOWN: "Shutting down",
    OperatingState.FAULT: "One or more faults exist",
    OperatingState.STANDBY: "Standby",
    OperatingState.NO_BUSINIT: "No SolarNet communication",
    OperatingState.NO_COMM_INV: "No communication with inverter",
    OperatingState.SN_OVERCURRENT: "Overcurrent on SolarNet plug detected",
    OperatingState.BOOTLOAD: "Inverter is being updated",
    OperatingState.AFCI: "AFCI Event",
}


class DcInputState(IntEnum):
    """Operating state of a single MPPT input (I160 DCST)."""

    OFF = 1
    SLEEPING = 2
    STARTING = 3
    MPPT = 4
    THROTTLED = 5
    SHUTTING_DOWN = 6
    FAULT = 7
    STANDBY = 8
    TEST = 9
    RESERVED = 10


class ChargeStatus(IntEnum):
    """Charge status of the storage device (storage CHAST)."""

    OFF = 1
    EMPTY = 2
    DISCHARGING = 3
    CHARGING = 4
    FULL = 5
    HOLDING = 6
    TESTING = 7


_E = TypeVar("_E", bound=IntEnum)


def state_from_raw(raw: int, state_type: type[_E]) -> _E | StateUnknown:
    """Map a raw enumerated register value to *state_type* or StateUnknown."""
    try:
        return state_type(raw)
    except ValueError:
        return StateUnknown(raw)


def operating_state_from_raw(raw: int) -> OperatingState | StateUnknown:
    """Map the raw ST register to an :class:`OperatingState`.

    >>> operating_state_from_raw(4)
    <OperatingState.MPPT: 4>
    >>> operating_state_from_raw(0)
    StateUnknown(raw=0)
    """
    return state_from_raw(raw, OperatingState)


# ---------------------------------------------------------------------------
# Inverter events: bitfield, EVT1
# ---------------------------------------------------------------------------


class InverterEvent(IntFlag):
    """SunSpec inverter event flags (EVT1)."""

    GROUND_FAULT = 0x0001
    DC_OVER_VOLT = 0x0002
    AC_DISCONNECT = 0x0004
    DC_DISCONNECT = 0x0008
    GRID_DISCONNECT = 0x0010
    CABINET_OPEN = 0x0020
    MANUAL_SHUTDOWN = 0x0040
    OVER_TEMP = 0x0080
    OVER_FREQUENCY = 0x0100
    UNDER_FREQUENCY = 0x0200
    AC_OVER_VOLT = 0x0400
    AC_UNDER_VOLT = 0x0800
    BLOWN_STRING_FUSE = 0x1000
    UNDER_TEMP = 0x2000
    MEMORY_LOSS = 0x4000
    HW_TEST_FAILURE = 0x8000


INVERTER_EVENT_DESCRIPTIONS: dict[InverterEvent, str] = {
    InverterEvent.GROUND_FAULT: "Ground fault",
    InverterEvent.DC_OVER_VOLT: "DC over voltage",
    InverterEvent.AC_DISCONNECT: "AC disconnect open",
    InverterEvent.DC_DISCONNECT: "DC disconnect open",
    InverterEvent.GRID_DISCONNECT: "Grid shutdown",
    InverterEvent.CABINET_OPEN: "Cabinet open",
    InverterEvent.MANUAL_SHUTDOWN: "Manual shutdown",
    InverterEvent.OVER_TEMP: "Over temperature",
    InverterEvent.OVER_FREQUENCY: "Frequency above limit",
    InverterEvent.UNDER_FREQUENCY: "Frequency under limit",
    InverterEvent.AC_OVER_VOLT: "AC voltage above limit",
    InverterEvent.AC_UNDER_VOLT: "AC voltage under limit",
    InverterEvent.BLOWN_STRING_FUSE: "Blown string fuse",
    InverterEvent.UNDER_TEMP: "Under temperature",
    InverterEvent.MEMORY_LOSS: "Generic Memory or Communication error (internal)",
    InverterEvent.HW_TEST_FAILURE: "Hardware test failure",
}


# ---------------------------------------------------------------------------
# Fronius vendor events: bitfields, EVTVND1..EVTVND3
# ---------------------------------------------------------------------------


class VendorEvent1(IntFlag):
    """Fronius vendor event flags, bank 1 (EVTVND1)."""

    INSULATION_FAULT = 0x00000001
    GRID_ERROR = 0x00000002
    AC_OVERCURRENT = 0x00000004
    DC_OVERCURRENT = 0x00000008
    OVER_TEMP = 0x00000010
    POWER_LOW = 0x00000020
    DC_LOW = 0x00000040
    INTERMEDIATE_FAULT = 0x00000080
    FREQUENCY_HIGH = 0x00000100
    FREQUENCY_LOW = 0x00000200
    AC_VOLTAGE_HIGH = 0x00000400
    AC_VOLTAGE_LOW = 0x00000800
    DIRECT_CURRENT = 0x00001000
    RELAY_FAULT = 0x00002000
    POWER_STAGE_FAULT = 0x00004000
    CONTROL_FAULT = 0x00008000
    GC_GRID_VOLT_ERR = 0x00010000
    GC_GRID_FREQU_ERR = 0x00020000
    ENERGY_TRANSFER_FAULT = 0x00040000
    REF_POWER_SOURCE_AC = 0x00080000
    ANTI_ISLANDING_FAULT = 0x00100000
    FIXED_VOLTAGE_FAULT = 0x00200000
    MEMORY_FAULT = 0x00400000
    DISPLAY_FAULT = 0x00800000
    COMMUNICATION_FAULT = 0x01000000
    TEMP_SENSORS_FAULT = 0x02000000
    DC_AC_BOARD_FAULT = 0x04000000
    ENS_FAULT = 0x08000000
    FAN_FAULT = 0x10000000
    DEFECTIVE_FUSE = 0x20000000
    OUTPUT_CHOKE_FAULT = 0x40000000
    CONVERTER_RELAY_FAULT = 0x80000000


VENDOR_EVENT1_DESCRIPTIONS: dict[VendorEvent1, str] = {
    VendorEvent1.INSULATION_FAULT: "DC Insulation fault",
    VendorEvent1.GRID_ERROR: "Grid error",
    VendorEvent1.AC_OVERCURRENT: "Overcurrent AC",
    VendorEvent1.DC_OVERCURRENT: "Overcurrent DC",
    VendorEvent1.OVER_TEMP: "Over-temperature",
    VendorEvent1.POWER_LOW: "Power low",
    VendorEvent1.DC_LOW: "DC low",
    VendorEvent1.INTERMEDIATE_FAULT: "Intermediate circuit error",
    VendorEvent1.FREQUENCY_HIGH: "AC frequency too high",
    VendorEvent1.FREQUENCY_LOW: "AC frequency too low",
    VendorEvent1.AC_VOLTAGE_HIGH: "AC voltage too high",
    VendorEvent1.AC_VOLTAGE_LOW: "AC voltage too low",
    VendorEvent1.DIRECT_CURRENT: "Direct current feed in",
    VendorEvent1.RELAY_FAULT: "Relay problem",
    VendorEvent1.POWER_STAGE_FAULT: "Internal power stage error",
    VendorEvent1.CONTROL_FAULT: "Control problems",
    VendorEvent1.GC_GRID_VOLT_ERR: "Guard Controller - AC voltage error",
    VendorEvent1.GC_GRID_FREQU_ERR: "Guard Controller - AC Frequency Error",
    VendorEvent1.ENERGY_TRANSFER_FAULT: "Energy transfer not possible",
    VendorEvent1.REF_POWER_SOURCE_AC: "Reference power source AC outside tolerances",
    VendorEvent1.ANTI_ISLANDING_FAULT: "Error during anti islanding test",
    VendorEvent1.FIXED_VOLTAGE_FAULT: "Fixed voltage lower than current MPP voltage",
    VendorEvent1.MEMORY_FAULT: "Memory fault",
    VendorEvent1.DISPLAY_FAULT: "Display",
    VendorEvent1.COMMUNICATION_FAULT: "Internal communication error",
    VendorEvent1.TEMP_SENSORS_FAULT: "Temperature sensors defective",
    VendorEvent1.DC_AC_BOARD_FAULT: "DC or AC board fault",
    VendorEvent1.ENS_FAULT: "ENS error",
    VendorEvent1.FAN_FAULT: "Fan error",
    VendorEvent1.DEFECTIVE_FUSE: "Defective fuse",
    VendorEvent1.OUTPUT_CHOKE_FAULT: "Output choke connected to wrong poles",
    VendorEvent1.CONVERTER_RELAY_FAULT: (
        "The buck converter relay does not open at high DC voltage"
    ),
}


class VendorEvent2(IntFlag):
    """Fronius vendor event flags, bank 2 (EVTVND2)."""

    NO_SOLARNET_COMM = 0x00000001
    INV_ADDRESS_FAULT = 0x00000002
    NO_FEED_IN_24H = 0x00000004
    PLUG_FAULT = 0x00000008
    PHASE_ALLOC_FAULT = 0x00000010
    GRID_CONDUCTOR_OPEN = 0x00000020
    SOFTWARE_ISSUE = 0x00000040
    POWER_DERATING = 0x00000080
    JUMPER_INCORRECT = 0x00000100
    INCOMPATIBLE_FEATURE = 0x00000200
    VENTS_BLOCKED = 0x00000400
    POWER_REDUCTION_ERROR = 0x00000800
    ARC_DETECTED = 0x00001000
    AFCI_SELF_TEST_FAILED = 0x00002000
    CURRENT_SENSOR_ERROR = 0x00004000
    DC_SWITCH_FAULT = 0x00008000
    AFCI_DEFECTIVE = 0x00010000
    AFCI_MANUAL_TEST_OK = 0x00020000
    PS_PWR_SUPPLY_ISSUE = 0x00040000
    AFCI_NO_COMM = 0x00080000
    AFCI_MANUAL_TEST_FAILED = 0x00100000
    AC_POLARITY_REVERSED = 0x00200000
    FAULTY_AC_DEVICE = 0x00400000
    FLASH_FAULT = 0x00800000
    GENERAL_ERROR = 0x01000000
    GROUNDING_ISSUE = 0x02000000
    LIMITATION_FAULT = 0x04000000
    OPEN_CONTACT = 0x08000000
    OVERVOLTAGE_PROTECTION = 0x10000000
    PROGRAM_STATUS = 0x20000000
    SOLARNET_ISSUE = 0x40000000
    SUPPLY_VOLTAGE_FAULT = 0x80000000


VENDOR_EVENT2_DESCRIPTIONS: dict[VendorEvent2, str] = {
    VendorEvent2.NO_SOLARNET_COMM: "No SolarNet communication",
    VendorEvent2.INV_ADDRESS_FAULT: "Inverter address incorrect",
    VendorEvent2.NO_FEED_IN_24H: "24h no feed in",
    VendorEvent2.PLUG_FAULT: "Faulty plug connections",
    VendorEvent2.PHASE_ALLOC_FAULT: "Incorrect phase allocation",
    VendorEvent2.GRID_CONDUCTOR_OPEN: "Grid conductor open or supply phase has failed",
    VendorEvent2.SOFTWARE_ISSUE: "Incompatible or old software",
    VendorEvent2.POWER_DERATING: "Power Derating Due To Overtemperature",
    VendorEvent2.JUMPER_INCORRECT: "Jumper set incorrectly",
    VendorEvent2.INCOMPATIBLE_FEATURE: "Incompatible feature",
    VendorEvent2.VENTS_BLOCKED: "Defective ventilator/air vents blocked",
    VendorEvent2.POWER_REDUCTION_ERROR: "Power reduction on error",
    VendorEvent2.ARC_DETECTED: "Arc Detected",
    VendorEvent2.AFCI_SELF_TEST_FAILED: "AFCI Self Test Failed",
    VendorEvent2.CURRENT_SENSOR_ERROR: "Current Sensor Error",
    VendorEvent2.DC_SWITCH_FAULT: "DC switch fault",
    VendorEvent2.AFCI_DEFECTIVE: "AFCI Defective",
    VendorEvent2.AFCI_MANUAL_TEST_OK: "AFCI Manual Test Successful",
    VendorEvent2.PS_PWR_SUPPLY_ISSUE: "Power Stack Supply Missing",
    VendorEvent2.AFCI_NO_COMM: "AFCI Communication Stopped",
    VendorEvent2.AFCI_MANUAL_TEST_FAILED: "AFCI Manual Test Failed",
    VendorEvent2.AC_POLARITY_REVERSED: "AC polarity reversed",
    VendorEvent2.FAULTY_AC_DEVICE: "AC measurement device fault",
    VendorEvent2.FLASH_FAULT: "Flash fault",
    VendorEvent2.GENERAL_ERROR: "General error",
    VendorEvent2.GROUNDING_ISSUE: "Grounding fault",
    VendorEvent2.LIMITATION_FAULT: "Power limitation fault",
    VendorEvent2.OPEN_CONTACT: "External NO contact open",
    VendorEvent2.OVERVOLTAGE_PROTECTION: "External overvoltage protection has tripped",
    VendorEvent2.PROGRAM_STATUS: "Internal processor program status",
    VendorEvent2.SOLARNET_ISSUE: "SolarNet issue",
    VendorEvent2.SUPPLY_VOLTAGE_FAULT: "Supply voltage fault",
}


class VendorEvent3(IntFlag):
    """Fronius vendor event flags, bank 3 (EVTVND3)."""

    TIME_FAULT = 0x1
    USB_FAULT = 0x2
    DC_HIGH = 0x4
    INIT_ERROR = 0x8


VENDOR_EVENT3_DESCRIPTIONS: dict[VendorEvent3, str] = {
    VendorEvent3.TIME_FAULT: "Time error",
    VendorEvent3.USB_FAULT: "USB error",
    VendorEvent3.DC_HIGH: "DC high",
    VendorEvent3.INIT_ERROR: "Init error",
}

#: Vendor event bank number → flag class.
VENDOR_EVENT_BANKS: dict[int, type[IntFlag]] = {
    1: VendorEvent1,
    2: VendorEvent2,
    3: VendorEvent3,
}


# ---------------------------------------------------------------------------
# Meter events: bitfield, M20X/M21X EVT
# ---------------------------------------------------------------------------


class MeterEvent(IntFlag):
    """SunSpec meter event flags (bits 0-1 and 8-15 reserved)."""

    POWER_FAILURE = 1 << 2
    UNDER_VOLTAGE = 1 << 3
    LOW_PF = 1 << 4
    OVER_CURRENT = 1 << 5
    OVER_VOLTAGE = 1 << 6
    MISSING_SENSOR = 1 << 7
    OEM01 = 1 << 16
    OEM02 = 1 << 17
    OEM03 = 1 << 18
    OEM04 = 1 << 19
    OEM05 = 1 << 20
    OEM06 = 1 << 21
    OEM07 = 1 << 22
    OEM08 = 1 << 23
    OEM09 = 1 << 24
    OEM10 = 1 << 25
    OEM11 = 1 << 26
    OEM12 = 1 << 27
    OEM13 = 1 << 28
    OEM14 = 1 << 29
    OEM15 = 1 << 30


METER_EVENT_DESCRIPTIONS: dict[MeterEvent, str] = {
    MeterEvent.POWER_FAILURE: "Loss of power or phase",
    MeterEvent.UNDER_VOLTAGE: "Voltage below threshold",
    MeterEvent.LOW_PF: "Power factor below threshold",
    MeterEvent.OVER_CURRENT: "Current input over threshold",
    MeterEvent.OVER_VOLTAGE: "Voltage input over threshold",
    MeterEvent.MISSING_SENSOR: "Sensor not connected",
}


class StorageControlMode(IntFlag):
    """Active hold/discharge/charge limits (storage STORCTL_MOD)."""

    CHARGE = 0x1
    DISCHARGE = 0x2


# ---------------------------------------------------------------------------
# Decoder functions
# ---------------------------------------------------------------------------


def expand_flags(raw_value: int, flag_type: type[_F]) -> list[_F]:
    """Return the named flags of *flag_type* set in *raw_value*.

    Flags are ordered by bit position; bits without a name are ignored.

    >>> expand_flags(0x0081, InverterEvent)
    [<InverterEvent.GROUND_FAULT: 1>, <InverterEvent.OVER_TEMP: 128>]
    """
    return sorted(
        (flag for flag in flag_type if raw_value & flag.value),
        key=lambda flag: flag.value,
    )


def describe_flags(raw_value: int, descriptions: dict[_F, str]) -> list[str]:
    """Extract active event descriptions from a bitfield value.

    Args:
        raw_value: The raw 32-bit register value (e.g. from EVT1).
        descriptions: A mapping of flag to description string.

    Returns:
        A list of active event descriptions sorted by bit position.
    """
    return [
        desc
        for flag, desc in sorted(descriptions.items(), key=lambda item: item[0].value)
        if raw_value & flag.value
    ]


__all__ = [
    "INVERTER_EVENT_DESCRIPTIONS",
    "METER_EVENT_DESCRIPTIONS",
    "OPERATING_STATE_DESCRIPTIONS",
    "VENDOR_EVENT1_DESCRIPTIONS",
    "VENDOR_EVENT2_DESCRIPTIONS",
    "VENDOR_EVENT3_DESCRIPTIONS",
    "VENDOR_EVENT_BANKS",
    "ChargeStatus",
    "DcInputState",
    "InverterEvent",
    "MeterEvent",
    "OperatingState",
    "StateUnknown",
    "StorageControlMode",
    "VendorEvent1",
    "VendorEvent2",
    "VendorEvent3",
    "describe_flags",
    "expand_flags",
    "operating_state_from_raw",
    "state_from_raw",
]
