"""Tests for operating states and event flag decoding."""

from __future__ import annotations

import pytest

from pyfroniusmodbus.events import (
    INVERTER_EVENT_DESCRIPTIONS,
    METER_EVENT_DESCRIPTIONS,
    VENDOR_EVENT_BANKS,
    ChargeStatus,
    InverterEvent,
    MeterEvent,
    OperatingState,
    StateUnknown,
    describe_flags,
    expand_flags,
    operating_state_from_raw,
    state_from_raw,
)

EXPECTED_ORDER = [
    "POWER_OFF",
    "SLEEPING",
    "STARTING",
    "MPPT",
    "THROTTLED",
    "SHUTTING_DOWN",
    "FAULT",
    "STANDBY",
    "NO_BUSINIT",
    "NO_COMM_INV",
    "SN_OVERCURRENT",
    "BOOTLOAD",
    "AFCI",
]


class TestOperatingState:
    """Tests for the enumerated ST register."""

    @pytest.mark.parametrize(("raw", "name"), list(enumerate(EXPECTED_ORDER, start=1)))
    def test_known_states(self, raw: int, name: str) -> None:
        state = operating_state_from_raw(raw)
        assert isinstance(state, OperatingState)
        assert state.name == name

    @pytest.mark.parametrize("raw", [0, 14, 0xFFFF])
    def test_unknown_states(self, raw: int) -> None:
        assert operating_state_from_raw(raw) == StateUnknown(raw)

    def test_every_state_has_description(self) -> None:
        for state in OperatingState:
            assert state.description

    def test_unknown_description(self) -> None:
        assert StateUnknown(14).description == "Unknown state 14"

    def test_generic_mapping(self) -> None:
        assert state_from_raw(3, ChargeStatus) is ChargeStatus.DISCHARGING
        assert state_from_raw(0, ChargeStatus) == StateUnknown(0)


class TestEventFlags:
    """Tests for bitfield expansion."""

    def test_no_flags(self) -> None:
        assert expand_flags(0, InverterEvent) == []

    def test_sorted_by_bit(self) -> None:
        raw = InverterEvent.HW_TEST_FAILURE | InverterEvent.GROUND_FAULT | InverterEvent.OVER_TEMP
        assert expand_flags(int(raw), InverterEvent) == [
            InverterEvent.GROUND_FAULT,
            InverterEvent.OVER_TEMP,
            InverterEvent.HW_TEST_FAILURE,
        ]

    def test_unnamed_bits_ignored(self) -> None:
        assert expand_flags(0x0001_0001, InverterEvent) == [InverterEvent.GROUND_FAULT]
        assert expand_flags(0b11, MeterEvent) == []

    def test_all_inverter_events_described(self) -> None:
        assert set(INVERTER_EVENT_DESCRIPTIONS) == set(InverterEvent)

    def test_describe_flags(self) -> None:
        raw = int(MeterEvent.OVER_VOLTAGE | MeterEvent.POWER_FAILURE)
        assert describe_flags(raw, METER_EVENT_DESCRIPTIONS) == [
            "Loss of power or phase",
            "Voltage input over threshold",
        ]

    def test_vendor_banks(self) -> None:
        assert sorted(VENDOR_EVENT_BANKS) == [1, 2, 3]
        for flag_type in VENDOR_EVENT_BANKS.values():
            assert expand_flags(0, flag_type) == []
