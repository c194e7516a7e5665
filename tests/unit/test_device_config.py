"""Tests for DeviceConfig."""

from __future__ import annotations

import pytest

from pyfroniusmodbus import DeviceConfig
from pyfroniusmodbus.config import MAX_UNIT_ADDRESS, MIN_UNIT_ADDRESS


class TestDeviceConfig:
    def test_defaults(self) -> None:
        config = DeviceConfig()

        assert config.unit_address == 1
        assert config.word_swap is False
        assert config.byte_swap is False
        assert config.read_fronius_registers is False
        config.validate()

    @pytest.mark.parametrize("unit", [MIN_UNIT_ADDRESS, 240, MAX_UNIT_ADDRESS])
    def test_valid_unit_addresses(self, unit: int) -> None:
        DeviceConfig(unit_address=unit).validate()

    @pytest.mark.parametrize("unit", [0, 248, 255, -1])
    def test_invalid_unit_addresses(self, unit: int) -> None:
        with pytest.raises(ValueError, match="unit_address"):
            DeviceConfig(unit_address=unit).validate()

    def test_dict_round_trip(self) -> None:
        config = DeviceConfig(unit_address=240, word_swap=True, read_fronius_registers=True)

        assert DeviceConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self) -> None:
        assert DeviceConfig.from_dict({}) == DeviceConfig()
