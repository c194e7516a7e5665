"""Tests for transport factory functions and TransportConfig."""

from __future__ import annotations

import pytest

from pyfroniusmodbus.transports import (
    ModbusSerialTransport,
    ModbusTcpTransport,
    TransportConfig,
    TransportType,
    create_modbus_transport,
    create_serial_transport,
    create_transport,
)


class TestTransportConfig:
    """Tests for TransportConfig validation and serialization."""

    def test_tcp_valid(self) -> None:
        TransportConfig(host="192.168.1.50").validate()

    def test_tcp_requires_host(self) -> None:
        with pytest.raises(ValueError, match="host required"):
            TransportConfig().validate()

    @pytest.mark.parametrize("port", [0, 65536])
    def test_tcp_port_range(self, port: int) -> None:
        with pytest.raises(ValueError, match="port"):
            TransportConfig(host="inverter.local", port=port).validate()

    def test_rtu_requires_serial_port(self) -> None:
        with pytest.raises(ValueError, match="serial_port required"):
            TransportConfig(transport_type=TransportType.MODBUS_RTU).validate()

    @pytest.mark.parametrize(
        ("field", "value"),
        [("parity", "X"), ("bytesize", 9), ("stopbits", 3), ("baudrate", 0)],
    )
    def test_rtu_line_settings(self, field: str, value: object) -> None:
        config = TransportConfig(transport_type=TransportType.MODBUS_RTU, serial_port="/dev/ttyUSB0")
        setattr(config, field, value)

        with pytest.raises(ValueError, match=field):
            config.validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"timeout": 0},
            {"retries": -1},
            {"retry_delay": -0.5},
            {"min_reconnect_delay": 30.0, "max_reconnect_delay": 10.0},
        ],
    )
    def test_common_limits(self, overrides: dict[str, float]) -> None:
        config = TransportConfig(host="192.168.1.50", **overrides)  # type: ignore[arg-type]

        with pytest.raises(ValueError):
            config.validate()

    def test_dict_round_trip(self) -> None:
        config = TransportConfig(
            transport_type=TransportType.MODBUS_RTU,
            serial_port="/dev/ttyUSB0",
            baudrate=19200,
            parity="E",
        )

        data = config.to_dict()
        assert data["transport_type"] == "modbus_rtu"
        assert TransportConfig.from_dict(data) == config

    def test_from_dict_defaults(self) -> None:
        config = TransportConfig.from_dict({"host": "10.0.0.7"})

        assert config.transport_type is TransportType.MODBUS_TCP
        assert config.port == 502
        assert config.timeout == 10.0


class TestFactories:
    """Tests for the create_* helpers."""

    def test_create_modbus_transport(self) -> None:
        transport = create_modbus_transport("192.168.1.50", port=1502, timeout=3.0)

        assert isinstance(transport, ModbusTcpTransport)
        assert transport.port == 1502
        assert transport.timeout == 3.0
        assert transport.is_connected is False

    def test_create_serial_transport(self) -> None:
        transport = create_serial_transport("/dev/ttyUSB0", baudrate=19200)

        assert isinstance(transport, ModbusSerialTransport)
        assert transport.baudrate == 19200

    def test_create_transport_tcp(self) -> None:
        transport = create_transport(TransportConfig(host="[2001:db8::50]"))

        assert isinstance(transport, ModbusTcpTransport)
        assert transport.endpoint == "[2001:db8::50]:502"

    def test_create_transport_rtu(self) -> None:
        config = TransportConfig(transport_type=TransportType.MODBUS_RTU, serial_port="COM3")
        transport = create_transport(config)

        assert isinstance(transport, ModbusSerialTransport)
        assert transport.port == "COM3"

    def test_create_transport_validates(self) -> None:
        with pytest.raises(ValueError):
            create_transport(TransportConfig())
