"""Tests for the Modbus RTU serial transport."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pyfroniusmodbus.transports.exceptions import TransportConnectionError
from pyfroniusmodbus.transports.modbus_serial import ModbusSerialTransport


def _mock_client() -> MagicMock:
    client = MagicMock()
    client.connect = AsyncMock(return_value=True)
    client.close = MagicMock()
    response = MagicMock()
    response.isError.return_value = False
    response.registers = [1, 65]
    client.read_holding_registers = AsyncMock(return_value=response)
    return client


class TestModbusSerialTransportInit:
    """Tests for ModbusSerialTransport initialization."""

    def test_defaults(self) -> None:
        transport = ModbusSerialTransport(port="/dev/ttyUSB0")

        assert transport.port == "/dev/ttyUSB0"
        assert transport.baudrate == 9600
        assert transport.transport_type == "modbus_serial"
        assert transport.line_settings == "9600 8N1"
        assert transport.is_connected is False

    def test_custom_values(self) -> None:
        transport = ModbusSerialTransport(
            port="COM3",
            baudrate=19200,
            parity="E",
            stopbits=2,
            timeout=3.0,
        )

        assert transport.port == "COM3"
        assert transport.baudrate == 19200
        assert transport.timeout == 3.0
        assert transport.line_settings == "19200 8E2"


class TestModbusSerialTransportConnection:
    """Tests for serial connect/disconnect."""

    @pytest.mark.asyncio
    async def test_connect_and_read(self) -> None:
        transport = ModbusSerialTransport(port="/dev/ttyUSB0", parity="E")

        with (
            patch("pymodbus.client.AsyncModbusSerialClient") as mock_client_class,
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            mock_client = _mock_client()
            mock_client_class.return_value = mock_client

            await transport.connect()
            words = await transport.read_words(240, 40002, 2)

        assert transport.is_connected is True
        assert words == [1, 65]
        _, kwargs = mock_client_class.call_args
        assert kwargs["port"] == "/dev/ttyUSB0"
        assert kwargs["baudrate"] == 9600
        assert kwargs["parity"] == "E"
        mock_client.read_holding_registers.assert_awaited_once_with(
            address=40002, count=2, device_id=240
        )

    @pytest.mark.asyncio
    async def test_connect_refused(self) -> None:
        transport = ModbusSerialTransport(port="/dev/ttyUSB0")

        with patch("pymodbus.client.AsyncModbusSerialClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client.connect = AsyncMock(return_value=False)
            mock_client_class.return_value = mock_client

            with pytest.raises(TransportConnectionError, match="/dev/ttyUSB0"):
                await transport.connect()

    @pytest.mark.asyncio
    async def test_permission_denied(self) -> None:
        transport = ModbusSerialTransport(port="/dev/ttyUSB0")

        with patch("pymodbus.client.AsyncModbusSerialClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client.connect = AsyncMock(side_effect=PermissionError("denied"))
            mock_client_class.return_value = mock_client

            with pytest.raises(TransportConnectionError, match="dialout"):
                await transport.connect()

    @pytest.mark.asyncio
    async def test_disconnect(self) -> None:
        transport = ModbusSerialTransport(port="/dev/ttyUSB0")

        with (
            patch("pymodbus.client.AsyncModbusSerialClient") as mock_client_class,
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            mock_client = _mock_client()
            mock_client_class.return_value = mock_client

            await transport.connect()
            await transport.disconnect()

        assert transport.is_connected is False
        mock_client.close.assert_called_once()
