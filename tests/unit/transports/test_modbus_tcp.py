"""Unit tests for the Modbus TCP transport."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymodbus.exceptions import ModbusIOException

from pyfroniusmodbus.transports import ModbusTcpTransport
from pyfroniusmodbus.transports.exceptions import (
    TransportConnectionError,
    TransportReadError,
    TransportTimeoutError,
    is_transient,
)
from pyfroniusmodbus.transports.modbus import normalize_host


def _response(registers: list[int]) -> MagicMock:
    response = MagicMock()
    response.isError.return_value = False
    response.registers = registers
    return response


def _error_response(code: int) -> MagicMock:
    response = MagicMock()
    response.isError.return_value = True
    response.exception_code = code
    return response


def _mock_client(read: AsyncMock | None = None) -> MagicMock:
    client = MagicMock()
    client.connect = AsyncMock(return_value=True)
    client.close = MagicMock()
    client.read_holding_registers = read or AsyncMock(return_value=_response([0x5375, 0x6E53]))
    return client


class TestModbusTcpTransportInit:
    """Tests for construction and host handling."""

    def test_defaults(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")

        assert transport.host == "192.168.1.50"
        assert transport.port == 502
        assert transport.timeout == 10.0
        assert transport.transport_type == "modbus_tcp"
        assert transport.is_connected is False
        assert transport.is_ipv6 is False
        assert transport.endpoint == "192.168.1.50:502"

    def test_ipv6_brackets_stripped(self) -> None:
        transport = ModbusTcpTransport(host="[2001:db8::50]", port=1502)

        assert transport.host == "2001:db8::50"
        assert transport.is_ipv6 is True
        assert transport.endpoint == "[2001:db8::50]:1502"

    def test_ipv6_without_brackets(self) -> None:
        transport = ModbusTcpTransport(host="fe80::1")

        assert transport.is_ipv6 is True
        assert transport.endpoint == "[fe80::1]:502"

    @pytest.mark.parametrize(
        ("host", "expected"),
        [
            (" inverter.local ", "inverter.local"),
            ("10.0.0.7", "10.0.0.7"),
            ("[::1]", "::1"),
        ],
    )
    def test_normalize_host(self, host: str, expected: str) -> None:
        assert normalize_host(host) == expected


class TestModbusTcpTransportConnection:
    """Tests for connect/disconnect."""

    @pytest.mark.asyncio
    async def test_connect_success(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client_class.return_value = mock_client

            await transport.connect()

            assert transport.is_connected is True
            mock_client.connect.assert_awaited_once()
            _, kwargs = mock_client_class.call_args
            assert kwargs["host"] == "192.168.1.50"
            assert kwargs["port"] == 502

    @pytest.mark.asyncio
    async def test_connect_refused(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client.connect = AsyncMock(return_value=False)
            mock_client_class.return_value = mock_client

            with pytest.raises(TransportConnectionError, match="Failed to connect"):
                await transport.connect()
            assert transport.is_connected is False

    @pytest.mark.asyncio
    async def test_connect_os_error(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client.connect = AsyncMock(side_effect=OSError("unreachable"))
            mock_client_class.return_value = mock_client

            with pytest.raises(TransportConnectionError, match="unreachable"):
                await transport.connect()

    @pytest.mark.asyncio
    async def test_context_manager(self) -> None:
        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client_class.return_value = mock_client

            async with ModbusTcpTransport(host="192.168.1.50") as transport:
                assert transport.is_connected is True

            assert transport.is_connected is False
            mock_client.close.assert_called_once()


class TestModbusTcpTransportRead:
    """Tests for read_words."""

    @pytest.mark.asyncio
    async def test_read_not_connected(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")

        with pytest.raises(TransportConnectionError):
            await transport.read_words(1, 40000, 2)

    @pytest.mark.asyncio
    async def test_read_success(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client = _mock_client()
            mock_client_class.return_value = mock_client
            await transport.connect()

            words = await transport.read_words(1, 40000, 2)

            assert words == [0x5375, 0x6E53]
            mock_client.read_holding_registers.assert_awaited_once_with(
                address=40000, count=2, device_id=1
            )
            assert transport.consecutive_errors == 0

    @pytest.mark.asyncio
    async def test_exception_response_is_not_retried(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50", retries=2)
        read = AsyncMock(return_value=_error_response(2))

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client_class.return_value = _mock_client(read)
            await transport.connect()

            with pytest.raises(TransportReadError) as exc_info:
                await transport.read_words(1, 40000, 2)

        assert exc_info.value.exception_code == 2
        assert read.await_count == 1
        assert is_transient(exc_info.value) is False

    @pytest.mark.asyncio
    async def test_io_error_is_retried(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50", retries=2, retry_delay=0.5)
        read = AsyncMock(
            side_effect=[
                ModbusIOException("connection reset"),
                ModbusIOException("connection reset"),
                _response([7]),
            ]
        )

        with (
            patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class,
            patch("asyncio.sleep", new_callable=AsyncMock) as mock_sleep,
        ):
            mock_client_class.return_value = _mock_client(read)
            await transport.connect()

            words = await transport.read_words(1, 40069, 1)

        assert words == [7]
        assert read.await_count == 3
        assert [c.args[0] for c in mock_sleep.await_args_list] == [0.5, 1.0]
        assert transport.consecutive_errors == 0

    @pytest.mark.asyncio
    async def test_timeout_after_retries(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50", retries=1)
        read = AsyncMock(side_effect=TimeoutError())

        with (
            patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class,
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            mock_client_class.return_value = _mock_client(read)
            await transport.connect()

            with pytest.raises(TransportTimeoutError) as exc_info:
                await transport.read_words(1, 40000, 2)

        assert read.await_count == 2
        assert transport.consecutive_errors == 2
        assert is_transient(exc_info.value) is True

    @pytest.mark.asyncio
    async def test_missing_registers_is_transient(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50", retries=0)
        response = _response([])
        response.registers = None

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client_class.return_value = _mock_client(AsyncMock(return_value=response))
            await transport.connect()

            with pytest.raises(TransportReadError) as exc_info:
                await transport.read_words(1, 40000, 2)

        assert exc_info.value.exception_code is None
        assert is_transient(exc_info.value) is True

    @pytest.mark.asyncio
    async def test_reconnect_after_consecutive_errors(self) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50", retries=0)
        read = AsyncMock(
            side_effect=[OSError("reset"), OSError("reset"), OSError("reset"), _response([1])]
        )

        with patch("pymodbus.client.AsyncModbusTcpClient") as mock_client_class:
            mock_client = _mock_client(read)
            mock_client_class.return_value = mock_client
            await transport.connect()

            for _ in range(3):
                with pytest.raises(TransportReadError):
                    await transport.read_words(1, 40000, 1)
            assert transport.consecutive_errors == 3

            assert await transport.read_words(1, 40000, 1) == [1]

        assert mock_client.connect.await_count == 2
        mock_client.close.assert_called_once()
        assert transport.consecutive_errors == 0


class TestReconnectDelay:
    """Tests for the reconnect backoff schedule."""

    @pytest.mark.parametrize(
        ("failures", "expected"),
        [(0, 0.0), (1, 5.0), (2, 10.0), (3, 20.0), (7, 320.0), (12, 320.0)],
    )
    def test_backoff(self, failures: int, expected: float) -> None:
        transport = ModbusTcpTransport(host="192.168.1.50")
        transport._reconnect_failures = failures

        assert transport.reconnect_delay == expected


class TestIsTransient:
    def test_classification(self) -> None:
        assert is_transient(TransportConnectionError("down")) is True
        assert is_transient(TransportTimeoutError("slow")) is True
        assert is_transient(TransportReadError("io")) is True
        assert is_transient(TransportReadError("illegal address", exception_code=2)) is False
        assert is_transient(ValueError("other")) is False
