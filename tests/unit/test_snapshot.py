"""Tests for the sparse register image."""

from __future__ import annotations

import pytest
from conftest import FakeTransport

from pyfroniusmodbus.exceptions import RegisterNotFilledError
from pyfroniusmodbus.snapshot import MAX_READ_WORDS, RegisterSnapshot, read_groups, words_at
from pyfroniusmodbus.transports.exceptions import TransportTimeoutError


class TestReadGroups:
    """Tests for splitting reads into device-sized chunks."""

    def test_single_group(self) -> None:
        assert read_groups(40000, 3) == [(40000, 3)]

    def test_exact_limit(self) -> None:
        assert read_groups(0, MAX_READ_WORDS) == [(0, MAX_READ_WORDS)]

    def test_split(self) -> None:
        assert read_groups(40069, 126) == [(40069, 125), (40194, 1)]


class TestWordsAt:
    def test_missing_address_raises(self) -> None:
        with pytest.raises(RegisterNotFilledError) as exc_info:
            words_at({1: 10, 3: 30}, 1, 3)
        assert exc_info.value.address == 2


class TestRegisterSnapshot:
    """Tests for RegisterSnapshot."""

    @pytest.mark.asyncio
    async def test_fill_reads_from_transport(self) -> None:
        transport = FakeTransport({40000: 0x5375, 40001: 0x6E53})
        snapshot = RegisterSnapshot(transport, unit_address=3)

        await snapshot.fill(40000, 2)

        assert transport.calls == [(3, 40000, 2)]
        assert snapshot.slice(40000, 2) == [0x5375, 0x6E53]
        assert snapshot.word(40001) == 0x6E53
        assert len(snapshot) == 2
        assert 40000 in snapshot

    @pytest.mark.asyncio
    async def test_large_fill_is_chunked(self) -> None:
        transport = FakeTransport()
        snapshot = RegisterSnapshot(transport, unit_address=1)

        await snapshot.fill(40069, 200)

        assert transport.calls == [(1, 40069, 125), (1, 40194, 75)]
        assert snapshot.is_filled(40069, 200)

    @pytest.mark.asyncio
    async def test_unfilled_read_raises(self) -> None:
        snapshot = RegisterSnapshot(FakeTransport(), unit_address=1)
        await snapshot.fill(40000, 2)

        with pytest.raises(RegisterNotFilledError):
            snapshot.word(40002)
        assert not snapshot.is_filled(40000, 3)

    @pytest.mark.asyncio
    async def test_invalid_range(self) -> None:
        snapshot = RegisterSnapshot(FakeTransport(), unit_address=1)
        with pytest.raises(ValueError):
            await snapshot.fill(0xFFFF, 2)
        with pytest.raises(ValueError):
            await snapshot.fill(0, 0)

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self) -> None:
        transport = FakeTransport()
        transport.error = TransportTimeoutError("timed out")
        snapshot = RegisterSnapshot(transport, unit_address=1)

        with pytest.raises(TransportTimeoutError):
            await snapshot.fill(40000, 3)

    @pytest.mark.asyncio
    async def test_clear_and_freeze(self) -> None:
        snapshot = RegisterSnapshot(FakeTransport({5: 7}), unit_address=1)
        await snapshot.fill(5, 1)

        frozen = snapshot.freeze()
        snapshot.clear()

        assert frozen[5] == 7
        assert len(snapshot) == 0
        with pytest.raises(TypeError):
            frozen[5] = 8  # type: ignore[index]
