"""Pytest configuration and fixtures for pyfroniusmodbus tests.

Devices are simulated with an in-memory register image (``dict[int, int]``)
served by :class:`FakeTransport`. The ``build_*_image`` helpers lay out a
complete SunSpec map (header, Common block, primary model, extension
blocks and End sentinel) at the addresses a Fronius Datamanager uses.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable

import pytest

from pyfroniusmodbus.registers.base import RegisterDescriptor
from pyfroniusmodbus.registers.blocks import INVERTER_END_BLOCK, METER_END_BLOCK
from pyfroniusmodbus.registers.common import COMMON, COMMON_LENGTH, SUNSPEC_ID
from pyfroniusmodbus.registers.inverter import I10X_BLOCK, I11X_BLOCK
from pyfroniusmodbus.registers.meter import M20X_BLOCK, M21X_BLOCK
from pyfroniusmodbus.registers.mppt import I160, I160_BLOCK
from pyfroniusmodbus.registers.nameplate import NAMEPLATE, NAMEPLATE_BLOCK
from pyfroniusmodbus.registers.storage import STORAGE_BLOCK

Image = dict[int, int]


class FakeTransport:
    """In-memory RegisterTransport; unset addresses read back as 0."""

    def __init__(self, image: Image | None = None) -> None:
        self.image: Image = dict(image or {})
        self.calls: list[tuple[int, int, int]] = []
        self.error: Exception | None = None

    async def read_words(self, unit_address: int, first_word: int, count: int) -> list[int]:
        self.calls.append((unit_address, first_word, count))
        if self.error is not None:
            raise self.error
        return [self.image.get(addr, 0) for addr in range(first_word, first_word + count)]


# ---------------------------------------------------------------------------
# Image helpers
# ---------------------------------------------------------------------------


def put_words(image: Image, address: int, words: Iterable[int]) -> None:
    """Store raw words (negative values as two's complement)."""
    for offset, word in enumerate(words):
        image[address + offset] = word & 0xFFFF


def put_u32(image: Image, address: int, value: int) -> None:
    put_words(image, address, [(value >> 16) & 0xFFFF, value & 0xFFFF])


def put_f32(image: Image, address: int, value: float) -> None:
    """Store an IEEE-754 single in ABCD word order."""
    raw = struct.unpack(">I", struct.pack(">f", value))[0]
    put_u32(image, address, raw)


def put_string(image: Image, descriptor: RegisterDescriptor, text: str, offset: int = 0) -> None:
    """Store *text* NUL padded into a string descriptor."""
    data = text.encode("ascii").ljust(descriptor.word_count * 2, b"\x00")
    words = [(data[i] << 8) | data[i + 1] for i in range(0, len(data), 2)]
    put_words(image, descriptor.address + offset, words)


def put_field(
    image: Image,
    descriptor: RegisterDescriptor,
    value: int,
    scale: int | None = None,
    offset: int = 0,
) -> None:
    """Store an integer field and, optionally, its scale factor."""
    if descriptor.word_count == 2:
        put_u32(image, descriptor.address + offset, value & 0xFFFF_FFFF)
    else:
        put_words(image, descriptor.address + offset, [value])
    if scale is not None:
        assert descriptor.scale_ref is not None
        put_words(image, descriptor.scale_ref.address + offset, [scale])


def build_common(
    image: Image,
    *,
    manufacturer: str = "Fronius",
    model: str = "Symo 10.0-3-M",
    options: str = "3.28.1-3",
    version: str = "0.3.30.2",
    serial: str = "28136344",
    unit_address: int = 1,
) -> None:
    """SunSpec header and Common block."""
    put_u32(image, COMMON["SID"].address, SUNSPEC_ID)
    put_words(image, COMMON["ID"].address, [1, COMMON_LENGTH])
    put_string(image, COMMON["MN"], manufacturer)
    put_string(image, COMMON["MD"], model)
    put_string(image, COMMON["OPT"], options)
    put_string(image, COMMON["VR"], version)
    put_string(image, COMMON["SN"], serial)
    put_words(image, COMMON["DA"].address, [unit_address])


def build_inverter_image(
    model_id: int = 113,
    *,
    storage: bool = False,
    inputs: int = 2,
    der_type: int = 4,
    unit_address: int = 1,
) -> Image:
    """Complete inverter map: Common, I10X/I11X, Nameplate, I160, End."""
    image: Image = {}
    build_common(image, unit_address=unit_address)
    use_float = model_id > 110
    block = I11X_BLOCK if use_float else I10X_BLOCK
    put_words(image, block.address, [model_id, block.length])

    offset = NAMEPLATE_BLOCK.offset(use_float)
    put_words(image, NAMEPLATE_BLOCK.address + offset, [120, NAMEPLATE_BLOCK.length])
    put_field(image, NAMEPLATE["DERTYP"], der_type, offset=offset)

    offset = I160_BLOCK.offset(use_float)
    put_words(image, I160_BLOCK.address + offset, [160, I160_BLOCK.length])
    put_field(image, I160["N"], inputs, offset=offset)
    put_string(image, I160["INPUT1_IDSTR"], "String 1", offset=offset)
    put_string(image, I160["INPUT2_IDSTR"], "String 2", offset=offset)

    end = INVERTER_END_BLOCK.base_address(use_float)
    if storage:
        put_words(image, STORAGE_BLOCK.base_address(use_float), [124, STORAGE_BLOCK.length])
        end += STORAGE_BLOCK.length + 2
    put_words(image, end, [0xFFFF, 0])
    return image


def build_meter_image(model_id: int = 213, *, unit_address: int = 240) -> Image:
    """Complete meter map: Common, M20X/M21X, End."""
    image: Image = {}
    build_common(
        image,
        model="Smart Meter 63A",
        options="",
        version="",
        serial="19480026",
        unit_address=unit_address,
    )
    use_float = model_id > 210
    block = M21X_BLOCK if use_float else M20X_BLOCK
    put_words(image, block.address, [model_id, block.length])
    put_words(image, METER_END_BLOCK.base_address(use_float), [0xFFFF, 0])
    return image


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def float_inverter_image() -> Image:
    """Three-phase float inverter (model 113) with two MPPT inputs."""
    return build_inverter_image(113)


@pytest.fixture
def int_inverter_image() -> Image:
    """Single-phase integer + SF inverter (model 101)."""
    return build_inverter_image(101)


@pytest.fixture
def meter_image() -> Image:
    """Three-phase float Smart Meter (model 213)."""
    return build_meter_image(213)
