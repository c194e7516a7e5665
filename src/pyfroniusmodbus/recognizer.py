"""SunSpec device recognition.

The :class:`Recognizer` walks a device register map in a fixed order,
each step depending on values read by the previous one::

    FRESH
      -> SUNSPEC_VALIDATED   "SunS" magic at 40000, Common ID 1 at 40002
      -> COMMON_PARSED       Common length 65, identity strings, DA
      -> MODEL_RECOGNIZED    primary model ID/length at 40069/40070
      -> VALID               primary + extension blocks read, End found

Any failure aborts recognition and leaves the recognizer outside VALID.
Transport errors propagate unchanged; the recognizer never retries.

End-block discovery probes the no-storage location first and falls back
to the location one Basic Storage Control block (26 words) further on.
The storage block ID is not required for a successful probe.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import TYPE_CHECKING

from .codec import string_at, u16_at
from .exceptions import (
    InvalidEndBlockError,
    NotSunSpecError,
    UnexpectedLengthError,
    UnknownModelError,
)
from .models import DeviceKind, DeviceSnapshot, Encoding, Identity
from .registers.base import ModelBlock
from .registers.blocks import (
    END_LENGTH,
    END_MODEL_ID,
    INVERTER_END_BLOCK,
    METER_END_BLOCK,
    PRIMARY_BLOCKS,
    end_block_candidates,
    first_block_after_common,
)
from .registers.common import COMMON, COMMON_BLOCK, COMMON_LENGTH, COMMON_MODEL_ID, SUNSPEC_ID
from .registers.fronius import SITE_RANGE, STATUS_RANGE
from .registers.mppt import I160, I160_BLOCK
from .registers.nameplate import NAMEPLATE_BLOCK
from .registers.storage import STORAGE_BLOCK

if TYPE_CHECKING:
    from .config import DeviceConfig
    from .snapshot import RegisterSnapshot

_LOGGER = logging.getLogger(__name__)

#: Words read to check the SunSpec header (SID + Common ID).
HEADER_WORDS = 3


class RecognizerState(str, Enum):
    """Progress of device recognition."""

    FRESH = "fresh"
    SUNSPEC_VALIDATED = "sunspec_validated"
    COMMON_PARSED = "common_parsed"
    MODEL_RECOGNIZED = "model_recognized"
    VALID = "valid"


#: Primary model ID → (device kind, encoding).
MODEL_CLASSES: dict[int, tuple[DeviceKind, Encoding]] = {
    101: (DeviceKind.INVERTER, Encoding.INT_SF),
    102: (DeviceKind.INVERTER, Encoding.INT_SF),
    103: (DeviceKind.INVERTER, Encoding.INT_SF),
    111: (DeviceKind.INVERTER, Encoding.FLOAT),
    112: (DeviceKind.INVERTER, Encoding.FLOAT),
    113: (DeviceKind.INVERTER, Encoding.FLOAT),
    201: (DeviceKind.METER, Encoding.INT_SF),
    202: (DeviceKind.METER, Encoding.INT_SF),
    203: (DeviceKind.METER, Encoding.INT_SF),
    211: (DeviceKind.METER, Encoding.FLOAT),
    212: (DeviceKind.METER, Encoding.FLOAT),
    213: (DeviceKind.METER, Encoding.FLOAT),
}


def classify_model(model_id: int) -> tuple[DeviceKind, Encoding, ModelBlock]:
    """Classify a primary model ID.

    Raises:
        UnknownModelError: If *model_id* is not an inverter or meter model.
    """
    try:
        kind, encoding = MODEL_CLASSES[model_id]
    except KeyError:
        raise UnknownModelError(model_id) from None
    return kind, encoding, PRIMARY_BLOCKS[model_id]


def phase_count_for(model_id: int) -> int:
    """Phase count encoded in the last digit of a primary model ID."""
    return model_id % 10


def decode_identity(snapshot: RegisterSnapshot) -> Identity:
    """Decode the Common block identity strings and unit address.

    Raises:
        NonPrintableError: If an identity string holds control bytes.
    """

    def text(name: str) -> str:
        descriptor = COMMON[name]
        words = snapshot.slice(descriptor.address, descriptor.word_count)
        return string_at(words, descriptor.word_count, descriptor.address).strip()

    return Identity(
        manufacturer=text("MN"),
        model=text("MD"),
        options=text("OPT"),
        firmware_version=text("VR"),
        serial_number=text("SN"),
        unit_address=u16_at(snapshot.word(COMMON["DA"].address)),
    )


class Recognizer:
    """Recognize the SunSpec device behind one Modbus unit address.

    Example:
        ```python
        snapshot = RegisterSnapshot(transport, unit_address=1)
        recognizer = Recognizer(snapshot, DeviceConfig())
        device = await recognizer.recognize()
        print(device.model_id, device.encoding, device.has_storage_block)
        ```
    """

    def __init__(
        self,
        snapshot: RegisterSnapshot,
        config: DeviceConfig,
        expected_kind: DeviceKind | None = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            snapshot: Register image to fill; cleared on every recognition
            config: Device configuration
            expected_kind: Reject primary models of the other device kind
        """
        self._snapshot = snapshot
        self._config = config
        self._expected_kind = expected_kind
        self._state = RecognizerState.FRESH

    @property
    def state(self) -> RecognizerState:
        """Current recognition state."""
        return self._state

    def _transition(self, state: RecognizerState) -> None:
        _LOGGER.debug(
            "Unit %d: %s -> %s",
            self._snapshot.unit_address,
            self._state.value,
            state.value,
        )
        self._state = state

    # ------------------------------------------------------------------
    # Full recognition
    # ------------------------------------------------------------------

    async def recognize(self) -> DeviceSnapshot:
        """Run every recognition step from FRESH.

        Returns:
            Immutable snapshot of the recognized device

        Raises:
            NotSunSpecError: SunSpec magic or Common ID mismatch
            UnexpectedLengthError: Common or primary block length mismatch
            UnknownModelError: Unsupported primary model ID
            InvalidEndBlockError: No End sentinel at any candidate address
            NonPrintableError: Unprintable identity string
            TransportError: Any transport failure, unchanged
        """
        self._state = RecognizerState.FRESH
        self._snapshot.clear()

        await self._validate_sunspec()
        identity = await self._parse_common()
        model_id, kind, encoding, block = await self._recognize_model()
        use_float = encoding is Encoding.FLOAT

        await self._fill_blocks(kind, block, use_float)
        has_storage = await self._locate_end(kind, use_float)
        if self._config.read_fronius_registers and kind is DeviceKind.INVERTER:
            await self._fill_fronius_registers()

        self._transition(RecognizerState.VALID)
        device = DeviceSnapshot(
            words=self._snapshot.freeze(),
            kind=kind,
            encoding=encoding,
            model_id=model_id,
            phase_count=phase_count_for(model_id),
            identity=identity,
            has_storage_block=has_storage,
            input_count=self._input_count(kind, use_float),
        )
        _LOGGER.info(
            "Recognized %s %s (model %d, %s, %d phase%s%s) at unit %d",
            identity.manufacturer or "unknown manufacturer",
            identity.model or kind.value,
            model_id,
            encoding.value,
            device.phase_count,
            "" if device.phase_count == 1 else "s",
            ", storage" if has_storage else "",
            self._snapshot.unit_address,
        )
        return device

    async def _validate_sunspec(self) -> None:
        sid = COMMON["SID"]
        await self._snapshot.fill(sid.address, HEADER_WORDS)
        words = self._snapshot.slice(sid.address, HEADER_WORDS)
        magic = (words[0] << 16) | words[1]
        if magic != SUNSPEC_ID:
            raise NotSunSpecError(
                f"Invalid SunSpec signature: 0x{magic:08X} at {sid.address}, "
                f"expected 0x{SUNSPEC_ID:08X}"
            )
        if words[2] != COMMON_MODEL_ID:
            raise NotSunSpecError(
                f"Invalid Common model ID: {words[2]}, expected {COMMON_MODEL_ID}"
            )
        self._transition(RecognizerState.SUNSPEC_VALIDATED)

    async def _parse_common(self) -> Identity:
        await self._fill_common()
        length = self._snapshot.word(COMMON["L"].address)
        if length != COMMON_LENGTH:
            raise UnexpectedLengthError(COMMON_MODEL_ID, COMMON_LENGTH, length)
        identity = decode_identity(self._snapshot)
        self._transition(RecognizerState.COMMON_PARSED)
        return identity

    async def _fill_common(self) -> None:
        await self._snapshot.fill(COMMON_BLOCK.address, COMMON_BLOCK.end - COMMON_BLOCK.address)

    async def _recognize_model(self) -> tuple[int, DeviceKind, Encoding, ModelBlock]:
        address = first_block_after_common()
        await self._snapshot.fill(address, 2)
        model_id, length = self._snapshot.slice(address, 2)

        kind, encoding, block = classify_model(model_id)
        if self._expected_kind is not None and kind is not self._expected_kind:
            _LOGGER.debug(
                "Model %d is a %s, expected a %s",
                model_id,
                kind.value,
                self._expected_kind.value,
            )
            raise UnknownModelError(model_id)
        if length != block.length:
            raise UnexpectedLengthError(model_id, block.length, length)

        self._transition(RecognizerState.MODEL_RECOGNIZED)
        return model_id, kind, encoding, block

    async def _fill_blocks(self, kind: DeviceKind, block: ModelBlock, use_float: bool) -> None:
        await self._snapshot.fill(block.address, block.end - block.address)
        if kind is DeviceKind.INVERTER:
            for extension in (NAMEPLATE_BLOCK, I160_BLOCK):
                await self._snapshot.fill(
                    extension.base_address(use_float),
                    extension.end - extension.address,
                )

    async def _locate_end(self, kind: DeviceKind, use_float: bool) -> bool:
        end_block = INVERTER_END_BLOCK if kind is DeviceKind.INVERTER else METER_END_BLOCK
        candidates = end_block_candidates(end_block, use_float)
        first = candidates[0]

        await self._snapshot.fill(first, 2)
        if self._is_end(first):
            _LOGGER.debug("End block found at %d", first)
            return False

        if len(candidates) == 1:
            raise InvalidEndBlockError(candidates)

        shifted = candidates[1]
        _LOGGER.warning(
            "No end block at %d, probing storage-shifted location %d",
            first,
            shifted,
        )
        # Storage block and the shifted End block in one read.
        await self._snapshot.fill(first, shifted - first + 2)
        if not self._is_end(shifted):
            raise InvalidEndBlockError(candidates)

        storage_id = self._snapshot.word(first)
        if storage_id not in STORAGE_BLOCK.model_ids:
            _LOGGER.warning(
                "End block at %d but model ID %d found where storage (124) was expected",
                shifted,
                storage_id,
            )
        return True

    def _is_end(self, address: int) -> bool:
        model_id, length = self._snapshot.slice(address, 2)
        return model_id == END_MODEL_ID and length == END_LENGTH

    def _input_count(self, kind: DeviceKind, use_float: bool) -> int:
        if kind is not DeviceKind.INVERTER:
            return 0
        offset = I160_BLOCK.offset(use_float)
        if self._snapshot.word(I160["ID"].address + offset) not in I160_BLOCK.model_ids:
            return 0
        return self._snapshot.word(I160["N"].address + offset)

    async def _fill_fronius_registers(self) -> None:
        for start, count in (STATUS_RANGE, SITE_RANGE):
            await self._snapshot.fill(start, count)

    # ------------------------------------------------------------------
    # Partial re-reads
    # ------------------------------------------------------------------

    async def refresh(self, device: DeviceSnapshot) -> DeviceSnapshot:
        """Re-read the data blocks of an already recognized device.

        The primary, extension and End blocks are read again without
        re-running recognition; identity is kept.
        """
        use_float = device.use_float
        block = PRIMARY_BLOCKS[device.model_id]
        await self._fill_blocks(device.kind, block, use_float)
        if device.has_storage_block:
            start = STORAGE_BLOCK.base_address(use_float)
            await self._snapshot.fill(start, STORAGE_BLOCK.end - STORAGE_BLOCK.address)
        if self._config.read_fronius_registers and device.kind is DeviceKind.INVERTER:
            await self._fill_fronius_registers()

        return replace(
            device,
            words=self._snapshot.freeze(),
            input_count=self._input_count(device.kind, use_float),
        )

    async def refresh_identity(self, device: DeviceSnapshot) -> DeviceSnapshot:
        """Re-read and re-decode the Common block.

        Fronius reports a changing serial number source (UID, PMC, serial)
        while the Datamanager starts up, so identity can differ between
        calls.

        Raises:
            UnexpectedLengthError: Common length changed
            NonPrintableError: Unprintable identity string
        """
        await self._fill_common()
        length = self._snapshot.word(COMMON["L"].address)
        if length != COMMON_LENGTH:
            raise UnexpectedLengthError(COMMON_MODEL_ID, COMMON_LENGTH, length)
        return replace(
            device,
            words=self._snapshot.freeze(),
            identity=decode_identity(self._snapshot),
        )


__all__ = [
    "MODEL_CLASSES",
    "Recognizer",
    "RecognizerState",
    "classify_model",
    "decode_identity",
    "phase_count_for",
]
