"""Base device class for pyfroniusmodbus.

A device owns one :class:`~pyfroniusmodbus.snapshot.RegisterSnapshot`
and the immutable :class:`~pyfroniusmodbus.models.DeviceSnapshot` produced
by the last successful ``validate()`` / ``refresh()``. Only those two
methods (and ``refresh_identity()``) perform I/O; every accessor is a
plain synchronous read of the current DeviceSnapshot.
"""

from __future__ import annotations

import logging
from abc import ABC
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pyfroniusmodbus.accessors import (
    Quantity,
    check_pair,
    check_phase,
    read_raw,
    read_scaled,
    resolve,
)
from pyfroniusmodbus.config import MAX_UNIT_ADDRESS, MIN_UNIT_ADDRESS, DeviceConfig
from pyfroniusmodbus.exceptions import InvalidModbusAddressError, NotValidatedError
from pyfroniusmodbus.recognizer import Recognizer, RecognizerState
from pyfroniusmodbus.snapshot import RegisterSnapshot

if TYPE_CHECKING:
    from pyfroniusmodbus.models import (
        DeviceKind,
        DeviceSnapshot,
        Encoding,
        Identity,
        Phase,
        PhasePair,
    )
    from pyfroniusmodbus.registers.base import RegisterDescriptor
    from pyfroniusmodbus.transports.protocol import RegisterTransport

_LOGGER = logging.getLogger(__name__)


class FroniusDevice(ABC):
    """Abstract base class for Fronius SunSpec devices.

    Subclasses set :attr:`kind` to the device kind they accept; a primary
    model of the other kind fails recognition with UnknownModelError.

    Example:
        ```python
        async with ModbusTcpTransport("192.168.1.50") as transport:
            inverter = Inverter(transport, DeviceConfig(unit_address=1))
            await inverter.validate()
            print(inverter.identity().serial_number, inverter.ac_active_power())
        ```
    """

    kind: DeviceKind

    def __init__(
        self,
        transport: RegisterTransport,
        config: DeviceConfig | None = None,
    ) -> None:
        """Initialize device.

        Args:
            transport: Anything providing ``read_words``
            config: Device configuration (default: unit address 1)

        Raises:
            ValueError: If the configuration is invalid
        """
        self._config = config if config is not None else DeviceConfig()
        self._config.validate()
        self._transport = transport
        self._registers = RegisterSnapshot(transport, self._config.unit_address)
        self._recognizer = Recognizer(self._registers, self._config, self.kind)
        self._snapshot: DeviceSnapshot | None = None
        self._last_refresh: datetime | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def validate(self) -> None:
        """Recognize the device from scratch.

        On failure the device is left not validated and every accessor
        raises NotValidatedError until a later ``validate()`` succeeds.

        Raises:
            ProtocolError: The register map is not a supported SunSpec map
            EncodingError: Identity strings cannot be decoded
            TransportError: Any transport failure, unchanged
        """
        _LOGGER.debug("Validating %s at unit %d", self.kind.value, self._config.unit_address)
        self._snapshot = None
        self._snapshot = await self._recognizer.recognize()
        self._last_refresh = datetime.now()

    async def refresh(self) -> None:
        """Re-read the measurement blocks without re-running recognition.

        Raises:
            NotValidatedError: If ``validate()`` has not succeeded
            TransportError: Any transport failure; the device then needs
                a new ``validate()``
        """
        device = self.snapshot
        self._snapshot = None
        self._snapshot = await self._recognizer.refresh(device)
        self._last_refresh = datetime.now()

    async def refresh_identity(self) -> Identity:
        """Re-read the Common block and return the new identity."""
        device = self.snapshot
        self._snapshot = None
        self._snapshot = await self._recognizer.refresh_identity(device)
        return self._snapshot.identity

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> DeviceConfig:
        return self._config

    @property
    def is_valid(self) -> bool:
        """Check whether the last ``validate()`` / ``refresh()`` succeeded."""
        return self._snapshot is not None and self._recognizer.state is RecognizerState.VALID

    @property
    def snapshot(self) -> DeviceSnapshot:
        """Immutable snapshot of the last successful read.

        Raises:
            NotValidatedError: If the device is not validated
        """
        if self._snapshot is None:
            raise NotValidatedError()
        return self._snapshot

    @property
    def last_refresh(self) -> datetime | None:
        """Time of the last successful ``validate()`` or ``refresh()``."""
        return self._last_refresh

    @property
    def has_storage_block(self) -> bool:
        return self.snapshot.has_storage_block

    def identity(self) -> Identity:
        """Manufacturer, model, options, firmware, serial and unit address."""
        return self.snapshot.identity

    def encoding(self) -> Encoding:
        return self.snapshot.encoding

    def model_id(self) -> int:
        return self.snapshot.model_id

    def phase_count(self) -> int:
        return self.snapshot.phase_count

    def unit_address(self) -> int:
        """Modbus address reported by the Common DA register.

        Raises:
            InvalidModbusAddressError: If DA is outside 1..247
        """
        address = self.snapshot.modbus_unit_address
        if not MIN_UNIT_ADDRESS <= address <= MAX_UNIT_ADDRESS:
            raise InvalidModbusAddressError(address)
        return address

    # ------------------------------------------------------------------
    # Shared accessors
    # ------------------------------------------------------------------

    def _field(self, quantity: Quantity, tag: Any = None) -> RegisterDescriptor:
        return resolve(self.snapshot, quantity, tag)

    def _scaled(self, quantity: Quantity, tag: Any = None) -> float:
        descriptor = self._field(quantity, tag)
        return read_scaled(
            self.snapshot,
            descriptor,
            word_swap=self._config.word_swap,
            byte_swap=self._config.byte_swap,
        )

    def _raw(self, quantity: Quantity, tag: Any = None) -> Any:
        return self._read(self._field(quantity, tag))

    def _read(self, descriptor: RegisterDescriptor) -> Any:
        return read_raw(
            self.snapshot,
            descriptor,
            word_swap=self._config.word_swap,
            byte_swap=self._config.byte_swap,
        )

    def _phase_scaled(self, quantity: Quantity, phase: Phase) -> float:
        check_phase(phase, self.snapshot.phase_count)
        return self._scaled(quantity, phase)

    def ac_current(self, phase: Phase) -> float:
        """AC current in A for the total or a single phase."""
        return self._phase_scaled(Quantity.AC_CURRENT, phase)

    def ac_voltage(self, phase: Phase) -> float:
        """AC phase-to-neutral voltage in V."""
        return self._phase_scaled(Quantity.AC_VOLTAGE, phase)

    def ac_voltage_phase_to_phase(self, pair: PhasePair) -> float:
        """AC phase-to-phase voltage in V."""
        check_pair(pair, self.snapshot.phase_count)
        return self._scaled(Quantity.AC_VOLTAGE_PHASE_TO_PHASE, pair)

    def ac_frequency(self) -> float:
        """AC line frequency in Hz."""
        return self._scaled(Quantity.AC_FREQUENCY)

    def events(self) -> int:
        """Raw 32-bit event bitfield (expand with ``events.expand_flags``)."""
        return int(self._raw(Quantity.EVENTS))

    def to_dict(self) -> dict[str, Any]:
        """Identity and recognition results as a plain dictionary."""
        device = self.snapshot
        return {
            "kind": device.kind.value,
            "model_id": device.model_id,
            "encoding": device.encoding.value,
            "phase_count": device.phase_count,
            "has_storage_block": device.has_storage_block,
            "identity": device.identity.to_dict(),
        }


__all__ = ["FroniusDevice"]
