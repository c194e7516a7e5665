"""Quantity dispatch and scaled register reads.

Every public measurement is resolved through :data:`DISPATCH`, keyed by
``(device kind, encoding, quantity, tag)``. The resolved :class:`FieldRef`
names the catalog block and descriptor; :func:`resolve` applies the
block's Fronius float offset so extension blocks (Multi MPPT) are read
from their float-model address while still decoding integer + scale
factor.

Scaling: ``value = raw * 10 ** sf`` where ``sf`` is the signed 16-bit
scale-factor register. Negative exponents divide so that results such as
``-10 * 10**-2`` come out as the nearest double to ``-0.1``.
"""

from __future__ import annotations

import math
from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum

from .codec import decode, i16_at
from .exceptions import (
    UnsupportedForInputCountError,
    UnsupportedForPhaseCountError,
    UnsupportedQuantityError,
    UnsupportedWireTypeError,
)
from .models import (
    DeviceKind,
    DeviceSnapshot,
    Encoding,
    Input,
    Phase,
    PhasePair,
    Quadrant,
    TemperatureKind,
)
from .registers.base import ModelBlock, RegisterDescriptor, WireType
from .registers.inverter import I10X, I10X_BLOCK, I11X, I11X_BLOCK
from .registers.meter import M20X, M20X_BLOCK, M21X, M21X_BLOCK
from .registers.mppt import I160, I160_BLOCK, MPPT_MODULES


class Quantity(str, Enum):
    """Physical or status quantity exposed by a device."""

    AC_CURRENT = "ac_current"
    AC_VOLTAGE = "ac_voltage"
    AC_VOLTAGE_PHASE_TO_PHASE = "ac_voltage_phase_to_phase"
    AC_ACTIVE_POWER = "ac_active_power"
    AC_APPARENT_POWER = "ac_apparent_power"
    AC_REACTIVE_POWER = "ac_reactive_power"
    AC_POWER_FACTOR = "ac_power_factor"
    AC_FREQUENCY = "ac_frequency"
    AC_LIFETIME_ENERGY = "ac_lifetime_energy"
    AC_ENERGY_EXPORTED = "ac_energy_exported"
    AC_ENERGY_IMPORTED = "ac_energy_imported"
    AC_APPARENT_ENERGY_EXPORTED = "ac_apparent_energy_exported"
    AC_APPARENT_ENERGY_IMPORTED = "ac_apparent_energy_imported"
    AC_REACTIVE_ENERGY = "ac_reactive_energy"
    DC_CURRENT = "dc_current"
    DC_VOLTAGE = "dc_voltage"
    DC_POWER = "dc_power"
    DC_ENERGY = "dc_energy"
    DC_INPUT_STATE = "dc_input_state"
    DC_INPUT_EVENTS = "dc_input_events"
    DC_INPUT_LABEL = "dc_input_label"
    TEMPERATURE = "temperature"
    OPERATING_STATE = "operating_state"
    VENDOR_OPERATING_STATE = "vendor_operating_state"
    EVENTS = "events"
    VENDOR_EVENTS = "vendor_events"


@dataclass(frozen=True)
class FieldRef:
    """Catalog field together with the block that owns it."""

    block: ModelBlock
    descriptor: RegisterDescriptor


DispatchKey = tuple[DeviceKind, Encoding, Quantity, Hashable]

#: (kind, encoding, quantity, tag) → field. Untagged quantities use tag None.
DISPATCH: dict[DispatchKey, FieldRef] = {}

_Layout = tuple[Encoding, ModelBlock, dict[str, RegisterDescriptor]]

_LAYOUTS: dict[DeviceKind, tuple[_Layout, ...]] = {
    DeviceKind.INVERTER: (
        (Encoding.INT_SF, I10X_BLOCK, I10X),
        (Encoding.FLOAT, I11X_BLOCK, I11X),
    ),
    DeviceKind.METER: (
        (Encoding.INT_SF, M20X_BLOCK, M20X),
        (Encoding.FLOAT, M21X_BLOCK, M21X),
    ),
}

_PHASE_SUFFIX = {Phase.A: "PHA", Phase.B: "PHB", Phase.C: "PHC"}
_INPUT_PREFIX = {Input.A: "INPUT1_", Input.B: "INPUT2_"}
_INPUT_INDEX = {Input.A: 1, Input.B: 2}


def _primary(kind: DeviceKind, quantity: Quantity, tag: Hashable, name: str) -> None:
    for encoding, block, index in _LAYOUTS[kind]:
        DISPATCH[(kind, encoding, quantity, tag)] = FieldRef(block, index[name])


def _mppt(quantity: Quantity, tag: Input, name: str) -> None:
    for encoding in Encoding:
        DISPATCH[(DeviceKind.INVERTER, encoding, quantity, tag)] = FieldRef(
            I160_BLOCK, I160[_INPUT_PREFIX[tag] + name]
        )


def _build_inverter() -> None:
    inv = DeviceKind.INVERTER
    _primary(inv, Quantity.AC_CURRENT, Phase.TOTAL, "A")
    for phase, suffix in _PHASE_SUFFIX.items():
        _primary(inv, Quantity.AC_CURRENT, phase, "A" + suffix)
        _primary(inv, Quantity.AC_VOLTAGE, phase, "PHV" + suffix)
    for pair in (PhasePair.AB, PhasePair.BC, PhasePair.CA):
        _primary(inv, Quantity.AC_VOLTAGE_PHASE_TO_PHASE, pair, "PPVPH" + pair.name)
    _primary(inv, Quantity.AC_ACTIVE_POWER, None, "W")
    _primary(inv, Quantity.AC_APPARENT_POWER, None, "VA")
    _primary(inv, Quantity.AC_REACTIVE_POWER, None, "VAR")
    _primary(inv, Quantity.AC_POWER_FACTOR, None, "PF")
    _primary(inv, Quantity.AC_FREQUENCY, None, "FREQ")
    _primary(inv, Quantity.AC_LIFETIME_ENERGY, None, "WH")
    _primary(inv, Quantity.DC_CURRENT, Input.TOTAL, "DCA")
    _primary(inv, Quantity.DC_VOLTAGE, Input.TOTAL, "DCV")
    _primary(inv, Quantity.DC_POWER, Input.TOTAL, "DCW")
    for sensor, name in (
        (TemperatureKind.CABINET, "TMPCAB"),
        (TemperatureKind.HEAT_SINK, "TMPSNK"),
        (TemperatureKind.TRANSFORMER, "TMPTRNS"),
        (TemperatureKind.OTHER, "TMPOT"),
    ):
        _primary(inv, Quantity.TEMPERATURE, sensor, name)
    _primary(inv, Quantity.OPERATING_STATE, None, "ST")
    _primary(inv, Quantity.VENDOR_OPERATING_STATE, None, "STVND")
    _primary(inv, Quantity.EVENTS, None, "EVT1")
    for bank in (1, 2, 3):
        _primary(inv, Quantity.VENDOR_EVENTS, bank, f"EVTVND{bank}")

    for tag in (Input.A, Input.B):
        _mppt(Quantity.DC_CURRENT, tag, "DCA")
        _mppt(Quantity.DC_VOLTAGE, tag, "DCV")
        _mppt(Quantity.DC_POWER, tag, "DCW")
        _mppt(Quantity.DC_ENERGY, tag, "DCWH")
        _mppt(Quantity.DC_INPUT_STATE, tag, "DCST")
        _mppt(Quantity.DC_INPUT_EVENTS, tag, "DCEVT")
        _mppt(Quantity.DC_INPUT_LABEL, tag, "IDSTR")


def _build_meter() -> None:
    met = DeviceKind.METER
    _primary(met, Quantity.AC_VOLTAGE, Phase.AVERAGE, "PHV")
    _primary(met, Quantity.AC_VOLTAGE_PHASE_TO_PHASE, PhasePair.AVERAGE, "PPV")
    for pair in (PhasePair.AB, PhasePair.BC, PhasePair.CA):
        _primary(met, Quantity.AC_VOLTAGE_PHASE_TO_PHASE, pair, "PPVPH" + pair.name)
    _primary(met, Quantity.AC_FREQUENCY, None, "FREQ")
    _primary(met, Quantity.EVENTS, None, "EVT")

    per_phase = (
        (Quantity.AC_CURRENT, "A"),
        (Quantity.AC_ACTIVE_POWER, "W"),
        (Quantity.AC_APPARENT_POWER, "VA"),
        (Quantity.AC_REACTIVE_POWER, "VAR"),
        (Quantity.AC_POWER_FACTOR, "PF"),
        (Quantity.AC_ENERGY_EXPORTED, "TOTWH_EXP"),
        (Quantity.AC_ENERGY_IMPORTED, "TOTWH_IMP"),
        (Quantity.AC_APPARENT_ENERGY_EXPORTED, "TOTVAH_EXP"),
        (Quantity.AC_APPARENT_ENERGY_IMPORTED, "TOTVAH_IMP"),
    )
    for quantity, prefix in per_phase:
        _primary(met, quantity, Phase.TOTAL, prefix)
        for phase, suffix in _PHASE_SUFFIX.items():
            _primary(met, quantity, phase, prefix + suffix)
    for phase, suffix in _PHASE_SUFFIX.items():
        _primary(met, Quantity.AC_VOLTAGE, phase, "PHV" + suffix)

    for quadrant, base in (
        (Quadrant.Q1, "TOTVARH_IMPQ1"),
        (Quadrant.Q2, "TOTVARH_IMPQ2"),
        (Quadrant.Q3, "TOTVARH_EXPQ3"),
        (Quadrant.Q4, "TOTVARH_EXPQ4"),
    ):
        _primary(met, Quantity.AC_REACTIVE_ENERGY, (quadrant, Phase.TOTAL), base)
        for phase, suffix in _PHASE_SUFFIX.items():
            _primary(met, Quantity.AC_REACTIVE_ENERGY, (quadrant, phase), base + suffix)


_build_inverter()
_build_meter()


# ---------------------------------------------------------------------------
# Tag validation
# ---------------------------------------------------------------------------

_PHASE_MINIMUM = {Phase.A: 1, Phase.B: 2, Phase.C: 3}
_PAIR_MINIMUM = {PhasePair.AB: 2, PhasePair.BC: 3, PhasePair.CA: 3}


def check_phase(phase: Phase, phase_count: int) -> None:
    """Reject phase tags the device does not have.

    Raises:
        UnsupportedForPhaseCountError: B on single phase, C below three phases.
    """
    if phase_count < _PHASE_MINIMUM.get(phase, 0):
        raise UnsupportedForPhaseCountError(phase.value, phase_count)


def check_pair(pair: PhasePair, phase_count: int) -> None:
    """Reject phase-to-phase pairs the device does not have."""
    if phase_count < _PAIR_MINIMUM.get(pair, 0):
        raise UnsupportedForPhaseCountError(pair.value, phase_count)


def check_input(tag: Input, input_count: int) -> None:
    """Reject DC input tags beyond the reported Multi MPPT input count."""
    if tag is Input.TOTAL:
        return
    if _INPUT_INDEX[tag] > min(input_count, MPPT_MODULES):
        raise UnsupportedForInputCountError(tag.value, input_count)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def resolve(
    snapshot: DeviceSnapshot,
    quantity: Quantity,
    tag: Hashable = None,
) -> RegisterDescriptor:
    """Return the descriptor for *quantity* on this device, offset applied.

    Raises:
        UnsupportedQuantityError: No such field for this kind/encoding/tag.
    """
    try:
        ref = DISPATCH[(snapshot.kind, snapshot.encoding, quantity, tag)]
    except KeyError:
        raise UnsupportedQuantityError(quantity.value, tag, snapshot.kind.value) from None
    return ref.descriptor.shifted(ref.block.offset(snapshot.use_float))


def read_raw(
    snapshot: DeviceSnapshot,
    descriptor: RegisterDescriptor,
    *,
    word_swap: bool = False,
    byte_swap: bool = False,
) -> int | float | str:
    """Decode *descriptor* from the snapshot without scaling."""
    words = snapshot.slice(descriptor.address, descriptor.word_count)
    return decode(
        words,
        descriptor.wire_type,
        word_swap=word_swap,
        byte_swap=byte_swap,
        address=descriptor.address,
    )


def scale_exponent(snapshot: DeviceSnapshot, descriptor: RegisterDescriptor) -> int:
    """Return the power-of-ten exponent of *descriptor* (0 without scale factor)."""
    if descriptor.scale_ref is None:
        return 0
    return i16_at(snapshot.word(descriptor.scale_ref.address))


def apply_scale(raw: int | float, exponent: int) -> float:
    """Return ``raw * 10 ** exponent`` as a float.

    Exponents beyond the double range saturate to +-inf instead of raising.
    """
    if exponent < 0 and isinstance(raw, int):
        return raw / 10**-exponent
    if raw == 0:
        return 0.0
    try:
        return float(raw) * math.pow(10.0, exponent)
    except OverflowError:
        return math.copysign(math.inf, raw)


def read_scaled(
    snapshot: DeviceSnapshot,
    descriptor: RegisterDescriptor,
    *,
    word_swap: bool = False,
    byte_swap: bool = False,
) -> float:
    """Decode *descriptor* and apply its scale factor.

    Raises:
        UnsupportedWireTypeError: If the field is a string.
    """
    if descriptor.wire_type is WireType.STRING:
        raise UnsupportedWireTypeError(descriptor.wire_type, "read_scaled")
    raw = read_raw(snapshot, descriptor, word_swap=word_swap, byte_swap=byte_swap)
    assert not isinstance(raw, str)
    return apply_scale(raw, scale_exponent(snapshot, descriptor))


#: SunSpec "not implemented" values per wire type (raw, before scaling).
NOT_IMPLEMENTED: dict[WireType, int] = {
    WireType.U16: 0xFFFF,
    WireType.I16: -0x8000,
    WireType.U32: 0xFFFF_FFFF,
    WireType.I32: -0x8000_0000,
    WireType.U64: 0xFFFF_FFFF_FFFF_FFFF,
    WireType.I64: -0x8000_0000_0000_0000,
}

#: Scale factor register value meaning "not implemented".
SF_NOT_IMPLEMENTED = -0x8000


def is_not_implemented(raw: int | float, wire_type: WireType) -> bool:
    """Check a raw value against the SunSpec "not implemented" sentinel."""
    if isinstance(raw, float):
        return math.isnan(raw)
    return NOT_IMPLEMENTED.get(wire_type) == raw


def read_scaled_optional(
    snapshot: DeviceSnapshot,
    descriptor: RegisterDescriptor,
    *,
    word_swap: bool = False,
    byte_swap: bool = False,
) -> float | None:
    """Like :func:`read_scaled` but None for "not implemented" values."""
    if descriptor.wire_type is WireType.STRING:
        raise UnsupportedWireTypeError(descriptor.wire_type, "read_scaled_optional")
    raw = read_raw(snapshot, descriptor, word_swap=word_swap, byte_swap=byte_swap)
    assert not isinstance(raw, str)
    if is_not_implemented(raw, descriptor.wire_type):
        return None
    exponent = scale_exponent(snapshot, descriptor)
    if exponent == SF_NOT_IMPLEMENTED:
        return None
    return apply_scale(raw, exponent)


__all__ = [
    "DISPATCH",
    "NOT_IMPLEMENTED",
    "FieldRef",
    "Quantity",
    "apply_scale",
    "check_input",
    "check_pair",
    "check_phase",
    "is_not_implemented",
    "read_raw",
    "read_scaled",
    "read_scaled_optional",
    "resolve",
    "scale_exponent",
]
