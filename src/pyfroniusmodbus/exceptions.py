"""Exception hierarchy for pyfroniusmodbus.

Every error raised by the library derives from :class:`FroniusError`, so
callers can use a single ``except FroniusError`` to catch recognition,
decoding, accessor and transport failures alike.

Nothing is recovered inside the library: transport failures propagate
verbatim and a failed recognition leaves the device in the not-validated
state.
"""

from __future__ import annotations


class FroniusError(Exception):
    """Base exception for all pyfroniusmodbus errors."""


# ---------------------------------------------------------------------------
# Protocol errors (device does not look like a supported SunSpec device)
# ---------------------------------------------------------------------------


class ProtocolError(FroniusError):
    """The device register map violates a SunSpec invariant."""


class NotSunSpecError(ProtocolError):
    """SunSpec signature or Common model ID mismatch."""

    def __init__(self, message: str = "Device does not expose a SunSpec register map") -> None:
        super().__init__(message)


class UnknownModelError(ProtocolError):
    """Primary model ID is not a supported inverter or meter model."""

    def __init__(self, model_id: int) -> None:
        self.model_id = model_id
        super().__init__(f"Unknown SunSpec model ID: {model_id}")


class UnexpectedLengthError(ProtocolError):
    """Declared block length does not match the expected constant."""

    def __init__(self, model: int, expected: int, got: int) -> None:
        self.model = model
        self.expected = expected
        self.got = got
        super().__init__(
            f"Invalid length for SunSpec model {model}: received {got}, expected {expected}"
        )


class InvalidEndBlockError(ProtocolError):
    """No (0xFFFF, 0) end sentinel at any candidate location."""

    def __init__(self, candidates: tuple[int, ...] = ()) -> None:
        self.candidates = candidates
        where = ", ".join(str(addr) for addr in candidates)
        super().__init__(
            f"Invalid register end block: no [0xFFFF, 0] sentinel at [{where}]"
        )


# ---------------------------------------------------------------------------
# Encoding errors
# ---------------------------------------------------------------------------


class EncodingError(FroniusError):
    """Register words cannot be decoded into the requested value."""


class NonPrintableError(EncodingError):
    """ASCII string register contains unprintable characters."""

    def __init__(self, address: int | None = None) -> None:
        self.address = address
        if address is None:
            message = "String contains unprintable characters"
        else:
            message = f"String at address {address} contains unprintable characters"
        super().__init__(message)


class UnsupportedWireTypeError(EncodingError):
    """Accessor requested a wire type it cannot convert."""

    def __init__(self, wire_type: object, operation: str = "decode") -> None:
        self.wire_type = wire_type
        super().__init__(f"Unsupported register type {wire_type} for {operation}()")


# ---------------------------------------------------------------------------
# Value errors (request not meaningful for this device)
# ---------------------------------------------------------------------------


class FroniusValueError(FroniusError, ValueError):
    """The requested quantity is not available on this device."""


class UnsupportedForPhaseCountError(FroniusValueError):
    """Phase tag is not valid for the device phase count."""

    def __init__(self, tag: object, phase_count: int) -> None:
        self.tag = tag
        self.phase_count = phase_count
        super().__init__(f"Phase {tag} is not supported on a {phase_count}-phase device")


class UnsupportedForInputCountError(FroniusValueError):
    """DC input tag is not valid for the number of MPPT inputs."""

    def __init__(self, tag: object, input_count: int) -> None:
        self.tag = tag
        self.input_count = input_count
        super().__init__(f"Input {tag} is not supported on a device with {input_count} DC inputs")


class UnsupportedOnHybridInverterError(FroniusValueError):
    """Register is flagged as not supported on SYMOHYBRID inverters."""

    def __init__(self, register: str) -> None:
        self.register = register
        super().__init__(f"Register {register} is not supported on hybrid inverters")


class UnsupportedQuantityError(FroniusValueError):
    """Quantity and tag combination does not exist for this device model."""

    def __init__(self, quantity: object, tag: object, model: str) -> None:
        self.quantity = quantity
        self.tag = tag
        self.model = model
        super().__init__(f"{quantity} with tag {tag} is not available on {model} devices")


class StorageNotPresentError(FroniusValueError):
    """Storage accessor called on a device without a Basic Storage Control block."""

    def __init__(self) -> None:
        super().__init__("Device does not expose a Basic Storage Control block (124)")


class InvalidModbusAddressError(FroniusValueError):
    """Common DA register holds an address outside 1..247."""

    def __init__(self, address: int) -> None:
        self.address = address
        super().__init__(f"Invalid Modbus slave address: received {address}, expected 1-247")


# ---------------------------------------------------------------------------
# State errors
# ---------------------------------------------------------------------------


class StateError(FroniusError):
    """Operation called in a state where it cannot run."""


class NotValidatedError(StateError):
    """Accessor called before ``validate()`` succeeded."""

    def __init__(self) -> None:
        super().__init__("Device not validated: call validate() first")


class RegisterNotFilledError(StateError):
    """Snapshot address was never filled from the device."""

    def __init__(self, address: int) -> None:
        self.address = address
        super().__init__(f"Register {address} has not been read from the device")


__all__ = [
    "EncodingError",
    "FroniusError",
    "FroniusValueError",
    "InvalidEndBlockError",
    "InvalidModbusAddressError",
    "NonPrintableError",
    "NotSunSpecError",
    "NotValidatedError",
    "ProtocolError",
    "RegisterNotFilledError",
    "StateError",
    "StorageNotPresentError",
    "UnexpectedLengthError",
    "UnknownModelError",
    "UnsupportedForInputCountError",
    "UnsupportedForPhaseCountError",
    "UnsupportedOnHybridInverterError",
    "UnsupportedQuantityError",
    "UnsupportedWireTypeError",
]
