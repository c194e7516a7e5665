"""Fronius Smart Meter device (SunSpec models 201-203, 211-213).

All meter quantities come from the primary block; power and energy are
available as a total and per phase. Voltages additionally have a
line-to-neutral average (``Phase.AVERAGE``) and a line-to-line average
(``PhasePair.AVERAGE``).
"""

from __future__ import annotations

from pyfroniusmodbus.accessors import Quantity, check_phase
from pyfroniusmodbus.events import MeterEvent, expand_flags
from pyfroniusmodbus.models import DeviceKind, Phase, Quadrant

from .base import FroniusDevice


class Meter(FroniusDevice):
    """Fronius Smart Meter.

    Example:
        ```python
        meter = Meter(transport, DeviceConfig(unit_address=240))
        await meter.validate()

        print(f"Grid power: {meter.ac_active_power()} W")
        print(f"Exported: {meter.ac_energy_exported()} Wh")
        ```
    """

    kind = DeviceKind.METER

    def ac_active_power(self, phase: Phase = Phase.TOTAL) -> float:
        """Active power in W (positive = import from grid)."""
        return self._phase_scaled(Quantity.AC_ACTIVE_POWER, phase)

    def ac_apparent_power(self, phase: Phase = Phase.TOTAL) -> float:
        return self._phase_scaled(Quantity.AC_APPARENT_POWER, phase)

    def ac_reactive_power(self, phase: Phase = Phase.TOTAL) -> float:
        return self._phase_scaled(Quantity.AC_REACTIVE_POWER, phase)

    def ac_power_factor(self, phase: Phase = Phase.TOTAL) -> float:
        """Power factor in percent, scaled but otherwise as reported."""
        return self._phase_scaled(Quantity.AC_POWER_FACTOR, phase)

    def ac_energy_exported(self, phase: Phase = Phase.TOTAL) -> float:
        """Exported active energy in Wh."""
        return self._phase_scaled(Quantity.AC_ENERGY_EXPORTED, phase)

    def ac_energy_imported(self, phase: Phase = Phase.TOTAL) -> float:
        """Imported active energy in Wh."""
        return self._phase_scaled(Quantity.AC_ENERGY_IMPORTED, phase)

    def ac_apparent_energy_exported(self, phase: Phase = Phase.TOTAL) -> float:
        """Exported apparent energy in VAh."""
        return self._phase_scaled(Quantity.AC_APPARENT_ENERGY_EXPORTED, phase)

    def ac_apparent_energy_imported(self, phase: Phase = Phase.TOTAL) -> float:
        """Imported apparent energy in VAh."""
        return self._phase_scaled(Quantity.AC_APPARENT_ENERGY_IMPORTED, phase)

    def ac_reactive_energy(self, quadrant: Quadrant, phase: Phase = Phase.TOTAL) -> float:
        """Reactive energy in varh for one quadrant.

        Q1 and Q2 are imported, Q3 and Q4 exported.
        """
        check_phase(phase, self.snapshot.phase_count)
        return self._scaled(Quantity.AC_REACTIVE_ENERGY, (quadrant, phase))

    def event_flags(self) -> list[MeterEvent]:
        """Active meter events decoded from EVT."""
        return expand_flags(self.events(), MeterEvent)


__all__ = ["Meter"]
